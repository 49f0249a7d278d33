"""
Core calendar engine: integer math primitives, value types, and contracts.

Independent of any platform calendar service.
"""
