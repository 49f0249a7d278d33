"""
JSON Schema Contract Validators

Validation of the serialized (dict / JSON) forms of the calendar value types
against formal JSON Schema contracts, using the jsonschema library.

Schemas (package data, jalali/core/contracts/schema/):
- calendar_date.json — CalendarDate.model_dump()
- day_time.json — DayTime.model_dump()
- date_range.json — DateRange.to_dict()
- period.json — Period.model_dump()

The schemas check shape and static ranges only; calendar validity (day 31 in
Mehr, Esfand 30 in a common year) is enforced by the models. A validator bound
to a model therefore loads in two steps: schema first, then the model.
"""

import json
import logging
from pathlib import Path
from typing import Any, ClassVar, Dict, Iterator, List, Optional, Type

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from pydantic import BaseModel

from jalali.core.domain.calendar_date import CalendarDate
from jalali.core.domain.day_time import DayTime
from jalali.util.period import Period

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Reads and caches the JSON Schema files of one directory.

    Defaults to the schema/ directory shipped inside this package.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Args:
            schema_name: File name without extension (e.g. 'calendar_date')

        Raises:
            FileNotFoundError: no such schema file
            json.JSONDecodeError: file is not JSON
            ValueError: file is JSON but not a valid Draft 2020-12 schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Package schemas, read once
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    One schema file, optionally bound to the model whose dump it describes.

    Subclasses set schema_name (and model when the payload maps to a
    pydantic model).
    """

    schema_name: ClassVar[str]
    model: ClassVar[Optional[Type[BaseModel]]] = None

    def __init__(self, loader: Optional[SchemaLoader] = None):
        self.schema = (loader or _SCHEMA_LOADER).load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: first violation found
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """Every violation as "<json path>: <message>", ordered by path."""
        errors = sorted(self.validator.iter_errors(data), key=lambda e: e.json_path)
        return [f"{e.json_path}: {e.message}" for e in errors]

    def load(self, data: Dict[str, Any]) -> BaseModel:
        """
        Validate data, then build the bound model from it.

        Raises:
            TypeError: this contract has no model
            ValidationError: shape / static range violation
            InvalidDate / InvalidTime: calendar rule violation
        """
        if self.model is None:
            raise TypeError(f"Contract {self.schema_name!r} is not bound to a model")
        self.validate(data)
        return self.model.model_validate(data)


class CalendarDateValidator(ContractValidator):
    schema_name = "calendar_date"
    model = CalendarDate


class DayTimeValidator(ContractValidator):
    schema_name = "day_time"
    model = DayTime


class DateRangeValidator(ContractValidator):
    # DateRange is a dataclass; its dict form is checked, not loaded
    schema_name = "date_range"


class PeriodValidator(ContractValidator):
    schema_name = "period"
    model = Period


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_calendar_date(data: Dict[str, Any]) -> None:
    CalendarDateValidator().validate(data)


def validate_day_time(data: Dict[str, Any]) -> None:
    DayTimeValidator().validate(data)


def validate_date_range(data: Dict[str, Any]) -> None:
    DateRangeValidator().validate(data)


def validate_period(data: Dict[str, Any]) -> None:
    PeriodValidator().validate(data)


def load_calendar_date(data: Dict[str, Any]) -> CalendarDate:
    """
    Raises:
        ValidationError: shape / static range violation
        InvalidDate: day does not exist in that month and year
    """
    return CalendarDateValidator().load(data)


def load_day_time(data: Dict[str, Any]) -> DayTime:
    """
    Raises:
        ValidationError: shape / static range violation
        InvalidDate: date part does not exist
    """
    return DayTimeValidator().load(data)


def load_period(data: Dict[str, Any]) -> Period:
    return PeriodValidator().load(data)
