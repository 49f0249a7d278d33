"""
Tests for JSON Schema Contract Validators

Checks the serialized forms of the value types:
- The schemas themselves are valid
- Model dumps pass validation
- Missing required fields are detected
- Type violations are detected
- Range / enum / additionalProperties violations are detected
- Calendar validity stays with the models (load_* helpers)
"""

import json

import pytest
from jsonschema import ValidationError

from jalali import CalendarDate, DayTime, InvalidDate
from jalali.core.contracts import (
    CalendarDateValidator,
    DateRangeValidator,
    DayTimeValidator,
    PeriodValidator,
    SchemaLoader,
    load_calendar_date,
    load_day_time,
    load_period,
    validate_calendar_date,
    validate_date_range,
    validate_day_time,
    validate_period,
)
from jalali.util import DateRange, Period


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_calendar_date():
    """Valid calendar_date payload."""
    return CalendarDate.of(1403, 12, 30).model_dump()


@pytest.fixture
def valid_day_time():
    """Valid day_time payload."""
    return DayTime.of_fields(1403, 1, 1, 13, 5, 9, 42).model_dump()


@pytest.fixture
def valid_date_range():
    """Valid date_range payload."""
    return DateRange.half_open(CalendarDate.of(1403, 1, 1), CalendarDate.of(1403, 2, 1)).to_dict()


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_all_schemas():
    """All schemas load and carry their titles."""
    loader = SchemaLoader()

    assert loader.load_schema("calendar_date")["title"] == "CalendarDate"
    assert loader.load_schema("day_time")["title"] == "DayTime"
    assert loader.load_schema("date_range")["title"] == "DateRange"
    assert loader.load_schema("period")["title"] == "Period"


def test_schema_loader_caches_schemas():
    """Second load returns the cached object."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("calendar_date")
    schema2 = loader.load_schema("calendar_date")

    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_raises_on_missing_directory(tmp_path):
    with pytest.raises(RuntimeError, match="Schema directory not found"):
        SchemaLoader(tmp_path / "missing")


def test_schema_loader_rejects_invalid_schema(tmp_path):
    """A file that is JSON but not a JSON Schema is rejected."""
    (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
    loader = SchemaLoader(tmp_path)

    with pytest.raises(ValueError, match="Invalid JSON Schema"):
        loader.load_schema("broken")


# =============================================================================
# TESTS - CALENDAR DATE
# =============================================================================


def test_calendar_date_validator_accepts_valid_data(valid_calendar_date):
    validator = CalendarDateValidator()
    validator.validate(valid_calendar_date)
    assert validator.is_valid(valid_calendar_date)


def test_calendar_date_validate_function(valid_calendar_date):
    validate_calendar_date(valid_calendar_date)


def test_calendar_date_accepts_negative_year():
    validate_calendar_date(CalendarDate.of(-12, 3, 4).model_dump())


def test_calendar_date_rejects_missing_required_field(valid_calendar_date):
    data = valid_calendar_date.copy()
    del data["day"]

    with pytest.raises(ValidationError) as exc_info:
        validate_calendar_date(data)
    assert "'day' is a required property" in str(exc_info.value)


def test_calendar_date_rejects_wrong_type(valid_calendar_date):
    data = valid_calendar_date.copy()
    data["year"] = "1403"

    with pytest.raises(ValidationError) as exc_info:
        validate_calendar_date(data)
    assert "is not of type 'integer'" in str(exc_info.value)


@pytest.mark.parametrize("field, value", [("month", 0), ("month", 13), ("day", 0), ("day", 32)])
def test_calendar_date_rejects_out_of_range(valid_calendar_date, field, value):
    data = valid_calendar_date.copy()
    data[field] = value

    assert not CalendarDateValidator().is_valid(data)


def test_calendar_date_rejects_additional_properties(valid_calendar_date):
    data = valid_calendar_date.copy()
    data["calendar"] = "persian"

    with pytest.raises(ValidationError):
        validate_calendar_date(data)


def test_calendar_date_iter_errors_reports_every_violation():
    errors = list(CalendarDateValidator().iter_errors({"year": 1403, "month": 13, "day": 0}))
    assert len(errors) == 2


# =============================================================================
# TESTS - DAY TIME
# =============================================================================


def test_day_time_validator_accepts_valid_data(valid_day_time):
    validator = DayTimeValidator()
    validator.validate(valid_day_time)
    assert validator.is_valid(valid_day_time)


def test_day_time_validate_function(valid_day_time):
    validate_day_time(valid_day_time)


def test_day_time_rejects_full_day_offset(valid_day_time):
    data = dict(valid_day_time)
    data["nano_of_day"] = 86_400_000_000_000

    with pytest.raises(ValidationError):
        validate_day_time(data)


def test_day_time_rejects_bad_nested_date(valid_day_time):
    data = dict(valid_day_time)
    data["date"] = {"year": 1403, "month": 1}

    with pytest.raises(ValidationError) as exc_info:
        validate_day_time(data)
    assert "'day' is a required property" in str(exc_info.value)


# =============================================================================
# TESTS - DATE RANGE / PERIOD
# =============================================================================


def test_date_range_validator_accepts_valid_data(valid_date_range):
    validator = DateRangeValidator()
    validator.validate(valid_date_range)
    assert validator.is_valid(valid_date_range)
    validate_date_range(valid_date_range)


def test_date_range_rejects_invalid_bound(valid_date_range):
    data = dict(valid_date_range)
    data["end_bound"] = "half"

    with pytest.raises(ValidationError) as exc_info:
        validate_date_range(data)
    assert "is not one of" in str(exc_info.value)


def test_period_accepts_model_dump():
    data = Period.of(-3, -1, -26).model_dump()
    PeriodValidator().validate(data)
    validate_period(data)


def test_period_rejects_missing_field():
    with pytest.raises(ValidationError):
        validate_period({"years": 1, "months": 0})


# =============================================================================
# TESTS - PYDANTIC INTEGRATION
# =============================================================================


def test_load_calendar_date_builds_model(valid_calendar_date):
    assert load_calendar_date(valid_calendar_date) == CalendarDate.of(1403, 12, 30)


def test_load_calendar_date_enforces_calendar_rules():
    """Shape is valid, but Esfand 30 does not exist in 1402."""
    data = {"year": 1402, "month": 12, "day": 30}
    validate_calendar_date(data)

    with pytest.raises(InvalidDate):
        load_calendar_date(data)


def test_load_calendar_date_rejects_before_model():
    with pytest.raises(ValidationError):
        load_calendar_date({"year": 1403, "month": 13, "day": 1})


def test_load_day_time_round_trip():
    dt = DayTime.of_fields(1357, 11, 22, 9, 30)
    assert load_day_time(dt.model_dump()) == dt


def test_load_day_time_from_json_text():
    dt = DayTime.of_fields(1403, 1, 1, 23, 59, 59, 999_999_999)
    assert load_day_time(json.loads(dt.model_dump_json())) == dt


def test_load_period():
    assert load_period({"years": 1, "months": -2, "days": 3}) == Period.of(1, -2, 3)


def test_validator_load_uses_bound_model():
    assert DayTimeValidator().load(DayTime.of_fields(1403, 1, 1, 8).model_dump()) == DayTime.of_fields(1403, 1, 1, 8)


def test_date_range_contract_has_no_model(valid_date_range):
    with pytest.raises(TypeError, match="not bound to a model"):
        DateRangeValidator().load(valid_date_range)


# =============================================================================
# TESTS - ERROR REPORTING / LOADER INJECTION
# =============================================================================


def test_error_messages_carry_json_path():
    messages = CalendarDateValidator().error_messages({"year": 1403, "month": 13, "day": 0})
    assert len(messages) == 2
    assert messages[0].startswith("$.day: ")
    assert messages[1].startswith("$.month: ")


def test_error_messages_empty_for_valid_data(valid_day_time):
    assert DayTimeValidator().error_messages(valid_day_time) == []


def test_validator_accepts_custom_loader(tmp_path):
    """A loader pointed elsewhere is used instead of the package schemas."""
    schema = {"type": "object", "required": ["year", "month", "day"]}
    (tmp_path / "calendar_date.json").write_text(json.dumps(schema), encoding="utf-8")
    validator = CalendarDateValidator(SchemaLoader(tmp_path))

    assert validator.is_valid({"year": 1403, "month": 99, "day": 1})
    assert not CalendarDateValidator().is_valid({"year": 1403, "month": 99, "day": 1})


def test_validator_with_loader_missing_schema(tmp_path):
    with pytest.raises(FileNotFoundError):
        PeriodValidator(SchemaLoader(tmp_path))
