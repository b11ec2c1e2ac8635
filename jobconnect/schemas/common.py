"""Shared schema building blocks."""

from datetime import datetime, timezone
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationInfo
from pydantic_core import PydanticCustomError


def none_to_list(v: Any) -> Any:
    """Treat NULL JSON columns as empty lists."""
    return [] if v is None else v


StrList = Annotated[List[str], BeforeValidator(none_to_list)]
JsonList = Annotated[List[Any], BeforeValidator(none_to_list)]


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalise timezone-aware datetimes to naive UTC (the storage convention)."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def check_salary_range(
    v: Optional[int], info: ValidationInfo, min_field: str = "salary_min"
) -> Optional[int]:
    """Validate a maximum salary against the minimum sent in the same payload."""
    salary_min = info.data.get(min_field)
    if v is not None and salary_min is not None and salary_min > v:
        raise PydanticCustomError(
            "salary_range", "Maximum salary must be greater than or equal to minimum salary"
        )
    return v


class RequestModel(BaseModel):
    """Base class for request bodies. Enum fields hold their plain values."""

    model_config = ConfigDict(use_enum_values=True)


class RecordModel(BaseModel):
    """Base class for persisted records read from storage."""

    model_config = ConfigDict(from_attributes=True)


class SuccessResponse(BaseModel):
    """Generic success acknowledgement."""

    success: bool = True
