"""Pure request validation helpers."""

from typing import Any, Dict, Iterable, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from jobconnect.core.exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

# First element of a FastAPI error location names the request part, not a field
REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def format_errors(errors: Iterable[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Convert pydantic/FastAPI error dicts into ``[{field, message}]``."""
    formatted = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]
        field = ".".join(str(part) for part in loc)
        formatted.append({"field": field, "message": error.get("msg", "Invalid value")})
    return formatted


def validate(
    schema: Type[ModelT], data: Any
) -> Tuple[Optional[ModelT], List[Dict[str, str]]]:
    """Validate ``data`` against ``schema``.

    Returns ``(model, [])`` on success or ``(None, errors)`` where ``errors``
    is the ordered list of field-level failures. Never raises for invalid
    input and performs no I/O.
    """
    try:
        return schema.model_validate(data), []
    except PydanticValidationError as e:
        return None, format_errors(e.errors())


def validate_or_raise(schema: Type[ModelT], data: Any) -> ModelT:
    """Like :func:`validate` but raise ``ValidationError`` on failure."""
    model, errors = validate(schema, data)
    if errors:
        raise ValidationError(errors)
    return model
