"""
Pure request validation helpers.

Nothing here touches the database; these functions normalise raw values and
translate pydantic errors into the machine-readable codes returned to clients.
"""
import re
from typing import Any, Dict, Optional, Sequence, Tuple

from pydantic_core import PydanticCustomError

_LOCATION_ROOTS = {'body', 'query', 'path'}
_FIELD_NAME = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')
_MISSING_TYPES = {'missing', 'blank'}


def to_upper_snake(name: str) -> str:
    """``planData`` -> ``PLAN_DATA``"""
    return re.sub(r'(?<!^)(?=[A-Z])', '_', name).upper()


def field_from_loc(loc: Sequence[Any]) -> str:
    names = [part for part in loc
             if isinstance(part, str) and part not in _LOCATION_ROOTS and _FIELD_NAME.match(part)]
    return names[-1] if names else 'body'


def validation_error_code(error: Dict[str, Any]) -> str:
    prefix = 'MISSING' if error.get('type') in _MISSING_TYPES else 'INVALID'
    return f"{prefix}_{to_upper_snake(field_from_loc(error.get('loc', ())))}"


def require_text(value: Any) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError('blank', 'Field is required and cannot be empty')
    if not isinstance(value, str):
        raise PydanticCustomError('string_type', 'Input should be a valid string')
    return value.strip()


def non_blank_text(value: Any) -> str:
    if not isinstance(value, str):
        raise PydanticCustomError('string_type', 'Input should be a valid string')
    if not value.strip():
        raise PydanticCustomError('empty_text', 'Field cannot be empty')
    return value.strip()


def stringify(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return value


def clamp_pagination(limit: Optional[int], offset: Optional[int],
                     default: int, maximum: int) -> Tuple[int, int]:
    limit = default if limit is None else min(max(limit, 1), maximum)
    offset = 0 if offset is None else max(offset, 0)
    return limit, offset


def check_strict_pagination(limit: Optional[int], offset: Optional[int],
                            default: int, maximum: int) -> Tuple[int, int, Optional[str]]:
    """
    Stricter variant used by the community feed: out of range values are
    reported instead of clamped. Returns ``(limit, offset, error_code)``.
    """
    limit = default if limit is None else limit
    offset = 0 if offset is None else offset
    if limit < 1:
        return limit, offset, 'INVALID_LIMIT'
    if limit > maximum:
        return limit, offset, 'LIMIT_EXCEEDED'
    if offset < 0:
        return limit, offset, 'INVALID_OFFSET'
    return limit, offset, None
