"""
Parsing helpers for JSON request payloads.

Each helper either returns a clean Python value or raises ValidationError
with a message that can be shown to the API caller as-is.
"""
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, List, Optional

from estimator.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
SLUG_INVALID_CHARS = re.compile(r"[^a-z0-9]+")

TRUE_VALUES = {'true', '1', 'yes', 'on'}
FALSE_VALUES = {'false', '0', 'no', 'off'}


def is_valid_email(email: Optional[str]) -> bool:
    return bool(email) and bool(EMAIL_PATTERN.match(email.strip()))


def slugify(value: str) -> str:
    """
    URL-safe slug.

    slugify('Health Care & Fitness') -> 'health-care-fitness'
    """
    return SLUG_INVALID_CHARS.sub('-', value.lower()).strip('-')


def parse_text(value: Any, label: str, min_length: Optional[int] = None,
               max_length: Optional[int] = None, required: bool = True) -> Optional[str]:
    """Strip a string field and check its length. Empty optional text becomes None."""
    if value is None or (isinstance(value, str) and not value.strip()):
        if required:
            raise ValidationError(f'{label} is required')
        return None

    if not isinstance(value, str):
        raise ValidationError(f'{label} must be a string')

    cleaned = value.strip()
    if min_length is not None and len(cleaned) < min_length:
        raise ValidationError(f'{label} must be at least {min_length} characters')
    if max_length is not None and len(cleaned) > max_length:
        raise ValidationError(f'{label} must be at most {max_length} characters')
    return cleaned


def parse_choice(value: Any, label: str, choices: Iterable[str]) -> str:
    choices = tuple(choices)
    if not isinstance(value, str) or value.strip().lower() not in choices:
        raise ValidationError(f"{label} must be one of: {', '.join(choices)}")
    return value.strip().lower()


def parse_decimal(value: Any, label: str, min_value: Optional[Decimal] = None,
                  max_value: Optional[Decimal] = None, exclusive_min: bool = False) -> Decimal:
    """Parse a JSON number (or numeric string) into Decimal and range-check it."""
    if value is None or value == '' or isinstance(value, bool):
        raise ValidationError(f'{label} must be a number')

    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f'{label} must be a number')

    if not number.is_finite():
        raise ValidationError(f'{label} must be a number')

    if min_value is not None:
        min_value = Decimal(str(min_value))
        if number < min_value or (exclusive_min and number == min_value):
            qualifier = 'greater than' if exclusive_min else 'at least'
            raise ValidationError(f'{label} must be {qualifier} {min_value}')
    if max_value is not None and number > Decimal(str(max_value)):
        raise ValidationError(f'{label} must be at most {max_value}')
    return number


def parse_int(value: Any, label: str, min_value: Optional[int] = None,
              max_value: Optional[int] = None) -> int:
    if isinstance(value, bool):
        raise ValidationError(f'{label} must be an integer')
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f'{label} must be an integer')

    if min_value is not None and number < min_value:
        raise ValidationError(f'{label} must be at least {min_value}')
    if max_value is not None and number > max_value:
        raise ValidationError(f'{label} must be at most {max_value}')
    return number


def parse_bool(value: Any, label: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
    raise ValidationError(f'{label} must be true or false')


def parse_string_list(value: Any, label: str) -> List[str]:
    """
    List of non-empty strings, duplicates removed (first occurrence wins).

    A bare string is treated as a one-item list.
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        raise ValidationError(f'{label} must be a list')

    result = []
    for item in value:
        if not isinstance(item, str):
            raise ValidationError(f'{label} must contain only strings')
        cleaned = item.strip()
        if cleaned and cleaned not in result:
            result.append(cleaned)
    return result


def parse_id_list(value: Any, label: str) -> List[int]:
    """List of integer ids (ints or digit strings), duplicates removed."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError(f'{label} must be a list of ids')

    result = []
    for item in value:
        if isinstance(item, bool):
            raise ValidationError(f'{label} must be a list of ids')
        if isinstance(item, int):
            item_id = item
        elif isinstance(item, str) and item.strip().isdigit():
            item_id = int(item.strip())
        else:
            raise ValidationError(f'{label} must be a list of ids')
        if item_id not in result:
            result.append(item_id)
    return result
