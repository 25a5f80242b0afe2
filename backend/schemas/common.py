import enum
import logging
import math
from typing import Any, Optional, Type

from pydantic import BeforeValidator
from typing_extensions import Annotated

logger = logging.getLogger(__name__)


def coerce_amount(value: Any) -> float:
    """Missing or non-numeric amounts/quantities count as zero instead of failing the request."""
    if value is None or value == "":
        return 0.0
    if isinstance(value, bool):
        logger.warning(f"Boolean {value!r} received where a number was expected, using 0.")
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Non-numeric value {value!r} received where a number was expected, using 0.")
        return 0.0
    if math.isnan(number) or math.isinf(number):
        logger.warning(f"Non-finite value {value!r} received where a number was expected, using 0.")
        return 0.0
    return number


Amount = Annotated[float, BeforeValidator(coerce_amount)]


def coerce_text(value: Any) -> str:
    """Missing free-text fields (product names, units, categories) read as empty."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    logger.warning(f"Non-text value {value!r} received where text was expected, using its string form.")
    return str(value)


Text = Annotated[str, BeforeValidator(coerce_text)]


def lenient_enum(enum_cls: Type[enum.Enum], default: Optional[enum.Enum]):
    """
    Enum field that accepts values case-insensitively and falls back to
    `default` with a warning for missing or unknown values.
    """
    def _coerce(value: Any):
        if value is None or value == "":
            return default
        if isinstance(value, enum_cls):
            return value
        wanted = str(value).strip().lower()
        for member in enum_cls:
            if member.value.lower() == wanted:
                return member
        logger.warning(f"Unknown {enum_cls.__name__} value {value!r}, using {default.value if default else None!r}.")
        return default

    if default is None:
        return Annotated[Optional[enum_cls], BeforeValidator(_coerce)]
    return Annotated[enum_cls, BeforeValidator(_coerce)]
