"""
Column codec for storing time-of-day values as text in SQL databases.
"""

from typing import Optional, Union

from ..domain.exceptions import LayoutError, SourceTypeError
from ..domain.models import DEFAULT_TIMEZONE, TimeOfDay, TimezoneLike


def to_db_value(value: TimeOfDay) -> str:
    """Return the value to bind as a query parameter."""
    return value.to_text()


def from_db_value(
    source: Optional[Union[str, bytes]],
    tz: TimezoneLike = DEFAULT_TIMEZONE,
) -> TimeOfDay:
    """
    Decode a column value.

    ``NULL`` and the empty string decode to the unset sentinel.

    Raises:
        SourceTypeError: If the driver returned neither text nor bytes
        LayoutError: If the text is not a valid "HH:MM:SS" literal
    """
    if source is None:
        return TimeOfDay.zero()

    if isinstance(source, (bytes, bytearray, memoryview)):
        try:
            text = bytes(source).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise LayoutError(
                f"time of day column is not valid UTF-8: {bytes(source)!r}"
            ) from exc
    elif isinstance(source, str):
        text = source
    else:
        raise SourceTypeError(
            f"Cannot decode a time of day from {type(source).__name__}"
        )

    if text == "":
        return TimeOfDay.zero()

    return TimeOfDay.parse(text, tz=tz)
