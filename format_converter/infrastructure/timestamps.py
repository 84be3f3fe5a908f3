"""Unix timestamps, ISO 8601 and RFC 1123 dates. All output is UTC."""
import math
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime, parsedate_to_datetime

from ..domain.errors import DecodeError, RangeError

# Numbers above this are read as milliseconds.
MILLISECONDS_THRESHOLD = 1e12

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_timestamp(text: str) -> datetime:
    """Parse Unix seconds, or milliseconds when the value exceeds 1e12."""
    try:
        number = float(text.strip())
    except ValueError:
        raise DecodeError(f"Invalid Unix timestamp: {text.strip()!r}") from None
    if not math.isfinite(number):
        raise DecodeError("Timestamp must be finite")
    milliseconds = number if abs(number) > MILLISECONDS_THRESHOLD else number * 1000
    try:
        return _EPOCH + timedelta(milliseconds=milliseconds)
    except OverflowError:
        raise RangeError(f"Timestamp out of range: {text.strip()}") from None


def parse_date(text: str) -> datetime:
    """Parse an ISO 8601 or RFC 2822 date. Naive values are taken as UTC."""
    cleaned = text.strip()
    if not cleaned:
        raise DecodeError("Empty date")
    try:
        parsed = datetime.fromisoformat(cleaned)
    except ValueError:
        try:
            parsed = parsedate_to_datetime(cleaned)
        except (TypeError, ValueError):
            raise DecodeError(f"Unrecognised date: {cleaned!r}") from None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_iso(moment: datetime) -> str:
    """Render as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    moment = moment.astimezone(timezone.utc)
    return f"{moment:%Y-%m-%dT%H:%M:%S}.{moment.microsecond // 1000:03d}Z"


def to_human(moment: datetime) -> str:
    """Render as an RFC 1123 date, e.g. ``Mon, 15 Jan 2024 12:00:00 GMT``."""
    return format_datetime(moment.astimezone(timezone.utc), usegmt=True)


def to_timestamp(moment: datetime) -> str:
    return str(math.floor(moment.timestamp()))


def timestamp_to_iso(text: str) -> str:
    return to_iso(parse_timestamp(text))


def timestamp_to_human(text: str) -> str:
    return to_human(parse_timestamp(text))


def date_to_timestamp(text: str) -> str:
    return to_timestamp(parse_date(text))


def date_to_iso(text: str) -> str:
    return to_iso(parse_date(text))


def date_to_human(text: str) -> str:
    return to_human(parse_date(text))
