"""Codecs for the textual date formats used on the NauSYS wire.

The provider mixes three formats and never sends a timezone:

* dates as ``DD.MM.YYYY``
* date-times as ``DD.MM.YYYY HH:MM``
* times of day as ``HH:MM:SS``

The annotated types at the bottom plug the codecs into pydantic models so a
field declared as ``NausysDate`` accepts only the wire format on input and
writes it back on JSON output.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from .errors import DateFormatError

DATE_FORMAT = "%d.%m.%Y"
DATETIME_FORMAT = "%d.%m.%Y %H:%M"
TIME_FORMAT = "%H:%M:%S"

# strptime accepts single-digit fields, the provider never sends them.
_DATE_SHAPE = re.compile(r"\d{2}\.\d{2}\.\d{4}")
_DATETIME_SHAPE = re.compile(r"\d{2}\.\d{2}\.\d{4} \d{2}:\d{2}")
_TIME_SHAPE = re.compile(r"\d{2}:\d{2}:\d{2}")


def _strict_parse(raw: str | bytes, shape: re.Pattern[str], fmt: str) -> datetime:
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    text = raw.strip('"')
    if not shape.fullmatch(text):
        raise DateFormatError(f"{text!r} does not match format {fmt!r}")
    try:
        return datetime.strptime(text, fmt)
    except ValueError as exc:
        raise DateFormatError(f"{text!r} does not match format {fmt!r}: {exc}") from exc


def parse_date(raw: str | bytes) -> date:
    """Parse a ``DD.MM.YYYY`` token, quoted or not."""
    return _strict_parse(raw, _DATE_SHAPE, DATE_FORMAT).date()


def parse_datetime(raw: str | bytes) -> datetime:
    """Parse a ``DD.MM.YYYY HH:MM`` token, quoted or not."""
    return _strict_parse(raw, _DATETIME_SHAPE, DATETIME_FORMAT)


def parse_time(raw: str | bytes) -> time:
    """Parse a ``HH:MM:SS`` token, quoted or not."""
    return _strict_parse(raw, _TIME_SHAPE, TIME_FORMAT).time()


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def format_datetime(value: datetime) -> str:
    return value.strftime(DATETIME_FORMAT)


def format_time(value: time) -> str:
    return value.strftime(TIME_FORMAT)


def _date_input(value: Any) -> date:
    if isinstance(value, (str, bytes)):
        return parse_date(value)
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    raise DateFormatError(f"expected {DATE_FORMAT!r} text or a date, got {value!r}")


def _datetime_input(value: Any) -> datetime:
    if isinstance(value, (str, bytes)):
        return parse_datetime(value)
    if isinstance(value, datetime) and value.tzinfo is None:
        return value
    raise DateFormatError(f"expected {DATETIME_FORMAT!r} text or a naive datetime, got {value!r}")


def _time_input(value: Any) -> time:
    if isinstance(value, (str, bytes)):
        return parse_time(value)
    if isinstance(value, time) and value.tzinfo is None:
        return value
    raise DateFormatError(f"expected {TIME_FORMAT!r} text or a naive time, got {value!r}")


NausysDate = Annotated[
    date,
    BeforeValidator(_date_input),
    PlainSerializer(format_date, return_type=str, when_used="json"),
]
NausysDateTime = Annotated[
    datetime,
    BeforeValidator(_datetime_input),
    PlainSerializer(format_datetime, return_type=str, when_used="json"),
]
NausysTime = Annotated[
    time,
    BeforeValidator(_time_input),
    PlainSerializer(format_time, return_type=str, when_used="json"),
]
