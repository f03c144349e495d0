import logging
import re
from datetime import date, datetime
from typing import List, Optional

from dateutil import parser as date_parser

from app.core.errors import InvalidDateFormat

logger = logging.getLogger(__name__)

API_DATE_FORMAT = "%Y-%m-%d"
YEAR_FIRST = re.compile(r"\d{4}[-/.]")

# Order matters: the first format that round-trips wins
CANDIDATE_FORMATS = [
    "%d-%m-%Y",
    "%d/%m/%Y",
    "%Y-%m-%d",
    "%d-%m-%Y %H:%M",
    "%d/%m/%Y %H:%M",
]

# Validation types a form can declare on a date field
VALIDATION_TYPE_FORMATS = {
    "date_dmy": "%d-%m-%Y",
    "date_mdy": "%m-%d-%Y",
    "date_ymd": "%Y-%m-%d",
    "datetime_dmy": "%d-%m-%Y %H:%M",
    "datetime_mdy": "%m-%d-%Y %H:%M",
    "datetime_ymd": "%Y-%m-%d %H:%M",
    "datetime_seconds_dmy": "%d-%m-%Y %H:%M:%S",
    "datetime_seconds_mdy": "%m-%d-%Y %H:%M:%S",
    "datetime_seconds_ymd": "%Y-%m-%d %H:%M:%S",
}


def hint_formats(format_hint: Optional[str]) -> List[str]:
    """Turn a format hint (validation type or strptime format) into formats to try."""
    if not format_hint:
        return []

    fmt = VALIDATION_TYPE_FORMATS.get(format_hint.strip().lower())
    if fmt:
        return [fmt, fmt.replace("-", "/")]
    if "%" in format_hint:
        return [format_hint]

    logger.warning(f"Ignoring unknown date format hint: {format_hint}")
    return []


def _parse_hinted(date_text: str, format_hint: Optional[str]) -> Optional[date]:
    for fmt in hint_formats(format_hint):
        try:
            return datetime.strptime(date_text, fmt).date()
        except ValueError:
            continue
    return None


def _parse_candidates(date_text: str) -> Optional[date]:
    for fmt in CANDIDATE_FORMATS:
        try:
            parsed = datetime.strptime(date_text, fmt)
        except ValueError:
            continue
        # Reject parses that only succeed by reading the fields in the wrong order
        if parsed.strftime(fmt) == date_text:
            return parsed.date()
    return None


def _parse_permissive(date_text: str) -> date:
    if YEAR_FIRST.match(date_text):
        # A leading four-digit year leaves no day/month ambiguity
        try:
            return date_parser.parse(date_text, yearfirst=True, dayfirst=False).date()
        except (ValueError, OverflowError):
            raise InvalidDateFormat(date_text) from None

    try:
        day_first = date_parser.parse(date_text, dayfirst=True)
        month_first = date_parser.parse(date_text, dayfirst=False)
    except (ValueError, OverflowError):
        raise InvalidDateFormat(date_text) from None

    if day_first.date() != month_first.date():
        logger.info(f"Refusing ambiguous date without a format hint: {date_text}")
        raise InvalidDateFormat(date_text)
    return day_first.date()


def normalize_date(date_text: str, format_hint: Optional[str] = None) -> str:
    """
    Parse a form date string into the YYYY-MM-DD form the growth API expects.

    A trusted format hint is tried first. Otherwise each candidate format is
    only accepted when formatting the result back reproduces the input, and
    as a last resort a permissive parse is used, provided the day-first and
    month-first readings agree.

    Raises InvalidDateFormat when nothing matches.
    """
    date_text = (date_text or "").strip()
    if not date_text:
        raise InvalidDateFormat(date_text)

    parsed = _parse_hinted(date_text, format_hint)
    if parsed is None:
        parsed = _parse_candidates(date_text)
    if parsed is None:
        parsed = _parse_permissive(date_text)

    return parsed.strftime(API_DATE_FORMAT)
