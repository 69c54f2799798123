from __future__ import annotations

import re
from datetime import date, datetime

from dateutil.relativedelta import relativedelta

DATE_FORMAT = "%d-%m-%Y"
REQUIRED_STATE = "Victoria"
PERSON_ID_LENGTH = 10
MIN_SPECIAL_CHARS = 2
ADDRESS_PARTS = 5

DATE_RE = re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}")
STREET_NUMBER_RE = re.compile(r"[+-]?[0-9]+")
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def validate_person_id(person_id: object) -> bool:
    if not isinstance(person_id, str) or len(person_id) != PERSON_ID_LENGTH:
        return False
    if any(not "2" <= char <= "9" for char in person_id[:2]):
        return False
    if any(not "A" <= char <= "Z" for char in person_id[8:]):
        return False
    specials = sum(1 for char in person_id[2:8] if not (char.isalpha() or char.isdecimal()))
    return specials >= MIN_SPECIAL_CHARS


def validate_address(address: object) -> bool:
    if not isinstance(address, str):
        return False
    parts = address.split("|")
    if len(parts) != ADDRESS_PARTS:
        return False
    if parts[3] != REQUIRED_STATE:
        return False
    return _is_int32(parts[0])


def validate_date(value: object) -> bool:
    return parse_date(value) is not None


def parse_date(value: object) -> date | None:
    """Parse a strict ``DD-MM-YYYY`` string; return None when it is not a real date."""

    if not isinstance(value, str) or not DATE_RE.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def age_on(birthdate: date, on: date) -> int:
    # Whole calendar years; a 29 Feb birthday is not reached on 28 Feb.
    before_birthday = (on.month, on.day) < (birthdate.month, birthdate.day)
    return on.year - birthdate.year - before_birthday


def window_start(offense_date: date, years: int = 2) -> date:
    return offense_date - relativedelta(years=years)


def _is_int32(value: str) -> bool:
    if not STREET_NUMBER_RE.fullmatch(value):
        return False
    return INT_MIN <= int(value) <= INT_MAX


__all__ = [
    "DATE_FORMAT",
    "age_on",
    "format_date",
    "parse_date",
    "validate_address",
    "validate_date",
    "validate_person_id",
    "window_start",
]
