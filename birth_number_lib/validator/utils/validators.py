"""
Pure helper functions used by the validation stages.
"""

from typing import Tuple, Optional

from birth_number_lib.data_models.constants import (
    Sex,
    ALLOWED_LENGTHS,
    CHECKSUM_MODULUS,
    CHECKSUM_WRAPAROUND_REMAINDER,
    MONTH_FIELD_DECODE_TABLE,
    UNRESOLVABLE_MONTH,
    MONTH_EXTENSION_START_YEAR,
)

_ASCII_DIGITS = frozenset("0123456789")

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_ascii_digits(value: str) -> bool:
    """
    ``True`` when every character of *value* is one of ``0``-``9``.

    ``str.isdigit`` is not used because it accepts other Unicode digits
    (e.g. superscripts or Arabic-Indic digits).
    """
    return all(ch in _ASCII_DIGITS for ch in value)


def has_allowed_length(value: str) -> bool:
    return len(value) in ALLOWED_LENGTHS


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def is_real_date(year: int, month: int, day: int) -> bool:
    """
    Check that ``(year, month, day)`` is a proleptic Gregorian calendar date.

    Unlike :class:`datetime.date` the check has no lower bound on *year*.
    """
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(year, month)


def decode_month_field(month_field: int) -> Tuple[int, Sex, bool]:
    """
    Split the month field into ``(calendar month, sex, extended)``.

    The decode ranges are examined in the order 1-12 (male), 51-62 (female),
    21-32 (male, extension) and 71-82 (female, extension).  A month field
    outside every range yields month ``0`` (never a valid month) and
    ``Sex.MALE``.
    """
    for offset, sex, extended in MONTH_FIELD_DECODE_TABLE:
        month = month_field - offset
        if 1 <= month <= 12:
            return month, sex, extended
    return UNRESOLVABLE_MONTH, Sex.MALE, False


def expected_check_digit(first_nine_digits: str) -> int:
    """
    Compute the mod 11 check digit for the first nine digits.

    The check digit is ``int(first_nine_digits) % 11``, with remainder 10
    written as ``0``.
    """
    remainder = int(first_nine_digits) % CHECKSUM_MODULUS
    if remainder == CHECKSUM_WRAPAROUND_REMAINDER:
        return 0
    return remainder


def is_plausible_birth_date(
    year: int, month: int, day: int, extended: bool = False
) -> bool:
    """
    Calendar check extended with the month-extension issuing rule.

    Extension month codes were issued only from 2004 on, an identity which
    uses one with an earlier year does not exist.
    """
    if extended and year < MONTH_EXTENSION_START_YEAR:
        return False
    return is_real_date(year, month, day)


def closest_year(year_remainder: int, reference_year: int) -> int:
    """
    Return the year ending in *year_remainder* closest to *reference_year*.

    On a tie the candidate in the reference year's own century wins.
    """
    same_century = reference_year - reference_year % 100 + year_remainder
    best: Optional[int] = None
    for candidate in (same_century, same_century - 100, same_century + 100):
        if best is None or abs(candidate - reference_year) < abs(
            best - reference_year
        ):
            best = candidate
    return best
