"""
Module level entry points backed by a shared :class:`BirthNumberValidator`.
"""

from typing import Optional

from birth_number_lib.data_models.birth_number import (
    BirthNumberIdentity,
    ValidationResult,
)
from birth_number_lib.validator.core.validator import (
    BirthNumberValidator,
    DateHint,
    SexHint,
)

_VALIDATOR = BirthNumberValidator()


def is_valid_birth_number(
    code: Optional[str], expected_sex: SexHint = None, expected_date: DateHint = None
) -> bool:
    """
    Validate a Czech birth number (rodné číslo).

    Parameters
    ----------
    code: str | None
        9 or 10 digits, no separators.
    expected_sex: Sex | str | None
        When given (and not ``Sex.UNSPECIFIED``) the number must encode it.
    expected_date: datetime.date | datetime.datetime | None
        When given the number must encode this birth date.

    Returns
    -------
    bool
        ``True`` if the birth number is valid and matches the hints,
        otherwise ``False``.
    """
    return _VALIDATOR.is_valid(
        code, expected_sex=expected_sex, expected_date=expected_date
    )


def validate_birth_number(
    code: Optional[str], expected_date: DateHint = None, expected_sex: SexHint = None
) -> BirthNumberIdentity:
    """
    Strict variant of :func:`is_valid_birth_number`.

    Returns the resolved :class:`BirthNumberIdentity` or raises
    :class:`~birth_number_lib.exceptions.BirthNumberValidationError` whose
    ``error_code`` names the single reason of the rejection.
    """
    return _VALIDATOR.validate(
        code, expected_date=expected_date, expected_sex=expected_sex
    )


def check_birth_number(
    code: Optional[str], expected_sex: SexHint = None, expected_date: DateHint = None
) -> ValidationResult:
    return _VALIDATOR.check(
        code, expected_sex=expected_sex, expected_date=expected_date
    )
