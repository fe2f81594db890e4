"""
Pydantic models exchanged between the validation stages.

The models are short-lived: every instance exists only for the duration of a
single validation call.  :class:`ValidationState` is the snapshot handed from
one stage to the next; stages never mutate it, they return an updated copy.
"""

import datetime

from typing import Optional, Dict, Any

from pydantic import BaseModel

from birth_number_lib.data_models.constants import Sex, BirthNumberValidityError
from birth_number_lib.utils.errors import error_as_dict


class BirthNumberFields(BaseModel):
    """
    Raw semantic fields sliced out of the digit string.

    Attributes
    ----------
    year_remainder : int
        Last two digits of the birth year (digits 1-2).
    month_field : int
        Month combined with the sex / century-extension offset (digits 3-4).
    day : int
        Day of month (digits 5-6).
    serial : str
        Three digit serial (digits 7-9).
    check_digit : int | None
        The 10th digit, ``None`` for legacy nine digit numbers.
    digit_count : int
        9 or 10.
    """

    year_remainder: int
    month_field: int
    day: int
    serial: str
    check_digit: Optional[int] = None
    digit_count: int


class BirthNumberIdentity(BaseModel):
    """
    Birth date and sex resolved from a birth number.

    ``month`` may be out of the 1-12 range when the month field matched no
    decode range. The calendar stage rejects such ten digit identities, nine
    digit ones are accepted without a calendar check and have no
    ``birth_date``.
    """

    year: int
    month: int
    day: int
    sex: Sex
    extended: bool = False

    @property
    def birth_date(self) -> Optional[datetime.date]:
        try:
            return datetime.date(self.year, self.month, self.day)
        except ValueError:
            return None


class ValidationState(BaseModel):
    code: Optional[str] = None
    expected_sex: Optional[Sex] = None
    expected_date: Optional[datetime.date] = None

    digits: Optional[str] = None
    parsed_fields: Optional[BirthNumberFields] = None
    identity: Optional[BirthNumberIdentity] = None


class ValidationResult(BaseModel):
    """
    Tagged outcome of a validation call.

    Exactly one of ``error_code`` / ``identity`` is set: a valid birth number
    carries its resolved identity, a rejected one its single error code.
    """

    code: Optional[str] = None
    is_valid: bool
    error_code: Optional[BirthNumberValidityError] = None
    error_msg: Optional[str] = None
    identity: Optional[BirthNumberIdentity] = None

    def as_dict(self) -> Dict[str, Any]:
        """Return a JSON-serialisable representation of the result."""
        result = {"code": self.code, "valid": self.is_valid}
        if self.identity is not None:
            birth_date = self.identity.birth_date
            result["sex"] = self.identity.sex.value
            result["birth_date"] = birth_date.isoformat() if birth_date else None
        if self.error_code is not None:
            result.update(error_as_dict(self.error_code.value, self.error_msg))
        return result
