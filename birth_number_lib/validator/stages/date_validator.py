"""
Stage confirming the resolved birth date exists in the calendar.
"""

from birth_number_lib.data_models.constants import (
    BirthNumberValidityError,
    LEGACY_LENGTH,
    NINE_DIGIT_SCHEME_START_YEAR,
)
from birth_number_lib.data_models.birth_number import ValidationState
from birth_number_lib.validator.core.stage_interface import ValidationStageI
from birth_number_lib.validator.utils.validators import is_plausible_birth_date


class CalendarValidator(ValidationStageI):
    """
    Ten digit numbers must encode a real birth date.

    Legacy nine digit numbers are not checked against the calendar, only
    their resolved year must fall in the hundred years before 1954.
    """

    name = "calendar"

    def apply(self, state: ValidationState) -> ValidationState:
        identity = state.identity
        if state.parsed_fields.digit_count == LEGACY_LENGTH:
            if identity.year < NINE_DIGIT_SCHEME_START_YEAR:
                raise self.reject(
                    BirthNumberValidityError.INVALID_DATE,
                    f"Nine digit birth numbers are accepted from "
                    f"{NINE_DIGIT_SCHEME_START_YEAR}, resolved year is "
                    f"{identity.year}",
                )
            return state

        if not is_plausible_birth_date(
            identity.year, identity.month, identity.day, identity.extended
        ):
            raise self.reject(
                BirthNumberValidityError.INVALID_DATE,
                f"Month field {state.parsed_fields.month_field:02d} and day "
                f"{identity.day:02d} do not form a birth date in {identity.year}",
            )
        return state
