"""
Stage comparing the resolved identity with the caller's expectations.
"""

from birth_number_lib.data_models.constants import BirthNumberValidityError, Sex
from birth_number_lib.data_models.birth_number import ValidationState
from birth_number_lib.validator.core.stage_interface import ValidationStageI


class CrossCheckComparator(ValidationStageI):
    """
    Checks the expected sex first and the expected birth date second.

    Absent hints (and ``Sex.UNSPECIFIED``) never trigger a comparison.
    """

    name = "cross_check"

    def apply(self, state: ValidationState) -> ValidationState:
        identity = state.identity

        expected_sex = state.expected_sex
        if expected_sex not in (None, Sex.UNSPECIFIED) and expected_sex != identity.sex:
            raise self.reject(
                BirthNumberValidityError.SEX_MISMATCH,
                f"Birth number encodes {identity.sex.value}, "
                f"expected {expected_sex.value}",
            )

        expected_date = state.expected_date
        if expected_date is not None and (
            expected_date.year,
            expected_date.month,
            expected_date.day,
        ) != (identity.year, identity.month, identity.day):
            raise self.reject(
                BirthNumberValidityError.BIRTH_DATE_MISMATCH,
                "Birth number encodes a different birth date than expected",
            )
        return state
