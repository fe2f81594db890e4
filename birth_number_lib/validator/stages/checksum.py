"""
Stage verifying the mod 11 check digit of ten digit birth numbers.
"""

from birth_number_lib.data_models.constants import BirthNumberValidityError
from birth_number_lib.data_models.birth_number import ValidationState
from birth_number_lib.validator.core.stage_interface import ValidationStageI
from birth_number_lib.validator.utils.validators import expected_check_digit


class ChecksumVerifier(ValidationStageI):
    """
    Compares the 10th digit with the check digit computed from the first
    nine digits.  Nine digit numbers carry no check digit and pass through.
    """

    name = "checksum"

    def apply(self, state: ValidationState) -> ValidationState:
        check_digit = state.parsed_fields.check_digit
        if check_digit is None:
            return state

        expected = expected_check_digit(state.digits[:9])
        if expected != check_digit:
            raise self.reject(
                BirthNumberValidityError.MOD_11_CHECKSUM_FAILUE,
                f"Check digit {check_digit} does not match expected {expected}",
            )
        return state
