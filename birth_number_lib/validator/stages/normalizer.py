"""
Stage rejecting absent, wrongly sized or non-numeric input.
"""

from birth_number_lib.data_models.constants import BirthNumberValidityError
from birth_number_lib.data_models.birth_number import ValidationState
from birth_number_lib.validator.core.stage_interface import ValidationStageI
from birth_number_lib.validator.utils.validators import (
    has_allowed_length,
    is_ascii_digits,
)


class InputNormalizer(ValidationStageI):
    """
    Accepts only a string of exactly 9 or 10 ASCII digits.

    Formatted input (``"891102/0019"``) is rejected, never stripped.
    """

    name = "normalizer"

    def apply(self, state: ValidationState) -> ValidationState:
        code = state.code
        if code is None:
            raise self.reject(
                BirthNumberValidityError.NULL_PARAM, "Birth number is missing"
            )

        if not has_allowed_length(code):
            raise self.reject(
                BirthNumberValidityError.INVALID_LENGTH,
                f"Birth number must have 9 or 10 characters, got {len(code)}",
            )

        if not is_ascii_digits(code):
            raise self.reject(
                BirthNumberValidityError.NONNUMERIC_CHARACTER,
                "Birth number may contain digits only",
            )

        return state.model_copy(update={"digits": code})
