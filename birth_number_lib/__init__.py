from birth_number_lib.data_models.constants import Sex, BirthNumberValidityError
from birth_number_lib.data_models.birth_number import (
    BirthNumberIdentity,
    ValidationResult,
)
from birth_number_lib.exceptions import BirthNumberError, BirthNumberValidationError
from birth_number_lib.validator import (
    BirthNumberValidator,
    is_valid_birth_number,
    validate_birth_number,
    check_birth_number,
)

__all__ = [
    "Sex",
    "BirthNumberValidityError",
    "BirthNumberIdentity",
    "ValidationResult",
    "BirthNumberError",
    "BirthNumberValidationError",
    "BirthNumberValidator",
    "is_valid_birth_number",
    "validate_birth_number",
    "check_birth_number",
]
