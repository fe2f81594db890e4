"""
Birth number validation pipeline.

The public API consists of:
- BirthNumberValidator (core orchestrator)
- ValidationStageI (stage interface)
- is_valid_birth_number / validate_birth_number / check_birth_number
"""

from birth_number_lib.validator.core.stage_interface import ValidationStageI
from birth_number_lib.validator.core.validator import BirthNumberValidator
from birth_number_lib.validator.api import (
    is_valid_birth_number,
    validate_birth_number,
    check_birth_number,
)
