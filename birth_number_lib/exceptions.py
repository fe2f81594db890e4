"""
Custom exception hierarchy for the birth number library.

All public exceptions inherit from :class:`BirthNumberError`, allowing callers
to catch a single base class for any library failure while still being able
to switch on the precise :class:`BirthNumberValidityError` carried by
:class:`BirthNumberValidationError`.
"""

from birth_number_lib.data_models.constants import BirthNumberValidityError


class BirthNumberError(Exception):
    """Base exception for all birth-number-specific errors."""

    pass


class BirthNumberValidationError(BirthNumberError):
    """
    Raised when a birth number is rejected by the validation pipeline.

    Attributes
    ----------
    error_code : BirthNumberValidityError
        The single reason of the rejection.
    """

    def __init__(self, message: str, error_code: BirthNumberValidityError):
        super().__init__(message)
        self.error_code = error_code

    def __str__(self) -> str:
        return f"{super().__str__()}, {self.error_code.value}"
