"""
Definition of the stage interface that every validation stage must implement.
"""

from abc import ABC, abstractmethod

from birth_number_lib.data_models.constants import BirthNumberValidityError
from birth_number_lib.data_models.birth_number import ValidationState
from birth_number_lib.exceptions import BirthNumberValidationError


class ValidationStageI(ABC):
    """
    Abstract base class for all birth number validation stages.

    Sub-classes implement :meth:`apply`, which receives the current
    :class:`ValidationState` and either returns the (possibly enriched)
    state for the next stage or raises :class:`BirthNumberValidationError`.
    Stages hold no per-call state, so a single instance can be shared by any
    number of concurrent callers.
    """

    name: str = "stage"

    @abstractmethod
    def apply(self, state: ValidationState) -> ValidationState:
        """
        Run the stage on *state*.

        Parameters
        ----------
        state: ValidationState
            Snapshot produced by the previous stage.

        Returns
        -------
        ValidationState
            The snapshot passed to the next stage.

        Raises
        ------
        BirthNumberValidationError
            When the stage rejects the birth number.
        """
        raise NotImplementedError

    def reject(
        self, error_code: BirthNumberValidityError, message: str
    ) -> BirthNumberValidationError:
        return BirthNumberValidationError(message=message, error_code=error_code)
