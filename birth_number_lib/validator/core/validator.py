"""
Validator module
================

Provides the :class:`BirthNumberValidator` class, a thin orchestration layer
that runs an ordered sequence of
:class:`~birth_number_lib.validator.core.stage_interface.ValidationStageI`
implementations over a single birth number.  The public API supports:

* Strict validation via :meth:`BirthNumberValidator.validate`, raising
  :class:`~birth_number_lib.exceptions.BirthNumberValidationError` with the
  precise reason.
* Tagged results via :meth:`BirthNumberValidator.check`, returning a
  :class:`~birth_number_lib.data_models.birth_number.ValidationResult`.
* Lenient validation via :meth:`BirthNumberValidator.is_valid`, collapsing
  every failure to ``False``.

The default pipeline is ``normalize -> extract fields / resolve century ->
checksum -> calendar -> cross-check``.  The first stage that rejects the
input ends the run; no later stage is executed.
"""

import datetime

from typing import Optional, Sequence, Union

from birth_number_lib.data_models.constants import Sex
from birth_number_lib.data_models.birth_number import (
    BirthNumberIdentity,
    ValidationResult,
    ValidationState,
)
from birth_number_lib.exceptions import BirthNumberValidationError
from birth_number_lib.utils.logger import prepare_logger, mask_code
from birth_number_lib.validator.core.stage_interface import ValidationStageI
from birth_number_lib.validator.stages import (
    InputNormalizer,
    FieldExtractor,
    ChecksumVerifier,
    CalendarValidator,
    CrossCheckComparator,
)

SexHint = Union[Sex, str, None]
DateHint = Union[datetime.date, datetime.datetime, None]


def to_sex_hint(expected_sex: SexHint) -> Optional[Sex]:
    """
    Convert a sex hint into a :class:`Sex` member.

    Strings are matched case-insensitively against the member names.
    ``None`` and ``Sex.UNSPECIFIED`` both mean "no cross-check".
    """
    if expected_sex is None or isinstance(expected_sex, Sex):
        return expected_sex
    if isinstance(expected_sex, str):
        try:
            return Sex[expected_sex.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown sex hint: {expected_sex!r}") from None
    raise TypeError(f"Sex hint must be Sex, str or None, got {type(expected_sex)}")


def to_date_hint(expected_date: DateHint) -> Optional[datetime.date]:
    """Drop the time of day from a date hint."""
    if expected_date is None:
        return None
    if isinstance(expected_date, datetime.datetime):
        return expected_date.date()
    if isinstance(expected_date, datetime.date):
        return expected_date
    raise TypeError(
        f"Date hint must be date, datetime or None, got {type(expected_date)}"
    )


class BirthNumberValidator:
    """
    Orchestrates the validation stages.

    The instance keeps only the immutable tuple of stages, so it is safe to
    share one validator between threads.

    Attributes
    ----------
    stages : tuple[ValidationStageI, ...]
        The stages executed for every call, in order.
    """

    DEFAULT_STAGES = (
        InputNormalizer(),
        FieldExtractor(),
        ChecksumVerifier(),
        CalendarValidator(),
        CrossCheckComparator(),
    )

    def __init__(self, stages: Optional[Sequence[ValidationStageI]] = None):
        self.stages = tuple(stages) if stages is not None else self.DEFAULT_STAGES
        self._logger = prepare_logger(__name__)

    def validate(
        self,
        code: Optional[str],
        expected_date: DateHint = None,
        expected_sex: SexHint = None,
    ) -> BirthNumberIdentity:
        """
        Validate *code* and return the resolved identity.

        Parameters
        ----------
        code : str | None
            The birth number, 9 or 10 digits without any separator.
        expected_date : datetime.date | datetime.datetime | None
            Birth date the number must encode. Time of day is ignored.
        expected_sex : Sex | str | None
            Sex the number must encode.

        Returns
        -------
        BirthNumberIdentity
            Birth date and sex encoded in the number.

        Raises
        ------
        BirthNumberValidationError
            With the :class:`BirthNumberValidityError` of the first stage
            that rejected the number.
        """
        if code is not None and not isinstance(code, str):
            raise TypeError(f"Birth number must be str or None, got {type(code)}")

        state = ValidationState(
            code=code,
            expected_sex=to_sex_hint(expected_sex),
            expected_date=to_date_hint(expected_date),
        )
        for stage in self.stages:
            try:
                state = stage.apply(state)
            except BirthNumberValidationError as e:
                self._logger.debug(
                    "Birth number %s rejected by %s stage: %s",
                    mask_code(code),
                    stage.name,
                    e.error_code.value,
                )
                raise
        return state.identity

    def check(
        self,
        code: Optional[str],
        expected_sex: SexHint = None,
        expected_date: DateHint = None,
    ) -> ValidationResult:
        """
        Validate *code* and return a tagged :class:`ValidationResult`.

        Validation failures never raise; invalid hint types still do.
        """
        try:
            identity = self.validate(
                code, expected_date=expected_date, expected_sex=expected_sex
            )
        except BirthNumberValidationError as e:
            return ValidationResult(
                code=code,
                is_valid=False,
                error_code=e.error_code,
                error_msg=e.args[0] if e.args else None,
            )
        return ValidationResult(code=code, is_valid=True, identity=identity)

    def is_valid(
        self,
        code: Optional[str],
        expected_sex: SexHint = None,
        expected_date: DateHint = None,
    ) -> bool:
        """``True`` only when the whole pipeline accepts *code*."""
        return self.check(
            code, expected_sex=expected_sex, expected_date=expected_date
        ).is_valid
