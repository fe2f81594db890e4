"""
Stage splitting the digits into fields and resolving the birth century.

Field layout of the digit string::

    YY MM DD SSS [C]
    |  |  |  |    +-- check digit (10 digit numbers only)
    |  |  |  +------- serial
    |  |  +---------- day
    |  +------------- month field (month + sex / extension offset)
    +---------------- year remainder

Century resolution:

* with a date hint, the year ending in ``YY`` closest to the hinted year;
* without a hint, ``19YY`` for nine digit numbers;
* without a hint, ``19YY`` for ten digit numbers unless it is not a real
  birth date while ``20YY`` is (only for ``YY < 54``, ten digit numbers
  exist since 1954 so later years of the 21st century were never issued).
"""

from birth_number_lib.data_models.constants import (
    BirthNumberValidityError,
    LEGACY_LENGTH,
    DEFAULT_CENTURY,
    NEXT_CENTURY,
    NEXT_CENTURY_REMAINDER_LIMIT,
    NINE_DIGIT_SCHEME_END_YEAR,
    RESERVED_LEGACY_SERIAL,
)
from birth_number_lib.data_models.birth_number import (
    BirthNumberFields,
    BirthNumberIdentity,
    ValidationState,
)
from birth_number_lib.validator.core.stage_interface import ValidationStageI
from birth_number_lib.validator.utils.validators import (
    closest_year,
    decode_month_field,
    is_plausible_birth_date,
)


def split_fields(digits: str) -> BirthNumberFields:
    check_digit = None
    if len(digits) > LEGACY_LENGTH:
        check_digit = int(digits[9])
    return BirthNumberFields(
        year_remainder=int(digits[0:2]),
        month_field=int(digits[2:4]),
        day=int(digits[4:6]),
        serial=digits[6:9],
        check_digit=check_digit,
        digit_count=len(digits),
    )


def resolve_year(fields: BirthNumberFields, date_hint=None) -> int:
    """
    Resolve the two digit year remainder into a full year.

    Parameters
    ----------
    fields: BirthNumberFields
        Fields of the birth number.
    date_hint: datetime.date | None
        Birth date expected by the caller.

    Returns
    -------
    int
        The four digit birth year.
    """
    if date_hint is not None:
        return closest_year(fields.year_remainder, date_hint.year)

    year = DEFAULT_CENTURY + fields.year_remainder
    if fields.digit_count == LEGACY_LENGTH:
        return year

    if fields.year_remainder >= NEXT_CENTURY_REMAINDER_LIMIT:
        return year

    next_century_year = NEXT_CENTURY + fields.year_remainder

    month, _, extended = decode_month_field(fields.month_field)
    if not is_plausible_birth_date(
        year, month, fields.day, extended
    ) and is_plausible_birth_date(next_century_year, month, fields.day, extended):
        return next_century_year
    return year


class FieldExtractor(ValidationStageI):
    """
    Populates ``parsed_fields`` and ``identity`` of the validation state.

    The stage never rejects an impossible month or day: it fills the identity
    mechanically and leaves the rejection to the calendar stage.  It rejects
    only nine digit numbers which resolve to 1954 or later and nine digit
    numbers with the reserved ``000`` serial.
    """

    name = "extractor"

    def apply(self, state: ValidationState) -> ValidationState:
        fields = split_fields(state.digits)
        year = resolve_year(fields, state.expected_date)
        month, sex, extended = decode_month_field(fields.month_field)

        if fields.digit_count == LEGACY_LENGTH:
            if year >= NINE_DIGIT_SCHEME_END_YEAR:
                raise self.reject(
                    BirthNumberValidityError.NINE_DIGITS_BEFORE_1954,
                    f"Nine digit birth numbers were issued only before "
                    f"{NINE_DIGIT_SCHEME_END_YEAR}, resolved year is {year}",
                )
            if fields.serial == RESERVED_LEGACY_SERIAL:
                raise self.reject(
                    BirthNumberValidityError.NINE_DIGITS_000_SUFFIX,
                    f"Serial {RESERVED_LEGACY_SERIAL} is not valid "
                    f"for nine digit birth numbers",
                )

        identity = BirthNumberIdentity(
            year=year, month=month, day=fields.day, sex=sex, extended=extended
        )
        return state.model_copy(update={"parsed_fields": fields, "identity": identity})
