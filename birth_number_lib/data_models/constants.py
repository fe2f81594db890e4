"""
Constants and enumerations describing the Czech birth number scheme.

The module groups the fixed values of the numbering scheme (lengths, month
offsets, historical cut-over years) together with the two public enums used
across the library: :class:`Sex` and :class:`BirthNumberValidityError`.
"""

from enum import Enum


class Sex(str, Enum):
    """
    Sex encoded in a birth number (or expected by the caller).

    ``UNSPECIFIED`` is accepted only as a hint and behaves exactly like
    omitting the hint: no sex cross-check is performed.
    """

    MALE = "MALE"
    FEMALE = "FEMALE"
    UNSPECIFIED = "UNSPECIFIED"


class BirthNumberValidityError(str, Enum):
    """
    Closed set of reasons a birth number is rejected.

    Exactly one member is reported per failed validation, chosen by the first
    pipeline stage that rejects the input.
    """

    NULL_PARAM = "NULL_PARAM"
    INVALID_LENGTH = "INVALID_LENGTH"
    NONNUMERIC_CHARACTER = "NONNUMERIC_CHARACTER"
    NINE_DIGITS_BEFORE_1954 = "NINE_DIGITS_BEFORE_1954"
    NINE_DIGITS_000_SUFFIX = "NINE_DIGITS_000_SUFFIX"
    MOD_11_CHECKSUM_FAILUE = "MOD_11_CHECKSUM_FAILUE"
    INVALID_DATE = "INVALID_DATE"
    SEX_MISMATCH = "SEX_MISMATCH"
    BIRTH_DATE_MISMATCH = "BIRTH_DATE_MISMATCH"


# Accepted lengths of the digit string
LEGACY_LENGTH = 9
MODERN_LENGTH = 10
ALLOWED_LENGTHS = (LEGACY_LENGTH, MODERN_LENGTH)

# Month field offsets
FEMALE_MONTH_OFFSET = 50
MALE_EXTENSION_OFFSET = 20
FEMALE_EXTENSION_OFFSET = 70

# (offset, sex, extended) in decode precedence order
MONTH_FIELD_DECODE_TABLE = (
    (0, Sex.MALE, False),
    (FEMALE_MONTH_OFFSET, Sex.FEMALE, False),
    (MALE_EXTENSION_OFFSET, Sex.MALE, True),
    (FEMALE_EXTENSION_OFFSET, Sex.FEMALE, True),
)

# Out-of-range month used when the month field matches no decode range
UNRESOLVABLE_MONTH = 0

# Nine digit numbers were issued only before this year
NINE_DIGIT_SCHEME_END_YEAR = 1954
# Oldest birth year a nine digit number is accepted for
NINE_DIGIT_SCHEME_START_YEAR = NINE_DIGIT_SCHEME_END_YEAR - 100
# Year from which the +20 / +70 month extension codes were issued
MONTH_EXTENSION_START_YEAR = 2004

# Reserved legacy serial
RESERVED_LEGACY_SERIAL = "000"

CHECKSUM_MODULUS = 11
# Remainder that is written as ``0`` in the check digit
CHECKSUM_WRAPAROUND_REMAINDER = 10

DEFAULT_CENTURY = 1900
NEXT_CENTURY = 2000
# Ten digit numbers exist since 1954, 20YY is never issued for YY >= 54
NEXT_CENTURY_REMAINDER_LIMIT = NINE_DIGIT_SCHEME_END_YEAR % 100
