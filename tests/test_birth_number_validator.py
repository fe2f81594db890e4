"""Tests for the public birth number validation API.

Tests cover:
- Missing, wrongly sized and non-numeric input
- Nine digit (legacy) numbers and their constraints
- Mod 11 checksum of ten digit numbers
- Calendar validation, leap years and month extension codes
- Century resolution with and without a date hint
- Sex and birth date cross-checks
- Consistency of the lenient, strict and tagged result forms
"""

import datetime

import pytest

from birth_number_lib import (
    BirthNumberError,
    BirthNumberValidationError,
    BirthNumberValidator,
    BirthNumberValidityError,
    Sex,
    check_birth_number,
    is_valid_birth_number,
    validate_birth_number,
)


def _error_code(code, expected_date=None, expected_sex=None):
    with pytest.raises(BirthNumberValidationError) as exc_info:
        validate_birth_number(
            code, expected_date=expected_date, expected_sex=expected_sex
        )
    return exc_info.value.error_code


class TestInputShape:
    def test_missing_code(self) -> None:
        assert is_valid_birth_number(None) is False
        assert _error_code(None) == BirthNumberValidityError.NULL_PARAM

    def test_empty_code(self) -> None:
        assert is_valid_birth_number("") is False
        assert _error_code("") == BirthNumberValidityError.INVALID_LENGTH

    @pytest.mark.parametrize("code", ["12345678", "12345678910", "abc", "1"])
    def test_wrong_length(self, code) -> None:
        assert is_valid_birth_number(code) is False
        assert _error_code(code) == BirthNumberValidityError.INVALID_LENGTH

    @pytest.mark.parametrize(
        "code", ["123456/708", "ABCDERFGHI", "12356-7890", "891102001٩", " 89110200"]
    )
    def test_non_numeric(self, code) -> None:
        assert is_valid_birth_number(code) is False
        assert _error_code(code) == BirthNumberValidityError.NONNUMERIC_CHARACTER

    def test_formatted_number_is_not_normalized(self) -> None:
        assert _error_code("891102/001") == BirthNumberValidityError.NONNUMERIC_CHARACTER

    def test_non_string_code_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            is_valid_birth_number(8911020019)


class TestNineDigitNumbers:
    @pytest.mark.parametrize("code", ["130217789", "505101250", "280715152"])
    def test_valid_legacy_numbers(self, code) -> None:
        assert is_valid_birth_number(code) is True

    def test_resolved_to_twentieth_century(self) -> None:
        identity = validate_birth_number("130217789")
        assert identity.birth_date == datetime.date(1913, 2, 17)
        assert identity.sex == Sex.MALE

    def test_issued_after_1954(self) -> None:
        assert is_valid_birth_number("923456789") is False
        assert _error_code("923456789") == BirthNumberValidityError.NINE_DIGITS_BEFORE_1954

    def test_reserved_serial(self) -> None:
        assert is_valid_birth_number("123456000") is False
        assert _error_code("123456000") == BirthNumberValidityError.NINE_DIGITS_000_SUFFIX

    def test_century_check_precedes_serial_check(self) -> None:
        assert _error_code("991101000") == BirthNumberValidityError.NINE_DIGITS_BEFORE_1954

    def test_no_calendar_check(self) -> None:
        # month field 34 and day 56 are not a date, legacy numbers pass anyway
        assert is_valid_birth_number("123456789") is True
        identity = validate_birth_number("123456789")
        assert identity.year == 1912
        assert identity.birth_date is None

    def test_leap_day_of_1900_accepted(self) -> None:
        assert is_valid_birth_number("000229123") is True

    def test_impossible_date_as_dict(self) -> None:
        payload = check_birth_number("123456789").as_dict()
        assert payload["valid"] is True
        assert payload["birth_date"] is None

    def test_no_checksum_required(self) -> None:
        assert is_valid_birth_number("130217780") is True


class TestChecksum:
    def test_checksum_failure(self) -> None:
        assert is_valid_birth_number("1234567890") is False
        assert _error_code("1234567890") == BirthNumberValidityError.MOD_11_CHECKSUM_FAILUE

    def test_checksum_failure_on_real_date(self) -> None:
        assert _error_code("9107036658") == BirthNumberValidityError.MOD_11_CHECKSUM_FAILUE

    def test_remainder_ten_is_written_as_zero(self) -> None:
        assert is_valid_birth_number("7801233540") is True

    def test_checksum_checked_before_date(self) -> None:
        assert _error_code("0000000001") == BirthNumberValidityError.MOD_11_CHECKSUM_FAILUE


class TestDates:
    @pytest.mark.parametrize("code", ["1234567895", "0000000000", "8975120011"])
    def test_invalid_date(self, code) -> None:
        assert is_valid_birth_number(code) is False
        assert _error_code(code) == BirthNumberValidityError.INVALID_DATE

    def test_leap_day_resolves_to_2000(self) -> None:
        identity = validate_birth_number("0002291234")
        assert identity.birth_date == datetime.date(2000, 2, 29)

    def test_leap_day_with_1900_hint(self) -> None:
        assert (
            _error_code("0002291234", expected_date=datetime.date(1900, 3, 1))
            == BirthNumberValidityError.INVALID_DATE
        )

    def test_extension_code_from_2004(self) -> None:
        identity = validate_birth_number("0421150004")
        assert identity.birth_date == datetime.date(2004, 1, 15)
        assert identity.sex == Sex.MALE
        assert identity.extended is True

    def test_extension_code_before_2004(self) -> None:
        assert _error_code("0321150005") == BirthNumberValidityError.INVALID_DATE


class TestExampleBirthNumbers:
    @pytest.mark.parametrize(
        "code, birth_date, sex",
        [
            ("8911020019", datetime.date(1989, 11, 2), Sex.MALE),
            ("8961020013", datetime.date(1989, 11, 2), Sex.FEMALE),
            ("7401040020", datetime.date(1974, 1, 4), Sex.MALE),
            ("7801233540", datetime.date(1978, 1, 23), Sex.MALE),
            ("8002104946", datetime.date(1980, 2, 10), Sex.MALE),
            ("0531135099", datetime.date(2005, 11, 13), Sex.MALE),
            ("0681186066", datetime.date(2006, 11, 18), Sex.FEMALE),
            ("1111111111", datetime.date(1911, 11, 11), Sex.MALE),
        ],
    )
    def test_resolved_identity(self, code, birth_date, sex) -> None:
        identity = validate_birth_number(code)
        assert identity.birth_date == birth_date
        assert identity.sex == sex
        assert is_valid_birth_number(code) is True


class TestCenturyHint:
    def test_hint_in_twentieth_century(self) -> None:
        assert is_valid_birth_number(
            "8911020019", expected_date=datetime.date(1989, 11, 2)
        )

    def test_hint_in_twenty_first_century(self) -> None:
        identity = validate_birth_number(
            "2111020010", expected_date=datetime.date(2021, 11, 2)
        )
        assert identity.year == 2021

    def test_hint_in_nineteenth_century(self) -> None:
        identity = validate_birth_number(
            "891102001", expected_date=datetime.date(1889, 11, 2)
        )
        assert identity.year == 1889

    def test_hint_before_legacy_issue_window(self) -> None:
        assert not is_valid_birth_number(
            "505101250", expected_date=datetime.date(1850, 1, 1)
        )
        assert (
            _error_code("505101250", expected_date=datetime.date(1850, 1, 1))
            == BirthNumberValidityError.INVALID_DATE
        )

    def test_legacy_issue_window_bounds(self) -> None:
        assert is_valid_birth_number(
            "540101123", expected_date=datetime.date(1854, 1, 1)
        )
        assert (
            _error_code("530101123", expected_date=datetime.date(1853, 1, 1))
            == BirthNumberValidityError.INVALID_DATE
        )

    def test_hint_resolving_legacy_number_after_1954(self) -> None:
        assert (
            _error_code("505101250", expected_date=datetime.date(2050, 1, 1))
            == BirthNumberValidityError.NINE_DIGITS_BEFORE_1954
        )


class TestCrossCheck:
    def test_matching_sex(self) -> None:
        assert is_valid_birth_number("8911020019", Sex.MALE) is True
        assert is_valid_birth_number("8961020013", Sex.FEMALE) is True

    def test_sex_mismatch(self) -> None:
        assert is_valid_birth_number("8911020019", Sex.FEMALE) is False
        assert is_valid_birth_number("8961020013", Sex.MALE) is False
        assert (
            _error_code("8911020019", expected_sex=Sex.FEMALE)
            == BirthNumberValidityError.SEX_MISMATCH
        )
        assert (
            _error_code("8961020013", expected_sex=Sex.MALE)
            == BirthNumberValidityError.SEX_MISMATCH
        )

    def test_unspecified_sex_skips_check(self) -> None:
        assert is_valid_birth_number("8911020019", Sex.UNSPECIFIED) is True
        assert is_valid_birth_number("8961020013", Sex.UNSPECIFIED) is True
        assert is_valid_birth_number("8911020019", None, None) is True

    def test_sex_given_as_string(self) -> None:
        assert is_valid_birth_number("8961020013", "female") is True
        assert is_valid_birth_number("8961020013", "MALE") is False

    def test_unknown_sex_string(self) -> None:
        with pytest.raises(ValueError):
            is_valid_birth_number("8961020013", "other")

    def test_matching_date(self) -> None:
        assert is_valid_birth_number(
            "8911020019", expected_date=datetime.date(1989, 11, 2)
        )
        assert is_valid_birth_number(
            "505101250", expected_date=datetime.date(1950, 1, 1)
        )

    def test_time_of_day_is_ignored(self) -> None:
        assert is_valid_birth_number(
            "8911020019", expected_date=datetime.datetime(1989, 11, 2, 23, 59, 59)
        )

    def test_date_mismatch(self) -> None:
        assert not is_valid_birth_number(
            "8911020019", expected_date=datetime.date(1972, 11, 2)
        )
        assert (
            _error_code("8911020019", expected_date=datetime.date(1972, 11, 2))
            == BirthNumberValidityError.BIRTH_DATE_MISMATCH
        )

    def test_date_mismatch_same_year(self) -> None:
        assert (
            _error_code("8911020019", expected_date=datetime.date(1989, 11, 3))
            == BirthNumberValidityError.BIRTH_DATE_MISMATCH
        )

    def test_sex_reported_before_date(self) -> None:
        assert (
            _error_code(
                "8911020019",
                expected_date=datetime.date(1972, 11, 2),
                expected_sex=Sex.FEMALE,
            )
            == BirthNumberValidityError.SEX_MISMATCH
        )


class TestResultForms:
    @pytest.mark.parametrize(
        "code",
        [None, "", "12345678", "123456/708", "923456789", "123456000",
         "1234567890", "1234567895", "8911020019", "8961020013", "123456789"],
    )
    def test_lenient_and_strict_forms_agree(self, code) -> None:
        result = check_birth_number(code)
        assert is_valid_birth_number(code) is result.is_valid
        if result.is_valid:
            assert validate_birth_number(code) == result.identity
        else:
            assert _error_code(code) == result.error_code

    def test_valid_result(self) -> None:
        result = check_birth_number("8961020013")
        assert result.is_valid is True
        assert result.error_code is None
        assert result.as_dict() == {
            "code": "8961020013",
            "valid": True,
            "sex": "FEMALE",
            "birth_date": "1989-11-02",
        }

    def test_invalid_result(self) -> None:
        result = check_birth_number("1234567890")
        assert result.is_valid is False
        assert result.identity is None
        payload = result.as_dict()
        assert payload["valid"] is False
        assert payload["error"] == "MOD_11_CHECKSUM_FAILUE"
        assert "message" in payload

    def test_exception_carries_code(self) -> None:
        with pytest.raises(BirthNumberError) as exc_info:
            validate_birth_number("1234567895")
        assert exc_info.value.error_code == BirthNumberValidityError.INVALID_DATE
        assert str(exc_info.value).endswith(", INVALID_DATE")

    def test_validator_instance(self) -> None:
        validator = BirthNumberValidator()
        assert validator.is_valid("8911020019", Sex.MALE) is True
        assert validator.check("8911020019", Sex.FEMALE).error_code == (
            BirthNumberValidityError.SEX_MISMATCH
        )
