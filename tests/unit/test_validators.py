"""
Unit tests for built-in and custom validators.

Includes property-based testing with hypothesis for validators.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fieldcheck.core.validators import (
    ConfigurationError,
    CustomValidator,
    DateFormatValidator,
    EmailValidator,
    InvalidModifierError,
    LengthValidator,
    RequiredValidator,
    translate_date_pattern,
)


class TestRequiredValidator:
    """Tests for RequiredValidator"""

    def test_non_empty_string_passes(self):
        """Test validation passes for a present value"""
        assert RequiredValidator().validate("i-am-required") is True

    def test_empty_string_fails(self):
        """Test validation fails for an empty string"""
        assert RequiredValidator().validate("") is False

    def test_none_fails(self):
        """Test validation fails for an absent value"""
        assert RequiredValidator().validate(None) is False

    def test_false_treated_as_absent(self):
        """Test boolean False is treated like an absent value"""
        assert RequiredValidator().validate(False) is False

    def test_zero_is_present(self):
        """Test numeric zero counts as a value"""
        assert RequiredValidator().validate(0) is True

    def test_whitespace_is_present(self):
        """Test whitespace-only strings are not considered empty"""
        assert RequiredValidator().validate("   ") is True

    def test_error_message(self):
        """Test error message template"""
        assert RequiredValidator().compose_error("email") == "email is required."

    @given(st.text(min_size=1))
    def test_property_any_nonempty_string_passes(self, value):
        """Property test: any non-empty string should pass"""
        assert RequiredValidator().validate(value) is True


class TestLengthValidator:
    """Tests for LengthValidator"""

    def test_long_enough_passes(self):
        """Test a 22-character value passes len:8"""
        assert LengthValidator().validate("i-am-fine-as-i-am-long", "8") is True

    def test_too_short_fails(self):
        """Test a 10-character value fails len:15"""
        assert LengthValidator().validate("i-am-short", "15") is False

    def test_exact_length_passes(self):
        """Test the minimum is inclusive"""
        assert LengthValidator().validate("12345678", "8") is True

    @pytest.mark.parametrize("modifier", [None, "", "0", "-3"])
    def test_no_constraint_always_passes(self, modifier):
        """Test absent or zero modifier means no constraint"""
        validator = LengthValidator()
        assert validator.validate("", modifier) is True
        assert validator.validate(None, modifier) is True

    def test_absent_value_fails_with_constraint(self):
        """Test absent value fails when a minimum is set"""
        assert LengthValidator().validate(None, "1") is False
        assert LengthValidator().validate("", "1") is False

    def test_counts_characters_not_bytes(self):
        """Test length is measured in characters"""
        assert LengthValidator().validate("ääää", "4") is True
        assert LengthValidator().validate("ääää", "5") is False

    def test_modifier_whitespace_tolerated(self):
        """Test surrounding whitespace in the modifier is ignored"""
        assert LengthValidator().validate("abc", " 3 ") is True

    def test_invalid_modifier_raises(self):
        """Test a non-integer modifier is a configuration fault"""
        with pytest.raises(InvalidModifierError) as exc_info:
            LengthValidator().validate("abc", "eight")

        assert exc_info.value.rule_name == "len"
        assert exc_info.value.modifier == "eight"
        assert isinstance(exc_info.value, ConfigurationError)

    @pytest.mark.parametrize("modifier", ["1_0", "١٠", "0x10", "8.0", "+"])
    def test_non_decimal_modifier_raises(self, modifier):
        """Test only plain ASCII base-10 integers are accepted as a minimum"""
        with pytest.raises(InvalidModifierError):
            LengthValidator().validate("abc", modifier)

    def test_signed_modifier(self):
        """Test an explicit sign is allowed"""
        assert LengthValidator().validate("abc", "+3") is True
        assert LengthValidator().validate("abc", "+4") is False

    def test_error_message(self):
        """Test error message template"""
        assert (
            LengthValidator().compose_error("string", "15")
            == "string is shorter than the required 15 characters."
        )

    @given(st.text(), st.integers(min_value=1, max_value=50))
    def test_property_threshold(self, value, minimum):
        """Property test: passes exactly when the value is at least minimum long"""
        assert LengthValidator().validate(value, str(minimum)) is (len(value) >= minimum)


class TestEmailValidator:
    """Tests for EmailValidator"""

    @pytest.mark.parametrize("value", [
        "a@b.com",
        "asko@bien.ee",
        "first.last+tag@sub.example.org",
        "user_name@my-domain.co.uk",
    ])
    def test_valid_addresses_pass(self, value):
        """Test well-formed addresses pass"""
        assert EmailValidator().validate(value) is True

    @pytest.mark.parametrize("value", [
        "not-an-email",
        "this-is-not-right",
        "a@b",
        "@example.com",
        "a@.com",
        "a@example.",
        "a b@example.com",
        "a@exa mple.com",
        "a@@example.com",
        "a..b@example.com",
        ".a@example.com",
        "a@-example.com",
        "",
    ])
    def test_invalid_addresses_fail(self, value):
        """Test malformed addresses fail"""
        assert EmailValidator().validate(value) is False

    def test_absent_value_fails(self):
        """Test None fails"""
        assert EmailValidator().validate(None) is False

    def test_overlong_local_part_fails(self):
        """Test local part is capped at 64 characters"""
        assert EmailValidator().validate("a" * 64 + "@example.com") is True
        assert EmailValidator().validate("a" * 65 + "@example.com") is False

    def test_overlong_address_fails(self):
        """Test the whole address is capped at 254 characters"""
        domain = ".".join(["a" * 63] * 4) + ".com"
        assert EmailValidator().validate("user@" + domain) is False

    def test_error_message(self):
        """Test error message template"""
        assert EmailValidator().compose_error("email") == "email is not a valid e-mail address."

    @given(st.text().filter(lambda s: "@" not in s))
    def test_property_strings_without_at_fail(self, value):
        """Property test: nothing without an '@' is an address"""
        assert EmailValidator().validate(value) is False


class TestDateFormatValidator:
    """Tests for DateFormatValidator"""

    def test_matching_value_passes(self):
        """Test a full date-time matches Y-m-d H:i:s"""
        assert DateFormatValidator().validate("2020-09-17 15:00:12", "Y-m-d H:i:s") is True

    def test_missing_component_fails(self):
        """Test a value without seconds fails Y-m-d H:i:s"""
        assert DateFormatValidator().validate("2020-09-17 15:00", "Y-m-d H:i:s") is False

    def test_trailing_characters_fail(self):
        """Test residual text after the pattern fails"""
        assert DateFormatValidator().validate("2020-09-17 extra", "Y-m-d") is False

    def test_invalid_calendar_date_fails(self):
        """Test impossible dates fail"""
        assert DateFormatValidator().validate("2021-02-30", "Y-m-d") is False

    @pytest.mark.parametrize("value", ["", None, False])
    def test_empty_value_passes(self, value):
        """Test absent values pass (presence is the required rule's job)"""
        assert DateFormatValidator().validate(value, "Y-m-d") is True

    def test_named_month_and_day(self):
        """Test textual month and weekday letters"""
        assert DateFormatValidator().validate("Thu, 17 Sep 2020", "D, d M Y") is True

    def test_twelve_hour_clock(self):
        """Test 12-hour clock with meridiem"""
        assert DateFormatValidator().validate("03:00 PM", "h:i A") is True

    def test_missing_modifier_raises(self):
        """Test a date-format rule without a pattern is a configuration fault"""
        with pytest.raises(InvalidModifierError):
            DateFormatValidator().validate("2020-09-17", None)

    @pytest.mark.parametrize("modifier", [None, "", "Y-m-d Q"])
    def test_pattern_checked_before_empty_value(self, modifier):
        """Test a bad pattern raises even when the value is empty"""
        with pytest.raises(InvalidModifierError):
            DateFormatValidator().validate("", modifier)

    def test_unix_timestamp(self):
        """Test U accepts epoch seconds"""
        validator = DateFormatValidator()

        assert validator.validate("1600354812", "U") is True
        assert validator.validate("0", "U") is True
        assert validator.validate("-86400", "U") is True

    @pytest.mark.parametrize("value", ["2020-09-17", "16003548.12", "1e9", " 1600354812", "9" * 40])
    def test_unix_timestamp_rejects_non_timestamps(self, value):
        """Test U fails for anything but a representable integer"""
        assert DateFormatValidator().validate(value, "U") is False

    def test_unix_timestamp_must_be_whole_pattern(self):
        """Test U cannot be mixed with other letters"""
        with pytest.raises(InvalidModifierError) as exc_info:
            DateFormatValidator().validate("1600354812 2020", "U Y")

        assert "whole pattern" in str(exc_info.value)

    def test_colon_offset(self):
        """Test P accepts +HH:MM offsets"""
        validator = DateFormatValidator()

        assert validator.validate("2020-09-17 15:00:12+02:00", "Y-m-d H:i:sP") is True
        assert validator.validate("2020-09-17 15:00:12", "Y-m-d H:i:sP") is False

    def test_compact_offset(self):
        """Test O accepts +HHMM offsets"""
        validator = DateFormatValidator()

        assert validator.validate("2020-09-17 15:00:12 -0500", "Y-m-d H:i:s O") is True
        assert validator.validate("2020-09-17 15:00:12 EST", "Y-m-d H:i:s O") is False

    @pytest.mark.parametrize("pattern", ["Y-m-d e", "Y-m-d T"])
    def test_timezone_name_letters_unsupported(self, pattern):
        """Test timezone-name letters are rejected rather than failing valid values"""
        with pytest.raises(InvalidModifierError):
            DateFormatValidator().validate("2020-09-17 Europe/Tallinn", pattern)

    def test_error_message(self):
        """Test error message template keeps the raw pattern"""
        assert (
            DateFormatValidator().compose_error("date", "Y-m-d H:i:s")
            == "date does not match the required date format Y-m-d H:i:s."
        )


class TestTranslateDatePattern:
    """Tests for date pattern translation"""

    def test_common_pattern(self):
        """Test the usual date-time pattern"""
        assert translate_date_pattern("Y-m-d H:i:s") == "%Y-%m-%d %H:%M:%S"

    def test_escaped_letter_is_literal(self):
        """Test a backslash makes the next character literal"""
        assert translate_date_pattern(r"Y-m-d\TH:i") == "%Y-%m-%dT%H:%M"

    def test_percent_is_escaped(self):
        """Test literal percent signs survive strptime"""
        assert translate_date_pattern("Y%") == "%Y%%"

    def test_unsupported_letter_raises(self):
        """Test unknown letters are rejected"""
        with pytest.raises(InvalidModifierError) as exc_info:
            translate_date_pattern("Y-m-d Q")

        assert "Q" in str(exc_info.value)

    def test_dangling_escape_raises(self):
        """Test a trailing backslash is rejected"""
        with pytest.raises(InvalidModifierError):
            translate_date_pattern("Y\\")


class TestCustomValidator:
    """Tests for CustomValidator"""

    def test_custom_validator_pass_and_fail(self, even_validator):
        """Test custom functions decide the outcome"""
        assert even_validator.validate("4") is True
        assert even_validator.validate("3") is False

    def test_custom_error_message(self, even_validator):
        """Test custom error composition"""
        assert even_validator.compose_error("Count") == "Count must be even."

    def test_modifier_forwarded(self):
        """Test the modifier reaches both functions"""
        validator = CustomValidator(
            validates=lambda value, modifier: value == modifier,
            error=lambda label, modifier: f"{label} must equal {modifier}.",
        )
        assert validator.validate("yes", "yes") is True
        assert validator.compose_error("Answer", "yes") == "Answer must equal yes."
        assert validator.rule_type == "custom"

    def test_exception_propagates(self):
        """Test exceptions from custom functions are not swallowed"""
        def boom(value, modifier):
            raise RuntimeError("boom")

        validator = CustomValidator(boom, lambda label, modifier: "")
        with pytest.raises(RuntimeError, match="boom"):
            validator.validate("x")

    def test_non_callable_raises(self):
        """Test non-callable arguments are rejected"""
        with pytest.raises(ConfigurationError):
            CustomValidator("not callable", lambda label, modifier: "")

        with pytest.raises(ConfigurationError):
            CustomValidator(lambda value, modifier: True, None)
