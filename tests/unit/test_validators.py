"""
Unit tests for field validators.

Includes property-based testing with hypothesis for validators.
"""

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fieldrules.core.models import ExactLength, LengthRange, Rule
from fieldrules.core.validators import (
    VALIDATORS,
    AbsentValidator,
    PresentValidator,
    RuleConfigurationError,
    absent,
    confirmed,
    format_,
    get_validator,
    length,
    present,
    with_function,
)


class TestValidatorTable:
    """Tests for the name -> validator mapping"""

    def test_all_validators_registered(self):
        """Test every validator is reachable by name"""
        assert set(VALIDATORS) == {"present", "absent", "confirmed", "format", "length", "withFunction"}

    def test_get_validator(self):
        """Test lookup returns the shared instance"""
        assert get_validator("withFunction") is with_function
        assert isinstance(get_validator("present"), PresentValidator)

    def test_unknown_validator_raises_configuration_error(self):
        """Test unknown name is a configuration error"""
        with pytest.raises(RuleConfigurationError) as exc_info:
            get_validator("numericality")

        assert "numericality" in str(exc_info.value)

    def test_builtin_format_not_shadowed(self):
        """Test the package exports the format validator without hiding builtins"""
        import fieldrules.core.validators as validators

        assert not hasattr(validators, "format")
        assert validators.format_ is VALIDATORS["format"]

    def test_table_is_read_only(self):
        """Test the table cannot be modified by callers"""
        with pytest.raises(TypeError):
            VALIDATORS["present"] = AbsentValidator()


class TestPresentValidator:
    """Tests for PresentValidator"""

    def test_empty_string_fails(self):
        """Test empty value returns a failure descriptor"""
        assert present("x", "", "", {}) == {"name": "x"}

    def test_none_fails(self):
        """Test None counts as missing"""
        assert present("x", None, {}, {})

    def test_filled_value_passes(self):
        """Test a filled value returns nothing"""
        assert present("x", "hello", {}, {}) is None

    def test_custom_message_returned(self):
        """Test custom message replaces the descriptor"""
        assert present("x", "", {}, {"message": "Gotta be here"}) == "Gotta be here"

    def test_accepts_rule_model(self):
        """Test Rule objects and mappings are interchangeable"""
        assert present("x", "", {}, Rule(message="Required")) == "Required"

    def test_none_rule_treated_as_empty(self):
        """Test a missing rule falls back to the descriptor"""
        assert present("x", "", {}, None) == {"name": "x"}

    @given(st.text(min_size=1))
    def test_property_any_nonempty_string_passes(self, value):
        """Property test: any non-empty string passes"""
        assert present("field", value, {}, {}) is None


class TestAbsentValidator:
    """Tests for AbsentValidator"""

    def test_filled_value_fails(self):
        """Test a filled value returns a failure descriptor"""
        assert absent("x", "v", "", {}) == {"name": "x"}

    def test_empty_value_passes(self):
        """Test an empty value returns nothing"""
        assert absent("x", "", "", {}) is None
        assert absent("x", None, {}, {}) is None

    def test_custom_message_returned(self):
        """Test custom message replaces the descriptor"""
        assert absent("x", "bot", {}, {"message": "Leave this blank"}) == "Leave this blank"


class TestConfirmedValidator:
    """Tests for ConfirmedValidator"""

    def test_mismatch_fails(self):
        """Test mismatched confirmation returns name and qualifier"""
        params = {"pw": "a", "pwConfirm": "b"}
        failure = confirmed("pw", "a", params, {"qualifier": "pwConfirm"})

        assert failure == {"name": "pw", "qual": "pwConfirm"}

    def test_match_passes(self):
        """Test matching confirmation returns nothing"""
        params = {"pw": "a", "pwConfirm": "a"}
        assert confirmed("pw", "a", params, {"qualifier": "pwConfirm"}) is None

    def test_missing_confirmation_field_fails(self):
        """Test a missing sibling compares as None"""
        assert confirmed("pw", "a", {"pw": "a"}, {"qualifier": "pwConfirm"})

    def test_missing_both_passes(self):
        """Test None equals a missing sibling"""
        assert confirmed("pw", None, {}, {"qualifier": "pwConfirm"}) is None

    def test_custom_message_returned(self):
        """Test custom message replaces the descriptor"""
        params = {"pw": "a", "pwConfirm": "b"}
        rule = {"qualifier": "pwConfirm", "message": "Passwords must match"}
        assert confirmed("pw", "a", params, rule) == "Passwords must match"

    @pytest.mark.parametrize("qualifier", [["pwConfirm"], None, 3])
    def test_non_string_qualifier_raises_configuration_error(self, qualifier):
        """Test the qualifier must name the confirmation field"""
        with pytest.raises(RuleConfigurationError) as exc_info:
            confirmed("pw", "a", {"pw": "a"}, {"qualifier": qualifier})

        assert exc_info.value.field_name == "pw"
        assert exc_info.value.validator == "confirmed"


class TestFormatValidator:
    """Tests for FormatValidator"""

    def test_matching_value_passes(self):
        """Test value matching pattern passes"""
        rule = {"qualifier": r"^[a-z]+@[a-z]+\.[a-z]+$"}
        assert format_("email", "user@example.com", {}, rule) is None

    def test_non_matching_value_fails(self):
        """Test value not matching pattern fails"""
        rule = {"qualifier": r"^[a-z]+@[a-z]+\.[a-z]+$"}
        assert format_("email", "invalid_email", {}, rule) == {"name": "email"}

    def test_unanchored_pattern_searches(self):
        """Test patterns match anywhere unless anchored"""
        assert format_("code", "abc123", {}, {"qualifier": r"\d+"}) is None

    def test_compiled_pattern(self):
        """Test compiled patterns keep their flags"""
        rule = {"qualifier": re.compile(r"^hello$", re.IGNORECASE)}
        assert format_("greeting", "HELLO", {}, rule) is None

    def test_non_string_value_converted(self):
        """Test non-string values are checked via str()"""
        assert format_("zip", 94110, {}, {"qualifier": r"^[0-9]{5}$"}) is None

    def test_none_checked_as_empty_string(self):
        """Test None only matches patterns that accept empty input"""
        assert format_("zip", None, {}, {"qualifier": r"^[0-9]{5}$"}) == {"name": "zip"}
        assert format_("zip", None, {}, {"qualifier": r"^$"}) is None

    def test_invalid_pattern_raises_configuration_error(self):
        """Test a broken regex is a configuration error"""
        with pytest.raises(RuleConfigurationError) as exc_info:
            format_("zip", "94110", {}, {"qualifier": "[0-9"})

        assert exc_info.value.field_name == "zip"

    def test_missing_pattern_raises_configuration_error(self):
        """Test a non-pattern qualifier is a configuration error"""
        with pytest.raises(RuleConfigurationError):
            format_("zip", "94110", {}, {"qualifier": 5})


class TestLengthValidator:
    """Tests for LengthValidator"""

    def test_exact_length_passes(self):
        """Test value of exact length passes"""
        assert length("x", "ab", "", {"qualifier": 2}) is None

    def test_exact_length_mismatch_fails(self):
        """Test value of the wrong length fails"""
        assert length("x", "a", "", {"qualifier": 2}) == {"name": "x"}
        assert length("x", "abc", "", {"qualifier": 2}) == {"name": "x"}

    def test_max_exceeded_fails_with_max(self):
        """Test exceeding max reports the bound"""
        assert length("x", "abcd", "", {"qualifier": {"max": 3}}) == {"name": "x", "max": 3}

    def test_below_min_fails_with_min(self):
        """Test falling short of min reports the bound"""
        assert length("x", "a", "", {"qualifier": {"min": 2, "max": 5}}) == {"name": "x", "min": 2}

    def test_within_range_passes(self):
        """Test value within bounds passes, bounds inclusive"""
        rule = {"qualifier": {"min": 2, "max": 4}}
        assert length("x", "ab", "", rule) is None
        assert length("x", "abcd", "", rule) is None

    def test_empty_value_always_fails(self):
        """Test empty value fails even when bounds would allow it"""
        assert length("x", "", "", {"qualifier": {"max": 3}}) == {"name": "x"}
        assert length("x", None, "", {"qualifier": 0}) == {"name": "x"}

    def test_typed_qualifiers(self):
        """Test ExactLength and LengthRange are accepted directly"""
        assert length("x", "abc", {}, Rule(qualifier=ExactLength(length=3))) is None
        assert length("x", "abc", {}, Rule(qualifier=LengthRange(max=2))) == {"name": "x", "max": 2}

    def test_lists_are_measured(self):
        """Test sized values other than strings"""
        assert length("tags", ["a", "b"], {}, {"qualifier": 2}) is None

    def test_custom_message_returned(self):
        """Test custom message replaces the descriptor"""
        rule = {"qualifier": {"min": 8}, "message": "Too short"}
        assert length("password", "abc", {}, rule) == "Too short"

    def test_whole_float_qualifiers_accepted(self):
        """Test 2.0 counts as 2, for exact lengths and bounds"""
        assert length("x", "ab", {}, {"qualifier": 2.0}) is None
        assert length("x", "abcd", {}, {"qualifier": {"max": 3.0}}) == {"name": "x", "max": 3}
        assert isinstance(length("x", "abcd", {}, {"qualifier": {"max": 3.0}})["max"], int)

    def test_bool_bound_not_treated_as_number(self):
        """Test a bool bound is a configuration error rather than a length of 1"""
        with pytest.raises(RuleConfigurationError) as exc_info:
            length("x", "a", {}, {"qualifier": {"min": True}})

        assert exc_info.value.validator == "length"

    @pytest.mark.parametrize("qualifier", [
        "3", True, None, [1, 2], 2.5,
        {"min": -1}, {"min": 5, "max": 2},
        {"min": True}, {"max": "3"}, {"max": 2.5},
    ])
    def test_invalid_qualifier_raises_configuration_error(self, qualifier):
        """Test malformed qualifiers are configuration errors"""
        with pytest.raises(RuleConfigurationError):
            length("x", "abc", {}, {"qualifier": qualifier})

    @given(st.text(min_size=1, max_size=10))
    def test_property_strings_within_max_pass(self, value):
        """Property test: non-empty strings up to max pass"""
        assert length("field", value, {}, {"qualifier": {"max": 10}}) is None

    @given(st.text(min_size=11))
    def test_property_strings_over_max_fail(self, value):
        """Property test: strings over max report max"""
        assert length("field", value, {}, {"qualifier": {"max": 10}}) == {"name": "field", "max": 10}


class TestWithFunctionValidator:
    """Tests for WithFunctionValidator"""

    def test_truthy_predicate_passes(self):
        """Test predicate returning True passes"""
        assert with_function("x", "abc", {}, {"qualifier": lambda value, params: True}) is None

    def test_falsy_predicate_fails(self):
        """Test predicate returning False fails"""
        rule = {"qualifier": lambda value, params: False}
        assert with_function("x", "abc", {}, rule) == {"name": "x"}

    def test_predicate_receives_value_and_params(self):
        """Test predicate is called with (value, params)"""
        calls = []

        def predicate(value, params):
            calls.append((value, params))
            return value == params["expected"]

        params = {"expected": "abc"}
        assert with_function("x", "abc", params, {"qualifier": predicate}) is None
        assert calls == [("abc", params)]

    def test_custom_message_returned(self):
        """Test custom message replaces the descriptor"""
        rule = {"qualifier": lambda value, params: False, "message": "Something is wrong"}
        assert with_function("x", "abc", {}, rule) == "Something is wrong"

    def test_non_callable_qualifier_raises(self):
        """Test non-function qualifier is a configuration error, not a failure"""
        with pytest.raises(RuleConfigurationError) as exc_info:
            with_function("x", "abc", {}, {"qualifier": "not a function"})

        assert str(exc_info.value) == 'withFunction validator for field "x" must be a function.'
        assert exc_info.value.validator == "withFunction"

    def test_configuration_error_is_value_error(self):
        """Test callers catching ValueError see configuration errors"""
        with pytest.raises(ValueError):
            VALIDATORS["withFunction"]("x", "abc", {}, {})
