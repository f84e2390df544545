"""Password rules registry compliance tests.

Every registered rule must:
- Reject each of its failing examples and accept each passing example
- Carry a message whose placeholders are all in default_params
- Agree with the mutation validator that emits its error code

Adding a rule to PASSWORD_RULES_REGISTRY without consistent examples or
metadata fails these tests.
"""

import re

import pytest

from passgate.core.enums import ErrorCode
from passgate.domain.entities import PendingMutation
from passgate.domain.validators import (
    PASSWORD_RULES_REGISTRY,
    Blacklist,
    RuleCategory,
    failed_rules,
    get_all_password_rules,
    get_password_rule,
    get_rules_by_category,
    get_statistics,
    validate_secure_password,
)

ALL_RULES = get_all_password_rules()
RULE_IDS = [rule.rule_name for rule in ALL_RULES]


@pytest.mark.unit
class TestRegistryCompleteness:
    """Test the registry covers every strength rule."""

    def test_registry_keys_match_codes(self):
        for code, rule in PASSWORD_RULES_REGISTRY.items():
            assert rule.code == code

    def test_expected_rules_registered(self):
        assert set(PASSWORD_RULES_REGISTRY) == {
            ErrorCode.TOO_SHORT,
            ErrorCode.REPETITIVE,
            ErrorCode.CONSECUTIVE,
            ErrorCode.BLACKLISTED,
        }

    def test_rule_names_are_unique(self):
        assert len(set(RULE_IDS)) == len(RULE_IDS)

    @pytest.mark.parametrize("rule", ALL_RULES, ids=RULE_IDS)
    def test_rule_has_examples(self, rule):
        assert rule.failing_examples, f"{rule.rule_name} has no failing examples"
        assert rule.passing_examples, f"{rule.rule_name} has no passing examples"
        assert rule.description


@pytest.mark.unit
class TestRuleExamples:
    """Test that each rule's predicate agrees with its examples."""

    @pytest.mark.parametrize("rule", ALL_RULES, ids=RULE_IDS)
    def test_failing_examples_fail(self, rule):
        for value in rule.failing_examples:
            assert rule.violates(value), f"{rule.rule_name} accepted {value!r}"

    @pytest.mark.parametrize("rule", ALL_RULES, ids=RULE_IDS)
    def test_passing_examples_pass(self, rule):
        for value in rule.passing_examples:
            assert not rule.violates(value), f"{rule.rule_name} rejected {value!r}"

    @pytest.mark.parametrize("rule", ALL_RULES, ids=RULE_IDS)
    def test_message_placeholders_are_parameters(self, rule):
        placeholders = set(re.findall(r"%\{(\w+)\}", rule.message))

        assert placeholders <= set(rule.default_params)

    @pytest.mark.parametrize("rule", ALL_RULES, ids=RULE_IDS)
    def test_validator_emits_registered_metadata(self, rule):
        """Test validate_secure_password reports the rule the registry describes."""
        for value in rule.failing_examples:
            if not value:
                continue
            mutation = PendingMutation.build(
                {"password": value, "password_confirmation": value}
            )
            errors = [
                e
                for e in validate_secure_password(mutation, "password").errors
                if e.code == rule.code
            ]

            assert len(errors) == 1
            assert errors[0].message == rule.message
            assert errors[0].validation == rule.rule_name
            for key, default in rule.default_params.items():
                assert errors[0].metadata[key] == default


@pytest.mark.unit
class TestRegistryHelpers:
    """Test registry helper functions."""

    def test_get_password_rule(self):
        rule = get_password_rule(ErrorCode.CONSECUTIVE)

        assert rule is not None
        assert rule.rule_name == "nonconsecutive"

    def test_get_password_rule_unknown_code(self):
        assert get_password_rule(ErrorCode.CONFIRMATION_MISMATCH) is None

    def test_get_rules_by_category(self):
        pattern_codes = {r.code for r in get_rules_by_category(RuleCategory.PATTERN)}

        assert pattern_codes == {ErrorCode.REPETITIVE, ErrorCode.CONSECUTIVE}

    def test_failed_rules(self):
        assert failed_rules("abc") == [ErrorCode.TOO_SHORT, ErrorCode.CONSECUTIVE]
        assert failed_rules("zx9#kQ!mP2") == []

    def test_failed_rules_uses_given_thresholds(self):
        """Test configured limits give the same verdict as the validators."""
        assert failed_rules("xaaay99") == [ErrorCode.TOO_SHORT, ErrorCode.REPETITIVE]
        assert failed_rules("xaaay99", min_length=4, max_repetitive=4) == []

        mutation = PendingMutation.build(
            {"password": "xaaay99", "password_confirmation": "xaaay99"}
        )
        validated = validate_secure_password(mutation, "password", min_length=4, max_repetitive=4)
        assert validated.is_valid

    def test_failed_rules_with_custom_blacklist(self):
        blacklist = Blacklist.from_iterable(["zx9#kQ!mP2"])

        assert failed_rules("zx9#kQ!mP2", blacklist=blacklist) == [ErrorCode.BLACKLISTED]
        assert failed_rules("spiderman", blacklist=blacklist) == []

    def test_violates_defaults_to_registered_threshold(self):
        rule = get_password_rule(ErrorCode.TOO_SHORT)

        assert rule.violates("1234567")
        assert not rule.violates("1234567", 7)

    def test_get_statistics(self):
        stats = get_statistics()

        assert stats["total_rules"] == 4
        assert stats["by_category"] == {"length": 1, "pattern": 2, "dictionary": 1}
