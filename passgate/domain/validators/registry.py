"""Password Rules Registry.

Single source of truth for the password strength rules: which predicate
backs each rule, its error code, validation name, message template and
default threshold, plus known failing/passing values. The mutation
validators read their code, name and message from here, and compliance
tests iterate the registry, so a rule added here without consistent
examples fails the suite.

Pattern: Registry Pattern with metadata catalog and helper functions.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from passgate.core.constants import (
    DEFAULT_MAX_CONSECUTIVE,
    DEFAULT_MAX_REPETITIVE,
    DEFAULT_MIN_LENGTH,
    MSG_BLACKLISTED,
    MSG_CONSECUTIVE,
    MSG_REPETITIVE,
    MSG_TOO_SHORT,
)
from passgate.core.enums import ErrorCode
from passgate.domain.validators.blacklist import Blacklist, load_default_blacklist
from passgate.domain.validators.functions import (
    is_blacklisted,
    is_consecutive,
    is_repetitive,
    is_too_short,
)


class RuleCategory(str, Enum):
    """What part of the password a rule inspects."""

    LENGTH = "length"  # Character count
    PATTERN = "pattern"  # Runs of repeated or ascending characters
    DICTIONARY = "dictionary"  # Membership in a known list


def _is_excluded(value: str, blacklist: Blacklist | None) -> bool:
    return is_blacklisted(value, blacklist if blacklist is not None else load_default_blacklist())


@dataclass(frozen=True, kw_only=True)
class PasswordRuleMetadata:
    """Metadata for a single password rule.

    Attributes:
        rule_name: Validation name stored in error metadata (e.g. 'nonrepetitive').
        code: ErrorCode attached to errors from this rule.
        predicate: ``(value, threshold)`` -> True when the value violates the rule.
        message: Default message template.
        threshold_param: Key in default_params holding the threshold, or None
            when the rule has no numeric threshold (blacklist).
        default_params: Threshold defaults, also substituted into the message.
        description: Human-readable description.
        failing_examples: Values the rule must reject with default params.
        passing_examples: Values the rule must accept with default params.
        category: Grouping for documentation.
    """

    rule_name: str
    code: ErrorCode
    predicate: Callable[[str, Any], bool]
    message: str
    threshold_param: str | None
    default_params: dict[str, int]
    description: str
    failing_examples: list[str]
    passing_examples: list[str]
    category: RuleCategory

    def violates(self, value: str, threshold: Any = None) -> bool:
        """Check ``value`` against the rule.

        Args:
            value: Candidate password.
            threshold: Length/run limit, or Blacklist for the exclusion rule.
                None uses the registered default.
        """
        if threshold is None and self.threshold_param is not None:
            threshold = self.default_params[self.threshold_param]
        return self.predicate(value, threshold)


# =============================================================================
# Password Rules Registry
# =============================================================================

PASSWORD_RULES_REGISTRY: dict[ErrorCode, PasswordRuleMetadata] = {
    ErrorCode.TOO_SHORT: PasswordRuleMetadata(
        rule_name="length",
        code=ErrorCode.TOO_SHORT,
        predicate=is_too_short,
        message=MSG_TOO_SHORT,
        threshold_param="min",
        default_params={"count": DEFAULT_MIN_LENGTH, "min": DEFAULT_MIN_LENGTH},
        description="At least 8 characters",
        failing_examples=["", "a", "1234567"],
        passing_examples=["12345678", "correct horse"],
        category=RuleCategory.LENGTH,
    ),
    ErrorCode.REPETITIVE: PasswordRuleMetadata(
        rule_name="nonrepetitive",
        code=ErrorCode.REPETITIVE,
        predicate=is_repetitive,
        message=MSG_REPETITIVE,
        threshold_param="max",
        default_params={"max": DEFAULT_MAX_REPETITIVE},
        description="No character repeated 3 or more times in a row",
        failing_examples=["aaa", "passsword", "x111y"],
        passing_examples=["aa", "password", "abab"],
        category=RuleCategory.PATTERN,
    ),
    ErrorCode.CONSECUTIVE: PasswordRuleMetadata(
        rule_name="nonconsecutive",
        code=ErrorCode.CONSECUTIVE,
        predicate=is_consecutive,
        message=MSG_CONSECUTIVE,
        threshold_param="max",
        default_params={"max": DEFAULT_MAX_CONSECUTIVE},
        description="No run of 3 or more ascending characters (abc, 123)",
        failing_examples=["abc", "testing123", "XYZ"],
        passing_examples=["testing12", "acegik", "cba"],
        category=RuleCategory.PATTERN,
    ),
    ErrorCode.BLACKLISTED: PasswordRuleMetadata(
        rule_name="exclusion",
        code=ErrorCode.BLACKLISTED,
        predicate=_is_excluded,
        message=MSG_BLACKLISTED,
        threshold_param=None,
        default_params={},
        description="Not one of the 1,000 most common passwords",
        failing_examples=["spiderman", "password", "123456"],
        passing_examples=["zx9#kQ!mP2", "SPIDERMAN"],
        category=RuleCategory.DICTIONARY,
    ),
}


# =============================================================================
# Helper Functions
# =============================================================================


def get_password_rule(code: ErrorCode) -> PasswordRuleMetadata | None:
    """Get rule metadata by error code.

    Example:
        >>> rule = get_password_rule(ErrorCode.REPETITIVE)
        >>> rule.violates("aaa")
        True
    """
    return PASSWORD_RULES_REGISTRY.get(code)


def get_all_password_rules() -> list[PasswordRuleMetadata]:
    """Get all rules in registry order."""
    return list(PASSWORD_RULES_REGISTRY.values())


def get_rules_by_category(category: RuleCategory) -> list[PasswordRuleMetadata]:
    """Get all rules in a specific category."""
    return [
        rule for rule in PASSWORD_RULES_REGISTRY.values() if rule.category == category
    ]


def failed_rules(
    value: str,
    *,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_repetitive: int = DEFAULT_MAX_REPETITIVE,
    max_consecutive: int = DEFAULT_MAX_CONSECUTIVE,
    blacklist: Blacklist | None = None,
) -> list[ErrorCode]:
    """Codes of every registered rule ``value`` violates at the given thresholds.

    Thresholds take the same values validate_secure_password does, so a
    caller using configured limits gets the same verdict the pipeline
    would. Confirmation is not a property of a single string and is not
    checked.

    Example:
        >>> failed_rules("abc")
        [<ErrorCode.TOO_SHORT: 'too_short'>, <ErrorCode.CONSECUTIVE: 'consecutive'>]
    """
    thresholds: dict[ErrorCode, Any] = {
        ErrorCode.TOO_SHORT: min_length,
        ErrorCode.REPETITIVE: max_repetitive,
        ErrorCode.CONSECUTIVE: max_consecutive,
        ErrorCode.BLACKLISTED: blacklist,
    }
    return [
        code
        for code, rule in PASSWORD_RULES_REGISTRY.items()
        if rule.violates(value, thresholds.get(code))
    ]


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Get registry statistics.

    Returns:
        Dictionary with total_rules and a per-category count.
    """
    rules = list(PASSWORD_RULES_REGISTRY.values())
    category_counts: dict[str, int] = {}

    for rule in rules:
        category_key = rule.category.value
        category_counts[category_key] = category_counts.get(category_key, 0) + 1

    return {
        "total_rules": len(rules),
        "by_category": category_counts,
    }
