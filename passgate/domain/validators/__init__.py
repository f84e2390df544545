"""Validators package exports.

Exports:
    - Password strength predicates (from functions.py)
    - Blacklist loading (from blacklist.py)
    - Mutation-level validators (from mutation_validators.py)
    - Rule catalog (from registry.py)
"""

from passgate.domain.validators.blacklist import Blacklist, load_default_blacklist
from passgate.domain.validators.functions import (
    is_blacklisted,
    is_consecutive,
    is_repetitive,
    is_too_short,
)
from passgate.domain.validators.mutation_validators import (
    validate_confirmation,
    validate_exclusion,
    validate_length,
    validate_nonconsecutive,
    validate_nonrepetitive,
    validate_secure_password,
)
from passgate.domain.validators.registry import (
    PASSWORD_RULES_REGISTRY,
    PasswordRuleMetadata,
    RuleCategory,
    failed_rules,
    get_all_password_rules,
    get_password_rule,
    get_rules_by_category,
    get_statistics,
)

__all__ = [
    # Predicates
    "is_too_short",
    "is_repetitive",
    "is_consecutive",
    "is_blacklisted",
    # Blacklist
    "Blacklist",
    "load_default_blacklist",
    # Mutation validators
    "validate_length",
    "validate_confirmation",
    "validate_nonrepetitive",
    "validate_nonconsecutive",
    "validate_exclusion",
    "validate_secure_password",
    # Registry
    "PASSWORD_RULES_REGISTRY",
    "PasswordRuleMetadata",
    "RuleCategory",
    "failed_rules",
    "get_password_rule",
    "get_all_password_rules",
    "get_rules_by_category",
    "get_statistics",
]
