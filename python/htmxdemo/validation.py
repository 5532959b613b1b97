"""Field validation as ordered lists of named rules.

Each rule is a pure predicate plus the message shown when it fails. Every
rule of every field is evaluated, so a form can report several problems at
once:

    rules = {"name": (required("Name is required"), length(2, 50, "Too short"))}
    result = validate({"name": ""}, rules)
    result.errors  # {'name': ('Name is required', 'Too short')}
"""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Callable

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class Rule:
    name: str
    message: str
    check: Callable[[str], bool]

    def __call__(self, value: str) -> bool:
        return self.check(value)


@dataclass(frozen=True)
class ValidationResult:
    errors: dict[str, tuple[str, ...]] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.errors

    def has_error(self, field_name: str) -> bool:
        return field_name in self.errors

    def messages(self, field_name: str) -> tuple[str, ...]:
        return self.errors.get(field_name, ())


def required(message: str) -> Rule:
    return Rule("required", message, lambda value: bool(value and value.strip()))


def length(min_length: int, max_length: int, message: str) -> Rule:
    return Rule("length", message, lambda value: min_length <= len(value or "") <= max_length)


def pattern(regex: str, message: str) -> Rule:
    compiled = re.compile(regex, re.ASCII)
    return Rule("pattern", message, lambda value: compiled.fullmatch(value or "") is not None)


def _is_email(value: str) -> bool:
    # Empty values are left to the required rule.
    if not value:
        return True
    if value != value.strip():
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def email(message: str) -> Rule:
    return Rule("email", message, _is_email)


def validate(values: Mapping[str, str], rules: Mapping[str, Sequence[Rule]]) -> ValidationResult:
    """Run every rule against its field and collect the failing messages."""
    errors = {}
    for field_name, field_rules in rules.items():
        value = values.get(field_name) or ""
        failed = tuple(rule.message for rule in field_rules if not rule(value))
        if failed:
            errors[field_name] = failed
    return ValidationResult(errors)
