"""
Field-level rules for employee payloads.

A rule table maps each employee attribute to an ordered list of
checks. The first failing check of a field produces that field's
error; fields are reported in table order.
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, List, Sequence

from email_validator import EmailNotValidError, validate_email

NAME_PATTERN = re.compile(r"^[A-Za-z]+(?:[ -][A-Za-z]+)*$")
PHONE_PATTERN = re.compile(r"^\+?[0-9]{7,15}$")

# A check returns an error message, or None when the value passes
Check = Callable[[Any], str | None]


@dataclass(frozen=True)
class FieldValidationError:
    """Validation error for a specific field."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass
class ValidationResult:
    """Outcome of validating one payload."""

    errors: List[FieldValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_list(self) -> List[dict[str, str]]:
        return [error.to_dict() for error in self.errors]


# ═══════════════════════════════════════════════════════════════════════════════
# CHECKS
# ═══════════════════════════════════════════════════════════════════════════════


def required(message: str) -> Check:
    """Fail on None and on blank strings."""

    def check(value: Any) -> str | None:
        if value is None:
            return message
        if isinstance(value, str) and not value.strip():
            return message
        return None

    return check


def matches(pattern: re.Pattern, message: str) -> Check:
    def check(value: Any) -> str | None:
        if not isinstance(value, str) or not pattern.fullmatch(value):
            return message
        return None

    return check


def valid_email(message: str) -> Check:
    """Syntax-only email check; no DNS lookups."""

    def check(value: Any) -> str | None:
        if not isinstance(value, str):
            return message
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return message
        return None

    return check


def not_in_future(message: str, today: Callable[[], date] = date.today) -> Check:
    def check(value: Any) -> str | None:
        if isinstance(value, datetime):
            value = value.date()
        if value > today():
            return message
        return None

    return check


def greater_than(limit: Decimal, message: str) -> Check:
    def check(value: Any) -> str | None:
        if not value > limit:
            return message
        return None

    return check


@dataclass(frozen=True)
class FieldRule:
    """Ordered checks for one attribute."""

    attribute: str
    field: str
    checks: Sequence[Check]

    def evaluate(self, value: Any) -> str | None:
        for check in self.checks:
            message = check(value)
            if message is not None:
                return message
        return None


EMPLOYEE_RULES: tuple[FieldRule, ...] = (
    FieldRule("first_name", "firstName", (
        required("FirstName is required."),
        matches(NAME_PATTERN, "Invalid FirstName"),
    )),
    FieldRule("last_name", "lastName", (
        required("LastName is required."),
        matches(NAME_PATTERN, "Invalid LastName"),
    )),
    FieldRule("email", "email", (
        required("Email is required."),
        valid_email("Invalid email format."),
    )),
    FieldRule("phone", "phone", (
        required("Phone is required."),
        matches(PHONE_PATTERN, "Invalid phone format"),
    )),
    FieldRule("department", "department", (
        required("Department is required."),
    )),
    FieldRule("hire_date", "hireDate", (
        required("HireDate is required."),
        not_in_future("HireDate cannot be in the future."),
    )),
    FieldRule("salary", "salary", (
        required("Salary is required."),
        greater_than(Decimal(0), "Salary must be greater than 0."),
    )),
)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATORS
# ═══════════════════════════════════════════════════════════════════════════════


class EmployeeValidator:
    """
    Validates employee payloads against the full rule table.

    In partial mode only present fields are checked, each with its
    complete rule list. The candidate is never modified.
    """

    def __init__(self, rules: Sequence[FieldRule] = EMPLOYEE_RULES):
        self.rules = tuple(rules)

    def validate(self, candidate: Any, partial: bool = False) -> ValidationResult:
        """
        Check a candidate employee.

        Args:
            candidate: Object exposing the employee attributes
            partial: Skip fields that are absent

        Returns:
            Validation result with errors in rule order
        """
        result = ValidationResult()
        for rule in self.rules:
            value = getattr(candidate, rule.attribute, None)
            if partial and self.is_absent(value):
                continue
            message = rule.evaluate(value)
            if message is not None:
                result.errors.append(FieldValidationError(rule.field, message))
        return result

    def validate_partial(self, candidate: Any) -> ValidationResult:
        return self.validate(candidate, partial=True)

    @staticmethod
    def is_absent(value: Any) -> bool:
        return value is None
