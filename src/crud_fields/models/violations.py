"""
Rule violation report.

crud-fields declares rules but never evaluates them. An external
validator checks a submission against `CrudFields.get_rules()` and hands
back a `ValidationReport`: one `RuleViolation` per failed rule token.
The registry turns the report into the error bag fields read from.
"""

from typing import Mapping

from pydantic import BaseModel, Field

from crud_fields.rules import parse_rule


class RuleViolation(BaseModel):
    """One declared rule a submitted value failed."""

    field: str = Field(..., description="Identifier of the offending field")
    rule: str = Field(..., description="Failed rule token as declared, e.g. 'min:3'")
    message: str = Field(..., description="Message shown next to the input")

    @property
    def rule_name(self) -> str:
        """Rule name without parameters ('min:3' -> 'min')."""
        return parse_rule(self.rule)[0]


class ValidationReport(BaseModel):
    """Every violation found in one submission, in the order found."""

    violations: list[RuleViolation] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.violations

    def for_field(self, identifier: str) -> list[RuleViolation]:
        return [v for v in self.violations if v.field == identifier]

    def undeclared(self, rules: Mapping[str, list[str]]) -> list[RuleViolation]:
        """
        Violations that do not match a declared rule.

        A violation is undeclared when its field is unknown or when the
        field declares no rule of that name.
        """
        result = []
        for violation in self.violations:
            declared = rules.get(violation.field)
            if declared is None or violation.rule_name not in _rule_names(declared):
                result.append(violation)
        return result

    def to_messages(self, rules: Mapping[str, list[str]] | None = None) -> dict[str, list[str]]:
        """
        Messages grouped per field.

        With `rules` (as returned by `CrudFields.get_rules()`), fields come
        in declared order and each field's messages follow the order its
        rules were declared in. Anything not declared keeps report order
        after that.
        """
        violations = list(self.violations)
        if rules is not None:
            field_order = {identifier: i for i, identifier in enumerate(rules)}
            rule_order = {
                identifier: {name: i for i, name in enumerate(_rule_names(declared))}
                for identifier, declared in rules.items()
            }
            # sorted() is stable, so undeclared entries keep report order
            violations.sort(key=lambda v: (
                field_order.get(v.field, len(field_order)),
                rule_order.get(v.field, {}).get(v.rule_name, len(rule_order.get(v.field, {}))),
            ))

        messages: dict[str, list[str]] = {}
        for violation in violations:
            messages.setdefault(violation.field, []).append(violation.message)
        return messages


def _rule_names(rules: list[str]) -> list[str]:
    names = []
    for rule in rules:
        name = parse_rule(rule)[0]
        if name not in names:
            names.append(name)
    return names
