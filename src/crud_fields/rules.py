"""
Helpers for declarative rule tokens.

Rules are opaque strings such as "required", "min:3" or "in:draft,live".
Nothing here evaluates them; they are only split into a name and its
parameters so that exports can describe constraints.
"""

from typing import Iterable

from crud_fields.constants import RULE_PARAMETER_SEPARATOR, RULE_SEPARATOR
from crud_fields.exceptions import FieldConfigurationError


def split_rules(rules: str | Iterable[str]) -> list[str]:
    """
    Normalize a rule declaration into a list of tokens.

    Accepts a pipe-delimited string ("required|min:3") or any iterable
    of tokens. Empty tokens are dropped.
    """
    if isinstance(rules, str):
        tokens = rules.split(RULE_SEPARATOR)
    else:
        try:
            tokens = list(rules)
        except TypeError:
            raise FieldConfigurationError(
                f"Rules must be a string or a sequence of strings, got {type(rules).__name__}"
            ) from None

    result = []
    for token in tokens:
        if not isinstance(token, str):
            raise FieldConfigurationError(
                f"Rule tokens must be strings, got {type(token).__name__}"
            )
        token = token.strip()
        if token:
            result.append(token)
    return result


def parse_rule(rule: str) -> tuple[str, list[str]]:
    """
    Split a rule token into its name and parameters.

        >>> parse_rule("min:3")
        ('min', ['3'])
        >>> parse_rule("in:draft,live")
        ('in', ['draft', 'live'])

    `regex` keeps its pattern whole since patterns may contain commas.
    """
    name, sep, params = rule.partition(RULE_PARAMETER_SEPARATOR)
    name = name.strip().lower()
    if not sep:
        return name, []
    if name in ("regex", "not_regex"):
        return name, [params]
    return name, [param.strip() for param in params.split(",")]


def find_rule(rules: Iterable[str], name: str) -> list[str] | None:
    """Parameters of the last rule called `name`, or None if absent."""
    found = None
    for rule in rules:
        rule_name, params = parse_rule(rule)
        if rule_name == name:
            found = params
    return found
