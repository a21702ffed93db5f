"""
Predicate factories for PromptSession.prompt.

Each factory returns a plain ``value -> bool`` callable, so they mix freely
with lambdas.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, Iterable, Pattern, Union

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError

from .errors import PromptSchemaError

Validator = Callable[[Any], bool]


def in_range(lo: Any, hi: Any) -> Validator:
    """Inclusive on both ends."""
    return lambda value: lo <= value <= hi


def one_of(*choices: Any) -> Validator:
    allowed = tuple(choices)
    return lambda value: value in allowed


def matches(pattern: Union[str, Pattern[str]]) -> Validator:
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    return lambda value: regex.fullmatch(str(value)) is not None


def non_empty() -> Validator:
    return lambda value: len(value) > 0


def all_of(*validators: Validator) -> Validator:
    checks: Iterable[Validator] = tuple(validators)
    return lambda value: all(check(value) for check in checks)


def matches_schema(schema: Dict[str, Any]) -> Validator:
    """
    Accept values that validate against a JSON Schema (draft 7).

    Raises:
        PromptSchemaError: the schema itself is invalid.
    """
    try:
        Draft7Validator.check_schema(schema)
    except SchemaError as exc:
        raise PromptSchemaError(f"invalid schema: {exc.message}") from exc
    validator = Draft7Validator(schema)
    return validator.is_valid


__all__ = ["Validator", "in_range", "one_of", "matches", "non_empty", "all_of", "matches_schema"]
