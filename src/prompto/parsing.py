"""
Generic string-to-value conversion.

A target is anything that knows how to build itself from a string:

* a type exposing a ``from_str(text)`` classmethod,
* ``bool``, which gets a strict ``true``/``false`` parser,
* any other one-argument callable (``int``, ``float``, ``Decimal``, ...).

The conversion itself is always delegated to the target; this module only
normalizes the failure into a ConversionError.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from .errors import ConversionError

T = TypeVar("T")

# Marks an omitted optional argument where None is a legitimate value.
MISSING: Any = object()

# Exceptions a target's parser may raise when it rejects its input.
# decimal.InvalidOperation is an ArithmeticError.
PARSE_ERRORS = (ValueError, TypeError, ArithmeticError)


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"invalid literal for bool: {text!r}")


def parser_for(target: Callable[..., T]) -> Callable[[str], T]:
    if target is bool:
        return _parse_bool  # type: ignore[return-value]
    from_str = getattr(target, "from_str", None)
    if callable(from_str):
        return from_str
    if not callable(target):
        raise TypeError(f"{target!r} is not a conversion target")
    return target


def convert(text: str, target: Callable[..., T]) -> T:
    """
    Convert `text` with the target's own parser.

    Raises:
        ConversionError: the parser rejected the text. The parser's
            exception is chained as ``__cause__``.
    """
    parse = parser_for(target)
    try:
        return parse(text)
    except PARSE_ERRORS as exc:
        raise ConversionError(text, target) from exc


def maybe_convert(text: str, target: Callable[..., T]) -> Optional[T]:
    try:
        return convert(text, target)
    except ConversionError:
        return None


def zero_value(target: Callable[..., T]) -> T:
    """
    Return the target's documented fallback value: ``target.default()`` when
    defined, otherwise ``target()``.
    """
    default = getattr(target, "default", None)
    if callable(default):
        return default()
    try:
        return target()
    except TypeError as exc:
        raise TypeError(f"{target!r} has no zero value") from exc


__all__ = ["MISSING", "PARSE_ERRORS", "parser_for", "convert", "maybe_convert", "zero_value"]
