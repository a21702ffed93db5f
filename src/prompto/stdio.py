"""
Module-level helpers bound to the process's standard streams.

Each call builds a fresh PromptSession over whatever ``sys.stdin`` and
``sys.stdout`` are at call time.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from .config import PromptConfig
from .parsing import MISSING
from .session import PromptSession

T = TypeVar("T")


def _session(config: Optional[PromptConfig]) -> PromptSession:
    return PromptSession.stdio(config)


def get_line(message: str, config: Optional[PromptConfig] = None) -> str:
    return _session(config).get_line(message)


def maybe_get_line(message: str, config: Optional[PromptConfig] = None) -> Optional[str]:
    return _session(config).maybe_get_line(message)


def acquire(message: str, target: Callable[..., T], config: Optional[PromptConfig] = None) -> T:
    return _session(config).acquire(message, target)


def maybe_acquire(message: str, target: Callable[..., T], config: Optional[PromptConfig] = None) -> Optional[T]:
    return _session(config).maybe_acquire(message, target)


def acquire_or_default(
    message: str,
    target: Callable[..., T],
    default: Any = MISSING,
    config: Optional[PromptConfig] = None,
) -> T:
    return _session(config).acquire_or_default(message, target, default)


def prompt(
    message: str,
    target: Callable[..., T],
    validator: Optional[Callable[[T], bool]] = None,
    config: Optional[PromptConfig] = None,
) -> T:
    return _session(config).prompt(message, target, validator)


def maybe_prompt(
    message: str,
    target: Callable[..., T],
    validator: Optional[Callable[[T], bool]] = None,
    config: Optional[PromptConfig] = None,
) -> Optional[T]:
    return _session(config).maybe_prompt(message, target, validator)


__all__ = [
    "get_line",
    "maybe_get_line",
    "acquire",
    "maybe_acquire",
    "acquire_or_default",
    "prompt",
    "maybe_prompt",
]
