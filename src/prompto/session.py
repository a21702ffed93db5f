"""
Prompt sessions: write a prompt, read one line, convert it, retry.

Every operation comes in two disciplines. The explicit one raises
PromptIOError or ConversionError; the ``maybe_`` one returns None and hides
the cause. Both share the same implementation and write the same text.
"""

from __future__ import annotations

import logging
import sys
from contextlib import nullcontext
from typing import Any, Callable, Optional, TextIO, TypeVar

from opentelemetry import trace

from .config import PromptConfig
from .errors import ConversionError, EndOfInputError, PromptIOError
from .logging import log_json
from .parsing import MISSING, convert, maybe_convert, zero_value

T = TypeVar("T")

# Closed text streams raise ValueError rather than OSError.
STREAM_ERRORS = (OSError, ValueError)

tracer = trace.get_tracer(__name__)


def _strip_line_ending(line: str) -> str:
    for ending in ("\r\n", "\n", "\r"):
        if line.endswith(ending):
            return line[: -len(ending)]
    return line


def _target_name(target: Any) -> str:
    return getattr(target, "__name__", repr(target))


class PromptSession:
    """
    Holds one input and one output stream and acquires typed values from them.

    `reader` needs ``readline()``; `writer` needs ``write()`` and ``flush()``.
    The session never closes either stream. A session must not be used from
    two threads at once.

    Example::

        session = PromptSession(sys.stdin, sys.stdout)
        age = session.prompt("Age: ", int, lambda x: 0 <= x <= 150)
    """

    def __init__(self, reader: TextIO, writer: TextIO, config: Optional[PromptConfig] = None):
        self.reader = reader
        self.writer = writer
        self.config = config or PromptConfig()

    @classmethod
    def stdio(cls, config: Optional[PromptConfig] = None) -> "PromptSession":
        return cls(sys.stdin, sys.stdout, config)

    def write_and_flush(self, message: str) -> None:
        """Write `message` as-is and flush, so it is visible before any read."""
        try:
            self.writer.write(message)
            self.writer.flush()
        except STREAM_ERRORS as exc:
            raise PromptIOError("failed to write prompt", exc) from exc

    def read_line(self) -> str:
        """
        Read exactly one line and strip its line ending.

        A final line without a newline is returned normally; a read that
        yields nothing at all raises EndOfInputError.
        """
        try:
            line = self.reader.readline()
        except STREAM_ERRORS as exc:
            raise PromptIOError("failed to read line", exc) from exc
        if not line:
            raise EndOfInputError()
        return _strip_line_ending(line)

    def get_line(self, message: str) -> str:
        self.write_and_flush(message)
        return self.read_line()

    def maybe_get_line(self, message: str) -> Optional[str]:
        try:
            return self.get_line(message)
        except PromptIOError:
            return None

    def convert(self, text: str, target: Callable[..., T]) -> T:
        return convert(text, target)

    def maybe_convert(self, text: str, target: Callable[..., T]) -> Optional[T]:
        return maybe_convert(text, target)

    def acquire(self, message: str, target: Callable[..., T]) -> T:
        """
        Prompt with `message`, read one line and convert it to `target`.

        Raises:
            PromptIOError: writing, flushing or reading failed.
            ConversionError: the line is not a valid `target`.
        """
        return convert(self.get_line(message), target)

    def maybe_acquire(self, message: str, target: Callable[..., T]) -> Optional[T]:
        try:
            return self.acquire(message, target)
        except (PromptIOError, ConversionError):
            return None

    def acquire_or_default(self, message: str, target: Callable[..., T], default: Any = MISSING) -> T:
        """Like maybe_acquire, but falls back to `default` or the target's zero value."""
        value = self.maybe_acquire(message, target)
        if value is not None:
            return value
        if default is not MISSING:
            return default
        return zero_value(target)

    def prompt(
        self,
        message: str,
        target: Callable[..., T],
        validator: Optional[Callable[[T], bool]] = None,
    ) -> T:
        """
        Keep prompting until a line converts to `target` and `validator`
        accepts it.

        Conversion and validation failures write the invalid-input notice
        and prompt again, with no attempt limit. I/O failures, including an
        exhausted reader, end the loop.

        Raises:
            PromptIOError: the streams failed or the input ran out.
        """
        span_cm = (
            tracer.start_as_current_span("prompto.prompt", attributes={"prompto.target": _target_name(target)})
            if self.config.tracing_enabled
            else nullcontext()
        )
        attempts = 0
        with span_cm as span:
            try:
                while True:
                    attempts += 1
                    try:
                        value = self.acquire(message, target)
                    except ConversionError as exc:
                        self._reject("conversion", attempts, target, input_length=len(exc.text))
                        continue
                    if validator is None or validator(value):
                        self._log(logging.DEBUG, "prompt_accepted", attempts=attempts, target=_target_name(target))
                        return value
                    self._reject("validation", attempts, target)
            except PromptIOError as exc:
                self._log(
                    logging.WARNING,
                    "prompt_io_failure",
                    attempts=attempts,
                    target=_target_name(target),
                    error_type=type(exc).__name__,
                )
                raise
            finally:
                if span is not None:
                    span.set_attribute("prompto.attempts", attempts)

    def maybe_prompt(
        self,
        message: str,
        target: Callable[..., T],
        validator: Optional[Callable[[T], bool]] = None,
    ) -> Optional[T]:
        """Same loop and output as prompt(); returns None where prompt() would raise."""
        try:
            return self.prompt(message, target, validator)
        except PromptIOError:
            return None

    def _reject(self, reason: str, attempt: int, target: Any, **fields: Any) -> None:
        self._log(logging.DEBUG, "prompt_rejected", reason=reason, attempt=attempt, target=_target_name(target), **fields)
        self.write_and_flush(self.config.invalid_input_message + "\n")

    def _log(self, level: int, event: str, **fields: Any) -> None:
        if self.config.log_events:
            log_json(level, event, **fields)


__all__ = ["PromptSession", "STREAM_ERRORS"]
