from __future__ import annotations

from typing import Any, Optional


class PromptError(Exception):
    pass


class PromptIOError(PromptError):
    """
    Writing the prompt, flushing the sink, or reading the line failed.

    `cause` is the exception raised by the underlying stream, or None when
    the failure has no underlying exception (end of input).
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        if cause is not None:
            message = f"{message}: {type(cause).__name__}: {cause}"
        super().__init__(message)


class EndOfInputError(PromptIOError):
    def __init__(self) -> None:
        super().__init__("input stream exhausted")


class ConversionError(PromptError):
    def __init__(self, text: str, target: Any) -> None:
        self.text = text
        self.target = target
        name = getattr(target, "__name__", repr(target))
        super().__init__(f"cannot convert {text!r} to {name}")


class PromptSchemaError(PromptError):
    pass
