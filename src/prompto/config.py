"""
Runtime settings for prompt sessions.

Every attribute can be passed explicitly; otherwise it falls back to an
environment variable and then to a built-in default.
"""

import os
from typing import Optional

DEFAULT_INVALID_INPUT_MESSAGE = "Invalid input! Please try again."


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class PromptConfig:
    """Configuration for a PromptSession"""

    def __init__(
        self,
        invalid_input_message: Optional[str] = None,
        tracing_enabled: Optional[bool] = None,
        log_events: Optional[bool] = None,
    ):
        self.invalid_input_message = (
            invalid_input_message
            if invalid_input_message is not None
            else os.getenv("PROMPTO_INVALID_INPUT_MESSAGE", DEFAULT_INVALID_INPUT_MESSAGE)
        )
        self.tracing_enabled = (
            tracing_enabled if tracing_enabled is not None else _env_flag("PROMPTO_TRACING_ENABLED", "true")
        )
        self.log_events = log_events if log_events is not None else _env_flag("PROMPTO_LOG_EVENTS", "true")

    def __repr__(self) -> str:
        return (
            f"PromptConfig(invalid_input_message={self.invalid_input_message!r}, "
            f"tracing_enabled={self.tracing_enabled}, log_events={self.log_events})"
        )
