"""
prompto - typed, validated line input over any text stream pair
"""

__version__ = "0.1.0"

from .config import PromptConfig, DEFAULT_INVALID_INPUT_MESSAGE

from .errors import (
    PromptError,
    PromptIOError,
    EndOfInputError,
    ConversionError,
    PromptSchemaError,
)

from .parsing import (
    parser_for,
    convert,
    maybe_convert,
    zero_value,
)

from .session import PromptSession

from .types import (
    FixedWidthInt,
    Int8,
    Int16,
    Int32,
    Int64,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    Rgb,
)

from .logging import configure_logging, log_json

from . import stdio, validators

__all__ = [
    "PromptConfig",
    "DEFAULT_INVALID_INPUT_MESSAGE",
    "PromptError",
    "PromptIOError",
    "EndOfInputError",
    "ConversionError",
    "PromptSchemaError",
    "parser_for",
    "convert",
    "maybe_convert",
    "zero_value",
    "PromptSession",
    "FixedWidthInt",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "Rgb",
    "configure_logging",
    "log_json",
    "stdio",
    "validators",
]
