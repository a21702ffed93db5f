import json
import logging
import re
from typing import Any, Dict

from opentelemetry import trace

LOGGER_NAME = "prompto"

SENSITIVE_KEYS = frozenset(
    {
        "authorization",
        "api_key",
        "apikey",
        "api-key",
        "password",
        "passphrase",
        "pin",
        "secret",
        "token",
        "access_token",
        "refresh_token",
    }
)

_BEARER_RE = re.compile(r"bearer\s+[A-Za-z0-9._\-]+", re.IGNORECASE)
_EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")


# Silent unless the host application configures logging.
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(name: str = LOGGER_NAME, level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, format="%(message)s")
    return logger


def _trace_fields() -> Dict[str, str]:
    """Trace identifiers of the current OpenTelemetry span, if one is active."""
    ctx = trace.get_current_span().get_span_context()
    if not ctx.is_valid:
        return {}
    trace_id = format(ctx.trace_id, "032x")
    span_id = format(ctx.span_id, "016x")
    flags = format(ctx.trace_flags, "02x")
    return {
        "trace_id": trace_id,
        "span_id": span_id,
        "traceparent": f"00-{trace_id}-{span_id}-{flags}",
    }


def _scrub_value(value: Any) -> Any:
    if isinstance(value, str):
        if _BEARER_RE.search(value):
            return "[REDACTED]"
        if _EMAIL_RE.search(value):
            return "[REDACTED_EMAIL]"
    return value


def scrub(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {
            k: "[REDACTED]" if str(k).lower() in SENSITIVE_KEYS else scrub(v)
            for k, v in obj.items()
        }
    if isinstance(obj, (list, tuple)):
        return [scrub(i) for i in obj]
    return _scrub_value(obj)


def log_json(level: int, event: str, **fields: Any) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.isEnabledFor(level):
        return
    for k, v in _trace_fields().items():
        fields.setdefault(k, v)
    payload = scrub({"event": event, **fields})
    logger.log(level, json.dumps(payload, default=str))
