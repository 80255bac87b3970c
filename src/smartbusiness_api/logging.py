import logging
from typing import Any, Iterable, List

from .observability import RESERVED_LOG_KEYS

# Rendered first, in this order; any other extras follow sorted by key
LOG_FIELD_ORDER = (
    "endpoint",
    "method",
    "path",
    "status",
    "attempt",
    "duration_ms",
    "error_type",
    "expires_in",
)

# Never written out, whatever logger they arrive through
SENSITIVE_KEYS = frozenset(
    {"access_token", "authorization", "client_secret", "password", "token"}
)

REDACTED = "***"


class LogfmtFormatter(logging.Formatter):
    """
    key=value lines: level, logger, event, then the record's extras.
    Values of SENSITIVE_KEYS are masked.
    """

    def format(self, record: logging.LogRecord) -> str:
        parts: List[str] = [
            f"level={record.levelname.lower()}",
            f"logger={record.name}",
        ]
        message = record.getMessage()
        if message:
            parts.append(f"event={self._fmt_val(message)}")

        for key in self._extra_keys(record):
            value = getattr(record, key)
            if value is None:
                continue
            if key.lower() in SENSITIVE_KEYS:
                value = REDACTED
            parts.append(f"{key}={self._fmt_val(value)}")

        if record.exc_info and record.exc_info[0] is not None:
            parts.append(f"exc_type={record.exc_info[0].__name__}")
        return " ".join(parts)

    @staticmethod
    def _extra_keys(record: logging.LogRecord) -> Iterable[str]:
        extras = set(record.__dict__) - RESERVED_LOG_KEYS - {"event"}
        ordered = [k for k in LOG_FIELD_ORDER if k in extras]
        return ordered + sorted(extras - set(ordered))

    @staticmethod
    def _fmt_val(val: Any) -> str:
        if isinstance(val, (bool, int, float)):
            return str(val)
        text = str(val)
        if any(c in text for c in ' ="'):
            return '"' + text.replace('"', '\\"') + '"'
        return text


def setup_logging(level: str = "INFO") -> None:
    """Replace root handlers with one logfmt stream handler at ``level``."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(LogfmtFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_FIELD_ORDER", "SENSITIVE_KEYS"]
