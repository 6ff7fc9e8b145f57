import logging
import sys
from typing import Any

from .errors import DocumizeClientError

# Rendered in this order after level/logger/event; anything else is ignored.
LOG_EXTRA_FIELDS = (
    "tool",
    "method",
    "path",
    "attempt",
    "status",
    "duration_ms",
    "reason",
)

# Chatty libraries that would repeat every request line at INFO.
QUIET_LOGGERS = ("httpx", "httpcore")


class LogfmtFormatter(logging.Formatter):
    """
    logfmt lines for the client and auth lifecycle, e.g.

        level=info logger=documize_mcp.auth event=auth.acquired status=200

    `event` comes from the record's `event` extra (set by log_event) or falls
    back to the message. A DocumizeClientError in exc_info adds its kind.
    """

    def format(self, record: logging.LogRecord) -> str:
        kv: list[str] = [
            f"level={record.levelname.lower()}",
            f"logger={record.name}",
        ]

        msg = record.getMessage()
        event = getattr(record, "event", None) or msg
        if event:
            kv.append(f"event={self._fmt_val(event)}")
        if msg and msg != event:
            kv.append(f"msg={self._fmt_val(msg)}")

        for key in LOG_EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is None:
                continue
            kv.append(f"{key}={self._fmt_val(val)}")

        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            kv.append(f"exc_type={type(exc).__name__}")
            if isinstance(exc, DocumizeClientError):
                kv.append(f"error_kind={exc.kind.value}")

        return " ".join(kv)

    @staticmethod
    def _fmt_val(val: Any) -> str:
        if isinstance(val, bool):
            return str(val).lower()
        if isinstance(val, (int, float)):
            return str(val)
        s = str(val)
        if not s or any(c in s for c in ' ="\n'):
            s = s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
            s = f'"{s}"'
        return s


def setup_logging(level: str = "INFO") -> None:
    """Initialize root logging with logfmt output on stderr (stdout is the MCP stream)."""

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(LogfmtFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS"]
