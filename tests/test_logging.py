import logging
import sys

import pytest

from documize_mcp.core.errors import AuthorizationExpiredRetryFailed
from documize_mcp.core.logging import LogfmtFormatter, setup_logging
from documize_mcp.core.observability import (
    AUTH_ACQUIRED,
    AUTH_FAILED,
    REDACTED,
    log_event,
)


def _record(msg, **extra):
    record = logging.LogRecord("documize_mcp.client", logging.INFO, __file__, 1, msg, None, None)
    for key, val in extra.items():
        setattr(record, key, val)
    return record


def test_logfmt_includes_known_extras():
    line = LogfmtFormatter().format(
        _record("op.request", method="GET", path="/api/space", status=200, attempt=0)
    )
    assert line.startswith("level=info logger=documize_mcp.client event=op.request")
    assert "method=GET" in line
    assert "path=/api/space" in line
    assert "status=200" in line
    assert "attempt=0" in line


def test_logfmt_quotes_values_with_spaces():
    line = LogfmtFormatter().format(_record("auth failed", reason="no token"))
    assert 'event="auth failed"' in line
    assert 'reason="no token"' in line


def test_setup_logging_replaces_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    httpx_log = logging.getLogger("httpx")
    saved_httpx_level = httpx_log.level
    try:
        setup_logging("debug")
        setup_logging("warning")
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, LogfmtFormatter)
        assert root.level == logging.WARNING
        assert httpx_log.level == logging.WARNING
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        httpx_log.setLevel(saved_httpx_level)


def test_logfmt_renders_event_extra_and_error_kind():
    record = _record("refresh after 401", event="auth.expired", path="/api/space")
    try:
        raise AuthorizationExpiredRetryFailed("still 401", status=401)
    except AuthorizationExpiredRetryFailed:
        record.exc_info = sys.exc_info()

    line = LogfmtFormatter().format(record)

    assert "event=auth.expired" in line
    assert 'msg="refresh after 401"' in line
    assert "exc_type=AuthorizationExpiredRetryFailed" in line
    assert "error_kind=authorization_expired_retry_failed" in line


def test_log_event_masks_secret_fields(caplog):
    log = logging.getLogger("documize_mcp.test")
    with caplog.at_level(logging.INFO, logger="documize_mcp.test"):
        log_event(AUTH_ACQUIRED, log, status=200, token="sekrit", credentials="abc")

    record = next(r for r in caplog.records if r.getMessage() == AUTH_ACQUIRED)
    assert record.event == AUTH_ACQUIRED
    assert record.status == 200
    assert record.token == REDACTED
    assert record.credentials == REDACTED
    assert "sekrit" not in repr(record.__dict__)


def test_log_event_failures_are_warnings(caplog):
    log = logging.getLogger("documize_mcp.test")
    with caplog.at_level(logging.INFO, logger="documize_mcp.test"):
        log_event(AUTH_FAILED, log, status=500, module="clobber")

    record = next(r for r in caplog.records if r.getMessage() == AUTH_FAILED)
    assert record.levelno == logging.WARNING
    assert record.field_module == "clobber"
    assert record.module != "clobber"


def test_log_event_rejects_unknown_events():
    with pytest.raises(ValueError):
        log_event("op.request", logging.getLogger("documize_mcp.test"))
