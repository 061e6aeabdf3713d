"""Test Sentry opt-in and user-error filtering."""

from unittest.mock import patch

from lifecycle_timeline.cli.main import initialize_sentry
from lifecycle_timeline.exceptions import CatalogLoadError, ConfigurationError, RenderError


def test_disabled_by_default():
    with patch("lifecycle_timeline.cli.main.sentry_sdk.init") as mock_init:
        assert initialize_sentry() is False
        mock_init.assert_not_called()


def test_requires_dsn(monkeypatch):
    monkeypatch.setenv("TELEMETRY", "true")
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    with patch("lifecycle_timeline.cli.main.sentry_sdk.init") as mock_init:
        assert initialize_sentry() is False
        mock_init.assert_not_called()


def test_user_errors_are_filtered(monkeypatch):
    monkeypatch.setenv("TELEMETRY", "true")
    monkeypatch.setenv("SENTRY_DSN", "https://public@example.org/1")
    with patch("lifecycle_timeline.cli.main.sentry_sdk.init") as mock_init:
        assert initialize_sentry() is True
        before_send = mock_init.call_args.kwargs["before_send"]

    event = {"exception": {}}
    for error in (ConfigurationError("bad"), CatalogLoadError("missing")):
        assert before_send(event, {"exc_info": (type(error), error, None)}) is None
    error = RenderError("sink bug")
    assert before_send(event, {"exc_info": (RenderError, error, None)}) is event
