"""Unit tests for error types."""

from codec import sortable64
from codec.sortable64 import is_valid
from core.errors import ClockError, ConfigError, DecodeError, Tiny64Error
from utils import timestamp


class TestErrors:
    """Tests for the error hierarchy."""

    def test_tracking_fields(self):
        """Errors carry an ID, timestamp and context."""
        error = Tiny64Error("failed", context={"a": 1})
        assert is_valid(error.error_id)
        assert error.timestamp.endswith("Z")
        assert error.context == {"a": 1}
        assert str(error) == f"[{error.error_id}] failed"

    def test_ids_are_unique(self):
        """Each error gets its own tracking ID."""
        assert Tiny64Error("a").error_id != Tiny64Error("b").error_id

    def test_clock_error_context(self):
        """ClockError records the clock reading."""
        error = ClockError("before epoch", clock_ms=-5)
        assert error.context == {"clock_ms": -5}
        assert isinstance(error, Tiny64Error)

    def test_config_error_field(self):
        """ConfigError records the field name."""
        assert ConfigError("bad", field="level").context == {"field": "level"}

    def test_decode_error_is_value_error(self):
        """DecodeError is a ValueError carrying the token."""
        error = DecodeError("bad token", token="x")
        assert isinstance(error, ValueError)
        assert error.token == "x"
        assert error.context == {"token": "x"}

    def test_decode_error_shared_with_codec(self):
        """core.errors re-exports the codec's DecodeError."""
        assert DecodeError is sortable64.DecodeError

    def test_clock_error_with_clock_before_epoch(self, monkeypatch):
        """ClockError is still built when the clock reads before 1970."""
        monkeypatch.setattr(timestamp, "epoch_millis", lambda: -1000)
        error = ClockError("before epoch", clock_ms=-1000)
        assert error.timestamp == "1969-12-31T23:59:59.000Z"
        assert is_valid(error.error_id)

    def test_cause(self):
        """Underlying cause is kept."""
        cause = OSError("clock")
        assert ClockError("x", cause=cause).cause is cause
