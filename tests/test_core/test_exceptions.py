"""
Тесты для core/exceptions.py.
"""

from replication_sync.core.exceptions import (
    ReplicationSyncError,
    InvalidEncodingError,
    UnsupportedOperationError,
    SnapshotError,
    ConfigError,
    format_error_for_log,
)


class TestExceptions:
    """Тесты иерархии исключений."""

    def test_hierarchy(self):
        for cls in (InvalidEncodingError, UnsupportedOperationError, SnapshotError, ConfigError):
            assert issubclass(cls, ReplicationSyncError)

    def test_str_without_details(self):
        assert str(ReplicationSyncError("boom")) == "boom"

    def test_str_with_details(self):
        err = InvalidEncodingError("Invalid key", key="T:zz")
        assert str(err) == "Invalid key (key='T:zz')"

    def test_invalid_encoding_skips_none(self):
        err = InvalidEncodingError("Bad field", field="Ethernet0")
        assert err.details == {"field": "Ethernet0"}
        assert err.key is None

    def test_invalid_encoding_truncates_value(self):
        err = InvalidEncodingError("Bad", value="x" * 500)
        assert len(err.details["value"]) == 100
        assert len(err.value) == 500

    def test_unsupported_operation(self):
        err = UnsupportedOperationError("Unsupported", update_type=42)
        assert err.update_type == 42
        assert err.details == {"update_type": "42"}

    def test_snapshot_error_path(self):
        err = SnapshotError("not found", path="/tmp/x.json")
        assert err.details == {"path": "/tmp/x.json"}

    def test_config_error(self):
        err = ConfigError("bad", config_file="config.yaml", key="appdb.table_name")
        assert err.details == {"config_file": "config.yaml", "key": "appdb.table_name"}

    def test_to_dict(self):
        data = SnapshotError("not found", path="a.json").to_dict()
        assert data == {
            "error_type": "SnapshotError",
            "message": "not found",
            "details": {"path": "a.json"},
        }

    def test_format_error_for_log(self):
        assert format_error_for_log(SnapshotError("nf", path="a")) == "nf (path='a')"
        assert format_error_for_log(ValueError("oops")) == "ValueError: oops"
