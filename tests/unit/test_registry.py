"""Tests for the backend registry."""

import pytest

from core.secrets import create_backend, get_backend
from core.secrets.aws_backend import AwsSecretStore
from core.secrets.exceptions import StoreError
from core.secrets.file_backend import FileSecretStore


class TestRegistry:
    """Tests for backend lookup and creation."""

    def test_builtin_backends_registered(self):
        """aws and file should be available after importing core.secrets."""
        assert get_backend("aws") is AwsSecretStore
        assert get_backend("file") is FileSecretStore

    def test_unknown_backend(self):
        """Should list available backends in the error."""
        with pytest.raises(StoreError) as exc_info:
            create_backend("vault")

        assert "Unknown backend: 'vault'" in str(exc_info.value)
        assert "aws, file" in str(exc_info.value)

    def test_missing_config(self):
        """Missing constructor arguments should raise StoreError."""
        with pytest.raises(StoreError) as exc_info:
            create_backend("file")

        assert "config error" in str(exc_info.value)

    def test_create_file_backend(self, tmp_path):
        """Should pass config through to the backend."""
        store = create_backend("file", path=str(tmp_path / "s.json"))

        assert isinstance(store, FileSecretStore)
        assert store.file_path == tmp_path / "s.json"
