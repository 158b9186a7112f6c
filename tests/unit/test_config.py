"""Unit tests for settings and the record store factory."""

import pytest
from pydantic import ValidationError

from inventory_manager.config import Settings, get_record_store
from inventory_manager.data import SampleDataGenerator, dump_records_file


class TestSettings:
    """Test application settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TRANSPORT", raising=False)
        settings = Settings(_env_file=None)

        assert settings.server_name == "inventory-manager"
        assert settings.server_version == "1.0.0"
        assert settings.transport == "stdio"
        assert settings.data_file is None
        assert settings.langfuse_enabled is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("TRANSPORT", "http")
        monkeypatch.setenv("PORT", "9100")

        settings = Settings(_env_file=None)

        assert settings.transport == "http"
        assert settings.port == 9100

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_langfuse_disabled_without_keys(self):
        settings = Settings(_env_file=None, langfuse_enabled=True)
        settings.validate_required_credentials()

        assert settings.langfuse_enabled is False

    def test_langfuse_kept_with_keys(self):
        settings = Settings(
            _env_file=None,
            langfuse_enabled=True,
            langfuse_public_key="pk-lf-test",
            langfuse_secret_key="sk-lf-test",
        )
        settings.validate_required_credentials()

        assert settings.langfuse_enabled is True


class TestGetRecordStore:
    """Test record store factory."""

    def test_builtin_records(self):
        store = get_record_store(Settings(_env_file=None))

        assert store.list_product_ids() == ["product_001", "product_002", "product_003", "product_004"]

    def test_generated_records(self):
        store = get_record_store(Settings(_env_file=None, sample_data_products_count=12))

        assert len(store.list_product_ids()) == 12

    def test_data_file_takes_precedence(self, tmp_path):
        stock, policies = SampleDataGenerator(seed=1).generate(count=5)
        path = tmp_path / "inventory.json"
        dump_records_file(path, stock, policies)

        store = get_record_store(Settings(_env_file=None, data_file=path, sample_data_products_count=12))

        assert store.list_product_ids() == [s.id for s in stock]

    def test_missing_data_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            get_record_store(Settings(_env_file=None, data_file=tmp_path / "missing.json"))
