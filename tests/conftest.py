"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real config, data and log
directories.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from focuspro_cli.models.config_models import AppConfig
from focuspro_cli.services.stats_service import StatsStore


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point every platformdirs lookup and the logger at *tmp_path*.

    Also clears the lru_cache so each test gets a fresh config service.
    """
    from focuspro_cli.services.config_service import get_config_service
    from focuspro_cli.utils.logger import reset_logger

    tmpdir = str(tmp_path)
    reset_logger()
    get_config_service.cache_clear()
    with patch("focuspro_cli.services.config_service.user_config_dir", return_value=tmpdir), \
            patch("focuspro_cli.services.config_service.user_data_dir", return_value=tmpdir), \
            patch("platformdirs.user_data_dir", return_value=tmpdir), \
            patch("focuspro_cli.utils.logger.user_log_dir", return_value=tmpdir):
        yield tmp_path
    get_config_service.cache_clear()
    reset_logger()


# ---------------------------------------------------------------------------
# Config and storage helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig()


@pytest.fixture()
def mock_config_service(app_config):
    """A MagicMock standing in for get_config_service() with a real AppConfig."""
    svc = MagicMock()
    svc.config = app_config
    svc.load_config.return_value = app_config
    svc.save_config = MagicMock()
    return svc


@pytest.fixture()
def stats_store(tmp_path) -> StatsStore:
    return StatsStore(data_dir=tmp_path / "data")
