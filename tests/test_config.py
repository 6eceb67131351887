"""Tests for Lending Library configuration.

These tests demonstrate:
1. Configuration validation
2. Environment variable loading
3. Default value behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from lending_library.config import LibraryConfig, get_config, reset_config


class TestLibraryConfig:
    """Test configuration behavior."""

    def test_default_configuration(self):
        """Test the defaults used when nothing is configured."""
        with patch.dict(os.environ, {}, clear=True):
            config = LibraryConfig()

        assert config.library_name == "lending-library"
        assert config.default_loan_days == 14
        assert config.log_level == "INFO"
        assert config.debug is False
        assert config.is_development is False

    def test_environment_variable_loading(self):
        """Test loading configuration from environment variables."""
        env_vars = {
            "LENDING_LIBRARY_LIBRARY_NAME": "branch-library",
            "LENDING_LIBRARY_DEFAULT_LOAN_DAYS": "21",
            "LENDING_LIBRARY_DEBUG": "true",
            "LENDING_LIBRARY_LOG_LEVEL": "warning",
        }

        with patch.dict(os.environ, env_vars):
            config = LibraryConfig()

            assert config.library_name == "branch-library"
            assert config.default_loan_days == 21
            assert config.debug is True
            assert config.log_level == "WARNING"
            assert config.effective_log_level == "DEBUG"

    def test_library_name_validation(self):
        """Test library name rules."""
        for name in ["lending-library", "branch-7", "abc"]:
            assert LibraryConfig(library_name=name).library_name == name

        invalid_names = [
            "Lending_Library",  # Uppercase and underscore not allowed
            "main library",  # Spaces not allowed
            "ab",  # Too short
            "a" * 51,  # Too long
        ]
        for name in invalid_names:
            with pytest.raises(ValidationError):
                LibraryConfig(library_name=name)

    def test_loan_days_bounds(self):
        assert LibraryConfig(default_loan_days=1).default_loan_days == 1
        assert LibraryConfig(default_loan_days=365).default_loan_days == 365

        for days in [0, -3, 366]:
            with pytest.raises(ValidationError):
                LibraryConfig(default_loan_days=days)

    def test_log_level_validation(self):
        for level in ["DEBUG", "INFO", "WARNING", "ERROR", "info"]:
            assert LibraryConfig(log_level=level).log_level == level.upper()

        with pytest.raises(ValidationError):
            LibraryConfig(log_level="VERBOSE")

    def test_development_mode(self):
        assert LibraryConfig(debug=True).is_development is True
        assert LibraryConfig(log_level="DEBUG").is_development is True
        assert LibraryConfig(log_level="INFO", debug=False).effective_log_level == "INFO"


class TestConfigSingleton:
    """Test the shared configuration accessor."""

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reset_config(self):
        first = get_config()

        reset_config()

        assert get_config() is not first

    def test_reset_picks_up_environment(self):
        with patch.dict(os.environ, {"LENDING_LIBRARY_DEFAULT_LOAN_DAYS": "30"}):
            reset_config()
            assert get_config().default_loan_days == 30
