"""Tests for configuration management."""

import pytest
import tempfile
import os

from intercom_migrate.config.config import Config, LoggingConfig, OutputConfig


class TestLoggingConfig:
    """Test logging configuration."""

    def test_level_upper_cased(self):
        """Test that log levels are normalized."""
        assert LoggingConfig(level='debug').level == 'DEBUG'

    def test_invalid_level(self):
        """Test that unknown levels are rejected."""
        with pytest.raises(ValueError):
            LoggingConfig(level='verbose')


class TestOutputConfig:
    """Test output configuration."""

    def test_defaults(self):
        """Test default output settings."""
        config = OutputConfig()

        assert config.format == 'json'
        assert config.indent == 2

    def test_invalid_format(self):
        """Test that unknown formats are rejected."""
        with pytest.raises(ValueError):
            OutputConfig(format='csv')

    def test_invalid_indent(self):
        """Test that indent must be positive."""
        with pytest.raises(ValueError):
            OutputConfig(indent=0)


class TestConfig:
    """Test main configuration class."""

    def test_config_defaults(self):
        """Test configuration creation with defaults."""
        config = Config()

        assert config.logging.level == 'INFO'
        assert config.logging.file is None
        assert config.output.format == 'json'

    def test_config_from_dict(self):
        """Test configuration creation from dictionary."""
        config = Config(**{'output': {'format': 'table'}, 'logging': {'level': 'error'}})

        assert config.output.format == 'table'
        assert config.logging.level == 'ERROR'

    def test_extra_fields_rejected(self):
        """Test that unknown sections are rejected."""
        with pytest.raises(ValueError):
            Config(**{'source': {'url': 'https://example.intercom.io'}})

    def test_config_from_file(self):
        """Test configuration loading from YAML file."""
        config_content = """
logging:
  level: warning
  file: migration.log

output:
  format: table
  indent: 4
"""

        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            f.write(config_content)
            f.flush()

        try:
            config = Config.from_file(f.name)
            assert config.logging.level == 'WARNING'
            assert config.logging.file == 'migration.log'
            assert config.output.format == 'table'
            assert config.output.indent == 4
        finally:
            os.unlink(f.name)

    def test_empty_config_file(self):
        """Test that an empty file gives the defaults."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            f.write('')

        try:
            assert Config.from_file(f.name) == Config()
        finally:
            os.unlink(f.name)

    def test_config_from_env(self, monkeypatch):
        """Test configuration loading from environment variables."""
        monkeypatch.setenv('LOG_LEVEL', 'debug')
        monkeypatch.setenv('OUTPUT_FORMAT', 'table')
        monkeypatch.setenv('OUTPUT_INDENT', '3')
        monkeypatch.delenv('LOG_FILE', raising=False)
        monkeypatch.delenv('LOG_FORMAT', raising=False)

        config = Config.from_env()

        assert config.logging.level == 'DEBUG'
        assert config.logging.file is None
        assert config.output.format == 'table'
        assert config.output.indent == 3

    def test_invalid_config_file(self):
        """Test handling of invalid configuration file."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            f.write('invalid: yaml: content:')

        try:
            with pytest.raises(Exception):  # Should raise YAML parsing error
                Config.from_file(f.name)
        finally:
            os.unlink(f.name)

    def test_missing_config_file(self):
        """Test handling of missing configuration file."""
        with pytest.raises(FileNotFoundError):
            Config.from_file('/nonexistent/config.yaml')

    def test_template_round_trip(self):
        """Test that the template and to_file produce loadable files."""
        with tempfile.TemporaryDirectory() as temp_dir:
            template_path = os.path.join(temp_dir, 'template.yaml')
            Config.create_template(template_path)
            config = Config.from_file(template_path)
            assert config.logging.file == 'migration.log'

            saved_path = os.path.join(temp_dir, 'nested', 'saved.yaml')
            config.to_file(saved_path)
            assert Config.from_file(saved_path) == config
