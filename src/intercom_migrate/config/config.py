"""Configuration management for the Intercom migration tool."""

from typing import Optional, Dict, Any
from pathlib import Path
import os

from pydantic import BaseModel, Field, validator
import yaml
from dotenv import load_dotenv


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default='INFO', description='Log level')
    file: Optional[str] = Field(default=None, description='Log file path')
    format: Optional[str] = Field(
        default=None, description='Log format (loguru syntax)'
    )

    @validator('level')
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'Log level must be one of: {valid_levels}')
        return v.upper()


class OutputConfig(BaseModel):
    """How the CLI prints actions."""

    format: str = Field(default='json', description='Output format (json, table)')
    indent: int = Field(default=2, description='JSON indentation')

    @validator('format')
    def validate_format(cls, v):
        """Validate output format."""
        valid_formats = ['json', 'table']
        if v.lower() not in valid_formats:
            raise ValueError(f'Output format must be one of: {valid_formats}')
        return v.lower()

    @validator('indent')
    def validate_indent(cls, v):
        """Validate indent is positive."""
        if v <= 0:
            raise ValueError('Indent must be positive')
        return v


class Config(BaseModel):
    """Main configuration class for the Intercom migration tool."""

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description='Logging settings'
    )
    output: OutputConfig = Field(
        default_factory=OutputConfig, description='Output settings'
    )

    class Config:
        """Pydantic configuration."""

        extra = 'forbid'  # Don't allow extra fields

    @classmethod
    def from_file(cls, config_path: str) -> 'Config':
        """Load configuration from YAML file."""
        config_file = Path(config_path)

        if not config_file.exists():
            raise FileNotFoundError(f'Configuration file not found: {config_path}')

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)

        return cls(**(config_data or {}))

    @classmethod
    def from_env(cls) -> 'Config':
        """Load configuration from environment variables."""
        # Load .env file if it exists
        load_dotenv()

        config_data = {
            'logging': {
                'level': os.getenv('LOG_LEVEL', 'INFO'),
                'file': os.getenv('LOG_FILE'),
                'format': os.getenv('LOG_FORMAT'),
            },
            'output': {
                'format': os.getenv('OUTPUT_FORMAT', 'json'),
                'indent': int(os.getenv('OUTPUT_INDENT', 2)),
            },
        }

        # Remove None values
        config_data = cls._remove_none_values(config_data)

        return cls(**config_data)

    @staticmethod
    def _remove_none_values(data: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively remove None values from dictionary."""
        if isinstance(data, dict):
            return {
                k: Config._remove_none_values(v)
                for k, v in data.items()
                if v is not None
            }
        return data

    def to_file(self, config_path: str) -> None:
        """Save configuration to YAML file."""
        config_file = Path(config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, 'w', encoding='utf-8') as f:
            yaml.dump(
                self.model_dump(),
                f,
                default_flow_style=False,
                indent=2,
                sort_keys=False,
            )

    @staticmethod
    def create_template(output_path: str) -> None:
        """Create a configuration template file."""
        template_config = {
            'logging': {
                'level': 'INFO',
                'file': 'migration.log',
            },
            'output': {
                'format': 'json',
                'indent': 2,
            },
        }

        config_file = Path(output_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, 'w', encoding='utf-8') as f:
            yaml.dump(
                template_config, f, default_flow_style=False, indent=2, sort_keys=False
            )
