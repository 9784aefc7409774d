"""Configuration for the Intercom migration tool."""

from .config import Config, LoggingConfig, OutputConfig

__all__ = ['Config', 'LoggingConfig', 'OutputConfig']
