"""Configuration loading for Mustalah.

Main components:
- load_config: defaults + YAML file + MUSTALAH_* environment variables
- flatten_pydantic_errors: readable messages for schema violations
"""

from mustalah.config.loader import load_config
from mustalah.config.validator import flatten_pydantic_errors

__all__ = [
    "load_config",
    "flatten_pydantic_errors",
]
