# kvcsv/config/__init__.py

"""
Configuration for the kvcsv command-line tool.

Loaded from TOML files and KVCSV_* environment variables into a validated
Pydantic model. The LayeredTable core does not read this configuration.
"""

from .models import KvcsvConfig
from .loaders import load_configuration

__all__ = [
    "KvcsvConfig",
    "load_configuration",
]
