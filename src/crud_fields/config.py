"""
Configuration module for crud-fields.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class CrudFieldsConfig:
    """Configuration settings for crud-fields."""

    # Rendering settings
    template_path: str | None = None  # Extra directory searched before bundled templates
    autoescape: bool = True
    strict_undefined: bool = False

    # Field settings
    id_prefix: str = "field-"
    date_format: str = "%Y-%m-%d"

    # Asset settings
    asset_prefix: str = ""

    @classmethod
    def from_env(cls) -> "CrudFieldsConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            template_path=os.getenv("CRUD_FIELDS_TEMPLATE_PATH", _defaults.template_path) or None,
            autoescape=os.getenv("CRUD_FIELDS_AUTOESCAPE", str(_defaults.autoescape).lower()).lower() == "true",
            strict_undefined=os.getenv("CRUD_FIELDS_STRICT_UNDEFINED", str(_defaults.strict_undefined).lower()).lower() == "true",
            id_prefix=os.getenv("CRUD_FIELDS_ID_PREFIX", _defaults.id_prefix),
            date_format=os.getenv("CRUD_FIELDS_DATE_FORMAT", _defaults.date_format),
            asset_prefix=os.getenv("CRUD_FIELDS_ASSET_PREFIX", _defaults.asset_prefix),
        )


config = CrudFieldsConfig.from_env()


def get_config() -> CrudFieldsConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> CrudFieldsConfig:
    """Update configuration settings."""
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
