"""
Configuration management for dynamic datatables using Pydantic for schema validation.
"""

import json
import os
import logging
from typing import Optional
from pydantic import BaseModel, Field, ValidationError

from dynamic_datatable.constants import DEFAULT_PAGE_SIZE


class DatatableConfig(BaseModel):
    """Pydantic model for datatable engine configuration"""

    page_size: int = Field(
        default=DEFAULT_PAGE_SIZE, ge=1, description="Rows shown per page"
    )
    currency_symbol: str = Field(
        default="$", description="Symbol prefixed to money cells"
    )
    missing_placeholder: str = Field(
        default="", description="Text rendered for missing or null cell values"
    )
    validate_schema: bool = Field(
        default=True,
        description="Check column and filter keys against the records on construction",
    )
    memoize: bool = Field(
        default=True, description="Reuse filtered/sorted rows when unchanged"
    )
    image_size: int = Field(
        default=40, ge=1, description="Pixel size of image cells"
    )

    model_config = {
        # Allow extra fields for forward compatibility
        "extra": "allow"
    }


_BOOL_FIELDS = {"validate_schema", "memoize"}
_INT_FIELDS = {"page_size", "image_size"}


class ConfigManager:
    """Configuration manager for dynamic datatables"""

    # Class variable for singleton pattern
    _instance = None
    # Track instances by config path to support testing with different paths
    _instances_by_path = {}

    @classmethod
    def _resolve_config_path(cls, config_path: Optional[str] = None) -> str:
        """Resolve configuration file path with precedence: parameter > DATATABLE_CONFIG_PATH > default.

        Args:
            config_path: Explicit path provided by caller

        Returns:
            Resolved configuration file path
        """
        if config_path is not None:
            return config_path

        env_path = os.getenv("DATATABLE_CONFIG_PATH")
        if env_path is not None:
            return env_path

        return os.path.join(os.path.expanduser("~"), ".dynamic_datatable.json")

    def __new__(cls, config_path: Optional[str] = None):
        """Singleton pattern that also respects different config paths for testing."""
        config_path = cls._resolve_config_path(config_path)

        if config_path in cls._instances_by_path:
            return cls._instances_by_path[config_path]

        instance = super(ConfigManager, cls).__new__(cls)
        if cls._instance is None:
            cls._instance = instance
        cls._instances_by_path[config_path] = instance
        instance._initialized = False
        return instance

    def __init__(self, config_path: Optional[str] = None):
        """Initialize config manager with optional custom path"""
        if getattr(self, "_initialized", False):
            return

        self.config_path = self._resolve_config_path(config_path)

        self._config: Optional[DatatableConfig] = None
        self._initialized = True

    def load(self) -> DatatableConfig:
        """Load configuration from file or create default"""
        if self._config:
            return self._config

        config_data = {}
        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, "r") as f:
                    config_data = json.load(f)
                    logging.debug(f"Loaded configuration from {self.config_path}")
            except json.JSONDecodeError:
                logging.error("Config file is corrupted. Using default config.")
            except Exception as e:
                logging.error(f"Error loading config: {e}")

        env_mappings = {
            "page_size": ["DATATABLE_PAGE_SIZE"],
            "currency_symbol": ["DATATABLE_CURRENCY_SYMBOL"],
            "missing_placeholder": ["DATATABLE_MISSING_PLACEHOLDER"],
            "validate_schema": ["DATATABLE_VALIDATE_SCHEMA"],
            "memoize": ["DATATABLE_MEMOIZE"],
        }

        for field, env_vars in env_mappings.items():
            for env_var in env_vars:
                value = os.getenv(env_var)
                if value is None:
                    continue
                if field in _BOOL_FIELDS:
                    config_data[field] = value.lower() in ("true", "1", "yes", "on")
                elif field in _INT_FIELDS:
                    try:
                        config_data[field] = int(value)
                    except ValueError:
                        logging.warning(
                            f"Ignoring non-integer {env_var}={value!r}, using default"
                        )
                        break
                else:
                    config_data[field] = value
                logging.debug(f"Using {field} from environment variable {env_var}")
                break

        try:
            self._config = DatatableConfig(**config_data)
        except ValidationError as e:
            # only the offending fields fall back to their defaults
            invalid = {err["loc"][0] for err in e.errors() if err["loc"]}
            logging.error(
                f"Invalid configuration values for {', '.join(sorted(map(str, invalid)))}, "
                f"using defaults for them: {e}"
            )
            valid_data = {k: v for k, v in config_data.items() if k not in invalid}
            try:
                self._config = DatatableConfig(**valid_data)
            except ValidationError as retry_error:
                logging.error(f"Invalid configuration, using defaults: {retry_error}")
                self._config = DatatableConfig()
        return self._config

    def save(self) -> bool:
        """Save configuration to file"""
        if not self._config:
            return False

        try:
            directory = os.path.dirname(self.config_path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            with open(self.config_path, "w") as f:
                json.dump(self._config.model_dump(), f, indent=2)
            logging.debug(f"Saved configuration to {self.config_path}")
            return True
        except Exception as e:
            logging.error(f"Error saving config: {e}")
            return False

    def get_config(self) -> DatatableConfig:
        """Get configuration object"""
        return self.load()

    def update(self, **kwargs) -> bool:
        """Update configuration values"""
        config = self.load()

        if "page_size" in kwargs:
            page_size = kwargs["page_size"]
            if not isinstance(page_size, int) or page_size < 1:
                logging.warning("Invalid page_size provided, keeping current value")
                kwargs.pop("page_size")

        for key, value in kwargs.items():
            setattr(config, key, value)

        return self.save()


# Global config manager instance
_config_manager = ConfigManager()


def get_config_manager():
    """Get the global config manager instance"""
    return _config_manager


def get_page_size():
    """Get the default page size from config."""
    return _config_manager.get_config().page_size


def set_page_size(page_size):
    """Set the default page size in config."""
    return _config_manager.update(page_size=page_size)


def get_currency_symbol():
    """Get the symbol used for money cells."""
    return _config_manager.get_config().currency_symbol


def get_missing_placeholder():
    """Get the text rendered for missing cell values."""
    return _config_manager.get_config().missing_placeholder


def get_image_size():
    return _config_manager.get_config().image_size


def schema_validation_enabled():
    """Whether views check their schema against the records on construction."""
    return _config_manager.get_config().validate_schema


def memoization_enabled():
    return _config_manager.get_config().memoize
