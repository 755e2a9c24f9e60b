# Path: ability_tags/config_loader.py
"""
Configuration Loader for ability_tags

Loads configuration from a .env file and ABILITY_TAGS_* environment
variables. Singleton pattern ensures consistent configuration across all
components.

Library classes (compiler, registry, engine) never read configuration
themselves; main.py passes the values in.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

APP_ROOT: Path = Path(__file__).resolve().parent

# Rule dictionary
DEFAULT_RULES_DIR: Path = APP_ROOT / 'dictionary' / 'rules'
DEFAULT_INCLUDE_LEGACY: bool = False
DEFAULT_ALPHABETICAL_ORDER: bool = True
DEFAULT_STRICT_GROUPS: bool = True

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'
DEFAULT_LOG_DIR: Path = APP_ROOT / 'logs'

# Output Defaults
DEFAULT_OUTPUT_DIR: Path = APP_ROOT / 'output_files'
DEFAULT_OUTPUT_FORMATS: str = 'json'


class ConfigLoader:
    """
    Singleton configuration loader for ability_tags.

    Loads configuration from environment variables with type conversion
    and sensible defaults.

    Example:
        config = ConfigLoader()
        rules_dir = config.get('rules_dir')  # Returns Path object
        legacy = config.get('include_legacy')  # Returns bool
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads .env file
        from the application directory on first instantiation.
        """
        if ConfigLoader._initialized:
            return

        env_path = APP_ROOT / '.env'
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # ENVIRONMENT & DEBUG
            # ================================================================
            'environment': self._get_env('ABILITY_TAGS_ENVIRONMENT', 'development'),
            'debug': self._get_bool('ABILITY_TAGS_DEBUG', False),

            # ================================================================
            # RULE DICTIONARY
            # ================================================================
            'rules_dir': self._get_path(
                'ABILITY_TAGS_RULES_DIR', default=DEFAULT_RULES_DIR
            ),
            'include_legacy': self._get_bool(
                'ABILITY_TAGS_INCLUDE_LEGACY', DEFAULT_INCLUDE_LEGACY
            ),
            'alphabetical_order': self._get_bool(
                'ABILITY_TAGS_ALPHABETICAL_ORDER', DEFAULT_ALPHABETICAL_ORDER
            ),
            'strict_groups': self._get_bool(
                'ABILITY_TAGS_STRICT_GROUPS', DEFAULT_STRICT_GROUPS
            ),

            # ================================================================
            # INPUT / OUTPUT
            # ================================================================
            'details_path': self._get_path('ABILITY_TAGS_DETAILS_PATH'),
            'output_dir': self._get_path(
                'ABILITY_TAGS_OUTPUT_DIR', default=DEFAULT_OUTPUT_DIR
            ),
            'output_formats': self._get_list(
                'ABILITY_TAGS_OUTPUT_FORMATS', DEFAULT_OUTPUT_FORMATS
            ),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path(
                'ABILITY_TAGS_LOG_DIR', default=DEFAULT_LOG_DIR
            ),
            'log_level': self._get_env('ABILITY_TAGS_LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('ABILITY_TAGS_LOG_CONSOLE', True),

            # ================================================================
            # TAG CACHE DATABASE
            # ================================================================
            # Any SQLAlchemy URL; unset disables the tag cache
            'database_url': self._get_env('ABILITY_TAGS_DATABASE_URL', '') or None,
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self._config.get(key)
        return default if value is None else value

    def _get_path(
        self,
        key: str,
        required: bool = False,
        default: Optional[Path] = None
    ) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name
            required: If True, raise error when missing
            default: Path used when the variable is unset

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(key)

        if value is None:
            if required:
                raise ValueError(f"Required path not configured: {key}")
            return default

        # Handle variable interpolation
        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def _get_list(self, key: str, default: str) -> list[str]:
        """Get comma-separated list environment variable."""
        value = os.getenv(key, default)
        return [item.strip() for item in value.split(',') if item.strip()]

    def __repr__(self) -> str:
        """String representation showing key settings."""
        return (
            f"ConfigLoader("
            f"rules_dir={self._config.get('rules_dir')}, "
            f"environment={self._config.get('environment')})"
        )


__all__ = ['ConfigLoader']
