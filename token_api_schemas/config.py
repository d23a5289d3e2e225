import os
import logging
from typing import Tuple

from dotenv import load_dotenv

from token_api_schemas.errors import ConfigurationError

"""
Configuration Management for the Token API Schemas

Settings are loaded from environment variables (a ``.env`` file is honoured) with
defaults defined in this module. Invalid values raise ``ConfigurationError`` when
the module is imported.

Environment Variables:
    SCHEMA_MESSAGE_LOCALE: Language of validation failure messages (en, ja)
    JWT_PAYLOAD_VARIANT: JWT payload shape returned by get_jwt_payload_schema (wallet, user)
"""

# Set up logger
logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()

SUPPORTED_LOCALES: Tuple[str, ...] = ("en", "ja")
JWT_PAYLOAD_VARIANTS: Tuple[str, ...] = ("wallet", "user")


def _get_env_str(key: str, default: str, required: bool = False) -> str:
    """Get environment variable as string with validation."""
    value = os.getenv(key, default)
    if required and not value:
        raise ConfigurationError(f"Required environment variable {key} is not set")
    return value


def _get_env_choice(key: str, default: str, choices: Tuple[str, ...]) -> str:
    """Get environment variable restricted to a fixed set of lowercase values."""
    value = _get_env_str(key, default, required=True).strip().lower()
    if value not in choices:
        raise ConfigurationError(
            f"Environment variable {key} must be one of {', '.join(choices)}, got '{value}'"
        )
    return value


try:
    # --- Validation Messages ---
    MESSAGE_LOCALE = _get_env_choice("SCHEMA_MESSAGE_LOCALE", "en", SUPPORTED_LOCALES)

    # --- JWT Payload ---
    JWT_PAYLOAD_VARIANT = _get_env_choice("JWT_PAYLOAD_VARIANT", "wallet", JWT_PAYLOAD_VARIANTS)

    logger.info("Configuration loaded successfully")

except ConfigurationError as e:
    logger.error(f"Configuration error: {e}")
    raise
except Exception as e:
    logger.error(f"Unexpected error loading configuration: {e}")
    raise ConfigurationError(f"Failed to load configuration: {e}")
