"""
Configuration loader for environment-specific settings.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from .settings import Settings, Environment

logger = logging.getLogger(__name__)


def load_config_for_environment(environment: Optional[str] = None) -> Settings:
    """
    Load configuration for the specified environment.

    Reads `.env.<environment>` when present, otherwise plain environment
    variables and defaults.

    Args:
        environment: development, staging, production or testing. If None,
            uses the ENVIRONMENT env var or defaults to development

    Raises:
        ValueError: unknown environment name
    """
    if environment is None:
        environment = os.getenv("ENVIRONMENT", "development")

    env = Environment(environment.lower())

    env_file = Path(f".env.{env.value}")
    if env_file.exists():
        return Settings(_env_file=str(env_file), environment=env)

    logger.warning(f"Environment file {env_file} not found, using default settings")
    return Settings(environment=env)
