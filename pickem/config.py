"""Application configuration management."""

import os
from functools import lru_cache
from pathlib import Path

from .schemas import PickemConfig
from .utils import load_json_safe

CONFIG_PATH = Path('data') / 'pickem_config.json'
PASSPHRASE_ENV = 'PICKEM_ADMIN_PASSPHRASE'


@lru_cache(maxsize=1)
def get_config() -> PickemConfig:
    """
    Load configuration from data/pickem_config.json.

    A missing or invalid file falls back to the built-in defaults. The
    admin passphrase can be overridden with PICKEM_ADMIN_PASSPHRASE.
    Configuration is cached after first load.

    Example:
        from pickem.config import get_config
        print(get_config().data_dir)
    """
    config = load_json_safe(CONFIG_PATH, default=None, schema=PickemConfig)
    if config is None:
        config = PickemConfig()

    passphrase = os.environ.get(PASSPHRASE_ENV)
    if passphrase:
        config = config.model_copy(update={'admin_passphrase': passphrase})
    return config


def get_admin_passphrase() -> str:
    """Get the shared administrator passphrase."""
    return get_config().admin_passphrase


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file or environment changes at runtime.
    """
    get_config.cache_clear()
