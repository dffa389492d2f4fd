import copy
import json
import logging
import os

logger = logging.getLogger(__name__)

CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.json")

DEFAULT_CONFIG = {
    "preprocessing": {
        "ascii_word_chars": True
    },
    "stemming": {
        "use": True,
        "language": "english"
    },
    "logging": {
        "level": "INFO"
    }
}


def _merge(base: dict, override: dict) -> dict:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(config_path: str = None) -> dict:
    """
    Load configuration, merging the file contents over the defaults.

    Args:
        config_path: Path to a JSON config file (defaults to the packaged config.json)

    Returns:
        Configuration dictionary
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    path = config_path or CONFIG_PATH

    if not os.path.exists(path):
        logger.warning("Config file %s not found, using default settings", path)
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not load config %s: %s. Using default settings.", path, e)
        return config

    if not isinstance(data, dict):
        logger.warning("Config %s is not a JSON object, using default settings", path)
        return config

    return _merge(config, data)
