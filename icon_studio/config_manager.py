import copy
import json
import logging
import os

from .config import DEFAULT_CONFIG

logger = logging.getLogger(__name__)

# We define the file name here
CONFIG_FILE = "config.json"


def _merge(defaults, overrides):
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path=None):
    """
    Load config.json (next to this module by default) over the built-in defaults.
    A missing or broken file is logged and the defaults are used.
    """
    if config_path is None:
        base_path = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_path, CONFIG_FILE)
    try:
        with open(config_path, 'r', encoding='utf-8') as file:
            data = json.load(file)

    except FileNotFoundError:
        logger.error("%s not found, using defaults", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)
    except json.JSONDecodeError as e:
        logger.error("JSON Error in %s: %s", config_path, e)
        return copy.deepcopy(DEFAULT_CONFIG)

    if not isinstance(data, dict):
        logger.error("%s must hold a JSON object, using defaults", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)
    return _merge(DEFAULT_CONFIG, data)


CONFIG = load_config()
