from pathlib import Path

import yaml


class ConfigError(ValueError):
    """Raised when a configuration file has the wrong shape."""


def load_config(path):
    """Read a YAML config file. An empty file gives an empty dict."""
    with open(Path(path), 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    return config


def load_keywords(path):
    """Return the `keywords` list from a config file, or [] if absent."""
    keywords = load_config(path).get('keywords')
    if keywords is None:
        return []
    if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
        raise ConfigError(f"{path}: 'keywords' must be a list of strings")
    return keywords
