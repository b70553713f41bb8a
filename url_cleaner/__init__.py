from .cleaner import KeywordUrlCleaner
from .config import ConfigError, load_config, load_keywords
from .logger import Logger

__all__ = ["KeywordUrlCleaner", "ConfigError", "Logger", "load_config", "load_keywords"]
