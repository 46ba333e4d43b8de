"""Per-user configuration file bootstrap with pluggable serialization.

Front-ends should only depend on the names exported here rather than
importing internal modules directly.
"""

from .errors import ConfigError, ConfigNotLoadedError
from .formats import JsonConfig, KeyValueConfig, YamlConfig
from .logging_config import setup_logging
from .manager import ConfigManager, Defaults
from .paths import default_config_path, user_home
from .serializer import Serializer, SerializerBase

__version__ = "0.1.0"

__all__: list[str] = [
    "ConfigError",
    "ConfigManager",
    "ConfigNotLoadedError",
    "Defaults",
    "JsonConfig",
    "KeyValueConfig",
    "Serializer",
    "SerializerBase",
    "YamlConfig",
    "default_config_path",
    "setup_logging",
    "user_home",
]
