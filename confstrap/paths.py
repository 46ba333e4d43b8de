from __future__ import annotations

"""Default configuration path resolution.

The per-user configuration file lives at
``<home>/.config/<app_name>/default.conf``. The home directory comes from an
injectable provider so callers (and tests) can root everything elsewhere
without touching the process environment.
"""

from pathlib import Path
from typing import Callable, Union

from confstrap.errors import ConfigError

__all__ = [
    "CONFIG_DIR_NAME",
    "DEFAULT_FILE_NAME",
    "DIR_MODE",
    "FILE_MODE",
    "HomeProvider",
    "default_config_path",
    "resolve_default_path",
    "user_home",
]

CONFIG_DIR_NAME = ".config"
DEFAULT_FILE_NAME = "default.conf"

# Subject to the process umask
DIR_MODE = 0o755
FILE_MODE = 0o644

HomeProvider = Callable[[], Union[str, Path]]


def user_home() -> Path:
    """Return the current user's home directory.

    Raises:
        RuntimeError: If no home directory can be determined.
    """
    return Path.home()


def default_config_path(app_name: str, home: Union[str, Path]) -> Path:
    """Build the default configuration file path for *app_name* under *home*."""
    return Path(home) / CONFIG_DIR_NAME / app_name / DEFAULT_FILE_NAME


def resolve_default_path(app_name: str, home_provider: HomeProvider = user_home) -> Path:
    """Ask *home_provider* for the home directory and build the default path.

    Raises:
        ConfigError: operation ``"resolve default path"`` when the home
            directory cannot be determined.
    """
    try:
        home = home_provider()
    except (RuntimeError, KeyError, OSError) as exc:
        raise ConfigError("resolve default path", "", exc) from exc
    if home is None or str(home) == "":
        raise ConfigError("resolve default path", "",
                          RuntimeError("could not determine home directory"))
    return default_config_path(app_name, home)
