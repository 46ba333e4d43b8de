from __future__ import annotations

"""Configuration file bootstrap, load and save.

A :class:`ConfigManager` resolves the per-user configuration file
(``<home>/.config/<app_name>/default.conf`` unless the caller passes a path),
creates it from the default values on first run, and moves configuration
between that file and caller-supplied :class:`~confstrap.serializer.Serializer`
objects.

The manager performs no locking. Two managers pointing at the same file can
race on first-run creation and on save; callers serialise their own access.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from confstrap.errors import ConfigError, ConfigNotLoadedError
from confstrap.paths import DIR_MODE, FILE_MODE, HomeProvider, resolve_default_path, user_home
from confstrap.serializer import Serializer

logger = logging.getLogger(__name__)

__all__ = ["ConfigManager", "Defaults"]

PathArg = Union[str, os.PathLike]


@dataclass(frozen=True)
class Defaults:
    """Construction data for :class:`ConfigManager`.

    Attributes:
        app_name: Name of the configuration subdirectory (required).
        default_values: Strategy whose encoded output seeds a newly created
            configuration file (required).
    """

    app_name: str = ""
    default_values: Optional[Serializer] = None


def _write_file(path: str, data: bytes) -> None:
    """Write *data* as the whole content of *path*, creating it with FILE_MODE."""
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
    with os.fdopen(fd, "wb") as fh:
        fh.write(data)


class ConfigManager:
    """Loads and saves a single configuration file."""

    def __init__(self, defaults: Defaults, home_provider: Optional[HomeProvider] = None) -> None:
        if not defaults.app_name:
            raise ConfigError("initialization", "", ValueError("AppName must be specified"))
        if defaults.default_values is None:
            raise ConfigError("initialization", "", ValueError("DefaultConfigValues must be specified"))
        self._defaults = defaults
        self._home_provider: HomeProvider = home_provider or user_home
        self._file_path: Optional[str] = None

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def defaults(self) -> Defaults:
        return self._defaults

    @property
    def app_name(self) -> str:
        return self._defaults.app_name

    @property
    def file_path(self) -> Optional[str]:
        """Path of the last successfully loaded file, ``None`` before any load."""
        return self._file_path

    @property
    def is_loaded(self) -> bool:
        return self._file_path is not None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def default_path(self) -> Path:
        """Return ``<home>/.config/<app_name>/default.conf``.

        Raises:
            ConfigError: If the home directory cannot be determined.
        """
        return resolve_default_path(self._defaults.app_name, self._home_provider)

    def ensure_config_file(self, path: PathArg) -> bool:
        """Create *path* from the default values unless something exists there.

        Existing content is trusted as-is. Returns ``True`` if the file was
        created by this call.

        Raises:
            ConfigError: ``"create config directory"``, ``"marshal default
                config"`` or ``"create default config"``.
        """
        path = os.fspath(path)
        if os.path.exists(path):
            return False

        directory = os.path.dirname(path)
        if directory:
            try:
                os.makedirs(directory, mode=DIR_MODE, exist_ok=True)
            except OSError as exc:
                raise ConfigError("create config directory", directory, exc) from exc

        try:
            data = self._defaults.default_values.encode()  # type: ignore[union-attr]
        except Exception as exc:
            raise ConfigError("marshal default config", path, exc) from exc

        try:
            _write_file(path, data)
        except OSError as exc:
            raise ConfigError("create default config", path, exc) from exc

        logger.info("Created default config: %s", path)
        return True

    def load_config(self, path: Optional[PathArg], target: Serializer) -> str:
        """Load the configuration at *path* into *target*.

        ``None`` selects :meth:`default_path`. An explicit empty path is
        rejected. A missing file is first created from the default values.
        Returns the path that was loaded, which later saves write back to.

        Raises:
            ValueError: If *path* is an empty string.
            ConfigError: On any failure while creating, reading or decoding.
        """
        if path is None:
            path = self.default_path()
        path = os.fspath(path)
        if path == "":
            raise ValueError("no path provided")

        self.ensure_config_file(path)

        try:
            with open(path, "rb") as fh:
                data = fh.read()
        except OSError as exc:
            raise ConfigError("read config", path, exc) from exc

        try:
            target.decode(data)
        except Exception as exc:
            raise ConfigError("unmarshal config", path, exc) from exc

        self._file_path = path
        logger.debug("Loaded config from %s (%d bytes)", path, len(data))
        return path

    def save_config(self, source: Serializer) -> None:
        """Encode *source* and overwrite the last loaded file with it.

        The write is a plain truncate-and-write, not an atomic replace.

        Raises:
            ConfigNotLoadedError: If no load has succeeded yet.
            ConfigError: ``"marshal config"`` or ``"save config"``.
        """
        if self._file_path is None:
            raise ConfigNotLoadedError()

        try:
            data = source.encode()
        except Exception as exc:
            raise ConfigError("marshal config", "", exc) from exc

        try:
            _write_file(self._file_path, data)
        except OSError as exc:
            raise ConfigError("save config", self._file_path, exc) from exc

        logger.debug("Saved config to %s (%d bytes)", self._file_path, len(data))
