from __future__ import annotations

"""Ready-made dictionary-backed serialization strategies.

Each class keeps its values in a plain ``dict`` (``.data``) and satisfies the
:class:`~confstrap.serializer.Serializer` protocol, so it can be passed as the
default values, as a load target, or as a save source.
"""

import json
from typing import Any, Dict, Optional

import yaml

from confstrap.serializer import SerializerBase

__all__ = ["JsonConfig", "KeyValueConfig", "YamlConfig"]


class _DictConfig(SerializerBase):
    """Shared mapping behaviour for the dict-backed strategies."""

    def __init__(self, data: Optional[Dict[str, Any]] = None) -> None:
        self.data: Dict[str, Any] = dict(data) if data else {}

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.data[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.data == other.data  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"


class YamlConfig(_DictConfig):
    """YAML mapping stored with PyYAML's safe dumper/loader."""

    def encode(self) -> bytes:
        text = yaml.safe_dump(self.data, default_flow_style=False,
                              sort_keys=False, allow_unicode=True)
        return text.encode("utf-8")

    def decode(self, data: bytes) -> None:
        loaded = yaml.safe_load(data.decode("utf-8"))
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f"expected a YAML mapping, got {type(loaded).__name__}")
        self.data = loaded


class JsonConfig(_DictConfig):
    """JSON object stored with the standard library encoder."""

    def __init__(self, data: Optional[Dict[str, Any]] = None, indent: Optional[int] = 2) -> None:
        super().__init__(data)
        self.indent = indent

    def encode(self) -> bytes:
        return (json.dumps(self.data, indent=self.indent, ensure_ascii=False) + "\n").encode("utf-8")

    def decode(self, data: bytes) -> None:
        loaded = json.loads(data.decode("utf-8"))
        if not isinstance(loaded, dict):
            raise ValueError(f"expected a JSON object, got {type(loaded).__name__}")
        self.data = loaded


class KeyValueConfig(_DictConfig):
    """Flat ``key = value`` lines; values are kept as strings.

    Blank lines and lines starting with ``#`` or ``;`` are ignored. Keys and
    values are stripped of surrounding whitespace on decode.
    """

    def encode(self) -> bytes:
        lines = []
        for key, value in self.data.items():
            key, value = str(key), str(value)
            if not key.strip() or "=" in key or key.strip().startswith(("#", ";")):
                raise ValueError(f"key {key!r} cannot be stored as 'key = value'")
            if "\n" in key or "\r" in key or "\n" in value or "\r" in value:
                raise ValueError(f"entry {key!r} contains a line break")
            lines.append(f"{key} = {value}")
        return ("\n".join(lines) + "\n").encode("utf-8") if lines else b""

    def decode(self, data: bytes) -> None:
        parsed: Dict[str, Any] = {}
        for lineno, raw in enumerate(data.decode("utf-8").splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith(("#", ";")):
                continue
            if "=" not in line:
                raise ValueError(f"line {lineno}: expected 'key = value', got {raw!r}")
            key, value = line.split("=", 1)
            parsed[key.strip()] = value.strip()
        self.data = parsed
