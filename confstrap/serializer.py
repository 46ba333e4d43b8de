from __future__ import annotations

"""Serialization strategy interface.

Defines the contract between :class:`~confstrap.manager.ConfigManager` and the
objects that hold configuration values. The manager never inspects the
encoded format; it only moves bytes between a strategy and the file system.
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

__all__ = ["Serializer", "SerializerBase"]


@runtime_checkable
class Serializer(Protocol):
    """Protocol for configuration serialization strategies.

    Any object exposing ``encode`` and ``decode`` satisfies the protocol,
    whatever format (YAML, JSON, key-value, binary...) it uses internally.
    """

    def encode(self) -> bytes:
        """Return the byte representation of the configuration.

        Raises:
            Exception: Any error; the manager wraps it in a ConfigError.
        """
        ...

    def decode(self, data: bytes) -> None:
        """Update the receiver from the byte representation ``data``.

        Raises:
            Exception: Any error; the manager wraps it in a ConfigError.

        Note:
            The receiver's state after a failed decode is up to the
            implementation.
        """
        ...


class SerializerBase(ABC):
    """Abstract base class for Serializer implementations.

    Optional alternative to implementing the protocol structurally.
    """

    @abstractmethod
    def encode(self) -> bytes:
        """Return the byte representation of the configuration."""

    @abstractmethod
    def decode(self, data: bytes) -> None:
        """Update the receiver from ``data``."""
