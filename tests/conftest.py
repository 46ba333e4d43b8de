"""Shared fixtures for the confstrap test suite.

Provides a recording fake serializer, a controlled home directory and a
ready-made manager rooted in it, so no test touches the real user profile.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from confstrap.manager import ConfigManager, Defaults

logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


class RecordingSerializer:
    """Fake strategy that returns canned bytes and records every call."""

    def __init__(self, encode_data: bytes = b"", encode_error: Optional[Exception] = None,
                 decode_error: Optional[Exception] = None) -> None:
        self.encode_data = encode_data
        self.encode_error = encode_error
        self.decode_error = decode_error
        self.encode_calls = 0
        self.decoded: List[bytes] = []

    @property
    def decode_calls(self) -> int:
        return len(self.decoded)

    def encode(self) -> bytes:
        self.encode_calls += 1
        if self.encode_error is not None:
            raise self.encode_error
        return self.encode_data

    def decode(self, data: bytes) -> None:
        self.decoded.append(data)
        if self.decode_error is not None:
            raise self.decode_error


@pytest.fixture
def home_dir(tmp_path):
    """Stand-in home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def default_values():
    return RecordingSerializer(encode_data=b"config data")


@pytest.fixture
def manager(home_dir, default_values):
    """Manager for app ``testapp`` whose home is ``home_dir``."""
    return ConfigManager(
        Defaults(app_name="testapp", default_values=default_values),
        home_provider=lambda: home_dir,
    )


@pytest.fixture
def default_file(home_dir):
    return home_dir / ".config" / "testapp" / "default.conf"


@pytest.fixture
def make_serializer():
    """Factory for RecordingSerializer instances."""
    return RecordingSerializer
