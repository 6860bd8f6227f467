"""Shared fixtures for mpv-mp tests."""

from typing import Any, Optional

import pytest
from loguru import logger

from mpv_mp.core.state import StateDir
from mpv_mp.ipc.protocol import PropertyValue


class FakeChannel:
    """Stands in for an IPC Channel, recording every command line sent."""

    def __init__(self, properties: Optional[dict[str, Any]] = None, raw: bytes = b""):
        self.properties = properties or {}
        self.raw = raw
        self.sent: list[str] = []
        self.queried: list[str] = []

    def send_command(self, text: str) -> None:
        self.sent.append(text)

    def receive_raw(self) -> bytes:
        return self.raw

    def get_property(self, name: str) -> PropertyValue:
        self.queried.append(name)
        return PropertyValue.from_data(name, self.properties[name])


def playlist_data(names: list[str], current: Optional[int] = None) -> list[dict]:
    """Build a ``playlist`` property value as mpv reports it."""
    entries = []
    for index, name in enumerate(names):
        entry = {"filename": name, "id": index + 1}
        if index == current:
            entry["current"] = True
            entry["playing"] = True
        entries.append(entry)
    return entries


@pytest.fixture
def fake_channel():
    """Factory for FakeChannel instances."""
    return FakeChannel


@pytest.fixture
def make_playlist():
    """Factory for ``playlist`` property values."""
    return playlist_data


@pytest.fixture
def state_dir(tmp_path):
    """A state directory under tmp_path instead of /tmp/mpv-mp."""
    return StateDir(tmp_path / "mpv-mp").ensure()


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep config lookups and log files inside tmp_path."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    yield
    # Release any file sinks a test configured
    logger.remove()
