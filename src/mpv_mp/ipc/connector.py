"""Connect to the mpv IPC socket.

A freshly started mpv creates its socket asynchronously, so the socket path
is polled for a short, fixed grace period before connecting.
"""

import os
import socket
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from loguru import logger

from mpv_mp.core.exceptions import ConnectError

from .protocol import Channel

CONNECT_ATTEMPTS = 10
CONNECT_INTERVAL = 0.1  # seconds


def wait_for_socket(
    ipc_path: Path,
    attempts: int = CONNECT_ATTEMPTS,
    interval: float = CONNECT_INTERVAL,
) -> None:
    """Wait until the socket path exists.

    Raises:
        ConnectError: If the path doesn't appear in time, or stat fails for
            any reason other than the path not existing yet
    """
    for attempt in range(1, attempts + 1):
        try:
            os.stat(ipc_path)
            return
        except FileNotFoundError:
            logger.debug(f"IPC socket not there yet (attempt {attempt}/{attempts})")
            time.sleep(interval)
        except OSError as e:
            raise ConnectError(f"couldn't stat file {str(ipc_path)!r}: {e}") from e

    raise ConnectError(
        f"couldn't get mpv ipc {str(ipc_path)!r}: not created after {attempts * interval:.1f}s"
    )


def connect(
    ipc_path: Path,
    attempts: int = CONNECT_ATTEMPTS,
    interval: float = CONNECT_INTERVAL,
) -> socket.socket:
    """Open a stream connection to the mpv IPC socket.

    Raises:
        ConnectError: If the socket never appears or the connection fails
    """
    wait_for_socket(ipc_path, attempts, interval)

    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        sock.connect(str(ipc_path))
    except OSError as e:
        sock.close()
        raise ConnectError(f"couldn't connect to mpv ipc {str(ipc_path)!r}: {e}") from e

    logger.debug(f"Connected to {ipc_path}")
    return sock


@contextmanager
def open_channel(
    ipc_path: Path,
    attempts: int = CONNECT_ATTEMPTS,
    interval: float = CONNECT_INTERVAL,
) -> Iterator[Channel]:
    """Connect and yield a Channel, closing it on exit."""
    channel = Channel(connect(ipc_path, attempts, interval))
    try:
        yield channel
    finally:
        channel.close()
