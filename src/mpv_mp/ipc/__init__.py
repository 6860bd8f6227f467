"""IPC (Inter-Process Communication) with the background mpv instance.

Connects to mpv's JSON IPC socket and speaks its command protocol.
"""

from .connector import connect, open_channel, wait_for_socket
from .protocol import (
    Channel,
    PropertyKind,
    PropertyValue,
    find_reply,
    format_loadfile,
    format_loadlist,
    iter_messages,
)

__all__ = [
    "connect",
    "open_channel",
    "wait_for_socket",
    "Channel",
    "PropertyKind",
    "PropertyValue",
    "find_reply",
    "format_loadfile",
    "format_loadlist",
    "iter_messages",
]
