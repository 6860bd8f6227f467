"""Playback domain - background mpv supervision and playlist handling.

This domain handles:
- Detecting, starting and killing the shared background mpv instance
- Decoding and formatting the mpv playlist
"""

# Instance supervision
from .locator import (
    mpv_command,
    is_running,
    start,
    ensure_running,
    read_pid,
    kill,
)

# Playlist
from .playlist import (
    PlaylistEntry,
    decode_playlist,
    format_listing,
    format_raw,
    parse_index,
)

__all__ = [
    # Locator
    "mpv_command",
    "is_running",
    "start",
    "ensure_running",
    "read_pid",
    "kill",
    # Playlist
    "PlaylistEntry",
    "decode_playlist",
    "format_listing",
    "format_raw",
    "parse_index",
]
