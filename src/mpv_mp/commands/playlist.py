"""
Playlist command handlers for mpv-mp.

Handles: add, playlist
"""

from enum import Enum
from typing import List, Optional, TextIO

from mpv_mp.core.exceptions import UsageError
from mpv_mp.domain.playback import playlist as playlist_domain
from mpv_mp.ipc.protocol import Channel, format_loadfile, format_loadlist


class AddMode(str, Enum):
    """How loaded files combine with the current playlist."""

    APPEND = "append"
    REPLACE = "replace"


def has_extension(path: str) -> bool:
    """Check if the last path component has an extension suffix.

    Anything with a suffix is loaded as a track; anything without one as a
    directory or playlist.
    """
    return "." in path.rsplit("/", 1)[-1]


def handle_add_command(
    channel: Channel, args: List[str], mode: AddMode = AddMode.APPEND
) -> None:
    """Load each argument into mpv, in order."""
    if not args:
        raise UsageError("add: at least one FILE is required")

    for path in args:
        if has_extension(path):
            channel.send_command(format_loadfile(path, mode.value))
        else:
            channel.send_command(format_loadlist(path, mode.value))


def handle_playlist_command(
    channel: Channel, args: List[str], out: Optional[TextIO] = None
) -> None:
    """Show the playlist, show it raw, or jump to an index.

    Args:
        channel: Open IPC channel
        args: [] for the numbered listing, ["raw"] for bare filenames,
            or [INDEX] to change the playlist position
        out: Where listings are printed
    """
    entries = playlist_domain.decode_playlist(channel.get_property("playlist"))

    if not args:
        for line in playlist_domain.format_listing(entries):
            print(line, file=out)
    elif args[0] == "raw":
        for line in playlist_domain.format_raw(entries):
            print(line, file=out)
    else:
        index = playlist_domain.parse_index(args[0], len(entries))
        channel.send_command(f"playlist-play-index {index}")
