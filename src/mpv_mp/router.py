"""
Command routing for mpv-mp.

Routes user commands to appropriate handler functions.
"""

from typing import List, Optional, TextIO

from mpv_mp.commands import playback
from mpv_mp.commands import playlist
from mpv_mp.core.exceptions import UsageError
from mpv_mp.ipc.protocol import Channel


def handle_command(
    channel: Channel, command: str, args: List[str], out: Optional[TextIO] = None
) -> None:
    """
    Run a single command that talks to mpv over an open channel.

    ``kill`` is not routed here: it never connects.

    Args:
        channel: Open IPC channel
        command: Command name
        args: Command arguments
        out: Where command output is printed
    """
    if command == 'play':
        playback.handle_play_command(channel, args, out)

    elif command == 'add':
        playlist.handle_add_command(channel, args)

    elif command == 'playlist':
        playlist.handle_playlist_command(channel, args, out)

    elif command == 'pause':
        playback.handle_pause_command(channel)

    elif command == 'next':
        playback.handle_next_command(channel)

    elif command == 'prev':
        playback.handle_prev_command(channel)

    elif command == 'loop':
        playback.handle_loop_command(channel)

    elif command == '-':
        playback.handle_custom_command(channel, args, out)

    else:
        raise UsageError(f"unknown command {command!r}")
