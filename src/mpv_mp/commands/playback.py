"""
Playback command handlers for mpv-mp.

Handles: play, pause, next, prev, loop, kill, custom
"""

from typing import List, Optional, TextIO

from loguru import logger

from mpv_mp.commands.playlist import (
    AddMode,
    handle_add_command,
    handle_playlist_command,
)
from mpv_mp.core.exceptions import UsageError
from mpv_mp.core.state import StateDir
from mpv_mp.domain import playback
from mpv_mp.ipc.protocol import Channel


def handle_play_command(
    channel: Channel, args: List[str], out: Optional[TextIO] = None
) -> None:
    """Play the playlist from the start, or replace it with args, then unpause."""
    if not args:
        handle_playlist_command(channel, ["0"], out)
    else:
        handle_add_command(channel, args, AddMode.REPLACE)

    if channel.get_property("pause").as_bool():
        logger.debug("mpv is paused, resuming")
        handle_pause_command(channel)


def handle_pause_command(channel: Channel) -> None:
    """Toggle pause."""
    channel.send_command("cycle pause")


def handle_next_command(channel: Channel) -> None:
    channel.send_command("playlist-next")


def handle_prev_command(channel: Channel) -> None:
    channel.send_command("playlist-prev")


def handle_loop_command(channel: Channel) -> None:
    """Toggle looping of the current track."""
    channel.send_command('cycle-values loop-file "inf" "no"')


def handle_kill_command(state: StateDir) -> None:
    """Kill the background mpv instance and clean up its state directory."""
    playback.kill(state)


def handle_custom_command(
    channel: Channel, args: List[str], out: Optional[TextIO] = None
) -> None:
    """Send an arbitrary mpv command and print whatever mpv answers.

    Unquoted words are joined with spaces, so `- cycle pause` and
    `- "cycle pause"` send the same command.
    """
    if not args:
        raise UsageError("-: CUSTOM_COMMAND is required")

    channel.send_command(" ".join(args))
    print(channel.receive_raw().decode("utf-8", errors="replace"), file=out)
