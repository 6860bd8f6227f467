"""Decoding and formatting of mpv's ``playlist`` property."""

from pathlib import PurePosixPath
from typing import NamedTuple

from mpv_mp.core.exceptions import PlaylistRangeError, PropertyTypeError, UsageError
from mpv_mp.ipc.protocol import PropertyValue


class PlaylistEntry(NamedTuple):
    """One playlist entry as reported by mpv."""

    filename: str
    current: bool = False

    @property
    def display_name(self) -> str:
        # URLs and paths alike: last path component
        return PurePosixPath(self.filename).name or self.filename


def decode_playlist(value: PropertyValue) -> list[PlaylistEntry]:
    """Turn the ``playlist`` property into entries, in playback order.

    Raises:
        PropertyTypeError: If the value isn't a list of entry objects
    """
    entries = []
    for index, item in enumerate(value.as_list()):
        if not isinstance(item, dict) or not isinstance(item.get("filename"), str):
            raise PropertyTypeError(
                f"{value.name}[{index}]",
                "an object with a filename",
                type(item).__name__,
            )
        entries.append(PlaylistEntry(item["filename"], item.get("current") is True))
    return entries


def format_listing(entries: list[PlaylistEntry]) -> list[str]:
    """Format entries as numbered lines, the current one marked with '>'."""
    width = len(str(len(entries))) + 2
    lines = []
    for index, entry in enumerate(entries):
        line = f"{index:>{width}d}\t{entry.display_name}"
        if entry.current:
            line = ">" + line[1:]
        lines.append(line)
    return lines


def format_raw(entries: list[PlaylistEntry]) -> list[str]:
    """Format entries as bare filenames, for piping."""
    return [entry.filename for entry in entries]


def parse_index(arg: str, length: int) -> int:
    """Parse a playlist position and check it is within the playlist.

    Raises:
        UsageError: If arg isn't an integer
        PlaylistRangeError: If the index is outside [0, length)
    """
    try:
        index = int(arg)
    except ValueError as e:
        raise UsageError(f"invalid playlist index {arg!r}") from e

    if index < 0 or index >= length:
        raise PlaylistRangeError(index, length)
    return index
