"""Exceptions raised by mpv-mp.

Every fatal condition is an MpvMpError; the CLI turns it into a diagnostic
line on stderr and exit code 1.
"""


class MpvMpError(Exception):
    """Base exception for mpv-mp operations."""

    exit_code = 1


class UsageError(MpvMpError):
    """Raised when a command is missing arguments or gets invalid ones."""

    pass


class LivenessProbeError(MpvMpError):
    """Raised when the handle file or the process table can't be inspected."""

    pass


class LaunchError(MpvMpError):
    """Raised when the background mpv instance fails to start."""

    pass


class ConnectError(MpvMpError):
    """Raised when the IPC socket never appears or refuses the connection."""

    pass


class InstanceKillError(MpvMpError):
    """Raised when the background instance can't be killed or cleaned up."""

    pass


class ProtocolError(MpvMpError):
    """Raised on partial writes and undecodable replies."""

    pass


class PropertyTypeError(ProtocolError):
    """Raised when a property value is not of the expected kind."""

    def __init__(self, name: str, expected: str, actual: str):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"property {name!r}: expected {expected}, got {actual}"
        )


class PlaylistRangeError(ProtocolError):
    """Raised when a playlist index is outside the current playlist."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"incorrect playlist position {index}")
