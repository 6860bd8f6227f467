"""On-disk coordination record shared by every mpv-mp invocation.

The state directory holds exactly two entries: the process handle file with
the background instance's PID, and the IPC socket mpv creates. There is no
locking; concurrent invocations race on it.
"""

from dataclasses import dataclass
from pathlib import Path

from .exceptions import MpvMpError

STATE_DIR = Path("/tmp/mpv-mp")
PID_FILE_NAME = "pid"
IPC_SOCKET_NAME = "ipc"


@dataclass(frozen=True)
class StateDir:
    """Location of the handle file and the IPC socket."""

    root: Path = STATE_DIR

    @property
    def pid_path(self) -> Path:
        return self.root / PID_FILE_NAME

    @property
    def ipc_path(self) -> Path:
        return self.root / IPC_SOCKET_NAME

    def ensure(self) -> "StateDir":
        """Create the directory if needed and return self.

        Raises:
            MpvMpError: If the directory can't be created
        """
        try:
            self.root.mkdir(mode=0o755, parents=True, exist_ok=True)
        except OSError as e:
            raise MpvMpError(f"couldn't create dir {str(self.root)!r}: {e}") from e
        return self
