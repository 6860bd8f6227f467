"""
Background mpv instance supervision.

A single mpv process is shared by every invocation. Its PID lives in the
handle file; the PID is only trusted when the process table still shows a
process with that PID whose name contains "mpv".
"""

import os
import shutil
import signal
import subprocess
from pathlib import Path
from typing import Optional

from loguru import logger

from mpv_mp.core.exceptions import InstanceKillError, LaunchError, LivenessProbeError
from mpv_mp.core.state import StateDir

MPV_EXECUTABLE = "mpv"
MPV_PROCESS_NAME = "mpv"
PROC_ROOT = Path("/proc")


def mpv_command(ipc_path: Path, executable: str = MPV_EXECUTABLE) -> list[str]:
    """Build the fixed mpv command line for a background instance."""
    return [
        executable,
        "--no-video",
        "--no-terminal",
        "--idle",
        "--loop-playlist",
        f"--input-ipc-server={ipc_path}",
    ]


def is_running(
    pid_path: Path,
    proc_root: Path = PROC_ROOT,
    expected_name: str = MPV_PROCESS_NAME,
) -> bool:
    """Check if the background mpv instance named by the handle file is alive.

    Args:
        pid_path: Handle file holding the instance PID
        proc_root: Root of the process table (``/proc``)
        expected_name: Substring the process name must contain

    Returns:
        False if there is no handle file, the PID is gone, or the PID now
        belongs to some other program

    Raises:
        LivenessProbeError: On any unexpected error reading either file
    """
    try:
        pid_text = pid_path.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        logger.debug(f"No handle file at {pid_path}")
        return False
    except OSError as e:
        raise LivenessProbeError(f"couldn't read file {str(pid_path)!r}: {e}") from e

    if not pid_text.isdigit():
        logger.info(f"Ignoring malformed handle file {pid_path}: {pid_text!r}")
        return False

    comm_path = proc_root / pid_text / "comm"
    try:
        proc_name = comm_path.read_text(encoding="utf-8", errors="replace")
    except (FileNotFoundError, ProcessLookupError):
        logger.info(f"Stale handle: no process {pid_text}")
        return False
    except OSError as e:
        raise LivenessProbeError(f"couldn't read file {str(comm_path)!r}: {e}") from e

    if expected_name not in proc_name:
        logger.info(
            f"Stale handle: process {pid_text} is {proc_name.strip()!r}, not {expected_name}"
        )
        return False

    return True


def start(pid_path: Path, ipc_path: Path, executable: str = MPV_EXECUTABLE) -> int:
    """Start a new background mpv instance and record its PID.

    Does not wait for the IPC socket; the connector polls for it.

    Returns:
        PID of the new instance

    Raises:
        LaunchError: If mpv can't be spawned or the handle can't be written
    """
    cmd = mpv_command(ipc_path, executable)
    logger.info(f"Starting mpv: {' '.join(cmd)}")

    try:
        process = subprocess.Popen(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
            start_new_session=True,  # outlive this invocation and its Ctrl-C
        )
    except (subprocess.SubprocessError, OSError) as e:
        raise LaunchError(f"couldn't start {executable}: {e}") from e

    try:
        pid_path.write_text(str(process.pid), encoding="utf-8")
    except OSError as e:
        raise LaunchError(f"couldn't write file {str(pid_path)!r}: {e}") from e

    logger.info(f"mpv started with pid {process.pid}")
    return process.pid


def ensure_running(state: StateDir) -> bool:
    """Start a background instance unless a live one is recorded.

    Returns:
        True if a new instance was launched
    """
    if is_running(state.pid_path):
        logger.debug(f"Reusing running mpv instance from {state.pid_path}")
        return False

    start(state.pid_path, state.ipc_path)
    return True


def read_pid(pid_path: Path) -> int:
    """Read the PID from the handle file.

    Only a plain positive decimal is accepted; ``0`` and negative values
    would make ``os.kill`` signal whole process groups.

    Raises:
        InstanceKillError: If the file is missing, unreadable or malformed
    """
    try:
        pid_text = pid_path.read_text(encoding="utf-8").strip()
    except OSError as e:
        raise InstanceKillError(f"couldn't read file {str(pid_path)!r}: {e}") from e

    if not (pid_text.isascii() and pid_text.isdigit()) or int(pid_text) <= 0:
        raise InstanceKillError(f"invalid pid {pid_text!r} in {str(pid_path)!r}")

    return int(pid_text)


def remove_state_dir(state: StateDir) -> None:
    """Remove the whole state directory, handle file and IPC socket included."""
    try:
        shutil.rmtree(state.root)
    except FileNotFoundError:
        pass
    except OSError as e:
        raise InstanceKillError(f"couldn't remove {str(state.root)!r}: {e}") from e

    logger.info(f"Removed state directory {state.root}")


def kill(state: StateDir, proc_root: Path = PROC_ROOT) -> Optional[int]:
    """Kill the background instance and remove the whole state directory.

    There is no graceful shutdown; mpv gets SIGKILL. A handle naming a PID
    that is gone or no longer mpv is only cleaned up, never signalled.

    Returns:
        The PID that was signalled, or None for a stale handle

    Raises:
        InstanceKillError: If the handle is missing or malformed, or the
            signal can't be sent, or cleanup fails
    """
    pid = read_pid(state.pid_path)

    if not is_running(state.pid_path, proc_root):
        logger.warning(f"Handle names pid {pid} which is not mpv, not signalling it")
        remove_state_dir(state)
        return None

    try:
        os.kill(pid, signal.SIGKILL)
    except OSError as e:
        raise InstanceKillError(f"couldn't kill pid {pid}: {e}") from e
    logger.info(f"Sent SIGKILL to mpv pid {pid}")

    remove_state_dir(state)
    return pid
