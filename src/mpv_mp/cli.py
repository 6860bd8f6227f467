"""
mpv-mp CLI - Entry point

Keeps one background mpv instance alive and drives it over its IPC socket.
Each invocation runs exactly one command and exits.
"""

import argparse
import sys
from typing import List, Optional

from loguru import logger

from mpv_mp import router
from mpv_mp.commands import playback
from mpv_mp.core import config
from mpv_mp.core.console import get_console, print_error, print_usage
from mpv_mp.core.exceptions import MpvMpError, UsageError
from mpv_mp.core.output import setup_loguru
from mpv_mp.core.state import StateDir
from mpv_mp.domain.playback import ensure_running
from mpv_mp.ipc import open_channel

PROG = "mpv-mp"

COMMANDS_HELP = """\
commands:
  play [FILE...]        play the current playlist from the beginning or replace it with FILE; FILE could be track or playlist
  add FILE...           add FILE to the current playlist; FILE could be track or playlist
  playlist [raw|INDEX]  show current playlist; if raw is specified, show it in raw format; if INDEX is specified, change position to INDEX
  pause                 toggle pause
  next                  go to the next track in the current playlist
  prev                  go to the prev track in the current playlist
  loop                  toggle loop for the current track
  kill                  clean up and kill running mpv-mp instance
  - CUSTOM_COMMAND      send custom command to mpv"""


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that raises UsageError instead of exiting with 2."""

    def error(self, message: str) -> None:
        raise UsageError(message)


def build_parser() -> ArgumentParser:
    """Build the argument parser with one subparser per command."""
    parser = ArgumentParser(
        prog=PROG,
        description="Control a background mpv instance",
        epilog=COMMANDS_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Mirror debug logs to stderr'
    )

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    subparsers.required = True

    play_parser = subparsers.add_parser('play', help='Play playlist or FILEs')
    play_parser.add_argument('files', nargs='*', metavar='FILE')

    add_parser = subparsers.add_parser('add', help='Append FILEs to the playlist')
    add_parser.add_argument('files', nargs='*', metavar='FILE')

    playlist_parser = subparsers.add_parser('playlist', help='Show or seek playlist')
    playlist_parser.add_argument('target', nargs='?', metavar='raw|INDEX')

    subparsers.add_parser('pause', help='Toggle pause')
    subparsers.add_parser('next', help='Next track')
    subparsers.add_parser('prev', help='Previous track')
    subparsers.add_parser('loop', help='Toggle loop for the current track')
    subparsers.add_parser('kill', help='Kill the background mpv instance')

    custom_parser = subparsers.add_parser('-', help='Send a custom mpv command')
    custom_parser.add_argument('custom', nargs=argparse.REMAINDER, metavar='CUSTOM_COMMAND')

    return parser


def command_args(args: argparse.Namespace) -> List[str]:
    """Flatten the parsed subcommand arguments into a plain list."""
    if args.command in ('play', 'add'):
        return args.files
    if args.command == 'playlist':
        return [args.target] if args.target is not None else []
    if args.command == '-':
        return args.custom
    return []


def run(args: argparse.Namespace, state: StateDir) -> None:
    """Run one parsed command against the background instance."""
    state.ensure()

    if args.command == 'kill':
        # Never start an instance only to kill it
        playback.handle_kill_command(state)
        return

    ensure_running(state)

    with open_channel(state.ipc_path) as channel:
        router.handle_command(channel, args.command, command_args(args))


def main(argv: Optional[List[str]] = None, state: Optional[StateDir] = None) -> int:
    """Main entry point for the mpv-mp command.

    Returns:
        Exit code (0 for success, 1 for any fatal error)
    """
    cfg = config.load_config()
    get_console(use_colors=cfg.ui.use_colors)
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print_error(str(e), PROG)
        print_usage(parser.format_usage() + COMMANDS_HELP)
        return e.exit_code

    setup_loguru(cfg.logging, verbose=args.verbose)
    logger.debug(f"Running {args.command!r} with {command_args(args)!r}")

    try:
        run(args, state or StateDir())
    except UsageError as e:
        logger.warning(f"Usage error: {e}")
        print_error(str(e), PROG)
        print_usage(parser.format_usage() + COMMANDS_HELP)
        return e.exit_code
    except MpvMpError as e:
        logger.error(f"{args.command} failed: {e}")
        print_error(str(e), PROG)
        return e.exit_code

    return 0


def entry() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    entry()
