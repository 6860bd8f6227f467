"""Centralized Rich Console management.

Diagnostics go to stderr so that listings on stdout stay pipe-clean.
"""

from rich.console import Console

_console: Console | None = None


def get_console(use_colors: bool = True) -> Console:
    """Get or create the global stderr Rich Console instance.

    Args:
        use_colors: Disable to strip all styling (only honoured on first call)

    Returns:
        Console: The global Rich Console instance
    """
    global _console
    if _console is None:
        _console = Console(stderr=True, no_color=not use_colors, highlight=False)
    return _console


def print_error(message: str, prog: str = "mpv-mp") -> None:
    """Print a one-line fatal diagnostic prefixed with the program name.

    Args:
        message: The message to print, printed verbatim (no Rich markup)
        prog: Program name used as prefix
    """
    console = get_console()
    console.print(f"{prog}: {message}", style="bold red", markup=False, soft_wrap=True)


def print_usage(text: str) -> None:
    """Print usage text to stderr without styling."""
    get_console().print(text, markup=False, soft_wrap=True)
