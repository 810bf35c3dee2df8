"""
Colored diagnostics for the `zp` command-line program.

Warnings and errors go to stderr, highlighted where the terminal supports it::

    from zp.cli.console import console

    console.print_error("Path does not exist: `a.zip`")

The rendered ZIP metadata itself is written with plain `print()` calls, so that it can be piped elsewhere undecorated.
"""

import sys

from termcolor import cprint


class Console:
    """
    Don't create your own instances of this; use the `console` singleton.
    """

    def print_warning(self, message: str) -> 'Console':
        return self.print_message('warning', message)

    def print_error(self, message: str, minor: bool = False) -> 'Console':
        """
        Print an error message in red. Minor messages (e.g. traceback lines) are not bolded.
        """
        return self.print_message('error', message, minor=minor)

    def print_message(self, kind: str, message: str, minor: bool = False) -> 'Console':
        color = _COLOR_BY_MSG_TYPE[kind]
        attrs = [] if minor else ['bold']

        cprint(message, color, attrs=attrs, file=sys.stderr)

        return self


_COLOR_BY_MSG_TYPE = {
    'warning': 'yellow',
    'error': 'red',
}


# Singleton
console = Console()
"""The currently active console abstraction."""
