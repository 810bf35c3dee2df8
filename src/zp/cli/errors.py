"""
Error reporting for the `zp` command-line program.

Problems the user can act on (a missing file, a broken archive, no arguments) surface as a `DescriptiveError` and are
reported as a single line on stderr. Any other exception that reaches `main` is a bug and is reported with its
traceback.
"""

import sys
import traceback

from typing import NoReturn, ContextManager, Optional, Callable
from textwrap import dedent, indent
from functools import wraps
from contextlib import contextmanager

from zp.cli.console import console


class DescriptiveError(RuntimeError):
    """
    An error whose message says everything the user needs to know. It is shown without the type or traceback.
    """


def fail(message: str) -> NoReturn:
    raise DescriptiveError(dedent(message).strip())


@contextmanager
def descriptive_errors(*classes: type, context: Optional[str] = None) -> ContextManager[None]:
    """
    Use ``with descriptive_errors(Exc1, Exc2, ...): <code>`` to report exceptions of the given kinds as descriptive
    errors carrying the same message.

    If `context` is given (e.g. the name of the file being processed), it is prepended to the message.
    """
    try:
        yield
    except classes as e:
        message = str(e) or e.__class__.__name__
        raise DescriptiveError(message if context is None else f"{context}: {message}") from e


def print_exception(exception: BaseException):
    if isinstance(exception, KeyboardInterrupt):
        console.print_warning("Stopped by user")
        return
    if isinstance(exception, DescriptiveError):
        console.print_error(str(exception))
        return

    head = ''.join(traceback.format_exception_only(exception.__class__, exception)).rstrip()
    trace = dedent(''.join(traceback.format_tb(exception.__traceback__))).rstrip()

    console.print_error(head)
    console.print_error("Traceback:", minor=True)
    console.print_error(indent(trace, '  '), minor=True)


def pretty_unhandled(exit_code: int = 1) -> Callable:
    """
    Decorator for a main method that reports unhandled exceptions via `print_exception` and then calls
    ``sys.exit(exit_code)``. A `KeyboardInterrupt` exits with status 0 instead.
    """

    def real_decorator(main_method):
        @wraps(main_method)
        def wrapper(*args, **kwargs):
            try:
                return main_method(*args, **kwargs)
            except SystemExit:
                raise
            except KeyboardInterrupt as e:
                print_exception(e)
                sys.exit(0)
            except BaseException as e:
                print_exception(e)

            sys.exit(exit_code)

        return wrapper

    return real_decorator
