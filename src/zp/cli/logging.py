import logging


def init_console_friendly_logging(level: int = logging.INFO):
    """
    Initializes logging appropriate for debugging in the console. Specifically:

    - Messages go to stderr, so as not to mix with the program output
    - A timestamp is attached to each message
    - The level is attached to each message as a string (INFO, ERROR etc)
    """
    logging.basicConfig(
        level=level,
        style='{',
        format='[{asctime}] {levelname}: {message}',
        datefmt='%Y-%m-%d %H:%M:%S'  # We omit the milliseconds by default
    )
