import logging
import sys

_THIRD_PARTY_LOGGERS = ("httpx", "httpcore")
_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"


def _level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Send log records to stderr so stdout carries only the standings.

    ``verbose`` wins over ``quiet``; HTTP library chatter is only shown when
    verbose.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(_level(verbose, quiet))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)

    for name in _THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if verbose else logging.WARNING)
