"""Logging setup for a conversion run.

Modules log through ``logging.getLogger(__name__)``. The CLI installs a console
handler plus a ``SeverityTracker`` that remembers whether anything at WARNING
or above was logged, so the run can report it at exit.
"""

import logging
import sys

UNSUPPORTED = 25
logging.addLevelName(UNSUPPORTED, "UNSUPPORTED")

PACKAGE_LOGGER = "dox2docx"


def log_unsupported(logger: logging.Logger, msg: str, *args: object) -> None:
    """Log markup that was degraded rather than rendered faithfully."""
    logger.log(UNSUPPORTED, msg, *args)


class SeverityTracker(logging.Handler):
    """Records sticky flags for warnings and errors seen during a run."""

    def __init__(self) -> None:
        super().__init__(level=logging.WARNING)
        self.has_warnings = False
        self.has_errors = False

    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno >= logging.ERROR:
            self.has_errors = True
        elif record.levelno >= logging.WARNING:
            self.has_warnings = True


def configure_logging(*, verbose: bool = False) -> SeverityTracker:
    """Attach console output and a fresh severity tracker to the package logger."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(console)

    tracker = SeverityTracker()
    logger.addHandler(tracker)
    return tracker
