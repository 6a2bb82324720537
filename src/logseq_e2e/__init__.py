"""logseq-e2e - Playwright helpers for driving the Logseq web app.

Reusable page, block and graph interactions shared across
end-to-end test suites.
"""

import logging

from rich.logging import RichHandler

__version__ = "0.1.0"


def _setup_logging(level: int = logging.INFO) -> None:
    """Send ``logseq_e2e`` log records to the console via Rich.

    Safe to call repeatedly; the handler is only attached once.
    """
    package_logger = logging.getLogger(__name__)
    package_logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(show_path=False))
