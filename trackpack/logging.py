"""
trackpack.logging - Logger shared by the extraction pipeline.

Messages for the user go through the Rich console in the CLI; this logger
carries the debug trail (scan counts, FFmpeg command lines, archive
entries) shown with --verbose, and warnings such as duplicate labels.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("trackpack")


def configure_logging(verbose: bool = False) -> None:
    """Send trackpack log records to stderr.

    Args:
        verbose: Show DEBUG records when True; only warnings otherwise
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    logger.setLevel(level)
