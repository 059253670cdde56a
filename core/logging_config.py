"""Logging setup for the API process."""

from __future__ import annotations

import logging

_configured = False

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger.

    Safe to call more than once (uvicorn reloads, test imports); only the
    level is updated after the first call.
    """
    global _configured

    root = logging.getLogger()
    root.setLevel(level)
    if _configured:
        return
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # APScheduler logs every job submission at INFO
    logging.getLogger("apscheduler").setLevel(logging.WARNING)
    _configured = True
