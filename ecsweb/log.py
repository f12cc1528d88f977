# File: ecsweb/log.py
"""
Logging setup.

Configures a single stream handler on the root logger so that Flask,
Werkzeug and application loggers share one format.
"""

import logging

from flask import Flask

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = 'ecsweb'  # Marks the handler installed by init_logging


def init_logging(app: Flask) -> None:
    """Attach the console handler and apply `LOG_LEVEL` from app config.

    Safe to call once per app; repeated calls reuse the existing handler.
    """
    level = app.config.get('LOG_LEVEL', 'INFO')
    root = logging.getLogger()
    root.setLevel(level)

    handler = next((h for h in root.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(handler)
    handler.setLevel(level)
