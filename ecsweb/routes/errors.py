# File: ecsweb/routes/errors.py
"""
HTTP error pages.

Unknown paths render a not-found page through the root layout.
"""

import logging

from flask import Flask, render_template, request
from werkzeug.exceptions import NotFound

logger = logging.getLogger(__name__)


def not_found(error: NotFound):
    logger.info("Not found: %s", request.path)
    return render_template('404.html'), 404


def register_error_handlers(app: Flask) -> None:
    app.register_error_handler(NotFound, not_found)
