# File: ecsweb/routes/core.py
"""
Core routes.

Defines the landing page. The health check linked from it is served
outside this application.
"""

from flask import Blueprint, render_template

bp = Blueprint('core', __name__)


@bp.get('/')
def index():
    """Render the landing page inside the root layout."""
    return render_template('index.html')
