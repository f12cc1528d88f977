import logging

from flask import Flask, current_app

from .config import get_config
from .log import init_logging
from .routes.core import bp as core_bp
from .routes.errors import register_error_handlers

logger = logging.getLogger(__name__)


def site_metadata() -> dict:
    """Expose the static document metadata to every template."""
    cfg = current_app.config
    return {
        'site': {
            'title': cfg['SITE_TITLE'],
            'description': cfg['SITE_DESCRIPTION'],
            'lang': cfg['SITE_LANG'],
        },
        'health_check_path': cfg['HEALTH_CHECK_PATH'],
    }


def create_app(config_name: str | None = None) -> Flask:
    config = get_config(config_name)
    app = Flask(__name__, template_folder="templates")
    app.config.from_object(config)

    init_logging(app)

    app.context_processor(site_metadata)
    app.register_blueprint(core_bp)
    register_error_handlers(app)

    logger.info("Application created with %s", config.__name__)
    return app
