import logging
import os
from logging.handlers import RotatingFileHandler

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .cli import register_cli
from .config import Config
from .extensions import csrf, db
from .routes import api_bp, web_bp


def create_app(config_object: type[Config] | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_object or Config)

    configure_logging(app)

    db.init_app(app)
    csrf.init_app(app)

    with app.app_context():
        db.create_all()

    # Blueprints
    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(web_bp)

    register_error_handlers(app)

    # CLI
    register_cli(app)

    return app


def configure_logging(app: Flask) -> None:
    # app.logger is the "catalog" logger, so module loggers propagate into it
    log_level = getattr(logging, app.config.get("LOG_LEVEL", "INFO"), logging.INFO)
    app.logger.setLevel(log_level)

    log_file = app.config.get("LOG_FILE")
    if log_file:
        log_path = os.path.abspath(log_file)
        file_handlers = [h for h in app.logger.handlers if isinstance(h, RotatingFileHandler)]
        for stale in file_handlers:
            # the logger is shared by every app in the process
            if stale.baseFilename != log_path:
                app.logger.removeHandler(stale)
                stale.close()
        handler = next((h for h in file_handlers if h.baseFilename == log_path), None)
        if handler is None:
            handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=5)
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
            app.logger.addHandler(handler)
        handler.setLevel(log_level)

    # Reduce noisy loggers
    logging.getLogger("faker").setLevel(logging.WARNING)


def _wants_json() -> bool:
    return request.path.startswith("/api/")


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        if not _wants_json():
            return e
        return jsonify({"message": e.description or e.name}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        db.session.rollback()
        if _wants_json():
            return jsonify({"message": "Server Error"}), 500
        return "Server Error", 500
