import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import Config
from server.eazepark.errors import ServiceError
from server.eazepark.extensions import (
    bcrypt,
    check_database,
    cors,
    db,
    init_database,
    init_geocoder,
)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level):
    logging.basicConfig(level=level, format=LOG_FORMAT)


def register_error_handlers(app):
    @app.errorhandler(ServiceError)
    def handle_service_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        app.logger.exception("Unhandled error: %s", error)
        return jsonify({"error": "Internal server error"}), 500


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Initialize extensions
    init_database(app)
    bcrypt.init_app(app)
    cors.init_app(app, origins=app.config["CORS_ORIGINS"], supports_credentials=True)
    init_geocoder(app)

    # Register blueprints
    from server.eazepark.blueprints.auth import auth_bp
    from server.eazepark.blueprints.api import api_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(api_bp)

    register_error_handlers(app)

    # Import models BEFORE create_all()
    if check_database(app):
        with app.app_context():
            from server.eazepark.models import User, ParkingBooking

            db.create_all()

    return app
