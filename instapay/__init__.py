from flask import Flask, jsonify

from instapay.config import config
from instapay.extensions import redis_client
from instapay.services.callback_service import CallbackConfig, CallbackDispatcher
from instapay.utils.logger import configure_app_logging


def create_app(config_name='development', inward_handler=None,
               service_request_handler=None, service_response_handler=None):
    """Application factory pattern"""
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])

    configure_app_logging(app)

    # Initialize extensions
    redis_client.init_app(app)

    app.extensions['instapay'] = CallbackDispatcher(CallbackConfig(
        secret_key=app.config['CALLBACK_SECRET_KEY'],
        token_ttl=app.config['CALLBACK_TOKEN_TTL'],
        inward_handler=inward_handler,
        service_request_handler=service_request_handler,
        service_response_handler=service_response_handler,
    ))

    # Register blueprints
    from instapay.api import callbacks_bp
    app.register_blueprint(callbacks_bp)

    # Error handlers
    register_error_handlers(app)

    return app


def register_error_handlers(app):
    """Register error handlers"""
    from instapay.errors import AppError

    @app.errorhandler(AppError)
    def app_error(error):
        return jsonify({
            'code': str(error.status_code),
            'status': error.error,
            'message': error.message,
        }), error.status_code

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'code': '404', 'status': 'Not Found', 'message': str(error)}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({
            'code': '405',
            'status': 'Method Not Allowed',
            'message': 'Only POST method is allowed',
        }), 405
