from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from dotenv import load_dotenv
import logging

load_dotenv()

logger = logging.getLogger(__name__)


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object('config')
    if test_config:
        app.config.from_mapping(test_config)

    # Configure logging
    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Keep todo records in the key order they were stored with
    app.json.sort_keys = False

    # Register blueprints
    from app.projects.todos.routes import todos_bp

    app.register_blueprint(todos_bp)

    # Register CLI commands
    from app.projects.todos.commands import todos_cli

    app.cli.add_command(todos_cli)

    register_error_handlers(app)

    return app


def register_error_handlers(app):
    """Answer framework-level errors with JSON bodies instead of HTML pages."""

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({'message': 'Not found.'}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'message': 'Method not allowed.'}), 405

    @app.errorhandler(Exception)
    def internal_error(e):
        if isinstance(e, HTTPException):
            return jsonify({'message': e.description}), e.code
        logger.exception("Unhandled error while serving request")
        return jsonify({'message': 'Internal server error.'}), 500
