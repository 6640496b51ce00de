"""
Flask Application Factory

Creates and configures the Flask application instance.
"""

import logging
from datetime import datetime
from flask import Flask

from config.database import DatabaseStorage
from config.settings import SECRET_KEY
from webapp.routes.auth import auth_bp
from webapp.services.user_store import UserRepository

logger = logging.getLogger(__name__)


def create_app(storage=None, config=None):
    """
    Create and configure the Flask application.

    Args:
        storage: Key/value store with get_item/set_item. Defaults to a
            DatabaseStorage on the configured DATABASE_URL.
        config (dict, optional): Extra Flask config values

    Returns:
        Flask: The application
    """
    app = Flask(__name__)
    app.secret_key = SECRET_KEY
    if config:
        app.config.update(config)

    if storage is None:
        storage = DatabaseStorage()
    storage.init_database()

    app.extensions['user_repository'] = UserRepository(storage)
    app.register_blueprint(auth_bp)

    @app.route('/admin/storage/status')
    def storage_status():
        """Health check endpoint for the user store."""
        try:
            users = app.extensions['user_repository'].list_users()
            return {
                'status': 'ok',
                'users': len(users),
                'timestamp': datetime.now().isoformat()
            }
        except Exception as e:
            logger.error(f"Storage status check failed: {e}")
            return {
                'status': 'error',
                'message': str(e)
            }, 500

    return app
