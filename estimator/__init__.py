"""Flask application factory."""
import os
import traceback

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from estimator.database import init_db


def create_app(config_object='config.Config'):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.json.sort_keys = False
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize Sentry for error tracking in production
    if os.getenv('SENTRY_DSN') and app.config.get('ENV') == 'production':
        import sentry_sdk
        from sentry_sdk.integrations.flask import FlaskIntegration

        sentry_sdk.init(
            dsn=os.getenv('SENTRY_DSN'),
            integrations=[FlaskIntegration()],
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
            environment=app.config.get('ENV'),
            release=os.getenv('GIT_COMMIT', 'unknown')
        )

    # Flask-Mail for contact / estimation notifications
    from estimator.services.email_service import init_mail
    init_mail(app)

    # Redis cache for the wizard reference data
    from estimator.services.cache_service import init_cache
    init_cache(app)

    # Prometheus metrics instrumentation
    from estimator.blueprints.metrics import setup_metrics_instrumentation
    setup_metrics_instrumentation(app)

    # Production: Enable ProxyFix for HTTPS behind Nginx reverse proxy
    if app.config.get('ENV') == 'production':
        from werkzeug.middleware.proxy_fix import ProxyFix
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_port=1, x_prefix=0)

    # Initialize database
    init_db(app)

    from estimator.middleware import apply_cors_headers
    app.after_request(apply_cors_headers)

    # Error Handlers
    from estimator.exceptions import EstimatorError
    from estimator.utils.responses import error_response

    @app.errorhandler(EstimatorError)
    def handle_estimator_error(error):
        """Handle custom application exceptions."""
        app.logger.warning(f"EstimatorError [{error.status_code}]: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        """404 for unknown routes, 405 for wrong methods, etc."""
        return error_response(error.name, error.code)

    @app.errorhandler(Exception)
    def internal_error(error):
        app.logger.error(f"Unhandled Exception: {error}")
        app.logger.error(f"Traceback: {traceback.format_exc()}")
        return error_response('Server Error', 500)

    # Register blueprints
    from estimator.blueprints.main import main_bp
    from estimator.blueprints.estimations import estimations_bp
    from estimator.blueprints.contacts import contacts_bp
    from estimator.blueprints.catalog import CATALOG_BLUEPRINTS
    from estimator.blueprints.metrics import metrics_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(estimations_bp)
    app.register_blueprint(contacts_bp)
    for blueprint in CATALOG_BLUEPRINTS:
        app.register_blueprint(blueprint)
    app.register_blueprint(metrics_bp)

    # CLI commands (init-db, seed-data)
    from estimator.cli_commands import init_cli_commands
    init_cli_commands(app)

    return app
