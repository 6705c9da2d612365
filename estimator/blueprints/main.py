"""Health endpoints under /api."""
from flask import Blueprint, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from estimator.database import get_session
from estimator.services.cache_service import get_cache

main_bp = Blueprint('main', __name__, url_prefix='/api')


def _database_status():
    """'connected', 'error' (query ran but returned garbage) or 'disconnected'."""
    try:
        value = get_session().execute(text("SELECT 1")).scalar()
    except SQLAlchemyError:
        get_session().rollback()
        return 'disconnected'
    return 'connected' if value == 1 else 'error'


@main_bp.route('/health')
def health():
    """
    Liveness probe; also checks the database.

    Returns:
        200 when the database answers, 500 otherwise
    """
    database = _database_status()
    if database == 'connected':
        return jsonify({'status': 'OK', 'database': database, 'message': 'Server is running'}), 200
    return jsonify({'status': 'ERROR', 'database': database, 'message': 'Database check failed'}), 500


@main_bp.route('/health/cache')
def health_cache():
    """
    Redis status. Always 200: without Redis the API still works, just uncached.
    """
    cache = get_cache()
    if not cache.enabled:
        state = 'disabled'
    elif cache.is_available():
        state = 'connected'
    else:
        state = 'degraded'
    return jsonify({'status': 'OK', 'cache': state}), 200
