"""Request/response middleware for the JSON API."""
from functools import wraps
from flask import current_app, g, request

from estimator.exceptions import ValidationError


def apply_cors_headers(response):
    """
    Allow the wizard and admin clients (served from CLIENT_URL) to call the API.

    Registered as an after_request hook.
    """
    origin = request.headers.get('Origin')
    allowed = current_app.config.get('CLIENT_URL')
    if origin and allowed and (allowed == '*' or origin == allowed.rstrip('/')):
        response.headers['Access-Control-Allow-Origin'] = origin
        response.headers['Access-Control-Allow-Credentials'] = 'true'
        response.headers['Access-Control-Allow-Methods'] = 'GET, POST, PUT, DELETE, OPTIONS'
        response.headers['Access-Control-Allow-Headers'] = 'Content-Type, Authorization'
        response.headers['Vary'] = 'Origin'
    return response


def require_json(f):
    """
    Decorator: parse the request body as a JSON object into g.payload.

    Anything other than a JSON object is a 400.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            raise ValidationError('Request body must be a JSON object')
        g.payload = payload
        return f(*args, **kwargs)
    return decorated_function
