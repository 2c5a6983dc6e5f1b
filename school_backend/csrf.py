"""
Optional CSRF header check.

When enabled, state-changing requests under /api/ must carry a non-empty
CSRF header. The token value is not verified against a session; this only
guards against plain cross-site form posts.
"""
from flask import current_app, request

from .errors import AuthorizationError

UNSAFE_METHODS = frozenset(['POST', 'PUT', 'PATCH', 'DELETE'])


def init_csrf(app):
    """Register the before_request CSRF hook on the Flask app."""

    @app.before_request
    def check_csrf():
        settings = current_app.extensions['school_config']
        if not settings.enable_csrf:
            return None
        if request.method not in UNSAFE_METHODS or not request.path.startswith('/api/'):
            return None
        if not request.headers.get(settings.csrf_header_name):
            raise AuthorizationError('CSRF token missing')
        return None
