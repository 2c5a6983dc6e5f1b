"""
JWT authentication and role gating for the school backend.
Validates Bearer tokens on all /api/ routes except public endpoints.
"""
import logging
from datetime import datetime, timedelta, timezone
from functools import wraps

import jwt
from flask import current_app, g, request

from .errors import AuthenticationError, AuthorizationError

logger = logging.getLogger(__name__)

ROLES = ('admin', 'faculty', 'student')

# Routes that don't require authentication
PUBLIC_PREFIXES = [
    '/api/navigation',
]

PUBLIC_EXACT = [
    '/api/auth/test-login',
    '/api/health',
    '/api/docs',
]


def _config():
    return current_app.extensions['school_config']


def issue_token(user_id, role, settings=None):
    """Sign a token carrying the caller's id and role."""
    settings = settings or _config()
    payload = {
        'id': user_id,
        'role': role,
        'exp': datetime.now(timezone.utc) + timedelta(hours=settings.jwt_expires_hours),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def validate_token(token, settings=None):
    """
    Validate a JWT and return the decoded payload.
    Returns None if invalid.
    """
    settings = settings or _config()
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired token")
        return None
    except jwt.InvalidTokenError:
        return None


def is_public_route(path):
    """Check if a route is public (no auth required)."""
    if path in PUBLIC_EXACT:
        return True
    for prefix in PUBLIC_PREFIXES:
        if path.startswith(prefix):
            return True
    return False


def current_user():
    """The authenticated caller as {'id', 'role'}."""
    return {'id': g.get('user_id'), 'role': g.get('user_role')}


def require_role(roles):
    """Restrict a view to callers whose token role is in roles."""
    allowed = tuple(roles)

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            role = g.get('user_role')
            if role is None:
                raise AuthenticationError()
            if role not in allowed:
                raise AuthorizationError(f"Access denied. Required role: {', '.join(allowed)}")
            return view(*args, **kwargs)
        return wrapper
    return decorator


def init_auth(app):
    """
    Register the before_request auth hook on the Flask app.
    Call this BEFORE registering blueprints.
    """
    @app.before_request
    def check_auth():
        # Skip non-API routes and CORS preflights
        if not request.path.startswith('/api/') or request.method == 'OPTIONS':
            return None

        # Unknown endpoints fall through to the 404 handler
        if request.url_rule is None:
            return None

        # Skip public routes
        if is_public_route(request.path):
            return None

        # Extract token from Authorization header
        auth_header = request.headers.get('Authorization', '')
        if not auth_header.startswith('Bearer '):
            raise AuthenticationError('Authentication required')

        token = auth_header[7:]  # Strip 'Bearer '
        payload = validate_token(token)
        if payload is None:
            raise AuthenticationError('Invalid or expired token')

        # Attach user info to Flask's g object for use in route handlers
        g.user_id = payload.get('id')
        g.user_role = payload.get('role')
