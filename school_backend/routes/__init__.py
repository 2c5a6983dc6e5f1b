"""
School Backend API Routes
=========================

All API route blueprints for the school backend.

Usage:
    from school_backend.routes import register_routes
    register_routes(app)
"""
from .auth_routes import auth_bp
from .grade_routes import grade_bp
from .navigation_routes import navigation_bp
from .system_routes import system_bp


def register_routes(app):
    """Register all route blueprints with the Flask app."""
    app.register_blueprint(system_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(grade_bp)
    app.register_blueprint(navigation_bp)


__all__ = [
    'register_routes',
    'auth_bp',
    'grade_bp',
    'navigation_bp',
    'system_bp',
]
