#!/usr/bin/env python3
"""
School Management System API
============================
Run: school-backend   (or: python -m school_backend.app)
Then open: http://localhost:5000/api/docs
"""

import logging

from flask import Flask
from flask_cors import CORS

from .audit import init_audit_log
from .auth import init_auth
from .config import Config, config
from .csrf import init_csrf
from .errors import register_error_handlers
from .routes import register_routes
from .store import GradeStore

logger = logging.getLogger(__name__)


def configure_logging(level):
    """Root logging setup for the development server."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def create_app(settings=None, store=None):
    """
    Build the Flask app.

    Args:
        settings: Config instance (a fresh one from the environment if omitted)
        store: GradeStore to serve (demo-seeded or empty per settings if omitted)
    """
    settings = settings or Config()
    if store is None:
        store = GradeStore.with_demo_data() if settings.seed_demo_data else GradeStore()

    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions['school_config'] = settings
    app.extensions['grade_store'] = store

    CORS(app, resources={r"/api/*": {"origins": settings.cors_origins}})

    # ══════════════════════════════════════════════════════════════
    # REQUEST HOOKS (order matters: CSRF, then auth)
    # ══════════════════════════════════════════════════════════════
    init_csrf(app)
    init_auth(app)

    register_error_handlers(app)
    register_routes(app)
    init_audit_log(settings.audit_log_file)

    logger.info("App created with %d grade record(s)", len(store))
    return app


def main():
    settings = config
    configure_logging(settings.log_level)
    app = create_app(settings)

    print("\n" + "=" * 50)
    print("  School Management System API")
    print("=" * 50)
    print(f"  Open: http://localhost:{settings.port}/api/docs")
    print("=" * 50 + "\n")

    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == '__main__':
    main()
