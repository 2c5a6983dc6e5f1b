"""
Health check and API listing.
"""
from datetime import datetime, timezone
from flask import Blueprint, jsonify

from .. import __version__

system_bp = Blueprint('system', __name__)

API_ENDPOINTS = {
    "authentication": [
        "POST /api/auth/test-login - Issue a signed token for a role",
        "GET /api/auth/me - Identity carried by the token",
    ],
    "grades": [
        "GET /api/grades - List grades (admin, faculty)",
        "GET /api/grades/summary - Grade distribution (admin, faculty)",
        "GET /api/grades/<id> - Get one grade (admin, faculty)",
        "POST /api/grades/assessment - Create assessment entries (admin)",
        "PUT /api/grades/<id> - Update a grade (admin)",
        "GET /api/grades/student/<studentId> - Published grades (student)",
    ],
    "navigation": [
        "GET /api/navigation?path=<path> - Section links and breadcrumbs",
    ],
}


@system_bp.route('/api/health')
def health():
    return jsonify({
        "success": True,
        "message": "School Management System API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
    })


@system_bp.route('/api/docs')
def docs():
    return jsonify({
        "success": True,
        "message": "School Management System API Documentation",
        "version": __version__,
        "endpoints": API_ENDPOINTS,
        "authentication": {
            "type": "JWT Bearer Token",
            "header": "Authorization: Bearer <token>",
        },
        "response_format": {
            "success": "boolean",
            "message": "string",
            "data": "object (optional)",
        },
    })
