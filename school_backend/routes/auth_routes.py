"""
Auth Routes for the school backend.
Issues signed test tokens and reports who the caller is.
"""
import logging
from flask import Blueprint, request, jsonify

from ..audit import audit_log
from ..auth import ROLES, current_user, issue_token
from ..errors import ValidationError

auth_bp = Blueprint('auth', __name__)
logger = logging.getLogger(__name__)


@auth_bp.route('/api/auth/test-login', methods=['POST'])
def test_login():
    """Issue a signed token for a role without a user database.

    PUBLIC endpoint. Body: {"role": "admin", "userId": "test-user"}.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    role = data.get('role', 'admin')
    user_id = data.get('userId', 'test-user')

    if role not in ROLES:
        raise ValidationError('Invalid role')

    token = issue_token(user_id, role)
    logger.info("Issued test token for %s (%s)", user_id, role)
    audit_log("TEST_LOGIN", role, user=user_id)
    return jsonify({"success": True, "token": token})


@auth_bp.route('/api/auth/me', methods=['GET'])
def me():
    """Return the identity carried by the caller's token."""
    return jsonify({"success": True, "data": current_user()})
