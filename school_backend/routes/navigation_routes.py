"""
Navigation API route.
Serves the breadcrumb trail and section links for a frontend path.
"""
from flask import Blueprint, request, jsonify

from ..navigation import build_crumbs, links_for_section, select_section

navigation_bp = Blueprint('navigation', __name__)


@navigation_bp.route('/api/navigation', methods=['GET'])
def navigation():
    """PUBLIC endpoint. ?path=/admin/grades -> section, links and breadcrumbs."""
    path = request.args.get('path', '/')
    section = select_section(path)
    return jsonify({
        "success": True,
        "data": {
            "path": path,
            "section": section,
            "links": links_for_section(section),
            "breadcrumbs": build_crumbs(path),
        },
    })
