"""
Grade API routes.
Handles listing, assessment creation, grade updates and the student view of
published grades. Records live in the app's GradeStore.
"""
import logging
from flask import Blueprint, current_app, jsonify, request

from ..audit import audit_log
from ..auth import current_user, require_role
from ..errors import AuthorizationError
from ..schemas import AssessmentCreate, GradeUpdate, parse_body

grade_bp = Blueprint('grades', __name__)
logger = logging.getLogger(__name__)


def get_store():
    """The GradeStore this app was created with."""
    return current_app.extensions['grade_store']


def _serialize(records):
    return [record.to_dict() for record in records]


@grade_bp.route('/api/grades', methods=['GET'])
@require_role(['admin', 'faculty'])
def list_grades():
    """List grades, optionally filtered by ?class= and ?subject=."""
    records = get_store().list_grades(
        class_name=request.args.get('class'),
        subject=request.args.get('subject'),
    )
    return jsonify({"success": True, "data": _serialize(records)})


@grade_bp.route('/api/grades/summary', methods=['GET'])
@require_role(['admin', 'faculty'])
def grade_summary():
    """Count, average and letter distribution for the filtered grades."""
    summary = get_store().summary(
        class_name=request.args.get('class'),
        subject=request.args.get('subject'),
    )
    return jsonify({"success": True, "data": summary})


@grade_bp.route('/api/grades/<grade_id>', methods=['GET'])
@require_role(['admin', 'faculty'])
def get_grade(grade_id):
    record = get_store().get(grade_id)
    return jsonify({"success": True, "data": record.to_dict()})


@grade_bp.route('/api/grades/assessment', methods=['POST'])
@require_role(['admin'])
def create_assessment():
    """
    Create assessment entries (bulk) for the listed students.
    Every new record starts at 0 marks and unpublished.
    """
    assessment = parse_body(AssessmentCreate, request.get_json(silent=True))
    created = get_store().create_assessment(assessment)

    audit_log("CREATE_ASSESSMENT", f"{assessment.name} ({len(created)} records)",
              user=current_user()['id'])
    return jsonify({"success": True, "message": "Assessment created", "data": _serialize(created)}), 201


@grade_bp.route('/api/grades/<grade_id>', methods=['PUT'])
@require_role(['admin'])
def update_grade(grade_id):
    """Update marks/totalMarks/remarks/isPublished on one record."""
    store = get_store()
    store.get(grade_id)  # 404 before looking at the body

    update = parse_body(GradeUpdate, request.get_json(silent=True), message="Invalid grade update")
    record = store.update_grade(grade_id, update)

    audit_log("UPDATE_GRADE", f"{grade_id} fields={','.join(sorted(update.changes())) or 'none'}",
              user=current_user()['id'])
    return jsonify({"success": True, "message": "Grade updated", "data": record.to_dict()})


@grade_bp.route('/api/grades/student/<student_id>', methods=['GET'])
@require_role(['student'])
def student_grades(student_id):
    """Published grades for one student."""
    settings = current_app.extensions['school_config']
    caller = current_user()
    if settings.enforce_student_binding and caller['id'] != student_id:
        logger.warning("Student %s tried to read grades of %s", caller['id'], student_id)
        raise AuthorizationError("Students may only view their own grades")

    records = get_store().list_published_for_student(student_id)
    return jsonify({"success": True, "data": _serialize(records)})
