"""
In-memory grade record store.

The store lives as long as the process does; nothing is persisted. One
instance is created per app (see app.create_app) and handed to the routes,
so tests can build isolated stores.
"""
import logging

from .errors import NotFoundError, ValidationError
from .grading import calculate
from .grade_scale import GRADE_LETTERS
from .schemas import GradeRecord

logger = logging.getLogger(__name__)

# Demo records the frontend expects on a fresh start
DEMO_GRADES = [
    {
        "id": "g1", "studentId": "S001", "name": "Rahul Yadav", "rollNumber": "001",
        "class": "10-A", "subject": "Mathematics", "assessment": "Unit Test 1",
        "assessmentType": "Unit Test", "marks": 42, "totalMarks": 50,
        "date": "2024-01-15", "remarks": "Good performance", "weightage": 20,
        "isPublished": False,
    },
    {
        "id": "g2", "studentId": "S002", "name": "Priya Patel", "rollNumber": "002",
        "class": "10-A", "subject": "Mathematics", "assessment": "Unit Test 1",
        "assessmentType": "Unit Test", "marks": 38, "totalMarks": 50,
        "date": "2024-01-15", "remarks": "Can improve", "weightage": 20,
        "isPublished": False,
    },
]


class GradeStore:
    """Ordered collection of GradeRecords with sequential 'g<N>' ids."""

    def __init__(self, records=None):
        self._records = []
        self._next_id = 1
        for data in records or []:
            self._insert(GradeRecord.model_validate(data).recalculate())

    @classmethod
    def with_demo_data(cls):
        return cls(DEMO_GRADES)

    def __len__(self):
        return len(self._records)

    def _insert(self, record):
        self._records.append(record)
        # Keep generated ids ahead of any seeded 'g<N>' id
        if record.id.startswith("g") and record.id[1:].isdigit():
            self._next_id = max(self._next_id, int(record.id[1:]) + 1)

    def _allocate_id(self):
        record_id = f"g{self._next_id}"
        self._next_id += 1
        return record_id

    def _find(self, grade_id):
        for record in self._records:
            if record.id == grade_id:
                return record
        raise NotFoundError("Grade not found")

    def get(self, grade_id):
        """Return a copy of one record, or raise NotFoundError."""
        return self._find(grade_id).model_copy()

    def list_grades(self, class_name=None, subject=None):
        """Records matching the optional class/subject filters, in insertion order."""
        return [
            record.model_copy() for record in self._records
            if (not class_name or record.class_name == class_name)
            and (not subject or record.subject == subject)
        ]

    def create_assessment(self, assessment):
        """Create one zero-mark record per listed student and return the batch."""
        percentage, grade = calculate(0, assessment.total_marks)
        weightage = assessment.weightage if assessment.weightage is not None else 0
        created = []
        for student in assessment.students:
            record = GradeRecord(
                id=self._allocate_id(),
                student_id=student.student_id,
                name=student.name,
                roll_number=student.roll_number,
                class_name=student.class_name,
                subject=student.subject,
                assessment=assessment.name,
                assessment_type=assessment.assessment_type,
                marks=0,
                total_marks=assessment.total_marks,
                percentage=percentage,
                grade=grade,
                date=assessment.date,
                remarks="",
                weightage=weightage,
                is_published=False,
            )
            self._records.append(record)
            created.append(record.model_copy())

        logger.info("Created assessment '%s' for %d student(s)", assessment.name, len(created))
        return created

    def update_grade(self, grade_id, update):
        """Apply a GradeUpdate to a record and recompute percentage/grade."""
        record = self._find(grade_id)
        candidate = record.model_copy(update=update.changes())
        try:
            candidate.recalculate()
        except (OverflowError, ValueError, ZeroDivisionError) as e:
            raise ValidationError(
                "Invalid grade update",
                errors=[{"field": "marks", "message": "marks/totalMarks give no finite percentage"}],
            ) from e

        # Swap in only once percentage/grade are known
        self._records[self._records.index(record)] = candidate
        return candidate.model_copy()

    def list_published_for_student(self, student_id):
        return [
            record.model_copy() for record in self._records
            if record.student_id == student_id and record.is_published
        ]

    def summary(self, class_name=None, subject=None):
        """Count, average percentage and letter distribution for a filtered view."""
        records = self.list_grades(class_name, subject)
        distribution = {letter: 0 for letter in GRADE_LETTERS}
        for record in records:
            distribution[record.grade] = distribution.get(record.grade, 0) + 1

        average = None
        if records:
            average = round(sum(r.percentage for r in records) / len(records), 1)

        return {
            "count": len(records),
            "published": sum(1 for r in records if r.is_published),
            "averagePercentage": average,
            "distribution": distribution,
        }
