"""
Request and record models for the grade API.

Request bodies are parsed once per operation into these models; handlers
and the store only ever see validated, typed values.
"""
import math
from typing import Any, List, Optional, Union

from pydantic import (
    BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt,
    ValidationError as PydanticValidationError, field_validator, model_validator,
)

from .errors import ValidationError
from .grading import calculate

Number = Union[StrictInt, StrictFloat]


def _is_finite(value):
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints beyond float range
        return False


class GradeRecord(BaseModel):
    """One student's result for one assessment."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    student_id: Any = Field(None, alias="studentId")
    name: Any = None
    roll_number: Any = Field(None, alias="rollNumber")
    class_name: Any = Field(None, alias="class")
    subject: Any = None
    assessment: str
    assessment_type: str = Field(alias="assessmentType")
    marks: Number = 0
    total_marks: Number = Field(alias="totalMarks")
    percentage: int = 0
    grade: str = "F"
    date: str
    remarks: str = ""
    weightage: Number = 0
    is_published: bool = Field(False, alias="isPublished")

    def recalculate(self):
        """Refresh percentage and grade from the current marks/total_marks."""
        self.percentage, self.grade = calculate(self.marks, self.total_marks)
        return self

    def to_dict(self):
        return self.model_dump(by_alias=True)


class StudentDescriptor(BaseModel):
    """A student listed on a new assessment."""

    model_config = ConfigDict(populate_by_name=True)

    student_id: Any = Field(None, alias="studentId")
    name: Any = None
    roll_number: Any = Field(None, alias="rollNumber")
    class_name: Any = Field(None, alias="class")
    subject: Any = None

    @model_validator(mode="before")
    @classmethod
    def _entry_as_object(cls, data):
        # Non-object entries still get a record, with no student details
        return data if isinstance(data, dict) else {}


class AssessmentCreate(BaseModel):
    """Body of POST /api/grades/assessment."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    assessment_type: str = Field(alias="type", min_length=1)
    total_marks: Number = Field(alias="totalMarks")
    date: str = Field(min_length=1)
    weightage: Optional[Number] = None
    students: List[StudentDescriptor]

    @field_validator("total_marks")
    @classmethod
    def _positive_total(cls, value):
        if not _is_finite(value):
            raise ValueError("totalMarks must be a finite number")
        if value <= 0:
            raise ValueError("totalMarks must be greater than 0")
        return value


# Accepted JSON types per updatable field; anything else is dropped
UPDATE_FIELD_TYPES = {
    "marks": (int, float),
    "totalMarks": (int, float),
    "remarks": (str,),
    "isPublished": (bool,),
}


def _has_type(value, types):
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool) and bool not in types:
        return False
    return isinstance(value, types)


class GradeUpdate(BaseModel):
    """Body of PUT /api/grades/<id>. Every field is optional."""

    model_config = ConfigDict(populate_by_name=True)

    marks: Optional[Number] = None
    total_marks: Optional[Number] = Field(None, alias="totalMarks")
    remarks: Optional[str] = None
    is_published: Optional[StrictBool] = Field(None, alias="isPublished")

    @model_validator(mode="before")
    @classmethod
    def _drop_mistyped_fields(cls, data):
        if not isinstance(data, dict):
            return {}
        return {
            key: value for key, value in data.items()
            if key in UPDATE_FIELD_TYPES and _has_type(value, UPDATE_FIELD_TYPES[key])
        }

    @field_validator("marks", "total_marks")
    @classmethod
    def _finite_number(cls, value):
        if value is not None and not _is_finite(value):
            raise ValueError("must be a finite number")
        return value

    @field_validator("total_marks")
    @classmethod
    def _positive_total(cls, value):
        if value is not None and value <= 0:
            raise ValueError("totalMarks must be greater than 0")
        return value

    def changes(self):
        """Only the fields the caller actually supplied."""
        return self.model_dump(exclude_unset=True)


def _error_field(loc):
    return ".".join(str(part) for part in loc)


def parse_body(model, data, message="Missing required fields"):
    """
    Validate a JSON body against a model.

    Raises ValidationError with one {field, message} entry per problem.
    """
    try:
        return model.model_validate(data if data is not None else {})
    except PydanticValidationError as e:
        errors = [
            {"field": _error_field(err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        raise ValidationError(message, errors=errors) from e
