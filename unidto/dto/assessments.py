"""Grade request shapes."""

from ..validation import IsNumber, IsUUID, Optional, Required
from .base import create_dto, list_dto, update_dto

CreateGradeDto = create_dto(
    "CreateGradeDto",
    Required("course_section_id", IsUUID()),
    Required("student_id", IsUUID()),
    Optional("final_grade", IsNumber(min=0, max=100, max_decimal_places=2)),
)

UpdateGradeDto = update_dto("UpdateGradeDto", CreateGradeDto)

ListGradesDto = list_dto(
    "ListGradesDto",
    Optional("student_id", IsUUID()),
    Optional("course_section_id", IsUUID()),
)
