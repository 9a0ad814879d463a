"""Enrollment and enrollment detail request shapes."""

from ..validation import (
    IsArray,
    IsDate,
    IsIn,
    IsNumber,
    IsString,
    IsUUID,
    Optional,
    Required,
    ValidateNested,
)
from .base import create_dto, list_dto, update_dto

ENROLLMENT_STATES = ("Active", "Canceled")
ENROLLMENT_ORIGINS = ("Regular", "Extra")
COURSE_STATES = ("Enrolled", "Approved", "Failed", "Withdrawn")

CreateEnrollmentDto = create_dto(
    "CreateEnrollmentDto",
    Optional("student_id", IsUUID()),
    Optional("student_code", IsString()),
    Optional("term_id", IsUUID()),
    Optional("term_name", IsString()),
    Required("enrolled_on", IsDate()),
    Optional("state", IsIn(ENROLLMENT_STATES), default="Active"),
    Optional("origin", IsIn(ENROLLMENT_ORIGINS), default="Regular"),
    Optional("note", IsString()),
)

UpdateEnrollmentDto = update_dto("UpdateEnrollmentDto", CreateEnrollmentDto)

ListEnrollmentsDto = list_dto(
    "ListEnrollmentsDto",
    Optional("student_id", IsUUID()),
    Optional("term_id", IsUUID()),
    Optional("state", IsIn(ENROLLMENT_STATES)),
)

# Natural keys (student_code, course_code, ...) stand in for ids in bulk loads
CreateEnrollmentDetailDto = create_dto(
    "CreateEnrollmentDetailDto",
    Optional("enrollment_id", IsUUID()),
    Optional("student_code", IsString()),
    Optional("term_name", IsString()),
    Optional("course_section_id", IsUUID()),
    Optional("course_code", IsString()),
    Optional("group_label", IsString()),
    Optional("degree_program_code", IsString()),
    Optional("study_plan_version", IsString()),
    Optional("course_state", IsIn(COURSE_STATES), default="Enrolled"),
    Optional("final_grade", IsNumber(min=0, max=100)),
    Optional("attempts", IsNumber(min=1), default=1),
    Optional("closed_on", IsDate()),
    Optional("remark", IsString()),
)

CreateEnrollmentDetailBatchDto = create_dto(
    "CreateEnrollmentDetailBatchDto",
    Required(
        "items",
        IsArray(min_size=1),
        ValidateNested(CreateEnrollmentDetailDto),
    ),
)

UpdateEnrollmentDetailDto = update_dto(
    "UpdateEnrollmentDetailDto", CreateEnrollmentDetailDto
)

ListEnrollmentDetailsDto = list_dto(
    "ListEnrollmentDetailsDto",
    Optional("enrollment_id", IsUUID()),
    Optional("course_section_id", IsUUID()),
)
