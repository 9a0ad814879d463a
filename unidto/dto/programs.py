"""
Academic offer request shapes: degree programs, study plans, levels,
courses and prerequisites.
"""

from ..validation import (
    IsBoolean,
    IsDate,
    IsIn,
    IsInt,
    IsNumber,
    IsString,
    IsUUID,
    MaxLength,
    MinLength,
    Optional,
    Required,
)
from .base import create_dto, list_dto, update_dto

STATUSES = frozenset({"Active", "Inactive"})
MODALITIES = frozenset({"Onsite", "Online", "Hybrid"})
PREREQUISITE_KINDS = frozenset({"required", "optional"})

CreateDegreeProgramDto = create_dto(
    "CreateDegreeProgramDto",
    Required("name", IsString(), MinLength(3), MaxLength(120)),
    Required("code", IsString(), MinLength(2), MaxLength(20)),
    Required("degree_title", IsString(), MinLength(3), MaxLength(120)),
    Required("modality", IsString(), IsIn(MODALITIES)),
    Required("status", IsString(), IsIn(STATUSES)),
)

UpdateDegreeProgramDto = update_dto("UpdateDegreeProgramDto", CreateDegreeProgramDto)

ListDegreeProgramsDto = list_dto(
    "ListDegreeProgramsDto",
    Optional("status", IsIn(STATUSES)),
)

CreateStudyPlanDto = create_dto(
    "CreateStudyPlanDto",
    Optional("degree_program_id", IsUUID()),
    Optional("degree_program_code", IsString()),
    Required("version", IsString(), MaxLength(20)),
    Optional("is_current", IsBoolean()),
    Required("valid_from", IsDate()),
    Optional("valid_to", IsDate()),
    Optional("resolution", IsString(), MaxLength(50)),
)

UpdateStudyPlanDto = update_dto("UpdateStudyPlanDto", CreateStudyPlanDto)

ListStudyPlansDto = list_dto(
    "ListStudyPlansDto",
    Optional("degree_program_id", IsUUID()),
    Optional("degree_program_code", IsString()),
    Optional("is_current", IsBoolean()),
)

CreateLevelDto = create_dto(
    "CreateLevelDto",
    Required("name", IsString(), MaxLength(50)),
    Required("order", IsInt(min=1)),
)

UpdateLevelDto = update_dto("UpdateLevelDto", CreateLevelDto)

CreateCourseDto = create_dto(
    "CreateCourseDto",
    Optional("study_plan_id", IsUUID()),
    Optional("level_id", IsUUID()),
    Optional("degree_program_code", IsString()),
    Optional("study_plan_version", IsString()),
    Optional("level_order", IsInt()),
    Required("code", IsString(), MaxLength(20)),
    Required("name", IsString(), MaxLength(120)),
    Required("credits", IsNumber(min=0)),
    Required("hours_theory", IsInt(min=0)),
    Required("hours_practice", IsInt(min=0)),
    Required("status", IsString(), IsIn(STATUSES)),
)

UpdateCourseDto = update_dto("UpdateCourseDto", CreateCourseDto)

ListCoursesDto = list_dto(
    "ListCoursesDto",
    Optional("study_plan_id", IsUUID()),
    Optional("level_id", IsUUID()),
)

CreatePrerequisiteDto = create_dto(
    "CreatePrerequisiteDto",
    Required("main_course_id", IsUUID()),
    Required("required_course_id", IsUUID()),
    Optional("kind", IsIn(PREREQUISITE_KINDS), default="required"),
)

UpdatePrerequisiteDto = update_dto("UpdatePrerequisiteDto", CreatePrerequisiteDto)

ListPrerequisitesDto = list_dto(
    "ListPrerequisitesDto",
    Optional("main_course_id", IsUUID()),
    Optional("required_course_id", IsUUID()),
)
