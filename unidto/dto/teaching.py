"""Course section and schedule request shapes."""

from ..validation import (
    IsDate,
    IsInt,
    IsString,
    IsUUID,
    Matches,
    MaxLength,
    Optional,
    Required,
)
from .base import OPTIONAL_ID, create_dto, list_dto, update_dto

# 24h clock, zero-padded
TIME_OF_DAY = r"^\d{2}:\d{2}$"

CreateCourseSectionDto = create_dto(
    "CreateCourseSectionDto",
    Optional("course_id", IsUUID()),
    Optional("term_id", IsUUID()),
    Required("classroom_id", IsUUID()),
    Required("teacher_id", IsUUID()),
    Optional("degree_program_code", IsString()),
    Optional("study_plan_version", IsString()),
    Optional("course_code", IsString()),
    Optional("term_name", IsString()),
    Optional("teacher_email", IsString()),
    Required("group_label", IsString(), MaxLength(10)),
    Required("modality", IsString(), MaxLength(20)),
    Required("shift", IsString(), MaxLength(20)),
    Required("quota_max", IsInt(min=1)),
    Optional("quota_available", IsInt(min=0)),
    Optional("status", IsString()),
)

UpdateCourseSectionDto = update_dto(
    "UpdateCourseSectionDto", CreateCourseSectionDto, OPTIONAL_ID
)

ListCourseSectionsDto = list_dto(
    "ListCourseSectionsDto",
    Optional("course_id", IsUUID()),
    Optional("term_id", IsUUID()),
    Optional("teacher_id", IsUUID()),
    Optional("status", IsString()),
)

CreateScheduleDto = create_dto(
    "CreateScheduleDto",
    Required("course_section_id", IsUUID()),
    Optional("classroom_id", IsUUID()),
    Required("weekday", IsString(), MaxLength(10)),
    Required("time_start", IsString(), Matches(TIME_OF_DAY)),
    Required("time_end", IsString(), Matches(TIME_OF_DAY)),
    Optional("date_start", IsDate()),
    Optional("date_end", IsDate()),
)

UpdateScheduleDto = update_dto("UpdateScheduleDto", CreateScheduleDto, OPTIONAL_ID)

ListSchedulesDto = list_dto(
    "ListSchedulesDto",
    Optional("course_section_id", IsUUID()),
    Optional("classroom_id", IsUUID()),
    Optional("weekday", IsString()),
)
