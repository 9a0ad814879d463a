"""
Request schemas for the academic administration API.

Importing this package builds and registers every schema once; the
resulting values are immutable and shared by all validation calls.

Usage:
    from unidto.dto import CreateClassroomDto, get_schema

    validate(CreateClassroomDto, body)
    validate(get_schema("ListSchedulesDto"), query)
"""

from ..validation import Schema
from .academic_calendar import (
    CreateAcademicYearDto,
    CreateTermDto,
    ListAcademicYearDto,
    ListTermDto,
    UpdateAcademicYearDto,
    UpdateTermDto,
)
from .assessments import CreateGradeDto, ListGradesDto, UpdateGradeDto
from .auth import CreateUserDto, UpdateUserDto
from .base import PAGINATION, REGISTRY
from .enrollments import (
    CreateEnrollmentDetailBatchDto,
    CreateEnrollmentDetailDto,
    CreateEnrollmentDto,
    ListEnrollmentDetailsDto,
    ListEnrollmentsDto,
    UpdateEnrollmentDetailDto,
    UpdateEnrollmentDto,
)
from .facilities import CreateClassroomDto, ListClassroomsDto, UpdateClassroomDto
from .programs import (
    CreateCourseDto,
    CreateDegreeProgramDto,
    CreateLevelDto,
    CreatePrerequisiteDto,
    CreateStudyPlanDto,
    ListCoursesDto,
    ListDegreeProgramsDto,
    ListPrerequisitesDto,
    ListStudyPlansDto,
    UpdateCourseDto,
    UpdateDegreeProgramDto,
    UpdateLevelDto,
    UpdatePrerequisiteDto,
    UpdateStudyPlanDto,
)
from .teaching import (
    CreateCourseSectionDto,
    CreateScheduleDto,
    ListCourseSectionsDto,
    ListSchedulesDto,
    UpdateCourseSectionDto,
    UpdateScheduleDto,
)


def get_schema(name: str) -> Schema:
    """Look up a registered schema by name. Raises KeyError if unknown."""
    return REGISTRY.get(name)


__all__ = [
    "PAGINATION",
    "REGISTRY",
    "get_schema",
    # facilities
    "CreateClassroomDto",
    "UpdateClassroomDto",
    "ListClassroomsDto",
    # teaching
    "CreateCourseSectionDto",
    "UpdateCourseSectionDto",
    "ListCourseSectionsDto",
    "CreateScheduleDto",
    "UpdateScheduleDto",
    "ListSchedulesDto",
    # programs
    "CreateDegreeProgramDto",
    "UpdateDegreeProgramDto",
    "ListDegreeProgramsDto",
    "CreateStudyPlanDto",
    "UpdateStudyPlanDto",
    "ListStudyPlansDto",
    "CreateLevelDto",
    "UpdateLevelDto",
    "CreateCourseDto",
    "UpdateCourseDto",
    "ListCoursesDto",
    "CreatePrerequisiteDto",
    "UpdatePrerequisiteDto",
    "ListPrerequisitesDto",
    # calendar
    "CreateAcademicYearDto",
    "UpdateAcademicYearDto",
    "ListAcademicYearDto",
    "CreateTermDto",
    "UpdateTermDto",
    "ListTermDto",
    # enrollments
    "CreateEnrollmentDto",
    "UpdateEnrollmentDto",
    "ListEnrollmentsDto",
    "CreateEnrollmentDetailDto",
    "CreateEnrollmentDetailBatchDto",
    "UpdateEnrollmentDetailDto",
    "ListEnrollmentDetailsDto",
    # assessments
    "CreateGradeDto",
    "UpdateGradeDto",
    "ListGradesDto",
    # auth
    "CreateUserDto",
    "UpdateUserDto",
]
