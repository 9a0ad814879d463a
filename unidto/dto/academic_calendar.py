"""Academic year and term request shapes."""

from ..validation import (
    IsDate,
    IsIn,
    IsInt,
    IsNotEmpty,
    IsString,
    IsUUID,
    MinLength,
    Optional,
    Required,
)
from .base import create_dto, list_dto, update_dto

FIRST_YEAR = 2000
TERM_STATUSES = ("planned", "active", "finished", "pending", "completed")

CreateAcademicYearDto = create_dto(
    "CreateAcademicYearDto",
    Required("year", IsInt(min=FIRST_YEAR)),
    Required("name", IsString(), IsNotEmpty(), MinLength(3)),
    Required("start_date", IsDate()),
    Required("end_date", IsDate()),
)

UpdateAcademicYearDto = update_dto("UpdateAcademicYearDto", CreateAcademicYearDto)

ListAcademicYearDto = list_dto(
    "ListAcademicYearDto",
    Optional("year", IsInt(min=FIRST_YEAR)),
)

CreateTermDto = create_dto(
    "CreateTermDto",
    Optional("academic_year_id", IsUUID()),
    Optional("year", IsInt(min=FIRST_YEAR)),
    Required("name", IsString(), IsNotEmpty(), MinLength(3)),
    Required("start_date", IsDate()),
    Required("end_date", IsDate()),
    Required("status", IsIn(TERM_STATUSES)),
)

UpdateTermDto = update_dto("UpdateTermDto", CreateTermDto)

ListTermDto = list_dto(
    "ListTermDto",
    Optional("academic_year_id", IsUUID()),
    Optional("status", IsIn(TERM_STATUSES)),
)
