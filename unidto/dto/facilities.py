"""Classroom request shapes."""

from ..validation import (
    IsBoolean,
    IsInt,
    IsNotEmpty,
    IsString,
    MaxLength,
    Optional,
    Required,
)
from .base import create_dto, list_dto, update_dto

CreateClassroomDto = create_dto(
    "CreateClassroomDto",
    Required("building", IsString(), IsNotEmpty(), MaxLength(50)),
    Required("code", IsString(), IsNotEmpty(), MaxLength(50)),
    Required("capacity", IsInt(min=1)),
    Optional("available", IsBoolean()),
    Optional("resources", IsString(), MaxLength(255)),
)

UpdateClassroomDto = update_dto("UpdateClassroomDto", CreateClassroomDto)

ListClassroomsDto = list_dto(
    "ListClassroomsDto",
    Optional("building", IsString(), MaxLength(50)),
    Optional("min_capacity", IsInt(min=1)),
    Optional("available", IsBoolean()),
)
