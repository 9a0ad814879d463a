"""User request shapes. Student and teacher profiles hang off ``role``."""

from ..validation import (
    IsDate,
    IsEmail,
    IsIn,
    IsNotEmpty,
    IsString,
    IsUUID,
    Matches,
    MaxLength,
    MinLength,
    Optional,
    Required,
    compose,
    define,
    derive_partial,
)
from .base import create_dto, register

ROLES = ("ADMIN", "STUDENT", "TEACHER")

PASSWORD_PATTERN = r"(?:(?=.*\d)|(?=.*\W+))(?![.\n])(?=.*[A-Z])(?=.*[a-z]).*$"
PASSWORD_MESSAGE = (
    "password must contain an uppercase letter, a lowercase letter and a number"
)


def _has_role(role: str):
    def check(record) -> bool:
        return record.get("role") == role

    return check


is_student = _has_role("STUDENT")
is_teacher = _has_role("TEACHER")

CreateUserDto = create_dto(
    "CreateUserDto",
    Required("email", IsEmail(), IsNotEmpty()),
    Required(
        "password",
        IsString(),
        MinLength(6),
        MaxLength(50),
        Matches(PASSWORD_PATTERN, message=PASSWORD_MESSAGE),
    ),
    Required("firstName", IsString(), MinLength(1), IsNotEmpty()),
    Required("lastName", IsString(), MinLength(1), IsNotEmpty()),
    Required("role", IsIn(ROLES), IsNotEmpty()),
    Optional("phone", IsString()),
    Optional("studentCode", IsString(), when=is_student),
    Required("studyPlanId", IsUUID(), IsNotEmpty(), when=is_student),
    Optional("nationalId", IsString(), when=is_student),
    Optional("birthDate", IsDate(), when=is_student),
    Optional("teacherCode", IsString(), when=is_teacher),
    Optional("teacherNationalId", IsString(), when=is_teacher),
    Optional("teacherBirthDate", IsDate(), when=is_teacher),
    Optional("department", IsString(), when=is_teacher),
)

UpdateUserDto = register(
    compose(
        "UpdateUserDto",
        derive_partial(CreateUserDto),
        define(
            "UpdateUserProfile",
            Optional("firstName", IsString(), MinLength(1)),
            Optional("lastName", IsString(), MinLength(1)),
            Optional("phone", IsString()),
        ),
    )
)
