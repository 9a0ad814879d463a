"""Tests for the registered request schemas."""

from datetime import datetime

import pytest

from unidto import validate
from unidto.dto import (
    PAGINATION,
    REGISTRY,
    CreateClassroomDto,
    CreateEnrollmentDetailBatchDto,
    CreateEnrollmentDetailDto,
    CreateEnrollmentDto,
    CreateGradeDto,
    CreatePrerequisiteDto,
    CreateScheduleDto,
    CreateTermDto,
    CreateUserDto,
    ListClassroomsDto,
    ListSchedulesDto,
    UpdateClassroomDto,
    UpdateCourseSectionDto,
    UpdateEnrollmentDto,
    UpdateScheduleDto,
    UpdateUserDto,
    get_schema,
)
from unidto.validation import Invalid, SchemaError, Valid, ViolationKind

UUID = "3f2504e0-4f89-11d3-9a0c-0305e82c3301"


class TestClassrooms:
    def test_capacity_below_minimum(self):
        result = validate(
            CreateClassroomDto, {"building": "A", "code": "101", "capacity": 0}
        )
        assert isinstance(result, Invalid)
        assert len(result.violations) == 1
        violation = result.violations[0]
        assert violation.field == "capacity"
        assert violation.check == "min"
        assert violation.kind == ViolationKind.RANGE_VIOLATION

    def test_valid_classroom(self):
        body = {"building": "A", "code": "101", "capacity": 30, "available": True}
        assert validate(CreateClassroomDto, body) == Valid(body)

    def test_building_max_length(self):
        result = validate(
            CreateClassroomDto, {"building": "B" * 51, "code": "1", "capacity": 1}
        )
        assert isinstance(result, Invalid)
        assert result.violations[0].check == "max_length"

    def test_update_rejects_bad_identifier_only(self):
        result = validate(UpdateClassroomDto, {"id": "not-a-uuid"})
        assert isinstance(result, Invalid)
        assert len(result.violations) == 1
        violation = result.violations[0]
        assert violation.field == "id"
        assert violation.check == "is_uuid"
        assert violation.kind == ViolationKind.TYPE_MISMATCH

    def test_update_requires_identifier(self):
        result = validate(UpdateClassroomDto, {"capacity": 10})
        assert isinstance(result, Invalid)
        assert result.fields == ["id"]

    def test_update_keeps_checks(self):
        result = validate(UpdateClassroomDto, {"id": UUID, "capacity": 0})
        assert isinstance(result, Invalid)
        assert result.fields == ["capacity"]

    def test_update_field_order(self):
        assert UpdateClassroomDto.field_names == (
            "building",
            "code",
            "capacity",
            "available",
            "resources",
            "id",
        )

    def test_list_filters(self):
        result = validate(ListClassroomsDto, {"min_capacity": 0})
        assert isinstance(result, Invalid)
        assert result.fields == ["min_capacity"]


class TestSchedules:
    def test_list_with_skip_and_limit(self):
        result = validate(ListSchedulesDto, {"skip": 0, "limit": 20})
        assert isinstance(result, Valid)
        assert result.value == {"page": 1, "limit": 20, "skip": 0}

    def test_list_limit_bounds(self):
        result = validate(ListSchedulesDto, {"limit": 500})
        assert isinstance(result, Invalid)
        assert result.violations[0].check == "max"

    def test_time_requires_zero_padding(self):
        body = {
            "course_section_id": UUID,
            "weekday": "Monday",
            "time_start": "9:30",
            "time_end": "11:00",
        }
        result = validate(CreateScheduleDto, body)
        assert isinstance(result, Invalid)
        assert result.fields == ["time_start"]
        assert result.violations[0].kind == ViolationKind.PATTERN_MISMATCH

        body["time_start"] = "09:30"
        assert isinstance(validate(CreateScheduleDto, body), Valid)

    def test_update_identifier_optional(self):
        assert isinstance(validate(UpdateScheduleDto, {}), Valid)
        assert isinstance(validate(UpdateCourseSectionDto, {}), Valid)
        assert not UpdateScheduleDto["id"].required


class TestCalendar:
    def test_term_status(self):
        body = {
            "name": "2024-I",
            "start_date": "2024-03-01",
            "end_date": "2024-07-15",
            "status": "archived",
        }
        result = validate(CreateTermDto, body)
        assert isinstance(result, Invalid)
        assert result.violations[0].kind == ViolationKind.ENUM_MEMBERSHIP_VIOLATION

    def test_term_dates_parsed(self):
        body = {
            "name": "2024-I",
            "start_date": "2024-03-01",
            "end_date": "2024-07-15",
            "status": "planned",
        }
        result = validate(CreateTermDto, body)
        assert isinstance(result, Valid)
        assert result.value["start_date"] == datetime(2024, 3, 1)


class TestEnrollments:
    def test_defaults(self):
        result = validate(CreateEnrollmentDto, {"enrolled_on": "2024-03-04"})
        assert isinstance(result, Valid)
        assert result.value["state"] == "Active"
        assert result.value["origin"] == "Regular"

    def test_update_does_not_apply_defaults(self):
        result = validate(UpdateEnrollmentDto, {"id": UUID, "note": "late"})
        assert result.value == {"id": UUID, "note": "late"}

    def test_batch_requires_items(self):
        result = validate(CreateEnrollmentDetailBatchDto, {"items": []})
        assert isinstance(result, Invalid)
        assert result.violations[0].check == "array_min_size"

    def test_batch_item_paths(self):
        body = {
            "items": [
                {"student_code": "S-1", "course_code": "MAT101"},
                {"student_code": "S-2", "course_state": "Dropped"},
            ]
        }
        result = validate(CreateEnrollmentDetailBatchDto, body)
        assert isinstance(result, Invalid)
        assert result.fields == ["items[1].course_state"]

    def test_batch_items_match_single_detail(self):
        detail = {"student_code": "S1", "closed_on": "2024-03-01"}
        single = validate(CreateEnrollmentDetailDto, detail)
        batch = validate(CreateEnrollmentDetailBatchDto, {"items": [detail]})
        assert isinstance(batch, Valid)
        assert batch.value["items"] == [single.value]
        assert batch.value["items"][0]["course_state"] == "Enrolled"
        assert batch.value["items"][0]["attempts"] == 1
        assert batch.value["items"][0]["closed_on"] == datetime(2024, 3, 1)


class TestPrograms:
    def test_prerequisite_kind_default(self):
        result = validate(
            CreatePrerequisiteDto,
            {"main_course_id": UUID, "required_course_id": UUID},
        )
        assert result.value["kind"] == "required"

    def test_grade_decimal_places(self):
        body = {"course_section_id": UUID, "student_id": UUID, "final_grade": 17.555}
        result = validate(CreateGradeDto, body)
        assert isinstance(result, Invalid)
        assert result.fields == ["final_grade"]


class TestUsers:
    admin = {
        "email": "ana@uni.edu",
        "password": "Secret1",
        "firstName": "Ana",
        "lastName": "Ruiz",
        "role": "ADMIN",
    }

    def test_admin(self):
        assert isinstance(validate(CreateUserDto, self.admin), Valid)

    def test_weak_password_message(self):
        result = validate(CreateUserDto, {**self.admin, "password": "secret1"})
        assert isinstance(result, Invalid)
        assert result.fields == ["password"]
        assert "uppercase" in result.violations[0].message

    def test_student_requires_study_plan(self):
        result = validate(CreateUserDto, {**self.admin, "role": "STUDENT"})
        assert isinstance(result, Invalid)
        assert result.fields == ["studyPlanId"]

    def test_student_fields_ignored_for_teacher(self):
        body = {**self.admin, "role": "TEACHER", "birthDate": "not a date"}
        assert isinstance(validate(CreateUserDto, body), Valid)

    def test_update_user(self):
        assert isinstance(validate(UpdateUserDto, {"phone": "555-0100"}), Valid)
        result = validate(UpdateUserDto, {"firstName": ""})
        assert isinstance(result, Invalid)
        assert result.violations[0].check == "min_length"


class TestRegistry:
    def test_every_schema_registered(self):
        assert len(REGISTRY) == 41
        assert get_schema("ListSchedulesDto") is ListSchedulesDto

    def test_unknown_schema(self):
        with pytest.raises(KeyError):
            get_schema("DeleteEverythingDto")

    def test_duplicate_registration(self):
        with pytest.raises(SchemaError):
            REGISTRY.register(CreateClassroomDto)

    def test_list_schemas_share_pagination(self):
        for schema in REGISTRY:
            if schema.name.startswith("List"):
                for rule in PAGINATION:
                    assert schema[rule.name] == rule

    def test_update_schemas_are_partial(self):
        for schema in REGISTRY:
            if schema.name.startswith("Update"):
                assert all(not r.required for r in schema if r.name != "id")
