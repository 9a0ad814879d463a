"""Property-based tests for validation and partial derivation."""

from hypothesis import given, settings
from hypothesis import strategies as st

from unidto.dto import REGISTRY, CreateClassroomDto, ListSchedulesDto
from unidto.validation import Valid, derive_partial, validate

SCHEMAS = list(REGISTRY)

field_values = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-5, max_value=500),
    st.text(max_size=60),
)


@st.composite
def records_for(draw, schema):
    names = draw(st.lists(st.sampled_from(schema.field_names), unique=True))
    return {name: draw(field_values) for name in names}


@settings(deadline=None)
@given(st.sampled_from(SCHEMAS).flatmap(lambda s: st.tuples(st.just(s), records_for(s))))
def test_validate_is_deterministic(case):
    schema, record = case
    assert validate(schema, record) == validate(schema, record)


@given(st.sampled_from(SCHEMAS))
def test_derive_partial_is_idempotent(schema):
    once = derive_partial(schema)
    twice = derive_partial(once, once.name)
    assert once == twice
    assert all(not rule.required for rule in twice)


@given(records_for(CreateClassroomDto))
def test_omitted_optional_fields_never_violate(record):
    optional = [r.name for r in CreateClassroomDto if not r.required]
    trimmed = {k: v for k, v in record.items() if k not in optional}
    result = validate(CreateClassroomDto, trimmed)
    if not result.is_valid():
        assert not set(result.fields) & set(optional)


@given(
    st.integers(min_value=0, max_value=10_000),
    st.integers(min_value=1, max_value=100),
)
def test_pagination_in_range_is_valid(skip, limit):
    result = validate(ListSchedulesDto, {"skip": skip, "limit": limit})
    assert isinstance(result, Valid)
