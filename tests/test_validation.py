import pytest

from wellness.helpers.validation import (
    check_strict_pagination, clamp_pagination, field_from_loc, to_upper_snake, validation_error_code
)


@pytest.mark.parametrize('name, expected', [
    ('userId', 'USER_ID'),
    ('planData', 'PLAN_DATA'),
    ('id', 'ID'),
])
def test_to_upper_snake(name, expected):
    assert to_upper_snake(name) == expected


def test_field_from_loc_skips_location_and_indexes():
    assert field_from_loc(('body', 'responses', 0, 'questionId')) == 'questionId'
    assert field_from_loc(('query', 'limit')) == 'limit'
    assert field_from_loc(('body',)) == 'body'


def test_validation_error_code():
    assert validation_error_code({'type': 'missing', 'loc': ('body', 'userId')}) == 'MISSING_USER_ID'
    assert validation_error_code({'type': 'blank', 'loc': ('body', 'taskName')}) == 'MISSING_TASK_NAME'
    assert validation_error_code({'type': 'int_parsing', 'loc': ('query', 'id')}) == 'INVALID_ID'
    assert validation_error_code({'type': 'enum', 'loc': ('body', 'metricType')}) == 'INVALID_METRIC_TYPE'


@pytest.mark.parametrize('limit, offset, expected', [
    (None, None, (10, 0)),
    (0, -5, (1, 0)),
    (500, 20, (100, 20)),
    (25, 3, (25, 3)),
])
def test_clamp_pagination(limit, offset, expected):
    assert clamp_pagination(limit, offset, 10, 100) == expected


@pytest.mark.parametrize('limit, offset, code', [
    (None, None, None),
    (50, 0, None),
    (51, 0, 'LIMIT_EXCEEDED'),
    (0, 0, 'INVALID_LIMIT'),
    (10, -1, 'INVALID_OFFSET'),
])
def test_check_strict_pagination(limit, offset, code):
    assert check_strict_pagination(limit, offset, 10, 50)[2] == code
