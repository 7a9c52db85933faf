import io

import pytest

from terrascan.results import ViolationStats
from terrascan.utils.printer import print_json


@pytest.mark.parametrize(
    "data, want",
    [
        ({}, "{}"),
        ({"apple": 5, "lettuce": 7}, '{\n  "apple": 5,\n  "lettuce": 7\n}'),
    ],
)
def test_print_json(data, want):
    stream = io.StringIO()
    print_json(data, stream)
    assert stream.getvalue().strip() == want.strip()


def test_print_json_ends_with_newline():
    stream = io.StringIO()
    print_json({}, stream)
    assert stream.getvalue() == "{}\n"


def test_print_json_uses_to_dict():
    stream = io.StringIO()
    print_json(ViolationStats(), stream)
    assert '"total": 0' in stream.getvalue()


def test_print_json_unserializable_raises():
    with pytest.raises(TypeError):
        print_json({"value": object()}, io.StringIO())