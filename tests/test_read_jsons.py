import json

import pytest

from src.business_objects import Item, SchemaError
from src.utils.read_jsons import read_items_json, read_problem_json


def _write(tmp_path, name, payload):
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_read_items_pairs_and_objects(tmp_path):
    path = _write(tmp_path, "items.json", [[1, 1], {"weight": 3, "benefit": 5}])
    assert read_items_json(path) == [Item(1, 1), Item(3, 5)]


def test_read_problem_with_capacity(tmp_path):
    path = _write(tmp_path, "problem.json", {"items": [[4, 5]], "capacity": 12})
    items, cap = read_problem_json(path)
    assert items == [Item(4, 5)]
    assert cap == 12.0


def test_read_problem_null_capacity_is_unconstrained(tmp_path):
    path = _write(tmp_path, "problem.json", {"items": [], "capacity": None})
    assert read_problem_json(path) == ([], None)
    path = _write(tmp_path, "problem2.json", {"items": []})
    assert read_problem_json(path) == ([], None)


@pytest.mark.parametrize(
    "payload",
    [
        {"not": "a list"},
        [[1, 2, 3]],
        [{"weight": 1}],
        [[0, 1]],
        ["x"],
    ],
)
def test_read_items_schema_errors(tmp_path, payload):
    with pytest.raises(SchemaError):
        read_items_json(_write(tmp_path, "bad.json", payload))


def test_read_problem_schema_errors(tmp_path):
    with pytest.raises(SchemaError):
        read_problem_json(_write(tmp_path, "a.json", [[1, 1]]))
    with pytest.raises(SchemaError):
        read_problem_json(_write(tmp_path, "b.json", {"capacity": 3}))
    with pytest.raises(SchemaError):
        read_problem_json(_write(tmp_path, "c.json", {"items": [], "capacity": "big"}))


def test_missing_or_broken_file(tmp_path):
    with pytest.raises(SchemaError):
        read_items_json(str(tmp_path / "nope.json"))
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(SchemaError):
        read_items_json(str(broken))
