import pytest

from hoconlite.errors import (
    ConcatenationDifferentTypeError,
    CycleSubstitutionError,
    InvalidConversionError,
    SubstitutionNotFoundError,
)
from hoconlite.merge.object import MergeObject
from hoconlite.merge.path import RefPath
from hoconlite.merge.resolver import resolve, substitute, to_plain
from hoconlite.merge.substitution import Substitution
from hoconlite.merge.value import AddAssign, Array, Concat


def ref(dotted, optional=False):
    return Substitution(RefPath.from_parts(dotted.split(".")), optional)


def plain(items):
    return to_plain(resolve(MergeObject.from_items(items)))


def test_simple_substitution():
    root = MergeObject.from_items([("a", 1), ("b", ref("a"))])
    substitute(root)
    assert root["b"].value == 1


def test_nested_path_substitution():
    result = plain([("x.y", "hi"), ("z", ref("x.y"))])
    assert result["z"] == "hi"
    assert result["x"] == {"y": "hi"}


def test_missing_required_substitution(monkeypatch):
    monkeypatch.delenv("HOCONLITE_MISSING_VAR", raising=False)
    with pytest.raises(SubstitutionNotFoundError):
        plain([("a", ref("HOCONLITE_MISSING_VAR"))])


def test_missing_optional_substitution_is_null(monkeypatch):
    monkeypatch.delenv("HOCONLITE_MISSING_VAR", raising=False)
    result = plain([("a", ref("HOCONLITE_MISSING_VAR", optional=True))])
    assert result["a"] is None


def test_environment_fallback(monkeypatch):
    monkeypatch.setenv("HOCONLITE_RESOLVER_VAR", "from-env")
    result = plain([("a", ref("HOCONLITE_RESOLVER_VAR"))])
    assert result["a"] == "from-env"


def test_cycle_between_two_keys():
    with pytest.raises(CycleSubstitutionError):
        plain([("a", ref("b")), ("b", ref("a"))])


def test_self_reference_keeps_previous_value():
    result = plain([("a", 1), ("a", ref("a"))])
    assert result["a"] == 1


def test_optional_self_reference_alone_is_null():
    result = plain([("a", ref("a", optional=True))])
    assert result["a"] is None


def test_required_self_reference_alone_is_cycle():
    with pytest.raises(CycleSubstitutionError):
        plain([("a", ref("a"))])


def test_string_concatenation():
    result = plain([("a", "foo"), ("b", Concat([ref("a"), "bar"]))])
    assert result["b"] == "foobar"


def test_three_part_concatenation_keeps_every_part():
    result = plain([("a", "foo"), ("b", Concat(["x", ref("a"), "z"]))])
    assert result["b"] == "xfooz"


def test_array_concatenation():
    result = plain([("a", [1, 2]), ("b", Concat([ref("a"), Array([3])]))])
    assert result["b"] == [1, 2, 3]
    assert result["a"] == [1, 2]


def test_object_concatenation_merges():
    result = plain([("base", {"x": 1}), ("c", Concat([ref("base"), {"y": 2}]))])
    assert result["c"] == {"x": 1, "y": 2}
    assert result["base"] == {"x": 1}


def test_concatenation_type_mismatch():
    with pytest.raises(ConcatenationDifferentTypeError):
        plain([("a", [1]), ("b", Concat([ref("a"), "x"]))])


def test_object_self_reference():
    result = plain([("a", {"x": 1}), ("a", ref("a"))])
    assert result["a"] == {"x": 1}


def test_substitution_inside_array():
    result = plain([("a", 1), ("l", [ref("a"), 2])])
    assert result["l"] == [1, 2]


def test_add_assign_appends():
    result = plain([("a", [1]), ("a", AddAssign(2))])
    assert result["a"] == [1, 2]


def test_add_assign_on_absent_key_creates_array():
    result = plain([("a", AddAssign(2))])
    assert result["a"] == [2]


def test_add_assign_with_substitution():
    result = plain([("x", 5), ("a", [1]), ("a", AddAssign(ref("x")))])
    assert result["a"] == [1, 5]


def test_resolve_marks_root_merged():
    root = MergeObject.from_items([("a", 1), ("b", ref("a"))])
    resolved = resolve(root)
    assert resolved.is_merged()


def test_substituted_object_is_independent_copy():
    root = MergeObject.from_items([("base", {"x": 1}), ("c", ref("base"))])
    substitute(root)
    assert root["c"].value is not root["base"].value
    assert to_plain(root["c"].value) == to_plain(root["base"].value)


def test_to_plain_rejects_unresolved():
    with pytest.raises(InvalidConversionError):
        to_plain(ref("a"))


def test_to_plain_scalars_pass_through():
    assert to_plain("text") == "text"
    assert to_plain(None) is None
    assert to_plain(Array([1, Array([2])])) == [1, [2]]