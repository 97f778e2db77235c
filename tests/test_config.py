import pytest

from hoconlite.config import Config
from hoconlite.errors import ResolveNotCompleteError, SubstitutionNotFoundError
from hoconlite.key import Key
from hoconlite.merge.path import RefPath
from hoconlite.merge.substitution import Substitution
from hoconlite.merge.value import AddAssign
from hoconlite.objects import Object
from hoconlite.options import ConfigOptions


def ref(dotted):
    return Substitution(RefPath.from_parts(dotted.split(".")))


def test_default_options():
    assert Config().options == ConfigOptions()


def test_explicit_options_kept():
    options = ConfigOptions(max_include_depth=3)
    assert Config(options).options.max_include_depth == 3


def test_add_kv_returns_self():
    config = Config()
    assert config.add_kv("a", 1) is config
    assert len(config) == 1


def test_dotted_key_creates_nested_object():
    result = Config().add_kv("a.b", 1).resolve()
    assert result == {"a": {"b": 1}}


def test_result_is_object():
    result = Config().add_kv("a", 1).resolve()
    assert isinstance(result["a"], int) and isinstance(result, Object)
    assert result["a"] == 1


def test_from_mapping_keys_are_literal():
    result = Config.from_mapping({"foo.bar": 1}).resolve()
    assert result == {"foo.bar": 1}


def test_key_object_is_literal():
    result = Config().add_kv(Key(["a.b"]), 1).resolve()
    assert result == {"a.b": 1}


def test_later_value_wins():
    result = Config().add_kv("a", 1).add_kv("a", 2).resolve()
    assert result["a"] == 2


def test_objects_merge():
    result = Config().add_kv("a", {"x": 1}).add_kv("a", {"y": 2}).resolve()
    assert result == {"a": {"x": 1, "y": 2}}


def test_add_kvs_and_add_object():
    config = Config().add_kvs([("a", 1), ("b", 2)]).add_object({"c": 3})
    assert config.resolve() == {"a": 1, "b": 2, "c": 3}


def test_substitution_resolves():
    result = Config().add_kv("a.b", "v").add_kv("c", ref("a.b")).resolve()
    assert result["c"] == "v"


def test_missing_substitution_raises(monkeypatch):
    monkeypatch.delenv("HOCONLITE_CONFIG_MISSING", raising=False)
    config = Config().add_kv("a", ref("HOCONLITE_CONFIG_MISSING"))
    with pytest.raises(SubstitutionNotFoundError):
        config.resolve()


def test_resolve_is_repeatable():
    config = Config().add_kv("a", [1]).add_kv("a", AddAssign(2))
    first = config.resolve()
    second = config.resolve()
    assert first == second
    assert first["a"] == [1, 2]


def test_add_assign_inside_array_is_incomplete():
    config = Config().add_kv("a", [AddAssign(1)])
    with pytest.raises(ResolveNotCompleteError):
        config.resolve()


def test_equality_of_configs():
    assert Config().add_kv("a", 1) == Config().add_kv("a", 1)
    assert Config().add_kv("a", 1) != Config().add_kv("a", 2)