import math

import pytest

from vecindex.config import BaseConfig, Config, FieldKind, ParamType
from vecindex.status import KnowhereError, Status


def test_param_type_bits_combine_on_field():
    cfg = Config()
    declared = cfg.declare("y", FieldKind.INT).set_default(1).for_search().for_range_search()
    assert declared.param_type == ParamType.SEARCH | ParamType.RANGE_SEARCH
    assert int(declared.param_type) == 6
    deserial = cfg.declare("z", FieldKind.BOOL).set_default(False).for_deserialize_from_file()
    assert int(deserial.param_type) == 32


def test_base_config_defaults():
    cfg = BaseConfig()
    assert cfg.metric_type == "L2"
    assert cfg.k == 10
    assert cfg.num_build_thread is None
    assert cfg.radius == 0.0
    assert math.isinf(cfg.range_filter)
    assert cfg.trace_visit is False


def test_load_search_values():
    cfg = BaseConfig()
    cfg.load({"k": 20, "metric_type": "IP", "trace_visit": True}, ParamType.SEARCH)
    assert cfg.k == 20
    assert cfg.metric_type == "IP"
    assert cfg.trace_visit is True


def test_missing_param_resets_to_default():
    cfg = BaseConfig()
    cfg.k = 5
    assert cfg.k == 5
    cfg.load({}, ParamType.SEARCH)
    assert cfg.k == 10


def test_fields_of_other_types_are_ignored():
    cfg = BaseConfig()
    cfg.load({"k": "x"}, ParamType.TRAIN)
    assert cfg.k == 10


def test_int_type_conflict():
    cfg = BaseConfig()
    with pytest.raises(KnowhereError) as info:
        cfg.load({"k": "x"}, ParamType.SEARCH)
    assert info.value.status is Status.TYPE_CONFLICT_IN_JSON
    assert info.value.message == "param k should be integer"


def test_bool_is_not_integer():
    cfg = BaseConfig()
    with pytest.raises(KnowhereError) as info:
        cfg.load({"k": True}, ParamType.SEARCH)
    assert info.value.status is Status.TYPE_CONFLICT_IN_JSON


def test_int_out_of_range():
    cfg = BaseConfig()
    with pytest.raises(KnowhereError) as info:
        cfg.load({"k": 0}, ParamType.SEARCH)
    assert info.value.status is Status.OUT_OF_RANGE_IN_JSON
    assert info.value.message == "param k out of range [ 1,2147483647 ]"


def test_int_overflow():
    cfg = BaseConfig()
    with pytest.raises(KnowhereError) as info:
        cfg.load({"k": 2**31}, ParamType.SEARCH)
    assert info.value.status is Status.ARITHMETIC_OVERFLOW
    assert info.value.message == "param k should be at most 2147483647"


def test_float_accepts_integer():
    cfg = BaseConfig()
    cfg.load({"radius": 2, "range_filter": 0.5}, ParamType.RANGE_SEARCH)
    assert cfg.radius == 2.0
    assert cfg.range_filter == 0.5


def test_float_type_conflict():
    cfg = BaseConfig()
    with pytest.raises(KnowhereError) as info:
        cfg.load({"radius": "far"}, ParamType.RANGE_SEARCH)
    assert info.value.status is Status.TYPE_CONFLICT_IN_JSON
    assert info.value.message == "param radius should be a number"


def test_float_overflow_with_range():
    cfg = Config()
    cfg.declare("r", FieldKind.FLOAT).set_default(0.0).set_range(0.0, 1.0).for_search()
    with pytest.raises(KnowhereError) as info:
        cfg.load({"r": 1e39}, ParamType.SEARCH)
    assert info.value.status is Status.ARITHMETIC_OVERFLOW
    assert info.value.message == "param r should be at most 3.402823e+38"


def test_float_out_of_range():
    cfg = Config()
    cfg.declare("r", FieldKind.FLOAT).set_default(0.0).set_range(0.0, 1.0).for_search()
    with pytest.raises(KnowhereError) as info:
        cfg.load({"r": 2.5}, ParamType.SEARCH)
    assert info.value.status is Status.OUT_OF_RANGE_IN_JSON
    assert cfg.r == 0.0


def test_bool_type_conflict():
    cfg = BaseConfig()
    with pytest.raises(KnowhereError) as info:
        cfg.load({"trace_visit": "yes"}, ParamType.SEARCH)
    assert info.value.status is Status.TYPE_CONFLICT_IN_JSON
    assert info.value.message == "param trace_visit should be a boolean"


def test_string_type_conflict():
    cfg = BaseConfig()
    with pytest.raises(KnowhereError) as info:
        cfg.load({"metric_type": 3}, ParamType.TRAIN)
    assert info.value.message == "param metric_type should be a string"


def test_missing_without_default_raises():
    cfg = Config()
    cfg.declare("nlist", FieldKind.INT).for_train()
    with pytest.raises(KnowhereError) as info:
        cfg.load({}, ParamType.TRAIN)
    assert info.value.status is Status.INVALID_PARAM_IN_JSON
    assert info.value.message == "invalid param nlist"


def test_allow_empty_without_default():
    cfg = BaseConfig()
    cfg.load({}, ParamType.TRAIN)
    assert cfg.num_build_thread is None
    assert cfg.metric_type == "L2"


def test_list_field():
    cfg = Config()
    cfg.declare("levels", FieldKind.LIST).for_feder()
    cfg.load({"levels": [3, 1, 2]}, ParamType.FEDER)
    assert cfg.levels == [3, 1, 2]
    with pytest.raises(KnowhereError) as info:
        cfg.load({"levels": 3}, ParamType.FEDER)
    assert info.value.message == "param levels should be an array"


def test_values_reflects_loaded_fields():
    cfg = BaseConfig()
    cfg.load({"k": 7}, ParamType.SEARCH)
    values = cfg.values()
    assert values["k"] == 7
    assert set(values) == set(cfg.fields)


def test_range_on_string_rejected():
    cfg = Config()
    with pytest.raises(TypeError):
        cfg.declare("s", FieldKind.STRING).set_range("a", "b")


def test_unknown_attribute():
    cfg = BaseConfig()
    assert getattr(cfg, "nprobe", "missing") == "missing"
    assert getattr(cfg, "k", "missing") == 10


def test_field_builder_records_settings():
    cfg = Config()
    declared = cfg.declare("x", FieldKind.INT).set_default(3).describe("x value").for_train_and_search()
    assert declared.default == 3
    assert declared.description == "x value"
    assert declared.param_type == ParamType.TRAIN | ParamType.SEARCH | ParamType.RANGE_SEARCH
    assert cfg.x == 3