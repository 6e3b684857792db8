import pytest

from setup_tests import *

from legacy_cfg.config.schema import build_property_map, schema_from_property_map


SCHEMA = {
    1:    {"name": "model_id", "type": "ushort"},
    "2":  {"name": "name", "type": "string", "default": "null"},
    40:   {"name": "colours", "type": "ushort_array", "default": [1, 2]},
    }


class TestSchema:
    def test_build_property_map(self):
        property_map = build_property_map(SCHEMA)
        assert property_map.opcodes == (1, 2, 40)
        assert property_map.get("name").default == "null"
        assert property_map.get("colours").default == (1, 2)
        assert not property_map.get("colours").present


    def test_schema_round_trip(self):
        schema = schema_from_property_map(build_property_map(SCHEMA))
        assert schema == {
            1:  {"name": "model_id", "type": "ushort"},
            2:  {"name": "name", "type": "string", "default": "null"},
            40: {"name": "colours", "type": "ushort_array", "default": [1, 2]},
            }


    def test_invalid_schemas_raise(self):
        with pytest.raises(ValueError):
            build_property_map({1: {"name": "model_id"}})
        with pytest.raises(ValueError):
            build_property_map({0: {"name": "model_id", "type": "ushort"}})
        with pytest.raises(ValueError):
            build_property_map({
                1: {"name": "model_id", "type": "ushort"},
                2: {"name": "model_id", "type": "ushort"},
                })
        with pytest.raises(KeyError):
            build_property_map({1: {"name": "model_id", "type": "float"}})
        with pytest.raises(TypeError):
            build_property_map([])


    def test_set_flag_default_raises(self):
        with pytest.raises(ValueError):
            build_property_map({1: {"name": "stackable", "type": "flag", "default": True}})
