import pytest

from setup_tests import *

from legacy_cfg.config.definition import ConfigDefinition
from legacy_cfg.config.property import new_property
from legacy_cfg.config.property_map import ConfigPropertyMap


@pytest.fixture
def template():
    template = ConfigPropertyMap()
    template.put(1, new_property("model_id", "ushort"))
    template.put(2, new_property("name", "string", "null"))
    template.put(4, new_property("members", "flag"))
    return template


class TestConfigDefinition:
    def test_construction_validates_inputs(self, template):
        with pytest.raises(TypeError):
            ConfigDefinition(0, None)
        with pytest.raises(TypeError):
            ConfigDefinition(0, {})
        with pytest.raises(ValueError):
            ConfigDefinition(-1, template)


    def test_definition_copies_its_template(self, template):
        definition = ConfigDefinition(3, template)
        definition.set_property("name", "Iron dagger")
        template.get("model_id").set_value(5)

        assert definition.id == 3
        assert definition.get_value("name") == "Iron dagger"
        assert definition.get_value("model_id") == 0
        assert template.get("name").value == "null"


    def test_add_property_uses_smallest_free_opcode(self, template):
        definition = ConfigDefinition(0, template)
        assert definition.add_property(new_property("cost", "int")) == 3
        assert definition.add_property(new_property("stack_size", "ushort")) == 5
        assert definition.add_property(new_property("team", "ubyte"), 9) == 9

        assert definition.get_property(3).name == "cost"
        assert [opcode for opcode, prop in definition.properties] == [1, 2, 3, 4, 5, 9]


    def test_set_property_by_opcode_replaces(self, template):
        definition = ConfigDefinition(0, template)
        definition.set_property(1, new_property("animation_id", "ushort", 0xFFFF))

        assert definition.get_property(1).name == "animation_id"
        with pytest.raises(KeyError):
            definition.get_property("model_id")


    def test_missing_properties_raise(self, template):
        definition = ConfigDefinition(0, template)
        with pytest.raises(KeyError):
            definition.get_property(3)
        with pytest.raises(KeyError):
            definition.set_property("cost", 10)


    def test_str_lists_only_present_properties(self, template):
        definition = ConfigDefinition(7, template)
        assert str(definition) == "ConfigDefinition{id=7}"

        definition.set_property("model_id", 12)
        definition.set_property("members", True)
        assert str(definition) == "ConfigDefinition{id=7, model_id=12, members=True}"
