from .data_types import get_default_value, get_data_type, ArrayType
from .property import SerializableProperty
from .property_map import ConfigPropertyMap


def build_property_map(schema):
    '''
    Builds a template property map from schema metadata. The schema maps
    each opcode to a dict holding the property's name, its data type name,
    and optionally its default value. Keys may be strings, as json has no
    integer keys.
    '''
    if not isinstance(schema, dict):
        raise TypeError(f"schema must be of type dict, not {type(schema)}")

    property_map = ConfigPropertyMap()
    for opcode in sorted(schema, key=int):
        prop_meta = schema[opcode]
        if not isinstance(prop_meta, dict):
            raise TypeError(
                f"Expected dict for schema opcode {opcode}, but got {type(prop_meta)}."
                )
        elif "name" not in prop_meta or "type" not in prop_meta:
            raise ValueError(f"Schema opcode {opcode} must define a name and a type.")

        data_type = get_data_type(prop_meta["type"])
        default   = prop_meta.get("default")
        if default is None:
            default = get_default_value(data_type)

        property_map.put(
            int(opcode), SerializableProperty(prop_meta["name"], default, data_type)
            )

    return property_map


def schema_from_property_map(property_map):
    schema = {}
    for opcode, prop in property_map.entries():
        prop_meta = dict(name=prop.name, type=prop.data_type.name)
        if prop.default != get_default_value(prop.data_type):
            prop_meta["default"] = (
                list(prop.default) if isinstance(prop.data_type, ArrayType) else
                prop.default
                )
        schema[opcode] = prop_meta

    return schema
