from .property_map import ConfigPropertyMap


class ConfigDefinition:
    '''
    A single entry of a config table(an item, npc, object, etc). The
    definition owns its own copy of the property map it is given, so
    editing it never touches the template it was created from.
    '''
    _id = 0
    _properties = None

    def __init__(self, id, properties):
        if not isinstance(id, int) or isinstance(id, bool):
            raise TypeError(f"id must be of type int, not {type(id)}")
        elif id < 0:
            raise ValueError(f"id must not be negative, not {id}")
        elif properties is None:
            raise TypeError("Property map cannot be None.")
        elif not isinstance(properties, ConfigPropertyMap):
            raise TypeError(f"properties must be of type ConfigPropertyMap, not {type(properties)}")

        self._id = id
        self._properties = ConfigPropertyMap(properties)

    @property
    def id(self): return self._id
    @property
    def property_map(self): return self._properties
    @property
    def properties(self): return self._properties.entries()

    def add_property(self, prop, opcode=None):
        if opcode is None:
            opcode = self._properties.next_free_opcode()

        self._properties.put(opcode, prop)
        return opcode

    def get_property(self, key):
        return self._properties.get(key)

    def get_value(self, key):
        return self._properties.get(key).value

    def set_property(self, key, value):
        '''
        Replaces the property at an opcode when given an int key,
        or sets the value of the named property when given a str key.
        '''
        if isinstance(key, str):
            self._properties.get(key).set_value(value)
        else:
            self._properties.put(key, value)

    def __str__(self):
        fields = [f"id={self.id}"]
        fields.extend(
            f"{prop.name}={prop}" for opcode, prop in self._properties.present_entries()
            )
        return "%s{%s}" % (type(self).__name__, ", ".join(fields))

    __repr__ = __str__
