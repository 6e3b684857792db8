from . import constants as c
from .property import SerializableProperty


class ConfigPropertyMap:
    '''
    Maps opcodes to the SerializableProperty stored under them, and keeps
    a second index from property name to opcode so either can be used to
    look a property up. Entries are always iterated in ascending opcode
    order, since that is the order they are written to a record in.
    '''
    _properties = ()
    _opcodes_by_name = ()

    def __init__(self, properties=None):
        self._properties = {}
        self._opcodes_by_name = {}

        if properties is None:
            return
        elif isinstance(properties, ConfigPropertyMap):
            properties = properties.entries()
        elif isinstance(properties, dict):
            properties = properties.items()

        # each property cell is copied so the maps never share values
        for opcode, prop in properties:
            self.put(opcode, prop.copy())

    def put(self, opcode, prop):
        if not isinstance(opcode, int) or isinstance(opcode, bool):
            raise TypeError(f"opcode must be of type int, not {type(opcode)}")
        elif not isinstance(prop, SerializableProperty):
            raise TypeError(f"property must be of type SerializableProperty, not {type(prop)}")
        elif opcode < 0:
            raise ValueError(f"opcode must not be negative, not {opcode}")
        elif opcode == c.RESERVED_OPCODE:
            raise ValueError(f"opcode {opcode} is reserved for the definition terminator")
        elif opcode > c.MAX_OPCODE:
            raise ValueError(f"opcode must be no greater than {c.MAX_OPCODE}, not {opcode}")

        bound_opcode = self._opcodes_by_name.get(prop.name, opcode)
        if bound_opcode != opcode:
            raise ValueError(
                f"property name '{prop.name}' is already used by opcode {bound_opcode}"
                )

        old_prop = self._properties.get(opcode)
        if old_prop is not None and old_prop.name != prop.name:
            del self._opcodes_by_name[old_prop.name]

        self._properties[opcode] = prop
        self._opcodes_by_name[prop.name] = opcode

    def get(self, key):
        return self._properties[self.get_opcode(key)]

    def get_opcode(self, key):
        if isinstance(key, str):
            if key not in self._opcodes_by_name:
                raise KeyError(f"No property called '{key}' exists.")
            return self._opcodes_by_name[key]
        elif key not in self._properties:
            raise KeyError(f"No property with opcode {key} exists.")
        return key

    def size(self):
        return len(self._properties)

    def next_free_opcode(self):
        opcode = c.MIN_OPCODE
        while opcode in self._properties:
            opcode += 1

        if opcode > c.MAX_OPCODE:
            raise ValueError("No free opcodes remain.")
        return opcode

    def entries(self):
        return [(opcode, self._properties[opcode]) for opcode in sorted(self._properties)]

    def present_entries(self):
        return [(opcode, prop) for opcode, prop in self.entries() if prop.present]

    @property
    def opcodes(self): return tuple(sorted(self._properties))
    @property
    def names(self):
        return tuple(prop.name for opcode, prop in self.entries())

    def copy(self):
        return ConfigPropertyMap(self)

    def __getitem__(self, key):
        return self.get(key)

    def __contains__(self, key):
        if isinstance(key, str):
            return key in self._opcodes_by_name
        return key in self._properties

    def __len__(self):
        return len(self._properties)

    def __iter__(self):
        return iter(self.entries())

    def __repr__(self):
        return "ConfigPropertyMap(%s)" % ", ".join(
            f"{opcode}: {prop.name}" for opcode, prop in self.entries()
            )
