import copy

from .data_types import DataType, get_data_type, get_default_value


class SerializableProperty:
    '''
    A named value slot of a config definition. The property is only
    written to a record while its value differs from its default, and
    the data type decides how that value looks on the wire.
    '''
    _name = ""
    _default = None
    _data_type = None
    _value = None

    def __init__(self, name, default, data_type, **kwargs):
        if isinstance(data_type, str):
            data_type = get_data_type(data_type)

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Property name must be a non-empty str, not {name!r}")
        elif not isinstance(data_type, DataType):
            raise TypeError(f"data_type must be of type DataType, not {type(data_type)}")

        self._name      = name.strip()
        self._data_type = data_type
        self._default   = data_type.coerce(default)
        data_type.validate_default(self._default)
        value = kwargs.pop("value", self._default)
        if kwargs:
            raise ValueError("Unknown parameters detected: %s" % ', '.join(kwargs.keys()))

        self.set_value(value)

    @property
    def name(self): return self._name
    @property
    def default(self): return self._default
    @property
    def data_type(self): return self._data_type
    @property
    def value(self): return self._value
    @value.setter
    def value(self, new_value):
        self.set_value(new_value)

    @property
    def present(self):
        return self._value != self._default

    def set_value(self, value):
        if isinstance(value, list):
            value = tuple(value)
        self._value = value

    def reset(self):
        self._value = self._default

    def encode(self):
        return self._data_type.encode(self._value)

    def decode(self, buffer):
        self._value = self._data_type.decode(buffer)
        return self._value

    def copy(self):
        # name, default and data type are never mutated, so they are shared
        new_property = copy.copy(self)
        new_property._value = copy.deepcopy(self._value)
        return new_property

    def __str__(self):
        return repr(self._value)

    def __repr__(self):
        return (f"SerializableProperty(name={self.name!r}, value={self.value!r}, "
                f"default={self.default!r}, data_type={self.data_type.name!r})")


def new_property(name, data_type, default=None):
    if isinstance(data_type, str):
        data_type = get_data_type(data_type)

    if default is None:
        default = get_default_value(data_type)

    return SerializableProperty(name, default, data_type)
