import struct

from . import constants as c


def read_exact(buffer, size):
    data = buffer.read(size)
    if len(data) != size:
        raise ValueError(
            f"Expected {size} bytes of property data, but only {len(data)} remain."
            )
    return data


class DataType:
    '''
    Base class for the wire encodings a property value can use.
    Subclasses convert a python value to bytes and read it back
    from any object with a read(size) method.
    '''
    name = ""

    def encode(self, value):
        raise NotImplementedError()

    def decode(self, buffer):
        raise NotImplementedError()

    def coerce(self, value):
        return value

    def validate_default(self, default):
        pass

    def __repr__(self):
        return f"<{type(self).__name__} '{self.name}'>"


class FlagType(DataType):
    name = "flag"

    def encode(self, value):
        if not isinstance(value, bool):
            raise ValueError(f"Flag value must be a bool, not {type(value)}")
        return b''

    def decode(self, buffer):
        # the opcode being in the record is what sets the flag
        return True

    def coerce(self, value):
        return bool(value)

    def validate_default(self, default):
        # a flag is written with no payload, so only a set flag can be stored
        if default is not False:
            raise ValueError(f"Flag default must be False, not {default!r}")


class NumericType(DataType):
    _struct = None

    def __init__(self, name, fmt):
        self.name    = name
        self._struct = struct.Struct(">" + fmt)

    @property
    def size(self): return self._struct.size

    def encode(self, value):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"{self.name} value must be an int, not {type(value)}")

        try:
            return self._struct.pack(value)
        except struct.error as e:
            raise ValueError(f"Value {value} cannot be encoded as a {self.name}.") from e

    def decode(self, buffer):
        return self._struct.unpack(read_exact(buffer, self.size))[0]

    def coerce(self, value):
        return int(value)


class TriByteType(DataType):
    name = "tri_byte"
    size = 3

    def encode(self, value):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"{self.name} value must be an int, not {type(value)}")
        elif value < 0 or value >= 1 << 24:
            raise ValueError(f"Value {value} cannot be encoded as a {self.name}.")

        return value.to_bytes(self.size, 'big')

    def decode(self, buffer):
        return int.from_bytes(read_exact(buffer, self.size), 'big')

    def coerce(self, value):
        return int(value)


class StringType(DataType):
    name = "string"

    def encode(self, value):
        if not isinstance(value, str):
            raise ValueError(f"String value must be a str, not {type(value)}")

        try:
            data = value.encode(c.STRING_ENCODING)
        except UnicodeEncodeError as e:
            raise ValueError(f"String '{value}' is not {c.STRING_ENCODING} encodable.") from e

        if c.STRING_TERMINATOR in data:
            raise ValueError(f"String {value!r} cannot contain its terminator character.")

        return data + bytes((c.STRING_TERMINATOR, ))

    def decode(self, buffer):
        data = bytearray()
        while True:
            char = buffer.read(1)
            if not char:
                raise ValueError("String property is missing its terminator.")
            elif char[0] == c.STRING_TERMINATOR:
                break
            data += char

        return data.decode(c.STRING_ENCODING)

    def coerce(self, value):
        return str(value)


class ArrayType(DataType):
    '''
    A sequence of elements of one type, prefixed with an unsigned byte count.
    Values are always held as tuples so they compare equal to their defaults.
    '''
    element_type = None

    def __init__(self, element_type):
        self.element_type = element_type
        self.name = element_type.name + c.ARRAY_TYPE_SUFFIX

    def encode(self, value):
        if not isinstance(value, (tuple, list)):
            raise ValueError(f"{self.name} value must be a tuple, not {type(value)}")
        elif len(value) > c.MAX_ARRAY_LENGTH:
            raise ValueError(
                f"{self.name} cannot hold more than {c.MAX_ARRAY_LENGTH} values, not {len(value)}."
                )

        return bytes((len(value), )) + b''.join(map(self.element_type.encode, value))

    def decode(self, buffer):
        count = read_exact(buffer, 1)[0]
        return tuple(self.element_type.decode(buffer) for i in range(count))

    def coerce(self, value):
        return tuple(map(self.element_type.coerce, value))


FLAG     = FlagType()
BYTE     = NumericType("byte",   "b")
UBYTE    = NumericType("ubyte",  "B")
SHORT    = NumericType("short",  "h")
USHORT   = NumericType("ushort", "H")
TRI_BYTE = TriByteType()
INT      = NumericType("int",    "i")
LONG     = NumericType("long",   "q")
STRING   = StringType()

DATA_TYPES = {
    data_type.name: data_type
    for data_type in (FLAG, BYTE, UBYTE, SHORT, USHORT, TRI_BYTE, INT, LONG, STRING)
    }

DEFAULT_VALUES = dict(
    flag=False, byte=0, ubyte=0, short=0, ushort=0,
    tri_byte=0, int=0, long=0, string="",
    )


def get_data_type(name):
    name = name.lower().strip()
    if name in DATA_TYPES:
        return DATA_TYPES[name]
    elif name.endswith(c.ARRAY_TYPE_SUFFIX):
        element_name = name[: -len(c.ARRAY_TYPE_SUFFIX)]
        if element_name in DATA_TYPES and element_name != FLAG.name:
            return ArrayType(DATA_TYPES[element_name])

    raise KeyError(f"Unknown property data type '{name}'")


def get_default_value(data_type):
    if isinstance(data_type, ArrayType):
        return ()
    return DEFAULT_VALUES[data_type.name]
