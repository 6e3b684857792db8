from ..archive.archive import ArchiveEntry
from ..archive.util import hash_name
from . import constants as c
from .config_def import config_data_def, config_index_def


def write_record(definition, buffer):
    '''
    Writes the present properties of a definition to the buffer as
    opcode/payload pairs, followed by the definition terminator.
    Returns the number of bytes written.
    '''
    start = len(buffer)
    for opcode, prop in definition.property_map.present_entries():
        buffer.append(opcode)
        buffer += prop.encode()

    buffer.append(c.DEFINITION_TERMINATOR)
    return len(buffer) - start


def encode_definitions(definitions):
    '''
    Encodes the definitions into the data and index stream payloads.
    '''
    definitions = list(definitions)
    if len(definitions) > c.MAX_DEFINITION_COUNT:
        raise ValueError(
            f"Cannot encode more than {c.MAX_DEFINITION_COUNT} definitions, "
            f"not {len(definitions)}."
            )

    data_block  = config_data_def.build()
    index_block = config_index_def.build()

    records = bytearray()
    record_lengths = index_block.record_lengths
    for definition in definitions:
        length = write_record(definition, records)
        if length > c.MAX_RECORD_LENGTH:
            raise ValueError(
                f"Record for definition {definition.id} is {length} bytes, "
                f"but cannot be longer than {c.MAX_RECORD_LENGTH}."
                )

        record_lengths.append()
        record_lengths[-1].length = length

    data_block.definition_count  = len(definitions)
    index_block.definition_count = len(definitions)
    data_block.records = bytes(records)

    return bytes(data_block.serialize()), bytes(index_block.serialize())


class ConfigEncoder:
    '''
    Encodes a list of definitions into the data and index
    archive entries of the config table with the given name.
    '''
    name = ""
    definitions = ()

    def __init__(self, name, definitions):
        if not isinstance(name, str):
            raise TypeError(f"name must be of type str, not {type(name)}")
        elif definitions is None:
            raise TypeError("Definitions cannot be None.")

        self.name = name
        self.definitions = list(definitions)

    @property
    def data_entry_name(self): return self.name + c.DATA_EXTENSION
    @property
    def index_entry_name(self): return self.name + c.INDEX_EXTENSION

    def encode(self):
        data, index = encode_definitions(self.definitions)
        return (
            ArchiveEntry(hash_name(self.data_entry_name), data),
            ArchiveEntry(hash_name(self.index_entry_name), index),
            )

    def encode_into(self, archive):
        return archive.add_entries(self.encode())
