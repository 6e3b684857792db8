from supyr_struct.buffer import BytesBuffer

from ..archive.util import hash_name
from . import constants as c
from .config_def import config_data_def, config_index_def
from .definition import ConfigDefinition
from .property_map import ConfigPropertyMap


def read_record_lengths(index):
    if len(index) < 2:
        raise ValueError("Index stream is too short to hold a definition count.")

    definition_count = int.from_bytes(index[:2], 'big')
    if len(index) != 2 + 2*definition_count:
        raise ValueError(
            f"Index stream holds {len(index)} bytes, but {definition_count} "
            f"definitions require {2 + 2*definition_count}."
            )

    # NOTE: supyr_struct can't seek to the start of a BytesBuffer, so
    #       streams are parsed from a bytearray instead.
    index_block = config_index_def.build(rawdata=bytearray(index))
    return [record.length for record in index_block.record_lengths]


def read_record(record, definition):
    buffer = BytesBuffer(record)
    while True:
        opcode_data = buffer.read(1)
        if not opcode_data:
            raise ValueError(
                f"Record for definition {definition.id} is missing its terminator."
                )

        opcode = opcode_data[0]
        if opcode == c.DEFINITION_TERMINATOR:
            break

        try:
            definition.get_property(opcode).decode(buffer)
        except KeyError:
            raise KeyError(
                f"Record for definition {definition.id} uses unknown opcode {opcode}."
                ) from None

    if buffer.tell() != len(record):
        raise ValueError(
            f"Record for definition {definition.id} has {len(record) - buffer.tell()} "
            "bytes after its terminator."
            )


class ConfigDecoder:
    '''
    Decodes the data and index entries of a config table back into
    definitions. Payload widths are not stored in the records, so the
    template property map describing the table's schema is required.
    '''
    template = None
    definition_cls = ConfigDefinition

    def __init__(self, template, definition_cls=None):
        if not isinstance(template, ConfigPropertyMap):
            raise TypeError(f"template must be of type ConfigPropertyMap, not {type(template)}")

        self.template = template
        if definition_cls is not None:
            self.definition_cls = definition_cls

    def decode(self, data, index):
        record_lengths = read_record_lengths(index)
        if len(data) < 2:
            raise ValueError("Data stream is too short to hold a definition count.")

        data_block = config_data_def.build(rawdata=bytearray(data))
        if data_block.definition_count != len(record_lengths):
            raise ValueError(
                f"Data stream holds {data_block.definition_count} definitions, "
                f"but index stream holds {len(record_lengths)}."
                )

        records = bytes(data_block.records)
        if sum(record_lengths) != len(records):
            raise ValueError(
                f"Index stream describes {sum(record_lengths)} bytes of records, "
                f"but data stream holds {len(records)}."
                )

        definitions = []
        offset = 0
        for i, length in enumerate(record_lengths):
            definition = self.definition_cls(i, self.template)
            read_record(records[offset: offset + length], definition)
            definitions.append(definition)
            offset += length

        return definitions

    def decode_from(self, archive, name):
        return self.decode(
            archive.get_entry(hash_name(name + c.DATA_EXTENSION)).payload,
            archive.get_entry(hash_name(name + c.INDEX_EXTENSION)).payload,
            )
