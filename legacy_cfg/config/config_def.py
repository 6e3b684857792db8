from supyr_struct.defs.block_def import BlockDef
from supyr_struct.defs.common_descs import remaining_data_length
from supyr_struct.field_types import *


record_length = QStruct("record_length",
    UInt16("length")
    )

# NOTE: records are opcode/payload pairs ending in a 0 byte. payload widths
#       depend on the table's schema, so the records are kept as one blob
#       and split apart using the lengths in the index stream.
config_data_def = BlockDef("config_data",
    UInt16("definition_count"),
    BytesRaw("records", SIZE=remaining_data_length),
    endian=">"
    )

config_index_def = BlockDef("config_index",
    UInt16("definition_count"),
    Array("record_lengths",
        SUB_STRUCT=record_length,
        SIZE=".definition_count"
        ),
    endian=">"
    )
