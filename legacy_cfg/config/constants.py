# the fixed extensions appended to a table name to name its archive entries
DATA_EXTENSION  = ".dat"
INDEX_EXTENSION = ".idx"

# every record ends with this byte, so it can never be used as an opcode
DEFINITION_TERMINATOR = 0
RESERVED_OPCODE = DEFINITION_TERMINATOR

# opcodes are written as a single unsigned byte
MIN_OPCODE = 1
MAX_OPCODE = 0xFF

# counts and record lengths are written as unsigned shorts
MAX_DEFINITION_COUNT = 0xFFFF
MAX_RECORD_LENGTH    = 0xFFFF

STRING_TERMINATOR = 10  # '\n'
STRING_ENCODING   = "latin-1"

ARRAY_TYPE_SUFFIX = "_array"
MAX_ARRAY_LENGTH  = 0xFF
