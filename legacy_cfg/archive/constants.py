# entry names are hashed as upper case, one character at a time
NAME_HASH_MULTIPLIER = 61
NAME_HASH_CHAR_OFFSET = 32
NAME_HASH_MASK = 0xFFFFFFFF

MAX_ENTRY_COUNT = 0xFFFF
