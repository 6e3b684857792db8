from . import constants as c


def hash_name(name):
    '''
    Returns the unsigned 32bit identifier the client uses to look
    up an archive entry by its display name(e.g. "obj.dat").
    '''
    if not isinstance(name, str):
        raise TypeError(f"name must be of type str, not {type(name)}")

    name_hash = 0
    for char in name.upper():
        name_hash = (
            name_hash * c.NAME_HASH_MULTIPLIER + ord(char) - c.NAME_HASH_CHAR_OFFSET
            ) & c.NAME_HASH_MASK

    return name_hash
