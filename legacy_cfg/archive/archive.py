from . import constants as c
from .util import hash_name


class ArchiveEntry:
    _identifier = 0
    _payload = b''

    def __init__(self, identifier, payload=b''):
        if not isinstance(identifier, int) or isinstance(identifier, bool):
            raise TypeError(f"identifier must be of type int, not {type(identifier)}")
        elif identifier < 0 or identifier > c.NAME_HASH_MASK:
            raise ValueError(f"identifier must be an unsigned 32bit value, not {identifier}")
        elif not isinstance(payload, (bytes, bytearray, memoryview)):
            raise TypeError(f"payload must be bytes-like, not {type(payload)}")

        self._identifier = identifier
        self._payload    = bytes(payload)

    @classmethod
    def from_name(cls, name, payload=b''):
        return cls(hash_name(name), payload)

    @property
    def identifier(self): return self._identifier
    @property
    def payload(self): return self._payload
    @property
    def size(self): return len(self._payload)

    def __eq__(self, other):
        if not isinstance(other, ArchiveEntry):
            return NotImplemented
        return (self.identifier, self.payload) == (other.identifier, other.payload)

    def __hash__(self):
        return hash((self.identifier, self.payload))

    def __repr__(self):
        return f"ArchiveEntry(identifier={self.identifier:#010x}, size={self.size})"


class Archive:
    '''
    An in-memory set of archive entries keyed by their identifier.
    Archives are never modified in place; adding entries returns a
    new Archive so earlier references keep seeing the old contents.
    '''
    _entries = ()

    def __init__(self, entries=()):
        self._entries = {}
        for entry in entries:
            self._put_entry(entry)

    def _put_entry(self, entry):
        if not isinstance(entry, ArchiveEntry):
            raise TypeError(f"entry must be of type ArchiveEntry, not {type(entry)}")
        elif (entry.identifier not in self._entries and
              len(self._entries) >= c.MAX_ENTRY_COUNT):
            raise ValueError(f"Archive cannot hold more than {c.MAX_ENTRY_COUNT} entries.")

        self._entries[entry.identifier] = entry

    @property
    def entries(self): return tuple(self._entries.values())

    def add_entries(self, entries):
        new_archive = Archive(self._entries.values())
        for entry in entries:
            new_archive._put_entry(entry)

        return new_archive

    def get_entry(self, key):
        identifier = hash_name(key) if isinstance(key, str) else key
        try:
            return self._entries[identifier]
        except KeyError:
            raise KeyError(f"No archive entry '{key}' exists.") from None

    def __contains__(self, key):
        identifier = hash_name(key) if isinstance(key, str) else key
        return identifier in self._entries

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries.values())
