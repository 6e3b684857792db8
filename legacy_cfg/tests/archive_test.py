import pytest

from setup_tests import *

from legacy_cfg.archive.archive import Archive, ArchiveEntry
from legacy_cfg.archive.util import hash_name


class TestArchive:
    def test_hash_name_known_values(self):
        assert hash_name("") == 0
        assert hash_name("A") == 33
        assert hash_name("ab") == 33*61 + 34


    def test_hash_name_ignores_case(self):
        assert hash_name("obj.dat") == hash_name("OBJ.DAT")
        assert hash_name("obj.dat") != hash_name("obj.idx")


    def test_hash_name_is_unsigned_32bit(self):
        name_hash = hash_name("a_rather_long_entry_name_that_overflows.dat")
        assert 0 <= name_hash <= 0xFFFFFFFF


    def test_hash_name_rejects_non_strings(self):
        with pytest.raises(TypeError):
            hash_name(b"obj.dat")


    def test_entry_validation(self):
        with pytest.raises(ValueError):
            ArchiveEntry(-1, b'')
        with pytest.raises(ValueError):
            ArchiveEntry(1 << 32, b'')
        with pytest.raises(TypeError):
            ArchiveEntry(1, "not bytes")

        entry = ArchiveEntry.from_name("obj.dat", bytearray(b'\x00\x00'))
        assert entry.identifier == hash_name("obj.dat")
        assert entry.payload == b'\x00\x00'
        assert isinstance(entry.payload, bytes)


    def test_add_entries_returns_new_archive(self):
        old_entry = ArchiveEntry.from_name("obj.dat", b'old')
        archive = Archive([old_entry, ArchiveEntry.from_name("obj.idx", b'idx')])

        new_archive = archive.add_entries([
            ArchiveEntry.from_name("obj.dat", b'new'),
            ArchiveEntry.from_name("npc.dat", b'npc'),
            ])

        assert len(archive) == 2
        assert archive.get_entry("obj.dat") is old_entry
        assert len(new_archive) == 3
        assert new_archive.get_entry("obj.dat").payload == b'new'
        assert new_archive.get_entry(hash_name("npc.dat")).payload == b'npc'
        assert "obj.idx" in new_archive


    def test_missing_entry_raises(self):
        with pytest.raises(KeyError):
            Archive().get_entry("obj.dat")
