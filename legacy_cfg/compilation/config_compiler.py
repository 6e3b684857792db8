import pathlib

from traceback import format_exc
from ..archive.archive import Archive
from ..config.data_types import ArrayType
from ..config.decoder import ConfigDecoder
from ..config.definition import ConfigDefinition
from ..config.encoder import ConfigEncoder
from ..config.schema import build_property_map, schema_from_property_map
from . import constants as c
from . import util


def compile_table_metadata(metadata):
    '''
    Builds the definitions of a table from its metadata. Ids missing
    from the metadata become definitions with every property left at
    its default, so each definition's position in the list is its id.
    '''
    template = build_property_map(metadata.get("schema") or {})
    definitions_meta = {
        int(def_id): def_meta
        for def_id, def_meta in (metadata.get("definitions") or {}).items()
        }

    if definitions_meta and min(definitions_meta) < 0:
        raise ValueError(f"Definition ids must not be negative, not {min(definitions_meta)}")

    definition_count = max(
        int(metadata.get("definition_count", 0)),
        max(definitions_meta, default=-1) + 1
        )

    definitions = []
    for def_id in range(definition_count):
        definition = ConfigDefinition(def_id, template)
        for name, value in (definitions_meta.get(def_id) or {}).items():
            prop = definition.get_property(name)
            prop.set_value(prop.data_type.coerce(value))

        definitions.append(definition)

    return definitions


def decompile_table_metadata(definitions, template):
    definitions_meta = {}
    for definition in definitions:
        def_meta = {}
        for opcode, prop in definition.property_map.present_entries():
            def_meta[prop.name] = (
                list(prop.value) if isinstance(prop.data_type, ArrayType) else
                prop.value
                )

        if def_meta:
            definitions_meta[definition.id] = def_meta

    return dict(
        definition_count=len(definitions),
        schema=schema_from_property_map(template),
        definitions=definitions_meta,
        )


class ConfigCompiler:
    target_dir = "."
    target_tables = ()
    decompile_dir = None

    overwrite  = False
    asset_type = "yaml"
    serialize_entry_files = True

    def __init__(self, **kwargs):
        # simple initialization setup where kwargs are
        # copied into the attributes of this new class
        for k, v in kwargs.items():
            setattr(self, k, v)

    def get_table_metadata_filepaths(self):
        all_assets = util.locate_metadata(self.target_dir)
        if not self.target_tables:
            return all_assets

        table_filepaths = {}
        for table_name in self.target_tables:
            table_name = table_name.lower().strip()
            if table_name in all_assets:
                table_filepaths[table_name] = all_assets[table_name]
            else:
                print(f"Warning: Could not locate metadata for table '{table_name}'.")

        return table_filepaths

    def get_entry_filepaths(self, table_name):
        target_dir = pathlib.Path(self.target_dir)
        return (
            target_dir.joinpath(f"{table_name}.{c.DATA_FILE_EXTENSION}"),
            target_dir.joinpath(f"{table_name}.{c.INDEX_FILE_EXTENSION}"),
            )

    def compile(self):
        archive = Archive()
        table_filepaths = self.get_table_metadata_filepaths()
        for table_name in sorted(table_filepaths):
            metadata_filepath = table_filepaths[table_name]
            try:
                metadata = util.load_metadata(metadata_filepath)
                definitions = compile_table_metadata(metadata)
                entries = ConfigEncoder(table_name, definitions).encode()

                if self.serialize_entry_files:
                    self.write_entry_files(table_name, entries)

                archive = archive.add_entries(entries)
                print(f"Compiled {len(definitions)} definitions for table '{table_name}'")
            except Exception:
                print(format_exc())
                print(f"Could not compile config table from '{metadata_filepath}'")

        return archive

    def write_entry_files(self, table_name, entries):
        for filepath, entry in zip(self.get_entry_filepaths(table_name), entries):
            if filepath.is_file() and not self.overwrite:
                print(f"Skipping existing file '{filepath}'")
                continue

            filepath.parent.mkdir(parents=True, exist_ok=True)
            with filepath.open("wb") as fout:
                fout.write(entry.payload)

    def decompile(self):
        decompile_dir = pathlib.Path(
            self.decompile_dir or pathlib.Path(self.target_dir, c.DECOMPILE_FOLDERNAME)
            )
        decompiled = {}
        table_filepaths = self.get_table_metadata_filepaths()
        for table_name in sorted(table_filepaths):
            data_filepath, index_filepath = self.get_entry_filepaths(table_name)
            if not (data_filepath.is_file() and index_filepath.is_file()):
                continue

            try:
                metadata = util.load_metadata(table_filepaths[table_name])
                template = build_property_map(metadata.get("schema") or {})
                definitions = ConfigDecoder(template).decode(
                    data_filepath.read_bytes(), index_filepath.read_bytes()
                    )

                table_metadata = decompile_table_metadata(definitions, template)
                filepath = decompile_dir.joinpath(f"{table_name}.{self.asset_type}")
                if util.dump_metadata(table_metadata, filepath, self.overwrite):
                    print(f"Decompiled {len(definitions)} definitions to '{filepath}'")

                decompiled[table_name] = definitions
            except Exception:
                print(format_exc())
                print(f"Could not decompile config table '{table_name}'")

        return decompiled
