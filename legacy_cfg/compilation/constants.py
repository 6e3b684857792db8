from ..config.constants import DATA_EXTENSION, INDEX_EXTENSION

METADATA_ASSET_EXTENSIONS = ("yaml", "yml", "json")

# loose entry payloads are written beside the table metadata
DATA_FILE_EXTENSION  = DATA_EXTENSION.lstrip(".")
INDEX_FILE_EXTENSION = INDEX_EXTENSION.lstrip(".")

DECOMPILE_FOLDERNAME = "decompiled"
