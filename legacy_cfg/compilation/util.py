import json
import os
import pathlib
import yaml

from . import constants as c


def locate_assets(data_dir, extensions):
    assets = {}
    for root, dirs, files in os.walk(data_dir):
        for filename in sorted(files):
            filepath = pathlib.Path(root, filename)
            asset_name = filepath.stem.lower()
            if filepath.suffix.lower().lstrip(".") not in extensions:
                continue

            if asset_name in assets:
                print(f"Warning: Skipping duplicate asset '{filepath.as_posix()}'.")
                continue

            assets[asset_name] = filepath

        # tables are only looked for at the top of the directory
        break

    return assets


def locate_metadata(data_dir):
    return locate_assets(data_dir, c.METADATA_ASSET_EXTENSIONS)


def load_metadata(filepath):
    filepath    = pathlib.Path(filepath)
    asset_type  = filepath.suffix.strip(".").lower()
    if asset_type in ("yaml", "yml"):
        with filepath.open() as f:
            metadata = yaml.safe_load(f)
    elif asset_type == "json":
        with filepath.open() as f:
            metadata = json.load(f)
    else:
        raise ValueError("Unknown metadata asset type '%s'" % asset_type)

    if not isinstance(metadata, dict):
        raise ValueError(
            f"Expected dict at top level of metadata, but got {type(metadata)}."
            )

    return metadata


def dump_metadata(metadata, filepath, overwrite=False):
    filepath    = pathlib.Path(filepath)
    asset_type  = filepath.suffix.strip(".").lower()
    if filepath.is_file() and not overwrite:
        return False
    elif asset_type in ("yaml", "yml"):
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with filepath.open('w') as f:
            yaml.safe_dump(metadata, f)
    elif asset_type in ("json", ):
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with filepath.open('w') as f:
            json.dump(metadata, f, sort_keys=True, indent=2)
    else:
        raise ValueError("Unknown metadata asset type '%s'" % asset_type)

    return True
