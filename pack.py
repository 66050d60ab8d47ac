#!python3
"""Pack the SVG directory listing into types.ts and icons.ts."""

import argparse
import logging
from pathlib import Path
from typing import Dict, Optional, Sequence

from templates import TypeScriptSyntax
from utils import IconFile, get_export_path, list_icon_files, setup_logging, write_atomic

TYPES_FILENAME = "types.ts"
ICONS_FILENAME = "icons.ts"


def _load_icons(input_dir: Path, files: Optional[Sequence[IconFile]]):
    if files is not None:
        return list(files)
    return list_icon_files(input_dir)


def warn_collisions(files: Sequence[IconFile]):
    """Log every pair of files that map to the same component name."""
    seen: Dict[str, str] = {}
    for icon in files:
        previous = seen.get(icon.component_name)
        if previous is not None:
            logging.warning(
                f"{icon.filename} and {previous} both generate {icon.component_name}."
            )
        seen[icon.component_name] = icon.filename


def create_icon_types_file(
    input_dir: Path,
    output_dir: Path,
    filename: str = TYPES_FILENAME,
    files: Optional[Sequence[IconFile]] = None,
) -> bool:
    """Write the list of icon names and the IconType union to output_dir/filename.

    Returns False (and leaves the file alone) if the directory cannot be listed
    or the file cannot be written.
    """
    try:
        icons = _load_icons(input_dir, files)
        content = TypeScriptSyntax.names_list([icon.stem for icon in icons])
        write_atomic(output_dir / filename, content)
    except (OSError, UnicodeError) as e:
        logging.error(f"🚨 {filename} generation failure: {e}")
        return False

    logging.info(f"💚 {filename} generated")
    return True


def create_icons_file(
    input_dir: Path,
    output_dir: Path,
    filename: str = ICONS_FILENAME,
    files: Optional[Sequence[IconFile]] = None,
) -> bool:
    """Write one ReactComponent re-export per SVG to output_dir/filename."""
    try:
        icons = _load_icons(input_dir, files)
        if icons:
            export_path = get_export_path(input_dir, output_dir)
            content = "".join(
                TypeScriptSyntax.reexport(icon.component_name, f"{export_path}{icon.filename}")
                for icon in icons
            )
        else:
            content = TypeScriptSyntax.empty_module()
        write_atomic(output_dir / filename, content)
    except (OSError, UnicodeError) as e:
        logging.error(f"🚨 {filename} generation failure: {e}")
        return False

    logging.info(f"💚 {filename} generated")
    return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Pack an SVG directory into types.ts and icons.ts")
    parser.add_argument("--input", type=Path, required=True, help="Directory containing SVG files")
    parser.add_argument("--output", type=Path, required=True, help="Directory for the generated files")
    args = parser.parse_args()

    setup_logging()
    create_icon_types_file(args.input, args.output)
    create_icons_file(args.input, args.output)
