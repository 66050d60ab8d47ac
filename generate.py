#!python3
import argparse
import logging
from pathlib import Path

from pack import ICONS_FILENAME, TYPES_FILENAME, create_icon_types_file, create_icons_file, warn_collisions
from svg import clean_svgs
from templates import SCAFFOLD
from utils import list_icon_files, setup_logging, write_atomic


def create_folders(input_dir: Path, output_dir: Path):
    for folder in (input_dir, output_dir):
        if folder.exists():
            logging.info(f"📁 Folder already exists: {folder}")
            continue
        folder.mkdir(parents=True, exist_ok=True)
        logging.info(f"✅ Created folder: {folder}")


def create_files_from_templates(output_dir: Path):
    """Write the scaffold files that are missing from output_dir. Existing files are never touched."""
    for template in SCAFFOLD:
        path = output_dir / template.filename
        if path.exists():
            logging.info(f"📄 File already exists: {template.filename}")
            continue
        try:
            write_atomic(path, template.content)
        except (OSError, UnicodeError) as e:
            logging.error(f"🚨 {template.filename} creation failure: {e}")
            continue
        logging.info(f"✅ Created file: {template.filename}")


def generate(
    input_dir: Path,
    output_dir: Path,
    clean_svg: bool = False,
    types_filename: str = TYPES_FILENAME,
    icons_filename: str = ICONS_FILENAME,
):
    input_dir, output_dir = Path(input_dir), Path(output_dir)

    create_folders(input_dir, output_dir)
    create_files_from_templates(output_dir)

    # Both modules are built from the same listing.
    try:
        icons = list_icon_files(input_dir)
    except OSError as e:
        logging.error(f"🚨 {types_filename} generation failure: {e}")
        logging.error(f"🚨 {icons_filename} generation failure: {e}")
        icons = None

    if icons is not None:
        warn_collisions(icons)
        create_icon_types_file(input_dir, output_dir, types_filename, files=icons)
        create_icons_file(input_dir, output_dir, icons_filename, files=icons)
        logging.debug(f"{len(icons)} icons found in {input_dir}")

    if clean_svg:
        clean_svgs(input_dir)


def main(args):
    generate(
        args.input,
        args.output,
        clean_svg=args.clean,
        types_filename=args.types_file,
        icons_filename=args.icons_file,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate typed React icon components from a directory of SVG files."
    )
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Input directory containing SVG files",
    )
    parser.add_argument(
        "--output",
        type=Path,
        required=True,
        help="Output directory for generated React icon files",
    )
    parser.add_argument(
        "--clean",
        action="store_true",
        help="Remove width, height and fill attributes from the SVG files",
    )
    parser.add_argument(
        "--types-file",
        default=TYPES_FILENAME,
        help="Name of the generated icon type file",
    )
    parser.add_argument(
        "--icons-file",
        default=ICONS_FILENAME,
        help="Name of the generated icon re-export file",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def cli():
    args = build_parser().parse_args()

    setup_logging()
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    main(args)


if __name__ == "__main__":
    cli()
