import logging
import re
from pathlib import Path

from tqdm import tqdm

from utils import list_icon_files, write_atomic

# width/height/fill attributes with either quote style, together with the
# whitespace before them. stroke-width and data-fill are not preceded by whitespace.
PRESENTATION_ATTR_RE = re.compile(r"""\s+(?:width|height|fill)\s*=\s*(?:"[^"]*"|'[^']*')""")


def strip_presentation_attributes(svg_text: str):
    """Remove width/height/fill attributes. Returns the new text and the count removed."""
    return PRESENTATION_ATTR_RE.subn("", svg_text)


def cleanup_svg(path: Path) -> bool:
    """Strip presentation attributes from the SVG at path, rewriting it in place.

    Everything else in the file is kept byte for byte. Returns False if the
    file could not be read, decoded or written back; it is left untouched then.
    """
    try:
        source = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeError) as e:
        logging.warning(f"🚨 Skipped {path.name}: {e}")
        return False

    svg_text, removed = strip_presentation_attributes(source)
    if removed:
        try:
            write_atomic(path, svg_text)
        except (OSError, UnicodeError) as e:
            logging.error(f"🚨 Could not rewrite {path.name}: {e}")
            return False

    logging.debug(f"🧹 Cleaned {path.name} ({removed} attributes removed)")
    return True


def clean_svgs(input_dir: Path) -> int:
    """Clean every SVG in input_dir. Returns the number of files processed."""
    try:
        icons = list_icon_files(input_dir)
    except OSError as e:
        logging.error(f"🚨 Could not list {input_dir}: {e}")
        return 0

    cleaned = 0
    for icon in tqdm(icons, desc="Cleaning SVGs", unit=" files"):
        if cleanup_svg(input_dir / icon.filename):
            cleaned += 1

    logging.info(f"🧹 Cleaned {cleaned} of {len(icons)} SVG files")
    return cleaned
