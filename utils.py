import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

SVG_SUFFIX = ".svg"

COLORS = {
    "DEBUG": "\033[36m",  # cyan
    "INFO": "\033[32m",  # green
    "WARNING": "\033[33m",  # yellow
    "ERROR": "\033[31m",  # red
    "CRITICAL": "\033[1;31m",  # bold red
}
COLOR_RESET = "\033[0m"

SEPARATOR_RE = re.compile(r"[-\s]+")


class ColorFormatter(logging.Formatter):
    def format(self, record):
        # Other handlers share the record, so colour a copy.
        record = logging.makeLogRecord(record.__dict__)
        color = COLORS.get(record.levelname, "")
        record.levelname = f"{color}{record.levelname}{COLOR_RESET}"
        return super().format(record)


def setup_logging():
    handler = logging.StreamHandler()
    handler.setFormatter(ColorFormatter("%(levelname)s %(message)s"))
    logging.root.addHandler(handler)
    logging.root.setLevel(logging.INFO)


def write_atomic(path: Path, content: str):
    """Replace path with content encoded as UTF-8.

    The text is encoded before anything touches the disk and lands through a
    sibling temp file, so on failure the previous file is left as it was.
    Raises OSError or UnicodeError.
    """
    data = content.encode("utf-8")
    tmp = path.with_name(f".{path.name}.tmp")
    try:
        tmp.write_bytes(data)
        os.replace(tmp, path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


def to_pascal_case(text: str) -> str:
    """Convert a file stem such as ``arrow-left`` into ``ArrowLeft``.

    Only hyphens and whitespace separate words; any other punctuation is kept.
    """
    words = SEPARATOR_RE.sub(" ", text).split(" ")
    return "".join(word[:1].upper() + word[1:] for word in words)


def get_export_path(input_dir: Path, output_dir: Path) -> str:
    """Module specifier prefix pointing from output_dir to input_dir, e.g. ``../../assets/svg/``."""
    relative = Path(os.path.relpath(input_dir, output_dir)).as_posix()
    if relative not in (".", "..") and not relative.startswith(("./", "../")):
        relative = f"./{relative}"
    return relative if relative.endswith("/") else f"{relative}/"


def filter_svg_files(names: Iterable[str]) -> List[str]:
    return [name for name in names if name.endswith(SVG_SUFFIX)]


def get_svg_stem(name: str) -> str:
    return name[: -len(SVG_SUFFIX)] if name.endswith(SVG_SUFFIX) else name


@dataclass(frozen=True)
class IconFile:
    filename: str

    def __post_init__(self):
        if not self.filename.endswith(SVG_SUFFIX):
            raise ValueError(f"Icon file must end with {SVG_SUFFIX} (filename={self.filename})")

    @property
    def stem(self) -> str:
        return get_svg_stem(self.filename)

    @property
    def component_name(self) -> str:
        return f"Icon{to_pascal_case(self.stem)}"


def list_icon_files(input_dir: Path) -> List[IconFile]:
    """List the SVG files in input_dir, in directory-listing order.

    Raises OSError if the directory cannot be read.
    """
    return [IconFile(name) for name in filter_svg_files(p.name for p in input_dir.iterdir())]
