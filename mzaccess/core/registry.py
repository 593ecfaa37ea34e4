# mzaccess/core/registry.py
import gzip
import logging
from pathlib import Path
from typing import BinaryIO, Dict, Optional, Type

from ..config import COMPRESSED_SUFFIXES, FORMAT_SUFFIXES, SNIFF_BYTES

reader_registry: Dict[str, Type] = {}

_CONTENT_MARKERS = (
    (b"<indexedmzML", "mzml"),
    (b"<mzML", "mzml"),
    (b"BEGIN IONS", "mgf"),
)


def register_reader(format_name: str):
    """Class decorator that registers a spectrum source for ``format_name``."""

    def decorator(cls):
        reader_registry[format_name] = cls
        return cls

    return decorator


def get_reader_class(format_name: str) -> Type:
    try:
        return reader_registry[format_name]
    except KeyError:
        raise ValueError(f"No reader registered for format '{format_name}'") from None


def _strip_compression(path: Path) -> str:
    name = path.name.lower()
    for suffix in COMPRESSED_SUFFIXES:
        if name.endswith(suffix):
            return name[: -len(suffix)]
    return name


def is_compressed(path: Path) -> bool:
    return Path(path).name.lower().endswith(COMPRESSED_SUFFIXES)


def open_binary(path: Path) -> BinaryIO:
    """Open ``path`` for binary reading, decompressing ``.gz`` files on the fly."""
    if is_compressed(path):
        return gzip.open(path, "rb")
    return open(path, "rb")


def _sniff(path: Path) -> bytes:
    with open_binary(path) as handle:
        return handle.read(SNIFF_BYTES)


def sniff_format(input_path: Path) -> Optional[str]:
    """Return the format whose marker appears in the leading bytes of the file, if any."""
    head = _sniff(Path(input_path))
    for marker, format_name in _CONTENT_MARKERS:
        if marker in head:
            return format_name
    return None


def detect_format(input_path: Path) -> str:
    """
    Detect the spectrum file format.

    The file suffix decides first (``.gz`` is looked through), then the
    leading bytes of the file are searched for a format marker.

    Raises:
        ValueError: If the path is not a file or the format is unknown
    """
    input_path = Path(input_path)
    if not input_path.is_file():
        raise ValueError(f"Not a file: {input_path}")

    name = _strip_compression(input_path)
    for format_name, suffixes in FORMAT_SUFFIXES.items():
        if name.endswith(suffixes):
            return format_name

    format_name = sniff_format(input_path)
    if format_name is not None:
        logging.debug(f"Detected {format_name} from content of {input_path}")
        return format_name

    raise ValueError(f"Unable to detect format for: {input_path}")
