# transcoder.py
#   Reads one legacy-encoded text file and writes it back out as UTF-8.
#   A file that cannot be read or decoded is logged and skipped, never fatal.

import logging
from pathlib import Path
from typing import Callable, Dict, List

from . import config

logger = logging.getLogger(__name__)

Reader = Callable[[Path], List[str]]


def read_lines(path: Path, encoding: str) -> List[str]:
    """
    Reads the whole file with a strict decoder and returns its lines
    without terminators. \\n, \\r\\n and \\r all end a line.
    """
    # newline=None turns every line ending into "\n"
    with open(path, "r", encoding=encoding, errors="strict", newline=None) as f:
        return [line.rstrip("\n") for line in f]


def read_legacy(path: Path) -> List[str]:
    return read_lines(path, config.LEGACY_ENCODING)


def read_utf8(path: Path) -> List[str]:
    """Reads a source that is already UTF-8. Only used when explicitly requested."""
    return read_lines(path, config.UNIVERSAL_ENCODING)


READ_STRATEGIES: Dict[str, Reader] = {
    "legacy": read_legacy,
    "utf8": read_utf8,
}


def write_lines(path: Path, lines: List[str]):
    """Writes one line per entry, each followed by "\\n". Truncates an existing file."""
    with open(path, "w", encoding=config.UNIVERSAL_ENCODING, newline="\n") as f:
        for line in lines:
            f.write(line + "\n")


def transcode_file(src: Path, dest: Path, read: Reader = read_legacy,
                   log: logging.Logger = logger) -> bool:
    """Converts src into dest. Returns False when the file was skipped."""
    log.info(f"Converting {src} --> {dest}")
    try:
        lines = read(src)
        write_lines(dest, lines)
    except (UnicodeDecodeError, OSError) as e:
        log.error(str(e))
        log.error(f"File was skipped {src}")
        return False
    return True
