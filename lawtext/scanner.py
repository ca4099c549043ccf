# scanner.py
#   Walks exactly one directory level and hands every matching regular file
#   to the transcoder. Subdirectories are never entered.

import logging
import os
import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import List

from tqdm import tqdm

from .task import ProcessingTask
from . import transcoder

logger = logging.getLogger(__name__)


@dataclass
class ScanReport:
    converted: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    # the source directory could not be listed
    failed: bool = False


@lru_cache(maxsize=64)
def _mask_regex(mask: str) -> re.Pattern:
    parts = []
    for ch in mask:
        if ch == "*":
            parts.append(".*")
        elif ch == "?":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    return re.compile("".join(parts), re.IGNORECASE | re.DOTALL)


def matches(name: str, mask: str) -> bool:
    """
    Case-insensitive wildcard match of a whole filename.

    `*` matches any run of characters (also none), `?` exactly one.
    Everything else is literal, so "*.*" needs a dot somewhere in the name.
    """
    return _mask_regex(mask).fullmatch(name) is not None


def list_matching(task: ProcessingTask) -> List[Path]:
    """
    Regular files directly inside task.input_dir whose names match task.mask,
    sorted by name. Raises OSError when the directory cannot be listed.
    """
    found = []
    with os.scandir(task.input_dir) as it:
        for entry in it:
            path = Path(entry.path)
            if path.parent != task.input_dir:
                continue
            # symlinks are not regular files
            if not entry.is_file(follow_symlinks=False):
                continue
            if matches(entry.name, task.mask):
                found.append(path)
    return sorted(found, key=lambda p: p.name)


def scan(task: ProcessingTask, log: logging.Logger = logger, progress: bool = False) -> ScanReport:
    report = ScanReport()
    try:
        files = list_matching(task)
    except OSError as e:
        log.error(str(e))
        report.failed = True
        return report

    read = transcoder.READ_STRATEGIES[task.read_strategy]
    for src in tqdm(files, desc=f"Converting {task.input_dir.name}", disable=not progress):
        dest = task.output_dir / src.name
        if transcoder.transcode_file(src, dest, read=read, log=log):
            report.converted.append(src)
        else:
            report.skipped.append(src)
    return report
