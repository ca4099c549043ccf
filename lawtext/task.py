# task.py
#   Turns the command line of the batch converter into a ProcessingTask.
#   Every problem with the arguments ends in "no task" (None), never an exception.

import argparse
import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from . import config
from .exceptions import UsageError

logger = logging.getLogger(__name__)

PROG = "lawtext-transcode"


@dataclass(frozen=True)
class ProcessingTask:
    input_dir: Path
    output_dir: Path
    mask: str = config.DEFAULT_MASK
    # key into transcoder.READ_STRATEGIES
    read_strategy: str = "legacy"
    progress: bool = True


class TaskArgumentParser(argparse.ArgumentParser):
    # argparse calls sys.exit() on bad input; a bad command line here only means "no task"
    def error(self, message):
        raise UsageError(message)


def _help_parser() -> TaskArgumentParser:
    ap = TaskArgumentParser(prog=PROG, add_help=False)
    ap.add_argument("-h", "--help", action="store_true")
    return ap


def make_parser() -> TaskArgumentParser:
    ap = TaskArgumentParser(
        prog=PROG,
        usage="%(prog)s OPTIONS",
        description="Re-encode Windows-1251 documents in a directory to UTF-8.",
        add_help=False,
    )
    ap.add_argument("-h", "--help", action="store_true", help="Show this help and exit")
    ap.add_argument("-s", "--src", metavar="DIR", required=True,
                    help="A directory that contains all the input files")
    ap.add_argument("-d", "--dest", metavar="DIR", required=True,
                    help="A directory where to store the processed files")
    ap.add_argument("-m", "--mask", metavar="PATTERN", default=config.DEFAULT_MASK,
                    help="A wildcard (* and ?) that selects the files to process. "
                         f"Case-insensitive. Default: \"{config.DEFAULT_MASK}\"")
    ap.add_argument("--fallback-utf8", action="store_true",
                    help="Read the input files as UTF-8 instead of Windows-1251")
    ap.add_argument("-q", "--quiet", action="store_true", help="Do not show a progress bar")
    return ap


def show_help(parser: Optional[argparse.ArgumentParser] = None):
    (parser or make_parser()).print_help()


def _existing_dir(name: str, log: logging.Logger) -> Optional[Path]:
    path = Path(name)
    try:
        st = os.stat(path)
    except ValueError as e:
        # e.g. an embedded NUL byte
        log.error(f"Invalid path {name!r}: {e}")
        return None
    except OSError:
        st = None
    if st is None or not stat.S_ISDIR(st.st_mode):
        log.error(f"Directory not exists {name}")
        return None
    return path


def wants_help(argv: List[str]) -> bool:
    """True when argv is empty or carries -h/--help anywhere, whatever else it holds."""
    if not argv:
        return True
    try:
        ns, _ = _help_parser().parse_known_args(argv)
    except UsageError:
        return False
    return ns.help


def build_task(argv: List[str], log: logging.Logger = logger) -> Optional[ProcessingTask]:
    """
    Read the command line and describe the files to be processed.

    Returns None when help was requested or when there is not enough valid
    information about the source and destination directories.
    """
    parser = make_parser()

    if wants_help(argv):
        show_help(parser)
        return None

    try:
        ns = parser.parse_args(argv)
    except UsageError as e:
        log.error(str(e))
        show_help(parser)
        return None

    src = _existing_dir(ns.src, log)
    if src is None:
        return None
    dest = _existing_dir(ns.dest, log)
    if dest is None:
        return None

    return ProcessingTask(
        input_dir=src,
        output_dir=dest,
        mask=ns.mask,
        read_strategy="utf8" if ns.fallback_utf8 else "legacy",
        progress=not ns.quiet,
    )
