# tools/transcode_dir.py
# Re-encodes every matching Windows-1251 file in one directory (not its
# subdirectories) into UTF-8 files of the same name in another directory.
import logging
import sys
from typing import List, Optional

from lawtext import config
from lawtext.scanner import scan
from lawtext.task import build_task


def main(argv: Optional[List[str]] = None) -> int:
    config.setup_logging()
    task = build_task(sys.argv[1:] if argv is None else argv)
    if task is None:
        # help, or nothing valid to work on
        return 0

    report = scan(task, progress=task.progress)
    if report.failed:
        logging.error(f"[fail] could not list {task.input_dir}")
        return 1
    logging.info(f"[ok] {len(report.converted)} converted, {len(report.skipped)} skipped "
                 f"({task.input_dir} -> {task.output_dir})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
