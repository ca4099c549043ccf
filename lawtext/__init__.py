"""Convert an archive of Windows-1251 law documents into a UTF-8 text corpus.

Entry points:
- lawtext-transcode: batch re-encoding of one directory level
- lawtext-html2txt: body text of a single HTML file
"""

from .exceptions import ExtractionError, LawTextError, UsageError
from .extractor import body_text, extract_file
from .scanner import ScanReport, matches, scan
from .task import ProcessingTask, build_task
from .transcoder import READ_STRATEGIES, transcode_file

__all__ = [
    "ExtractionError",
    "LawTextError",
    "UsageError",
    "body_text",
    "extract_file",
    "ScanReport",
    "matches",
    "scan",
    "ProcessingTask",
    "build_task",
    "READ_STRATEGIES",
    "transcode_file",
]
