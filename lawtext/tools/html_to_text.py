# tools/html_to_text.py
# Prints the visible body text of one UTF-8 HTML file.
import sys
from typing import List, Optional

from lawtext import config
from lawtext.exceptions import ExtractionError
from lawtext.extractor import extract_file

USAGE = "usage: lawtext-html2txt <file.htm>"


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 1:
        print(USAGE)
        return 2
    config.setup_logging()
    try:
        text = extract_file(args[0])
    except ExtractionError:
        # already logged by extract_file
        return 1
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
