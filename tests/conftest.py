"""
Shared fixtures for lawtext tests.
"""

import pytest


# ============================================================================
# Filesystem Fixtures
# ============================================================================

@pytest.fixture
def src_dir(tmp_path):
    """Empty source directory for a batch run."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def dest_dir(tmp_path):
    """Empty destination directory for a batch run."""
    path = tmp_path / "conv"
    path.mkdir()
    return path


@pytest.fixture
def legacy_file():
    """Factory writing text into a file encoded as Windows-1251."""
    def _write(path, text):
        path.write_bytes(text.encode("windows-1251"))
        return path
    return _write


@pytest.fixture
def law_archive(src_dir, legacy_file):
    """
    A downloaded archive as found on disk.

    Structure:
    - d0001.htm      (Cyrillic, matches d0*.htm)
    - D0002.HTM      (upper case name, matches d0*.htm)
    - d4501.htm      (does not match d0*.htm)
    - readme         (no extension, never matches *.*)
    - sub/d0003.htm  (matches, but lives one level too deep)
    """
    legacy_file(src_dir / "d0001.htm", "<html><body>Закон України</body></html>\n")
    legacy_file(src_dir / "D0002.HTM", "<html><body>Постанова</body></html>\n")
    legacy_file(src_dir / "d4501.htm", "<html><body>Указ</body></html>\n")
    (src_dir / "readme").write_text("index of the archive\n", encoding="ascii")
    sub = src_dir / "sub"
    sub.mkdir()
    legacy_file(sub / "d0003.htm", "<html><body>Наказ</body></html>\n")
    return src_dir
