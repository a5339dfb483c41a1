"""
Tests for writing generated source files.
"""

import pytest

from modelgen.codegen.core.errors import FilesystemWriteError, PreexistingTargetError
from modelgen.codegen.core.writer import SourceWriter


def test_creates_missing_directories(tmp_path):
    target = tmp_path / "Models" / "Blog" / "Post.php"

    written = SourceWriter().write(target, "<?php\n")

    assert written == target
    assert target.read_text(encoding="utf-8") == "<?php\n"


def test_refuses_to_overwrite(tmp_path):
    target = tmp_path / "Post.php"
    target.write_text("original", encoding="utf-8")

    with pytest.raises(PreexistingTargetError) as exc_info:
        SourceWriter().write(target, "replacement")

    assert exc_info.value.path == target
    assert target.read_text(encoding="utf-8") == "original"


def test_force_overwrites(tmp_path):
    target = tmp_path / "Post.php"
    target.write_text("original", encoding="utf-8")

    SourceWriter().write(target, "replacement", force=True)

    assert target.read_text(encoding="utf-8") == "replacement"


def test_unwritable_directory(tmp_path):
    # A regular file where the parent directory should be
    blocker = tmp_path / "Models"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(FilesystemWriteError):
        SourceWriter().write(blocker / "Post.php", "<?php\n")
