from pathlib import Path

import pytest


@pytest.fixture
def write_words(tmp_path: Path):
    def _write(lines, name="words.txt") -> Path:
        fp = tmp_path / name
        fp.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return fp

    return _write
