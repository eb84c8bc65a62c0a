from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Sequence

log = logging.getLogger(__name__)

OUTPUT_SUFFIX = "_output"
OUTPUT_EXT = ".txt"


def output_path_for(input_path: Path, directory: Optional[Path] = None) -> Path:
    """
    words.txt -> <directory or cwd>/words_output.txt
    """
    base = Path(directory) if directory is not None else Path.cwd()
    return base / f"{Path(input_path).stem}{OUTPUT_SUFFIX}{OUTPUT_EXT}"


def write_lines(out_path: Path, lines: Sequence[str]) -> bool:
    """
    Write lines joined by the platform line separator.
    Returns False (and logs) on I/O failure instead of raising.
    """
    data = os.linesep.join(lines)
    try:
        # newline="" keeps os.linesep as is on every platform
        with Path(out_path).open("w", encoding="utf-8", newline="") as f:
            f.write(data)
    except OSError as e:
        log.error("could not write %s: %s", out_path, e)
        return False
    log.debug("wrote %d lines to %s", len(lines), out_path)
    return True
