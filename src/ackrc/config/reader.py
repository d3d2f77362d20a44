"""Read an rc file into option lines."""

import os
from typing import Iterator, Optional
from ..utils.errors import RcReadError
from ..utils.logging import get_logger

logger = get_logger("config.reader")

COMMENT_PREFIX = "#"


def read_rcfile(path: Optional[str]) -> Iterator[str]:
    """
    Yield the option lines of an rc file.
    
    Each line is stripped of surrounding whitespace. Blank lines and lines
    starting with '#' are skipped. Nothing else is interpreted.
    
    A missing or vanished file (or no path at all) yields nothing. Bytes that
    are not UTF-8 are kept as surrogate escapes. The file is opened on
    first iteration and closed before the iterator finishes or raises.
    
    Args:
        path: Path of the rc file
        
    Yields:
        Non-empty, non-comment, stripped lines
        
    Raises:
        RcReadError: If the file exists but cannot be read
    """
    if path is None or not os.path.exists(path):
        logger.debug(f"Skipping missing rc file: {path}")
        return
    
    try:
        f = open(path, "r", encoding="utf-8", errors="surrogateescape")
    except FileNotFoundError:
        logger.debug(f"rc file vanished before reading: {path}")
        return
    except OSError as e:
        raise RcReadError(path, f"Unable to read {path}: {e.strerror or e}") from e
    
    with f:
        try:
            for line in f:
                line = line.strip()
                if not line or line.startswith(COMMENT_PREFIX):
                    continue
                yield line
        except OSError as e:
            raise RcReadError(path, f"Unable to read {path}: {e.strerror or e}") from e
