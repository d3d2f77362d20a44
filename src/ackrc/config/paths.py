"""Per-directory rc file probe (.ackrc / _ackrc)."""

import os
from typing import Optional
from ..utils.errors import ConfigConflictError

ACKRC_FILENAMES = (".ackrc", "_ackrc")


def check_for_ackrc(directory: Optional[str]) -> Optional[str]:
    """
    Find the rc file in a directory.
    
    Args:
        directory: Directory to probe. None or empty means "no such directory"
        
    Returns:
        Full path of the one rc file present, or None
        
    Raises:
        ConfigConflictError: If both .ackrc and _ackrc exist in the directory
    """
    if not directory:
        return None
    
    found = [
        path for path in (os.path.normpath(os.path.join(directory, name)) for name in ACKRC_FILENAMES)
        if os.path.isfile(path)
    ]
    
    if len(found) > 1:
        raise ConfigConflictError(
            directory,
            f"{directory} contains both {ACKRC_FILENAMES[0]} and {ACKRC_FILENAMES[1]}.\n"
            "Please remove one of those files."
        )
    
    return found[0] if found else None
