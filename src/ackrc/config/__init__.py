"""Configuration module: locate rc files and read their option lines."""

from typing import List, Optional, Tuple
from ..contracts.config_file import ConfigFileRef
from ..utils.logging import get_logger
from .paths import check_for_ackrc, ACKRC_FILENAMES
from .finder import ConfigFinder, remove_redundancies
from .reader import read_rcfile

logger = get_logger("config")


def load_rc_arguments(finder: Optional[ConfigFinder] = None) -> List[Tuple[ConfigFileRef, List[str]]]:
    """
    Locate rc files and read each one, in precedence order.
    
    Args:
        finder: ConfigFinder to use (default: one for the current host)
        
    Returns:
        (ConfigFileRef, option lines) pairs, ready for the option parser
        
    Raises:
        ConfigConflictError: If a directory has both .ackrc and _ackrc
        RcReadError: If a discovered file cannot be read
    """
    if finder is None:
        finder = ConfigFinder()
    
    sources = []
    for config in finder.find_config_files():
        lines = list(read_rcfile(config.path))
        logger.debug(f"Read {len(lines)} option line(s) from {config.path}")
        sources.append((config, lines))
    return sources


__all__ = [
    "ACKRC_FILENAMES",
    "check_for_ackrc",
    "ConfigFinder",
    "remove_redundancies",
    "read_rcfile",
    "load_rc_arguments",
]
