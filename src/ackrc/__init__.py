"""ackrc - Layered rc file discovery for command-line tools."""

from typing import List, Optional
from .config import ConfigFinder, read_rcfile, load_rc_arguments, check_for_ackrc, remove_redundancies
from .contracts.config_file import ConfigFileRef, Scope
from .platform import PlatformCapabilities, detect_platform
from .utils.errors import AckrcError, ConfigConflictError, RcReadError
from .utils.logging import get_logger

__version__ = "0.1.0"

__all__ = [
    "find_config_files",
    "read_rcfile",
    "load_rc_arguments",
    "check_for_ackrc",
    "remove_redundancies",
    "ConfigFinder",
    "ConfigFileRef",
    "Scope",
    "PlatformCapabilities",
    "detect_platform",
    "AckrcError",
    "ConfigConflictError",
    "RcReadError",
]

logger = get_logger("ackrc")


def find_config_files(platform: Optional[PlatformCapabilities] = None) -> List[ConfigFileRef]:
    """Locate rc files for the current process (environment and cwd)."""
    return ConfigFinder(platform=platform).find_config_files()
