"""Windows platform: application-data folders and path-string identity."""

import os
from typing import Callable, List, Mapping, Optional
from .base import PlatformCapabilities
from ..utils.logging import get_logger

logger = get_logger("platform.windows")

SYSTEM_CONFIG_NAME = "ackrc"

# Searched in this order; both are used when both hold an ackrc.
SYSTEM_FOLDERS = ("COMMON_APPDATA", "APPDATA")

# Environment variables that point at each known folder, first match wins.
FOLDER_ENV_VARS = {
    "COMMON_APPDATA": ("ProgramData", "ALLUSERSPROFILE"),
    "APPDATA": ("APPDATA",),
}

FolderResolver = Callable[[str], Optional[str]]


def environ_folder_resolver(environ: Optional[Mapping[str, str]] = None) -> FolderResolver:
    """
    Build a folder resolver backed by environment variables.
    
    Args:
        environ: Environment mapping (defaults to os.environ)
        
    Returns:
        Callable mapping a folder id to a directory, or None if unknown
    """
    env = os.environ if environ is None else environ

    def resolve(folder_id: str) -> Optional[str]:
        for var in FOLDER_ENV_VARS.get(folder_id, ()):
            value = env.get(var)
            if value:
                return value
        return None

    return resolve


class WindowsPlatform(PlatformCapabilities):
    """Platform without reliable inode reporting (stat returns 0 inodes)."""

    name = "windows"

    def __init__(self, folder_resolver: Optional[FolderResolver] = None):
        self.folder_resolver = folder_resolver or environ_folder_resolver()

    def list_system_config_paths(self) -> List[str]:
        paths = []
        for folder_id in SYSTEM_FOLDERS:
            folder = self.folder_resolver(folder_id)
            if not folder:
                logger.debug(f"Known folder {folder_id} is not available")
                continue
            paths.append(os.path.join(folder, SYSTEM_CONFIG_NAME))
        return paths

    def identity_key(self, path: str) -> Optional[str]:
        return path
