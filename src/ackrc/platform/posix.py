"""POSIX platform: /etc/ackrc and (device, inode) identity."""

import os
from typing import List, Optional, Tuple
from .base import PlatformCapabilities
from ..utils.logging import get_logger

logger = get_logger("platform.posix")

DEFAULT_SYSTEM_CONFIG = "/etc/ackrc"


class PosixPlatform(PlatformCapabilities):
    """Platform with reliable inode reporting."""

    name = "posix"

    def __init__(self, system_config_path: str = DEFAULT_SYSTEM_CONFIG):
        self.system_config_path = system_config_path

    def list_system_config_paths(self) -> List[str]:
        return [self.system_config_path]

    def identity_key(self, path: str) -> Optional[Tuple[int, int]]:
        try:
            st = os.stat(path)
        except OSError as e:
            logger.debug(f"Cannot stat {path}, treating as gone: {e}")
            return None
        return (st.st_dev, st.st_ino)
