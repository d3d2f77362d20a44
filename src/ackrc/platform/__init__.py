"""Platform capabilities, selected once and injected into the finder."""

import os
from typing import Optional
from .base import PlatformCapabilities
from .posix import PosixPlatform
from .windows import WindowsPlatform, environ_folder_resolver
from .registry import SUPPORTED_PLATFORMS, OS_NAME_ALIASES
from ..utils.errors import AckrcError
from ..utils.logging import get_logger

logger = get_logger("platform")


def detect_platform(name: Optional[str] = None) -> PlatformCapabilities:
    """
    Select the platform implementation.
    
    Args:
        name: Registry key ("posix" or "windows"). If None, derived from os.name
        
    Returns:
        PlatformCapabilities instance
        
    Raises:
        AckrcError: If the platform is not supported
    """
    if name is None:
        name = OS_NAME_ALIASES.get(os.name, os.name)
    
    if name not in SUPPORTED_PLATFORMS:
        raise AckrcError(
            f"Unsupported platform: {name}. "
            f"Supported: {', '.join(sorted(SUPPORTED_PLATFORMS))}"
        )
    
    logger.debug(f"Using {name} platform capabilities")
    return SUPPORTED_PLATFORMS[name]()


__all__ = [
    "PlatformCapabilities",
    "PosixPlatform",
    "WindowsPlatform",
    "environ_folder_resolver",
    "detect_platform",
    "SUPPORTED_PLATFORMS",
]
