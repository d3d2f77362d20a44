"""Layered rc file discovery: system, then user, then project."""

import os
from pathlib import Path
from typing import Iterable, List, Mapping, Optional
from ..contracts.config_file import ConfigFileRef, Scope
from ..platform import PlatformCapabilities, detect_platform
from ..utils.logging import get_logger
from .paths import check_for_ackrc

logger = get_logger("config.finder")

HOME_ENV_VAR = "HOME"
OVERRIDE_ENV_VAR = "ACKRC"


def remove_redundancies(
    configs: Iterable[ConfigFileRef],
    platform: PlatformCapabilities
) -> List[ConfigFileRef]:
    """
    Drop later references to a file that is already in the list.
    
    Two references are the same file when the platform gives them the same
    identity key. A reference whose key cannot be computed (the file is gone)
    is dropped.
    
    Args:
        configs: Discovered references in precedence order
        platform: Platform capabilities providing identity keys
        
    Returns:
        Surviving references, in their original order
    """
    seen = set()
    unique = []
    
    for config in configs:
        key = platform.identity_key(config.path)
        if key is None:
            logger.debug(f"Dropping {config.path}: no longer present")
            continue
        if key in seen:
            logger.debug(f"Dropping {config.path} ({config.scope.value}): already loaded")
            continue
        seen.add(key)
        unique.append(config)
    
    return unique


class ConfigFinder:
    """Locates rc files in precedence order."""

    def __init__(
        self,
        platform: Optional[PlatformCapabilities] = None,
        environ: Optional[Mapping[str, str]] = None,
        cwd: Optional[str] = None
    ):
        """
        Initialize the finder.
        
        Args:
            platform: Platform capabilities (default: detected from the host)
            environ: Environment mapping (default: os.environ)
            cwd: Directory the project search starts from (default: os.getcwd())
        """
        self.platform = platform if platform is not None else detect_platform()
        self.environ = os.environ if environ is None else environ
        self.cwd = cwd

    def find_config_files(self) -> List[ConfigFileRef]:
        """
        Locate rc files, with duplicates removed.
        
        Returns:
            ConfigFileRef list: system files, then user file, then project file
            
        Raises:
            ConfigConflictError: If a probed directory has both .ackrc and _ackrc
        """
        configs = remove_redundancies(self.discover(), self.platform)
        logger.info(f"Found {len(configs)} rc file(s)")
        return configs

    def discover(self) -> List[ConfigFileRef]:
        """Locate rc files without removing duplicates."""
        configs = []
        configs.extend(self._system_configs())
        configs.extend(self._user_configs())
        configs.extend(self._project_configs())
        return configs

    def _system_configs(self) -> List[ConfigFileRef]:
        configs = []
        for path in self.platform.list_system_config_paths():
            if os.path.isfile(path):
                logger.debug(f"Found system rc file: {path}")
                configs.append(ConfigFileRef(path=path, scope=Scope.SYSTEM))
        return configs

    def _user_configs(self) -> List[ConfigFileRef]:
        override = self.environ.get(OVERRIDE_ENV_VAR)
        if override and os.path.isfile(override):
            logger.debug(f"Using {OVERRIDE_ENV_VAR} override: {override}")
            return [ConfigFileRef(path=override, scope=Scope.USER)]
        
        path = check_for_ackrc(self.environ.get(HOME_ENV_VAR))
        if path is None:
            return []
        logger.debug(f"Found user rc file: {path}")
        return [ConfigFileRef(path=path, scope=Scope.USER)]

    def _project_configs(self) -> List[ConfigFileRef]:
        start = Path(self.cwd if self.cwd is not None else os.getcwd())
        
        # Nearest directory wins; ancestors above it are not probed.
        for directory in (start, *start.parents):
            path = check_for_ackrc(str(directory))
            if path is not None:
                logger.debug(f"Found project rc file: {path}")
                return [ConfigFileRef(path=path, scope=Scope.PROJECT)]
        return []
