"""Abstract base class for platform capabilities."""

from abc import ABC, abstractmethod
from typing import Hashable, List, Optional


class PlatformCapabilities(ABC):
    """
    Interface for the host-specific parts of rc file discovery.
    
    One implementation is selected at startup and passed to the finder.
    The finder never inspects the host platform itself.
    """

    name: str = ""

    @abstractmethod
    def list_system_config_paths(self) -> List[str]:
        """
        Return system-wide rc file candidates, in precedence order.
        
        Returns:
            Candidate paths; they are not required to exist
        """
        pass

    @abstractmethod
    def identity_key(self, path: str) -> Optional[Hashable]:
        """
        Return the key two paths share when they name the same file.
        
        Args:
            path: Path of a discovered rc file
            
        Returns:
            Hashable identity, or None if the file is no longer present
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name})"
