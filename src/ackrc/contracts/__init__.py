from .config_file import ConfigFileRef, Scope

__all__ = [
    "ConfigFileRef",
    "Scope",
]
