"""Declarative registry of supported platforms."""

from .posix import PosixPlatform
from .windows import WindowsPlatform

SUPPORTED_PLATFORMS = {
    "posix": PosixPlatform,
    "windows": WindowsPlatform,
}

# Values of os.name mapped to registry keys.
OS_NAME_ALIASES = {
    "posix": "posix",
    "nt": "windows",
}
