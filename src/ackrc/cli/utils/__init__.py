"""CLI utilities package."""

from typing import Optional
from ...config import ConfigFinder
from ...platform import detect_platform
from ...utils.logging import get_logger

logger = get_logger("cli.utils")


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    """
    Render a fatal discovery or read error for stderr.
    
    Args:
        message: Error text, usually str() of an AckrcError
        suggestion: How to fix it, shown on its own line
        
    Returns:
        "Error: ..." text, followed by "Tip: ..." when a suggestion is given
    """
    lines = [f"Error: {message}"]
    if suggestion:
        lines.append(f"Tip: {suggestion}")
    return "\n".join(lines)


def build_finder(ctx_obj: Optional[dict]) -> ConfigFinder:
    """
    Build the ConfigFinder for a command from the group options.
    
    Args:
        ctx_obj: click context object set by the top-level group
        
    Returns:
        ConfigFinder for the selected platform
    """
    platform_name = (ctx_obj or {}).get("platform")
    return ConfigFinder(platform=detect_platform(platform_name))


__all__ = ["format_error", "build_finder"]
