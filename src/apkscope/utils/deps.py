"""External tool dependency checker."""

from __future__ import annotations

import shutil
from pathlib import Path

from apkscope.exceptions import ToolNotFoundError
from apkscope.utils.config import get_config_value

# Install hints for tools used by certificate inspection
TOOL_INSTALL_HINTS: dict[str, str] = {
    "keytool": "Part of Java JDK (install JDK and ensure it's on PATH)",
    "openssl": "https://www.openssl.org/ (or your system package manager)",
}


def _configured_path(tool: str) -> str | None:
    """Return the `<tool>_path` override from config if it points at a file."""
    value = get_config_value(f"{tool}_path")
    if not isinstance(value, str) or not value:
        return None

    candidate = Path(value).expanduser()
    return str(candidate) if candidate.is_file() else None


def resolve_tool(tool: str) -> str | None:
    """Resolve a tool via config override, then PATH."""
    return _configured_path(tool) or shutil.which(tool)


def check_tool(tool: str) -> bool:
    """Check if a tool is available via configuration or on PATH."""
    return resolve_tool(tool) is not None


def require(*tools: str) -> None:
    """Require that all specified tools are available.

    Args:
        *tools: Names of tools that must be available.

    Raises:
        ToolNotFoundError: If any tool is not found.
    """
    for tool in tools:
        if not check_tool(tool):
            raise ToolNotFoundError(tool, TOOL_INSTALL_HINTS.get(tool))


def get_tool_path(tool: str) -> str:
    """Get the full path to a tool.

    Raises:
        ToolNotFoundError: If the tool is not found.
    """
    path = resolve_tool(tool)
    if path is None:
        raise ToolNotFoundError(tool, TOOL_INSTALL_HINTS.get(tool))
    return path
