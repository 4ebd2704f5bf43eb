"""
Tool definitions: the fixed set of assistant CLIs and their npm packages.
"""

from __future__ import annotations

from enum import Enum


class Tool(str, Enum):
    """Supported assistant CLI, valued by its binary name."""

    CLAUDE = "claude"
    GEMINI = "gemini"
    CODEX = "codex"

    @property
    def package(self) -> str:
        """npm package identifier that provides this tool."""
        return PACKAGES[self]


PACKAGES: dict[Tool, str] = {
    Tool.CLAUDE: "@anthropic-ai/claude-code",
    Tool.GEMINI: "@google/gemini-cli",
    Tool.CODEX: "@openai/codex",
}

# Order used for status reports
KNOWN_TOOLS: tuple[Tool, ...] = (Tool.CLAUDE, Tool.GEMINI, Tool.CODEX)


def get_tool(name: str) -> Tool | None:
    """Get tool definition by name.

    Args:
        name: Tool name (exact, case-sensitive)

    Returns:
        Tool or None if not found
    """
    try:
        return Tool(name)
    except ValueError:
        return None
