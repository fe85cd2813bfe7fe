"""Formatting options for generated type definitions."""

from dataclasses import dataclass
from pathlib import Path

import yaml


@dataclass
class Options:
    """Formatting options used when generating definition lines.

    Attributes:
        break_params: Number of parameters at which a signature is split
            across several lines.
        tab_width: Number of spaces per indentation level.
        sort_namespaces: Whether namespace members are emitted alphabetically.
    """
    break_params: int = 4
    tab_width: int = 2
    sort_namespaces: bool = False

    def indented(self, level: int, text: str) -> str:
        """Prefix text with the indentation for the given nesting level.

        Args:
            level: Nesting depth, not a character count
            text: The line to indent

        Returns:
            The indented line

        Raises:
            ValueError: If level is negative
        """
        if level < 0:
            raise ValueError(f"Indentation level must be non-negative, got {level}")
        return " " * (level * self.tab_width) + text


def load_options(repo_root: Path | None = None) -> Options:
    """Load formatting options from .typegen file in repository root.

    Args:
        repo_root: Path to repository root. If None, uses current directory.

    Returns:
        Options object with loaded or default values.

    Notes:
        If .typegen file doesn't exist or can't be parsed, returns default options.
        Expected YAML structure:

        ```yaml
        format:
          break_params: 4
          tab_width: 2
          sort_namespaces: false
        ```
    """
    if repo_root is None:
        repo_root = Path.cwd()

    config_path = repo_root / ".typegen"

    if not config_path.exists():
        return Options()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            return Options()

        format_config = data.get("format", {})
        if not isinstance(format_config, dict):
            return Options()

        return Options(
            break_params=int(format_config.get("break_params", Options.break_params)),
            tab_width=int(format_config.get("tab_width", Options.tab_width)),
            sort_namespaces=bool(
                format_config.get("sort_namespaces", Options.sort_namespaces)
            ),
        )
    except (yaml.YAMLError, OSError, TypeError, ValueError):
        # Return default options on any parsing errors
        return Options()
