"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from dagsort._io import FileFormat


class ConfigError(Exception):
    """Error in dagsort configuration."""


@dataclass(slots=True, frozen=True)
class DagsortConfig:
    """Configuration loaded from the ``[tool.dagsort]`` table of pyproject.toml.

    All relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    input: Path | None = None
    reverse: bool = False
    format: FileFormat | None = None
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def load_config(pyproject_path: Path) -> DagsortConfig:
    """Load and validate [tool.dagsort] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed DagsortConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("dagsort", {})
    if not section:
        return DagsortConfig(project_root=project_root)

    input_path: Path | None = None
    if "input" in section:
        input_value = section["input"]
        if not isinstance(input_value, str):
            msg = "Invalid [tool.dagsort].input: expected string path"
            raise ConfigError(msg)
        input_path = Path(input_value)
        if not input_path.is_absolute():
            input_path = project_root / input_path

    reverse = section.get("reverse", False)
    if not isinstance(reverse, bool):
        msg = "Invalid [tool.dagsort].reverse: expected boolean"
        raise ConfigError(msg)

    output_format: FileFormat | None = None
    if "format" in section:
        try:
            output_format = FileFormat(section["format"])
        except ValueError as e:
            choices = ", ".join(f.value for f in FileFormat)
            msg = f"Invalid [tool.dagsort].format: expected one of {choices}"
            raise ConfigError(msg) from e

    return DagsortConfig(
        input=input_path,
        reverse=reverse,
        format=output_format,
        project_root=project_root,
    )


def get_config() -> DagsortConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        DagsortConfig (may be empty if no pyproject.toml or no [tool.dagsort] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return DagsortConfig()
    return load_config(pyproject_path)
