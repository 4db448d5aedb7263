"""
Runtime Configuration Store.

Settings come from the ``[tool.linescript]`` table of the nearest
``pyproject.toml`` and can be overridden by CLI flags.

.. code-block:: toml

    [tool.linescript]
    output_extension = ".ts"
    check_blocks = true

    [tool.linescript.type_aliases]
    int = "number"
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


class RuntimeConfig(BaseModel):
  """
  Configuration container for the translation engine.
  """

  output_extension: str = Field(".ts", description="Extension given to generated files.")
  type_aliases: Dict[str, str] = Field(
    default_factory=dict,
    description="Extra source->target type names, applied on top of the built-in table.",
  )
  check_blocks: bool = Field(False, description="If True, reject files with unbalanced blocks.")

  @field_validator("output_extension")
  @classmethod
  def validate_extension(cls, v: str) -> str:
    """
    Normalizes the extension to a leading-dot form.

    Raises:
        ValueError: If the extension is empty or contains a path separator.
    """
    v_clean = v.strip()
    if not v_clean.lstrip("."):
      raise ValueError("output_extension must not be empty")
    if "/" in v_clean or "\\" in v_clean:
      raise ValueError(f"Invalid output_extension: '{v_clean}'")
    return v_clean if v_clean.startswith(".") else f".{v_clean}"

  @classmethod
  def load(
    cls,
    output_extension: Optional[str] = None,
    type_aliases: Optional[Dict[str, str]] = None,
    check_blocks: Optional[bool] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        output_extension: Override for the generated file extension.
        type_aliases: Aliases merged over those found in TOML.
        check_blocks: Override for block balance checking.
        search_path: Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    final_ext = output_extension or toml_config.get("output_extension", ".ts")

    aliases = {**toml_config.get("type_aliases", {}), **(type_aliases or {})}

    if check_blocks is not None:
      final_check = check_blocks
    else:
      final_check = toml_config.get("check_blocks", False)

    return cls(output_extension=final_ext, type_aliases=aliases, check_blocks=final_check)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches ``start_path`` and its parents for 'pyproject.toml'.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The ``[tool.linescript]`` table (empty if
      absent) and the directory the file was found in.

  Raises:
      ValueError: If the nearest pyproject.toml is not valid TOML.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {toml_path}: {e}") from e
      return data.get("tool", {}).get("linescript", {}), parent

  return {}, None
