"""
Runtime Configuration Store.

Settings come from three layers, highest priority first:

1.  Command line arguments.
2.  The `[tool.ilib_scanner]` table of the nearest `pyproject.toml`.
3.  Built-in defaults.
"""

import codecs
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from ilib_scanner.enums import AssemblyMode, CompilationMode

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

# The top locales on the internet by traffic
DEFAULT_LOCALES: Tuple[str, ...] = (
  "en-AU",
  "en-CA",
  "en-GB",
  "en-IN",
  "en-NG",
  "en-PH",
  "en-PK",
  "en-US",
  "en-ZA",
  "de-DE",
  "fr-CA",
  "fr-FR",
  "es-AR",
  "es-ES",
  "es-MX",
  "id-ID",
  "it-IT",
  "ja-JP",
  "ko-KR",
  "pt-BR",
  "ru-RU",
  "tr-TR",
  "vi-VN",
  "zxx-XX",
  "zh-Hans-CN",
  "zh-Hant-HK",
  "zh-Hant-TW",
  "zh-Hans-SG",
)

TOML_SECTION = "ilib_scanner"


def parse_locale_list(value: Union[str, List[str], Tuple[str, ...], None]) -> List[str]:
  """
  Normalizes a locale list given as a comma-separated string or a sequence.

  Args:
      value: e.g. "en-US,de-DE" or ["en-US", "de-DE"].

  Returns:
      List[str]: Stripped, non-empty tags in their original order.
  """
  if value is None:
    return []
  items = value.split(",") if isinstance(value, str) else list(value)
  return [str(item).strip() for item in items if str(item).strip()]


class ScanConfig(BaseModel):
  """
  Everything a scanner run needs to know.
  """

  output_path: Path = Field(..., description="Where to write the generated manifest module.")
  inputs: List[Path] = Field(default_factory=lambda: [Path(".")], description="Files or directories to scan.")
  assembly: AssemblyMode = Field(AssemblyMode.ASSEMBLED, description="How locale data is loaded.")
  compilation: CompilationMode = Field(CompilationMode.COMPILED, description="Whether to minify the bundle.")
  locales: List[str] = Field(default_factory=lambda: list(DEFAULT_LOCALES), description="Locales the app supports.")
  ilib_root: Optional[str] = Field(None, description="Explicit location of the ilib package.")
  mode: Optional[str] = Field(None, description="webpack 4+ build mode (production/development).")
  class_path: Optional[str] = Field(None, description="Catalog location relative to the ilib root.")
  encoding: str = Field("utf-8", description="Text encoding of the scanned sources.")
  always_include_dates: bool = Field(
    False, description="Include the date classes even if no file constructs a Date."
  )
  exclude_dirs: List[str] = Field(default_factory=lambda: ["node_modules"], description="Directory names to skip.")
  base_dir: Optional[Path] = Field(None, description="Directory a relative ilib_root is resolved against.")

  @field_validator("locales", mode="before")
  @classmethod
  def validate_locales(cls, v: Any) -> List[str]:
    """
    Accepts a comma-separated string or a list, and rejects an empty result.

    Raises:
        ValueError: If no locale remains after cleaning.
    """
    locales = parse_locale_list(v)
    if not locales:
      raise ValueError("At least one locale is required.")
    return locales

  @field_validator("encoding")
  @classmethod
  def validate_encoding(cls, v: str) -> str:
    try:
      codecs.lookup(v)
    except LookupError:
      raise ValueError(f"Unknown encoding: {v}") from None
    return v

  @field_validator("inputs", mode="before")
  @classmethod
  def default_inputs(cls, v: Any) -> Any:
    if not v:
      return [Path(".")]
    return v

  @property
  def output_dir(self) -> str:
    """Directory part of the output path ("." for a bare file name)."""
    return str(self.output_path.parent)

  @property
  def resolved_ilib_root(self) -> Optional[str]:
    """
    The ilib root as a path usable from the working directory.

    `ilib_root` itself is emitted verbatim into the generated files. A
    relative value read from pyproject.toml is only anchored to that file's
    directory here, for locating the catalog.
    """
    if not self.ilib_root or self.base_dir is None or Path(self.ilib_root).is_absolute():
      return self.ilib_root
    return str(self.base_dir / self.ilib_root)

  @classmethod
  def load(
    cls,
    output_path: Union[str, Path],
    inputs: Optional[List[Union[str, Path]]] = None,
    assembly: Optional[str] = None,
    compilation: Optional[str] = None,
    locales: Optional[Union[str, List[str]]] = None,
    ilib_root: Optional[str] = None,
    mode: Optional[str] = None,
    class_path: Optional[str] = None,
    encoding: Optional[str] = None,
    always_include_dates: Optional[bool] = None,
    search_path: Optional[Path] = None,
  ) -> "ScanConfig":
    """
    Loads configuration from pyproject.toml and overrides it with CLI arguments.

    Args:
        output_path: Manifest output path.
        inputs: Roots to scan. Defaults to TOML `inputs`, then ["."].
        assembly: Override for the assembly mode.
        compilation: Override for the compilation mode.
        locales: Override for the locale list.
        ilib_root: Override for the ilib package location.
        mode: Override for the webpack build mode.
        class_path: Override for the catalog location.
        encoding: Override for the source encoding.
        always_include_dates: Override for the date inclusion policy.
        search_path: Directory to start searching for TOML config.

    Returns:
        ScanConfig: The fully resolved configuration.

    Raises:
        pydantic.ValidationError: If a resolved value is invalid.
    """
    toml_config, toml_dir = _load_toml_settings(search_path or Path.cwd())

    overrides: Dict[str, Any] = {
      "inputs": inputs,
      "assembly": assembly,
      "compilation": compilation,
      "locales": locales,
      "ilib_root": ilib_root,
      "mode": mode,
      "class_path": class_path,
      "encoding": encoding,
      "always_include_dates": always_include_dates,
    }

    values: Dict[str, Any] = {k: v for k, v in toml_config.items() if k in cls.model_fields and k != "base_dir"}
    values.update({k: v for k, v in overrides.items() if v is not None and v != []})
    values["output_path"] = Path(output_path)

    # A root given in pyproject.toml is relative to that file
    if ilib_root is None and toml_dir and toml_config.get("ilib_root"):
      values["base_dir"] = toml_dir

    return cls(**values)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      return data.get("tool", {}).get(TOML_SECTION, {}), parent

  return {}, None
