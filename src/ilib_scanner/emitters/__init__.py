"""
Artifact Emitters.

Renders a scan result into the manifest module and the webpack configuration
and writes both. Both files are rendered before either is written, so a
rendering problem never leaves a half-updated pair behind.
"""

from pathlib import Path
from typing import Tuple

from ilib_scanner.analysis.session import ScanResult
from ilib_scanner.config import ScanConfig
from ilib_scanner.emitters.manifest import GENERATED_WARNING, render_manifest
from ilib_scanner.emitters.webpack import WEBPACK_CONFIG_NAME, render_webpack_config, webpack_config_path


class OutputWriteError(OSError):
  """Raised when a generated file cannot be written."""


def write_artifacts(result: ScanResult, config: ScanConfig) -> Tuple[Path, Path]:
  """
  Writes the manifest and the webpack config, overwriting previous versions.

  Args:
      result: The scan outcome.
      config: The run configuration.

  Returns:
      Tuple[Path, Path]: The manifest path and the webpack config path.

  Raises:
      OutputWriteError: If either file cannot be written.
  """
  manifest_path = Path(config.output_path)
  config_path = webpack_config_path(manifest_path)

  outputs = [
    (manifest_path, render_manifest(result.members, config.ilib_root)),
    (config_path, render_webpack_config(config)),
  ]

  for path, content in outputs:
    try:
      with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)
    except OSError as e:
      raise OutputWriteError(f"Could not write {path}: {e}") from e

  return manifest_path, config_path


__all__ = [
  "GENERATED_WARNING",
  "OutputWriteError",
  "WEBPACK_CONFIG_NAME",
  "render_manifest",
  "render_webpack_config",
  "webpack_config_path",
  "write_artifacts",
]
