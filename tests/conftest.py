"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- A recording Rich console so tests can assert on log output.
- Small builders for scan trees and ilib package layouts.
"""

import io
import json
import sys
from pathlib import Path
from typing import Dict, List

import pytest
from rich.console import Console

# Add src to path so we can import 'ilib_scanner' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from ilib_scanner.utils.console import reset_console, set_console  # noqa: E402

SAMPLE_CATALOG = [
  "DateFmt",
  "DateFactory",
  "GregorianDate",
  "JulianDate",
  "LocaleMatcher",
  "NumFmt",
  "ThaiSolarDate",
  "HanDate",
  "AddressFmt",
]


class RecordedConsole:
  """Gives tests access to everything printed or logged during the test."""

  def __init__(self) -> None:
    self.console = Console(file=io.StringIO(), record=True, width=500, color_system=None)

  @property
  def text(self) -> str:
    return self.console.export_text(clear=False)


@pytest.fixture
def recorded_console():
  """Routes console output and logging into an in-memory buffer."""
  recorder = RecordedConsole()
  set_console(recorder.console)
  yield recorder
  reset_console()


def write_tree(root: Path, files: Dict[str, str]) -> Path:
  """
  Creates files (and parent directories) under root.

  Args:
      root: Base directory.
      files: Relative path -> file content.

  Returns:
      Path: The root directory.
  """
  for rel, content in files.items():
    target = root / rel
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
  return root


@pytest.fixture
def ilib_package(tmp_path) -> Path:
  """
  A minimal ilib installation with an `ilib-unpack.js` class list.
  """
  root = tmp_path / "node_modules" / "ilib"
  names: List[str] = SAMPLE_CATALOG
  unpack = (
    "/*\n * ilib-unpack.js - unpack ilib classes into the global scope\n */\n"
    "var ilib = require('./ilib.js');\n"
    f"var classes = {json.dumps(names, indent=4)};\n"
    "module.exports = classes;\n"
  )
  write_tree(root, {"lib/ilib-unpack.js": unpack, "package.json": '{"version": "14.0.0"}'})
  return root


@pytest.fixture
def make_tree():
  """Exposes `write_tree` to tests."""
  return write_tree
