"""
Manifest Module Rendering.

The manifest is a CommonJS module that requires only the detected ilib classes,
attaches them to the `ilib` namespace, and then runs `ilib-unpack.js` so they
are also available in the global scope. webpack uses it as the bundle entry.
"""

from typing import Iterable, Optional

from ilib_scanner.catalog import DEFAULT_LIBRARY_NAME
from ilib_scanner.emitters.literals import js_str

DOUBLE_QUOTE = '"'

GENERATED_WARNING = (
  "/*\n"
  " * WARNING: this is a file generated by ilib-scanner.\n"
  " * Do not hand edit or else your changes may be overwritten and lost.\n"
  " * Instead, re-run the scanner to generate a new version of this file.\n"
  " */\n\n"
)


def render_manifest(
  members: Iterable[str],
  library_root: Optional[str] = None,
  library_name: str = DEFAULT_LIBRARY_NAME,
) -> str:
  """
  Renders the manifest module.

  Members are written in sorted order so that rescanning an unchanged tree
  produces an identical file.

  Args:
      members: The detected member names.
      library_root: Explicit ilib root; the bare package name is used if None.
      library_name: The namespace variable and package name.

  Returns:
      str: The JavaScript source of the manifest.
  """
  root = library_root or library_name

  def require(path: str) -> str:
    return f"require({js_str(path, quote=DOUBLE_QUOTE)})"

  lines = [GENERATED_WARNING, f"var {library_name} = {require(root)};\n\n"]
  for member in sorted(set(members)):
    lines.append(f"{library_name}.{member} = {require(root + '/lib/' + member + '.js')};\n")

  lines.append(f"\n{require(root + '/lib/' + library_name + '-unpack.js')};\n\n")
  lines.append(f"module.exports = {library_name};\n")
  return "".join(lines)
