"""
Main Entry Point for the ilib-scanner CLI.

Parses arguments, resolves the configuration and dispatches to the scan
handler in `ilib_scanner.cli.handlers.scan`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from ilib_scanner import __version__
from ilib_scanner.cli.handlers.scan import handle_scan
from ilib_scanner.config import ScanConfig
from ilib_scanner.enums import AssemblyMode, CompilationMode
from ilib_scanner.utils.console import log_error

USAGE = "ilib-scanner [-h] [options] outputFile [input_file_or_directory ...]"


def build_parser() -> argparse.ArgumentParser:
  """
  Builds the argument parser.

  Option defaults are left as None so that `[tool.ilib_scanner]` in
  pyproject.toml can fill them in.

  Returns:
      argparse.ArgumentParser: The configured parser.
  """
  parser = argparse.ArgumentParser(
    prog="ilib-scanner",
    usage=USAGE,
    description=(
      "Scan a web site for references to ilib classes and generate a manifest "
      "and webpack config for a minimal ilib build."
    ),
  )
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  parser.add_argument("output", nargs="?", help="Path of the manifest module to generate")
  parser.add_argument("inputs", nargs="*", help="Files or directories to scan (default: .)")

  parser.add_argument(
    "-a",
    "--assembly",
    choices=[m.value for m in AssemblyMode],
    default=None,
    help="How you want to load locale data. Default: 'assembled'.",
  )
  parser.add_argument(
    "-c",
    "--compilation",
    choices=[m.value for m in CompilationMode],
    default=None,
    help="Whether you want the output to be compiled with uglify-js. Default: 'compiled'.",
  )
  parser.add_argument(
    "-l",
    "--locales",
    default=None,
    help="Comma-separated list of BCP-47 locale tags your webapp supports. Default: the top locales by traffic.",
  )
  parser.add_argument(
    "-i",
    "--ilibRoot",
    "--ilib-root",
    dest="ilib_root",
    default=None,
    help="Explicit location of the root of ilib. Default: look for ilib in node_modules.",
  )
  parser.add_argument(
    "-m",
    "--mode",
    default=None,
    help="webpack 4+ mode, 'production' or 'development'. Default: no mode.",
  )
  parser.add_argument(
    "-p",
    "--classPath",
    "--class-path",
    dest="class_path",
    default=None,
    help="Path of the ilib class list relative to the ilib root. Default: lib/ilib-unpack.js.",
  )
  parser.add_argument(
    "--encoding",
    default=None,
    help="Text encoding of the scanned files. Default: utf-8.",
  )
  parser.add_argument(
    "--always-include-dates",
    action="store_true",
    default=None,
    help="Include the date classes even if no scanned file constructs a Date.",
  )
  return parser


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = build_parser()
  args = parser.parse_args(argv)

  if not args.output:
    parser.print_help()
    return 1

  try:
    config = ScanConfig.load(
      output_path=Path(args.output),
      inputs=[Path(p) for p in args.inputs],
      assembly=args.assembly,
      compilation=args.compilation,
      locales=args.locales,
      ilib_root=args.ilib_root,
      mode=args.mode,
      class_path=args.class_path,
      encoding=args.encoding,
      always_include_dates=args.always_include_dates,
    )
  except ValidationError as e:
    log_error(f"Invalid configuration: {e}")
    return 1

  return handle_scan(config)


if __name__ == "__main__":
  sys.exit(main())
