"""
Enumerations for ilib-scanner.

These mirror the option values understood by `ilib-webpack-loader` and
`ilib-webpack-plugin`, which receive them verbatim in the generated config.
"""

from enum import Enum


class AssemblyMode(str, Enum):
  """
  How locale data is delivered to the web app.
  """

  ASSEMBLED = "assembled"  # locale data bundled into the ilib chunk
  DYNAMIC = "dynamic"  # code and data both loaded on demand
  DYNAMICDATA = "dynamicdata"  # code bundled, data loaded on demand


class CompilationMode(str, Enum):
  """
  Whether the bundle is minified.
  """

  COMPILED = "compiled"
  UNCOMPILED = "uncompiled"
