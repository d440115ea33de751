"""
webpack Configuration Rendering.

Produces a `webpack.config.js` that bundles the manifest with
`ilib-webpack-loader` and `ilib-webpack-plugin`, both configured with the same
options object (locales, assembly and compilation modes).
"""

import json
from pathlib import Path

from ilib_scanner.config import ScanConfig
from ilib_scanner.emitters.literals import js_str
from ilib_scanner.emitters.manifest import GENERATED_WARNING

WEBPACK_CONFIG_NAME = "webpack.config.js"


def webpack_config_path(output_path: Path) -> Path:
  """
  The webpack config is written beside the manifest.

  Args:
      output_path: The manifest path.

  Returns:
      Path: `<manifest dir>/webpack.config.js`.
  """
  return Path(output_path).parent / WEBPACK_CONFIG_NAME


def render_webpack_config(config: ScanConfig) -> str:
  """
  Renders the webpack configuration for a scan.

  Args:
      config: The run configuration.

  Returns:
      str: The JavaScript source of `webpack.config.js`.
  """
  library_root = config.ilib_root or "ilib"
  locales = json.dumps(config.locales, separators=(",", ":"))

  options = [
    f"    locales: {locales},\n",
    f"    assembly: {js_str(config.assembly.value)},\n",
    f"    compilation: {js_str(config.compilation.value)},\n",
  ]
  if config.ilib_root:
    options.append(f"    ilibRoot: {js_str(config.ilib_root)},\n")
  options.append("    size: 'custom',\n    target: 'web',\n    tempDir: 'assets'\n")

  mode = f"    mode: {js_str(config.mode)},\n" if config.mode else ""

  return (
    GENERATED_WARNING
    + "var path = require('path');\n"
    + "var webpack = require('webpack');\n"
    + "var IlibWebpackPlugin = require('ilib-webpack-plugin');\n"
    + "var options = {\n"
    + "".join(options)
    + "};\n"
    + "module.exports = {\n"
    + f"    entry: path.resolve({js_str('./' + config.output_path.name)}),\n"
    + mode
    + "    output: {\n"
    + "        filename: 'ilib.js',\n"
    + "        chunkFilename: 'ilib.[name].js',\n"
    + "        path: path.resolve('.'),\n"
    + f"        publicPath: {js_str(config.output_dir + '/')},\n"
    + "        library: 'ilib',\n"
    + "        libraryTarget: 'umd'\n"
    + "    },\n"
    + "    module: {\n"
    + "        rules: [{\n"
    + "            test: /\\.js$/,\n"
    + "            use: {\n"
    + "                loader: 'ilib-webpack-loader',\n"
    + "                options: options\n"
    + "            }\n"
    + "        }]\n"
    + "    },\n"
    + "    plugins: [\n"
    + "        new webpack.DefinePlugin({\n"
    + f"            __VERSION__: JSON.stringify(require({js_str(library_root + '/package.json')}).version)\n"
    + "        }),\n"
    + "        new IlibWebpackPlugin(options)\n"
    + "    ]\n"
    + "};\n"
  )
