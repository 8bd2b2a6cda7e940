# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/utils/arg_helpers.py

"""Load field data given on the command line"""

import json
import sys
from pathlib import Path

# Optional: Support YAML if PyYAML is installed
try:
    import yaml

    HAS_YAML = True
except ImportError:
    HAS_YAML = False


def resolve_field_data(arg_or_data, stdin=None):
    """
    Resolves fill data from a CLI argument or a direct object.

    Strategies (in order):
    1. Direct Object: a dict (API usage) is returned as is.
    2. Standard input: "-" reads JSON from `stdin` (default sys.stdin).
    3. Inline JSON: an argument starting with "{" is parsed as JSON.
    4. File Reference: "@file" or "file" is loaded from disk.

    :param arg_or_data: The CLI argument, or the data itself.
    :param stdin: Text stream used for "-".
    """
    # 1. API Strategy: Direct Object Pass-through
    if isinstance(arg_or_data, dict):
        return arg_or_data

    if not isinstance(arg_or_data, str):
        raise TypeError(f"Expected a string or dict, got {type(arg_or_data)}")

    # 2. Standard input
    if arg_or_data == "-":
        return _check_mapping(json.load(stdin or sys.stdin), "<stdin>")

    # 3. Inline JSON
    if arg_or_data.lstrip().startswith("{"):
        return _check_mapping(json.loads(arg_or_data), "<inline>")

    # 4. File Strategy: @filename (the @ is optional)
    path_str = arg_or_data[1:] if arg_or_data.startswith("@") else arg_or_data
    return _load_data_from_file(path_str)


def _load_data_from_file(path_str: str) -> dict:
    """
    Loads JSON (or YAML) from disk.
    """
    path = Path(path_str)
    if not path.exists():
        raise FileNotFoundError(f"Argument file not found: {path}")

    with open(path, encoding="utf-8") as f:
        # Simple extension check
        if path.suffix.lower() in (".yaml", ".yml"):
            if not HAS_YAML:
                raise ImportError(
                    "PyYAML is required to load .yaml files. Install it with: pip install pyyaml"
                )
            data = yaml.safe_load(f)
        else:
            # Default to JSON
            data = json.load(f)

    return _check_mapping(data, str(path))


def _check_mapping(data, source):
    if not isinstance(data, dict):
        raise ValueError(f"Field data in {source} must be a mapping of field name to value")
    return data
