# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/utils/io_helpers.py

"""Helpers for text output"""

import sys
from contextlib import contextmanager


@contextmanager
def smart_open_output(output_file=None):
    """Yield a text file for `output_file`, or stdout if it is None or "-"."""
    if output_file is None or output_file == "-":
        yield sys.stdout
        return

    with open(output_file, "w", encoding="utf-8") as f:
        yield f
