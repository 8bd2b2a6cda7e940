# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/core/constants.py

"""Constants used across pdfform"""

# --- Field type codes (/FT) ---

FT_BUTTON = "/Btn"
FT_CHOICE = "/Ch"
FT_TEXT = "/Tx"

# --- Appearance states ---

OFF_STATE = "Off"
DEFAULT_ON_STATE = "Yes"

# --- Text appearance regeneration ---

# (font name, font size, color operand, color operator), i.e. "/Helv 12 Tf 0 g"
DEFAULT_FONT = ("Helv", 12, 0, "g")

# Number of tokens in a "/Font size Tf gray g" default appearance string
DA_TOKEN_COUNT = 5

# Fixed left margin; the border width is not known here
TEXT_LEFT_MARGIN = 3

# y = 0.5 * height - TEXT_BASELINE_FACTOR * size (as Poppler does)
TEXT_BASELINE_FACTOR = 0.4

# Operators dropped from an existing text appearance before it is rebuilt.
# Compared case-insensitively, so e.g. "q" also drops "Q".
IGNORED_APPEARANCE_OPERATORS = frozenset(
    ["bt", "tc", "tw", "tz", "g", "tr", "tf", "tj", "et", "q", "bmc", "emc"]
)

# Marked content tag used for variable text
MARKED_CONTENT_TAG = "/Tx"

# --- Operation argument keys ---

INPUT_PDF = "input_pdf"
INPUT_FILENAME = "input_filename"
INPUT_PASSWORD = "input_password"
OPERATION_ARGS = "operation_args"
OUTPUT = "output"
OPTIONS = "options"

# --- Result metadata keys ---

META_OUTPUT_FILE = "output_file"
META_JSON_OUTPUT = "json_output"
