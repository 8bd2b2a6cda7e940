# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/cli/constants.py

"""Command line keywords and flags"""

PROG_NAME = "pdfform"

HELP_FLAGS = {"--help", "-h", "help"}
VERSION_FLAGS = {"--version"}
VERBOSE_FLAGS = {"--verbose", "-v"}
DEBUG_FLAGS = {"--debug"}

# Keywords taking one argument, may follow the operation arguments
INPUT_PASSWORD_KEYWORD = "input_pw"
OUTPUT_KEYWORD = "output"

# Output flags, stored as True in the stage options
FLAG_KEYWORDS = {"need_appearances", "strict_readonly"}

EXIT_OK = 0
EXIT_USER_ERROR = 1
EXIT_PDF_ERROR = 2
