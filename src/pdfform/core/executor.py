# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/core/executor.py

"""Run registered operations against a context dictionary"""

import logging

import pdfform.core.constants as c
from pdfform.core.registry import registry
from pdfform.exceptions import UserCommandLineError

logger = logging.getLogger(__name__)

# Every context key an operation may ask for, with the value used when the
# caller did not supply one.
_CONTEXT_FLOOR = {
    c.INPUT_PDF: None,
    c.INPUT_FILENAME: None,
    c.INPUT_PASSWORD: None,
    c.OPERATION_ARGS: [],
    c.OUTPUT: None,
    c.OPTIONS: {},
}


def _resolve_arguments(arg_style, context):
    """
    Maps an operation's declared arguments onto values from `context`.

    Unknown keys raise KeyError, so a typo in a registration fails loudly.
    """
    positional_keys, keyword_keys = arg_style[0], arg_style[1]
    literals = arg_style[2] if len(arg_style) > 2 else {}

    def lookup(key):
        if key in context:
            return context[key]
        return _CONTEXT_FLOOR[key]

    pos = [lookup(key) for key in positional_keys]
    kw = {name: lookup(key) for name, key in keyword_keys.items()}
    kw.update(literals)
    return pos, kw


def run_operation(operation_name, context):
    if operation_name not in registry.operations:
        raise UserCommandLineError(f"Unknown operation '{operation_name}'")

    op = registry.operations[operation_name]
    pos, kw = _resolve_arguments(op.args, context)
    logger.debug("Running %s with %d positional arguments", operation_name, len(pos))
    return op.function(*pos, **kw)
