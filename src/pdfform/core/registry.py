# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/core/registry.py

"""Registry of the operations available on the command line"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass
class Operation:
    name: str
    function: Callable
    desc: str = ""
    long_desc: str = ""
    usage: str = ""
    tags: list[str] = field(default_factory=list)
    examples: list[dict] = field(default_factory=list)
    # (positional context keys, {kwarg: context key}, {kwarg: literal value})
    args: tuple = ([], {}, {})
    cli_hook: Callable | None = None


class Registry:
    def __init__(self):
        self.operations: dict[str, Operation] = {}

    def add(self, op: Operation):
        if op.name in self.operations:
            logger.debug("Replacing registered operation '%s'", op.name)
        self.operations[op.name] = op


registry = Registry()


def register_operation(
    name,
    *,
    desc="",
    long_desc="",
    usage="",
    tags=None,
    examples=None,
    args=([], {}, {}),
    cli_hook=None,
    **_ignored: Any,
):
    """Decorator registering a function as a named operation. Can be stacked."""

    def decorator(func):
        registry.add(
            Operation(
                name=name,
                function=func,
                desc=desc,
                long_desc=long_desc,
                usage=usage,
                tags=list(tags or []),
                examples=list(examples or []),
                args=args,
                cli_hook=cli_hook,
            )
        )
        return func

    return decorator
