# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/cli/help.py

"""Help and version output, rendered with rich"""

import sys

from pdfform._version import __version__
from pdfform.cli.constants import PROG_NAME
from pdfform.core.registry import registry

_GENERAL_USAGE = f"""\
# {PROG_NAME}

Inspect and fill the interactive form fields of a PDF.

```
{PROG_NAME} <input> [input_pw <password>] <operation> [<arg>...] [output <file>] [<flag>...]
{PROG_NAME} help <operation>
```

Global flags: `-v/--verbose` (progress on stderr), `--debug`, `--version`.
"""


def _console(dest, raw):
    from rich.console import Console

    return Console(file=dest or sys.stdout, no_color=raw, highlight=not raw, soft_wrap=True)


def print_version(dest=None):
    print(f"{PROG_NAME} {__version__}", file=dest or sys.stdout)


def print_help(command=None, dest=None, raw=False):
    """Prints general help, or the help of one operation if `command` names one."""
    from rich.markdown import Markdown
    from rich.table import Table

    console = _console(dest, raw)

    if command and command in registry.operations:
        op = registry.operations[command]
        console.print(Markdown(f"# {op.name}\n\n{op.desc}\n\n```\n{PROG_NAME} {op.usage}\n```"))
        if op.long_desc:
            console.print(Markdown(op.long_desc))
        for example in op.examples:
            console.print(Markdown(f"{example['desc']}:\n\n```\n{PROG_NAME} {example['cmd']}\n```"))
        return

    console.print(Markdown(_GENERAL_USAGE))
    table = Table(title="Operations", show_header=True)
    table.add_column("Operation")
    table.add_column("Description")
    for name in sorted(registry.operations):
        table.add_row(name, registry.operations[name].desc)
    console.print(table)
