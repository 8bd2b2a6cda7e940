# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/cli/main.py

"""Command line entry point"""

import logging
import sys
from typing import NamedTuple

import pdfform.cli.help as helpmod
import pdfform.core.constants as c
from pdfform.cli.constants import (
    DEBUG_FLAGS,
    EXIT_OK,
    EXIT_PDF_ERROR,
    EXIT_USER_ERROR,
    FLAG_KEYWORDS,
    HELP_FLAGS,
    INPUT_PASSWORD_KEYWORD,
    OUTPUT_KEYWORD,
    PROG_NAME,
    VERBOSE_FLAGS,
    VERSION_FLAGS,
)
from pdfform.core import executor
from pdfform.core.types import OpResult
from pdfform.exceptions import MissingArgumentError, PdfFormError, UserCommandLineError
from pdfform.registry_init import initialize_registry

logger = logging.getLogger(__name__)


class CliStage(NamedTuple):
    input_file: str
    operation: str
    operation_args: list
    options: dict
    password: str | None = None


# --- Flags ---


def _get_flags_and_setup_logging(args):
    """Strip -v/--debug from `args` and configure logging on stderr."""
    verbose = any(arg in VERBOSE_FLAGS for arg in args)
    debug = any(arg in DEBUG_FLAGS for arg in args)
    remaining = [arg for arg in args if arg not in VERBOSE_FLAGS | DEBUG_FLAGS]

    if debug or verbose:
        logging.basicConfig(
            level=logging.DEBUG if debug else logging.INFO,
            stream=sys.stderr,
            format="%(name)s: %(message)s",
        )
    return verbose or debug, remaining


def _find_help_command(args):
    """The operation named after a help flag, if any."""
    from pdfform.core.registry import registry

    for arg in args:
        if arg not in HELP_FLAGS and arg in registry.operations:
            return arg
    return None


def _print_help_and_exit(command):
    helpmod.print_help(command=command, dest=sys.stdout, raw=False)
    return EXIT_OK


def _handle_special_flags(args):
    """Handles --version (exits) and help (returns 0). Returns None otherwise."""
    if any(arg in VERSION_FLAGS for arg in args):
        helpmod.print_version(dest=sys.stdout)
        sys.exit(EXIT_OK)
    if not args or any(arg in HELP_FLAGS for arg in args):
        return _print_help_and_exit(_find_help_command(args))
    return None


# --- Parsing ---


def parse_cli_stage(args) -> CliStage:
    """
    Parses `<input> [input_pw <pw>] <operation> [<arg>...] [output <file>] [<flag>...]`.
    """
    if not args:
        raise MissingArgumentError("No input file given")

    input_file, rest = args[0], list(args[1:])
    password = None
    if rest and rest[0] == INPUT_PASSWORD_KEYWORD:
        if len(rest) < 2:
            raise MissingArgumentError(f"'{INPUT_PASSWORD_KEYWORD}' requires a password")
        password, rest = rest[1], rest[2:]

    if not rest:
        raise MissingArgumentError("No operation given")
    operation, rest = rest[0], rest[1:]

    op_args = []
    options = {}
    while rest:
        arg = rest.pop(0)
        if arg == OUTPUT_KEYWORD:
            if not rest:
                raise MissingArgumentError(f"'{OUTPUT_KEYWORD}' requires a file name")
            options[c.OUTPUT] = rest.pop(0)
        elif arg in FLAG_KEYWORDS:
            options[arg] = True
        else:
            op_args.append(arg)

    return CliStage(input_file, operation, op_args, options, password)


# --- Running ---


def run_stage(stage: CliStage):
    import pikepdf

    from pdfform.core.registry import registry

    if stage.operation not in registry.operations:
        raise UserCommandLineError(f"Unknown operation '{stage.operation}'")

    pdf = pikepdf.open(stage.input_file, password=stage.password or "")
    with pdf:
        context = {
            c.INPUT_PDF: pdf,
            c.INPUT_FILENAME: stage.input_file,
            c.INPUT_PASSWORD: stage.password,
            c.OPERATION_ARGS: stage.operation_args,
            c.OUTPUT: stage.options.get(c.OUTPUT),
            c.OPTIONS: stage.options,
        }
        result = executor.run_operation(stage.operation, context)

        if not isinstance(result, OpResult):
            return EXIT_OK
        if not result.success:
            raise UserCommandLineError(f"Operation '{stage.operation}' failed: {result.summary}")

        op = registry.operations[stage.operation]
        if op.cli_hook is not None:
            op.cli_hook(result, stage)
        elif result.pdf is not None and not result.is_discardable:
            output = stage.options.get(c.OUTPUT)
            if output is None:
                raise MissingArgumentError(f"'{stage.operation}' requires 'output <file>'")
            result.pdf.save(output)
            logger.info("Saved %s", output)

    return EXIT_OK


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)
    initialize_registry()

    _, args = _get_flags_and_setup_logging(args)

    ret = _handle_special_flags(args)
    if ret is not None:
        return ret

    try:
        return run_stage(parse_cli_stage(args))
    except UserCommandLineError as exc:
        print(f"{PROG_NAME}: {exc}", file=sys.stderr)
        return EXIT_USER_ERROR
    except PdfFormError as exc:
        print(f"{PROG_NAME}: {exc}", file=sys.stderr)
        return EXIT_PDF_ERROR
    except FileNotFoundError as exc:
        print(f"{PROG_NAME}: {exc}", file=sys.stderr)
        return EXIT_USER_ERROR
    except Exception as exc:
        import pikepdf

        if isinstance(exc, pikepdf.PdfError):
            print(f"{PROG_NAME}: {exc}", file=sys.stderr)
            return EXIT_PDF_ERROR
        raise


def cli_entry():
    sys.exit(main())
