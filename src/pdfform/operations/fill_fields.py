# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/operations/fill_fields.py

"""Fill PDF form fields from JSON or YAML data"""

import logging

logger = logging.getLogger(__name__)

import pdfform.core.constants as c
from pdfform.core.registry import register_operation
from pdfform.core.types import FieldType, OpResult
from pdfform.exceptions import (
    FieldValueError,
    InvalidArgumentError,
    MissingArgumentError,
    UserCommandLineError,
)
from pdfform.utils.arg_helpers import resolve_field_data

_FILL_FIELDS_LONG_DESC = """

Fills form fields by name. `<data>` is a JSON object mapping
field names to values, given inline, as a file name (JSON, or
YAML if PyYAML is installed), as `@file`, or as `-` to read
JSON from standard input.

The value expected depends on the field's type:

|Field type|Value|
|-|-|
|Text|a string|
|CheckBox|true or false (also "yes"/"no", "on"/"off")|
|Radio|the name of one of its options|
|ListBox|an option, a list of options, or null|
|ComboBox|an option (any text if the combo box is editable)|

Text fields get their appearance stream rebuilt. Pass
`need_appearances` to also ask viewers to regenerate all
appearances, and `strict_readonly` to refuse writing to
read-only fields.

All problems are reported together; fields that could be
filled are filled.
"""

_FILL_FIELDS_EXAMPLES = [
    {
        "cmd": "form.pdf fill_fields data.json output filled.pdf",
        "desc": "Fill form.pdf with the values in data.json",
    },
    {
        "cmd": """form.pdf fill_fields '{"Name": "Ada", "Agree": true}' output filled.pdf""",
        "desc": "Fill two fields given inline",
    },
]

_TRUE_STRINGS = ("yes", "true", "on", "1")
_FALSE_STRINGS = ("no", "false", "off", "0", "")


def _as_bool(value):
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in _TRUE_STRINGS + _FALSE_STRINGS:
        return value.lower() in _TRUE_STRINGS
    raise InvalidArgumentError(f"Expected true or false, got {value!r}")


def _as_choices(value):
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [str(item) for item in value]
    raise InvalidArgumentError(f"Expected an option or a list of options, got {value!r}")


def fill_field(form, index, value):
    """Writes `value` into the field at `index`, dispatching on its type."""
    field_type = form.type_of(index)

    if field_type == FieldType.TEXT:
        form.set_text(index, "" if value is None else str(value))
    elif field_type == FieldType.CHECKBOX:
        form.set_checkbox(index, _as_bool(value))
    elif field_type == FieldType.RADIO:
        form.set_radio(index, str(value))
    elif field_type == FieldType.LISTBOX:
        form.set_list_selection(index, _as_choices(value))
    elif field_type == FieldType.COMBOBOX:
        form.set_combo_selection(index, str(value))
    else:
        raise InvalidArgumentError(f"{field_type} fields cannot be filled")


@register_operation(
    "fill_fields",
    tags=["forms", "in_place"],
    desc="Fill PDF form fields from JSON or YAML data",
    long_desc=_FILL_FIELDS_LONG_DESC,
    examples=_FILL_FIELDS_EXAMPLES,
    usage="<input> fill_fields <data> output <file> [need_appearances] [strict_readonly]",
    args=([c.INPUT_PDF, c.OPERATION_ARGS], {"options": c.OPTIONS}, {}),
)
def fill_fields(pdf, op_args, options=None) -> OpResult:
    if not op_args:
        raise MissingArgumentError("fill_fields requires a <data> argument")
    if len(op_args) > 1:
        raise InvalidArgumentError(f"Unexpected arguments: {' '.join(op_args[1:])}")

    try:
        data = resolve_field_data(op_args[0])
    except Exception as exc:
        raise UserCommandLineError(exc) from exc

    return execute_fill_fields(pdf, data, options or {})


def execute_fill_fields(pdf, data: dict, options: dict) -> OpResult:
    from pdfform.form import Form

    form = Form(pdf, enforce_readonly=bool(options.get("strict_readonly")))
    errors = []
    filled = 0

    for name, value in data.items():
        try:
            index = form.index_of(name)
        except KeyError:
            errors.append(f"No field named '{name}'")
            continue

        try:
            fill_field(form, index, value)
            filled += 1
        except (FieldValueError, InvalidArgumentError) as exc:
            errors.append(f"{name}: {exc}")

    if options.get("need_appearances"):
        pdf.Root.AcroForm.NeedAppearances = True

    if errors:
        raise UserCommandLineError(
            "Errors encountered while filling form:\n  " + "\n  ".join(errors)
        )

    summary = f"Filled {filled} field{'s' if filled != 1 else ''}"
    logger.info(summary)
    return OpResult(success=True, pdf=pdf, summary=summary)
