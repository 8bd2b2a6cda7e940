# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/operations/dump_fields.py

"""Dump the fields of a PDF form and their current state"""

import json
import logging

logger = logging.getLogger(__name__)

import pdfform.core.constants as c
from pdfform.core.registry import register_operation
from pdfform.core.types import FieldType, OpResult
from pdfform.utils.io_helpers import smart_open_output
from pdfform.utils.string import xml_encode_for_info

_DUMP_FIELDS_LONG_DESC = """

Lists every input field of the form (AcroForm fields carrying
a field type), in the order in which they are discovered, one
stanza per field. All string values are processed with
XML-style escaping.

The `FieldIndex` of a field is the index used by the
`pdfform.Form` API.

### Field Stanza Format

* `FieldBegin`

* `FieldIndex: <index>`

* `FieldName: <partial_field_name>` (if the field has one)

* `FieldType: <Button|Radio|CheckBox|ListBox|ComboBox|Text|Unknown>`

* `FieldValue: <value>`
  Repeated once per selected value. Checkboxes report `Yes` or `Off`.

* `FieldOption: <option>`
  Repeated once per option (radio groups and choice fields).

* `FieldReadOnly: <true|false>`, `FieldRequired: <true|false>`

* `FieldMultiSelect` (list boxes) and `FieldEditable` (combo boxes)
"""

_DUMP_FIELDS_JSON_LONG_DESC = """

Same content as `dump_fields`, written as a JSON array with
one object per field. Strings are not escaped.
"""

_DUMP_FIELDS_EXAMPLES = [
    {
        "cmd": "form.pdf dump_fields",
        "desc": "Print the fields of form.pdf",
    },
    {
        "cmd": "form.pdf dump_fields output fields.txt",
        "desc": "Save the fields of form.pdf to fields.txt",
    },
]

_DUMP_FIELDS_JSON_EXAMPLES = [
    {
        "cmd": "form.pdf dump_fields_json output fields.json",
        "desc": "Save the fields of form.pdf as JSON",
    },
]


# --- CLI Hook ---


def _bool_str(value):
    return "true" if value else "false"


def dump_fields_cli_hook(result, stage):
    """
    Formats the structured field data (List[Dict]) as stanzas or JSON.
    """
    if result.data is None:
        return

    output_file = result.meta.get(c.META_OUTPUT_FILE) or stage.options.get(c.OUTPUT)
    json_output = result.meta.get(c.META_JSON_OUTPUT, False)

    with smart_open_output(output_file) as f:
        if json_output:
            print(json.dumps(result.data, indent=2, ensure_ascii=False), file=f)
            return

        for field in result.data:
            print("FieldBegin", file=f)
            print(f"FieldIndex: {field['index']}", file=f)
            if field["name"] is not None:
                print(f"FieldName: {xml_encode_for_info(field['name'])}", file=f)
            print(f"FieldType: {field['type']}", file=f)

            for value in field.get("values", []):
                print(f"FieldValue: {xml_encode_for_info(value)}", file=f)
            for option in field.get("options", []):
                print(f"FieldOption: {xml_encode_for_info(option)}", file=f)

            if "readonly" in field:
                print(f"FieldReadOnly: {_bool_str(field['readonly'])}", file=f)
                print(f"FieldRequired: {_bool_str(field['required'])}", file=f)
            if "multiselect" in field:
                print(f"FieldMultiSelect: {_bool_str(field['multiselect'])}", file=f)
            if "editable" in field:
                print(f"FieldEditable: {_bool_str(field['editable'])}", file=f)


# --- Extraction Logic ---


def field_data(form, index):
    """
    Describes the field at `index` as a JSON-friendly dictionary.
    """
    state = form.state_of(index)
    field_type = state.field_type

    data = {
        "index": index,
        "name": form.name_of(index),
        "type": str(field_type),
    }

    if field_type == FieldType.TEXT:
        data["values"] = [state.text] if state.text else []
    elif field_type == FieldType.CHECKBOX:
        data["values"] = [c.DEFAULT_ON_STATE if state.is_checked else c.OFF_STATE]
    elif field_type == FieldType.RADIO:
        data["values"] = [state.selected] if state.selected else []
        data["options"] = list(state.options)
    elif field_type in (FieldType.LISTBOX, FieldType.COMBOBOX):
        data["values"] = list(state.selected)
        data["options"] = list(state.options)
    else:
        # Buttons and unknown fields have no state
        return data

    data["readonly"] = state.readonly
    data["required"] = state.required
    if field_type == FieldType.LISTBOX:
        data["multiselect"] = state.multiselect
    elif field_type == FieldType.COMBOBOX:
        data["editable"] = state.editable
    return data


# --- Operations ---


@register_operation(
    "dump_fields_json",
    tags=["info", "forms"],
    desc="Print PDF form fields as JSON",
    long_desc=_DUMP_FIELDS_JSON_LONG_DESC,
    examples=_DUMP_FIELDS_JSON_EXAMPLES,
    cli_hook=dump_fields_cli_hook,
    usage="<input> dump_fields_json [output <output>]",
    args=([c.INPUT_PDF], {"output_file": c.OUTPUT}, {"json_output": True}),
)
@register_operation(
    "dump_fields",
    tags=["info", "forms"],
    desc="Print PDF form fields with XML-style escaping",
    long_desc=_DUMP_FIELDS_LONG_DESC,
    examples=_DUMP_FIELDS_EXAMPLES,
    cli_hook=dump_fields_cli_hook,
    usage="<input> dump_fields [output <output>]",
    args=([c.INPUT_PDF], {"output_file": c.OUTPUT}, {"json_output": False}),
)
def dump_fields(pdf, output_file=None, json_output=False) -> OpResult:
    """
    Extracts form field data from the PDF.

    Returns:
        OpResult:
            data: List[Dict] (Structured field data)
            pdf: pikepdf.Pdf (The input PDF)
    """
    from pdfform.form import Form

    form = Form(pdf)
    all_fields_data = [field_data(form, i) for i in range(form.field_count())]

    return OpResult(
        success=True,
        data=all_fields_data,
        pdf=pdf,
        meta={c.META_OUTPUT_FILE: output_file, c.META_JSON_OUTPUT: json_output},
        is_discardable=True,
    )
