# tests/operations/test_dump_fields.py
import json
import types

import pytest
from pikepdf import Name, String

import pdfform.core.constants as c
from pdfform.core.types import OpResult
from pdfform.form import Form
from pdfform.operations.dump_fields import dump_fields, dump_fields_cli_hook, field_data


def _stage(output=None):
    return types.SimpleNamespace(options={c.OUTPUT: output} if output else {})


def test_dump_fields_result(all_types_pdf):
    result = dump_fields(all_types_pdf)

    assert isinstance(result, OpResult)
    assert result.is_discardable
    assert result.pdf is all_types_pdf
    assert [field["type"] for field in result.data] == [
        "Text",
        "CheckBox",
        "Radio",
        "ListBox",
        "ComboBox",
        "Button",
        "Unknown",
    ]


def test_field_data_by_type(all_types_pdf):
    form = Form(all_types_pdf)
    form.set_checkbox(1, True)
    form.set_list_selection(3, ["Cherry"])

    assert field_data(form, 0) == {
        "index": 0,
        "name": "Name",
        "type": "Text",
        "values": ["Ada"],
        "readonly": False,
        "required": False,
    }
    assert field_data(form, 1)["values"] == ["Yes"]
    assert field_data(form, 2)["options"] == ["Red", "Blue"]
    assert field_data(form, 3)["values"] == ["Cherry"]
    assert field_data(form, 3)["multiselect"] is False
    assert field_data(form, 4)["editable"] is False
    assert field_data(form, 5) == {"index": 5, "name": "Submit", "type": "Button"}


def test_checkbox_reports_yes_for_custom_on_value(pdf, add_field, on_off_appearance):
    add_field(FT=Name.Btn, T=String("Box"), V=Name("/X"), AP=on_off_appearance("X"))
    assert field_data(Form(pdf), 0)["values"] == ["Yes"]


def test_stanza_output(all_types_pdf, capsys):
    dump_fields_cli_hook(dump_fields(all_types_pdf), _stage())
    out = capsys.readouterr().out

    assert out.count("FieldBegin") == 7
    assert "FieldIndex: 0\nFieldName: Name\nFieldType: Text\nFieldValue: Ada\n" in out
    assert "FieldValue: Off" in out
    assert "FieldOption: Red\nFieldOption: Blue" in out
    assert "FieldOption: Small\nFieldOption: Large" in out
    assert "FieldMultiSelect: false" in out
    assert "FieldEditable: false" in out
    assert "FieldType: Button\nFieldBegin" in out


def test_stanza_output_escapes(pdf, add_field, capsys):
    add_field(FT=Name.Tx, T=String("A&B"), V=String("<ü>"))
    dump_fields_cli_hook(dump_fields(pdf), _stage())
    out = capsys.readouterr().out
    assert "FieldName: A&amp;B" in out
    assert "FieldValue: &lt;&#252;&gt;" in out


def test_json_output_to_file(all_types_pdf, tmp_path):
    out_path = tmp_path / "fields.json"
    result = dump_fields(all_types_pdf, output_file=str(out_path), json_output=True)
    dump_fields_cli_hook(result, _stage())

    data = json.loads(out_path.read_text(encoding="utf-8"))
    assert len(data) == 7
    assert data[4]["options"] == ["Small", "Large"]
    assert data[6] == {"index": 6, "name": "Signature", "type": "Unknown"}


def test_output_from_stage_options(all_types_pdf, tmp_path):
    out_path = tmp_path / "fields.txt"
    dump_fields_cli_hook(dump_fields(all_types_pdf), _stage(str(out_path)))
    assert out_path.read_text(encoding="utf-8").startswith("FieldBegin\nFieldIndex: 0\n")


def test_hook_ignores_empty_result(capsys):
    dump_fields_cli_hook(OpResult(data=None), _stage())
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("name", ["dump_fields", "dump_fields_json"])
def test_operations_registered(name):
    from pdfform.core.registry import registry

    op = registry.operations[name]
    assert op.function is dump_fields
    assert op.cli_hook is dump_fields_cli_hook
    assert op.args[2] == {"json_output": name.endswith("json")}
