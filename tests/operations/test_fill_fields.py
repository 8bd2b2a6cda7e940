# tests/operations/test_fill_fields.py
import io
import json
from unittest.mock import patch

import pytest
from pikepdf import Name

from pdfform.core.flags import FieldFlags
from pdfform.exceptions import InvalidArgumentError, MissingArgumentError, UserCommandLineError
from pdfform.form import Form
from pdfform.operations.fill_fields import _as_bool, _as_choices, execute_fill_fields, fill_fields
from pdfform.utils.arg_helpers import resolve_field_data


def test_fill_all_types(all_types_pdf):
    data = {
        "Name": "Grace",
        "Agree": True,
        "Color": "Red",
        "Fruit": ["Apple"],
        "Size": "Small",
    }
    result = execute_fill_fields(all_types_pdf, data, {})

    assert result.success
    assert result.summary == "Filled 5 fields"
    assert result.pdf is all_types_pdf

    form = Form(all_types_pdf)
    assert form.state_of(0).text == "Grace"
    assert form.state_of(1).is_checked
    assert form.state_of(2).selected == "Red"
    assert form.state_of(3).selected == ["Apple"]
    assert form.state_of(4).selected == ["Small"]


def test_fill_single_field_summary(all_types_pdf):
    assert execute_fill_fields(all_types_pdf, {"Name": "x"}, {}).summary == "Filled 1 field"


def test_fill_inline_json(all_types_pdf):
    fill_fields(all_types_pdf, ['{"Agree": "yes", "Fruit": null}'])
    assert Form(all_types_pdf).state_of(1).is_checked


def test_errors_are_collected(all_types_pdf):
    data = {"Missing": "x", "Color": "Green", "Submit": "click", "Name": "Still filled"}

    with pytest.raises(UserCommandLineError) as excinfo:
        execute_fill_fields(all_types_pdf, data, {})

    message = str(excinfo.value)
    assert message.startswith("Errors encountered while filling form:")
    assert "No field named 'Missing'" in message
    assert "Color:" in message
    assert "Submit: Button fields cannot be filled" in message
    assert Form(all_types_pdf).state_of(0).text == "Still filled"


def test_strict_readonly(pdf, add_field):
    add_field(FT=Name.Tx, T="Locked", Ff=int(FieldFlags.READONLY))

    with pytest.raises(UserCommandLineError, match="read-only"):
        execute_fill_fields(pdf, {"Locked": "x"}, {"strict_readonly": True})

    execute_fill_fields(pdf, {"Locked": "x"}, {})
    assert Form(pdf).state_of(0).text == "x"


def test_need_appearances(all_types_pdf):
    execute_fill_fields(all_types_pdf, {"Name": "x"}, {"need_appearances": True})
    assert bool(all_types_pdf.Root.AcroForm.NeedAppearances) is True


def test_missing_data_argument(all_types_pdf):
    with pytest.raises(MissingArgumentError):
        fill_fields(all_types_pdf, [])


def test_too_many_arguments(all_types_pdf):
    with pytest.raises(InvalidArgumentError):
        fill_fields(all_types_pdf, ["a.json", "b.json"])


def test_unreadable_data_is_a_user_error(all_types_pdf, tmp_path):
    with pytest.raises(UserCommandLineError, match="not found"):
        fill_fields(all_types_pdf, [str(tmp_path / "missing.json")])


@pytest.mark.parametrize(
    "value, expected",
    [(True, True), (False, False), ("Yes", True), ("on", True), ("0", False), ("", False)],
)
def test_as_bool(value, expected):
    assert _as_bool(value) is expected


def test_as_bool_rejects_other_values():
    with pytest.raises(InvalidArgumentError):
        _as_bool("maybe")
    with pytest.raises(InvalidArgumentError):
        _as_bool(1)


def test_as_choices():
    assert _as_choices(None) == []
    assert _as_choices("a") == ["a"]
    assert _as_choices(["a", 2]) == ["a", "2"]
    with pytest.raises(InvalidArgumentError):
        _as_choices({"a": 1})


# --- Data loading ---


def test_resolve_dict_passthrough():
    data = {"a": 1}
    assert resolve_field_data(data) is data


def test_resolve_from_stdin():
    assert resolve_field_data("-", stdin=io.StringIO('{"a": "b"}')) == {"a": "b"}


def test_resolve_from_file(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"Name": "Ada"}), encoding="utf-8")
    assert resolve_field_data(str(path)) == {"Name": "Ada"}
    assert resolve_field_data("@" + str(path)) == {"Name": "Ada"}


def test_resolve_from_yaml(tmp_path):
    pytest.importorskip("yaml")
    path = tmp_path / "data.yaml"
    path.write_text("Name: Ada\nAgree: true\n", encoding="utf-8")
    assert resolve_field_data(str(path)) == {"Name": "Ada", "Agree": True}


def test_resolve_yaml_without_pyyaml(tmp_path):
    path = tmp_path / "data.yml"
    path.write_text("Name: Ada\n", encoding="utf-8")
    with patch("pdfform.utils.arg_helpers.HAS_YAML", False):
        with pytest.raises(ImportError, match="PyYAML"):
            resolve_field_data(str(path))


def test_resolve_requires_mapping(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        resolve_field_data(str(path))


def test_resolve_rejects_other_types():
    with pytest.raises(TypeError):
        resolve_field_data(42)
