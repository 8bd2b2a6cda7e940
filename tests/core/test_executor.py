# tests/core/test_executor.py
from unittest.mock import MagicMock, patch

import pytest

import pdfform.core.constants as c
from pdfform.core.executor import _resolve_arguments, run_operation
from pdfform.core.registry import Registry, register_operation
from pdfform.exceptions import UserCommandLineError


def test_executor_floor_defaults():
    """Empty context returns defaults, not KeyError."""
    arg_style = ([c.INPUT_PDF, c.OPERATION_ARGS], {"options": c.OPTIONS}, {})
    pos, kw = _resolve_arguments(arg_style, {})
    assert pos == [None, []]
    assert kw == {"options": {}}


def test_executor_strict_indexing_typo():
    arg_style = (["this_key_does_not_exist_in_floor"], {}, {})
    with pytest.raises(KeyError):
        _resolve_arguments(arg_style, {})


def test_executor_successful_mapping_and_literals():
    arg_style = ([c.INPUT_PDF], {"output_file": c.OUTPUT}, {"json_output": True})
    mock_pdf = MagicMock()
    context = {c.INPUT_PDF: mock_pdf, c.OUTPUT: "fields.json"}
    pos, kw = _resolve_arguments(arg_style, context)
    assert pos == [mock_pdf]
    assert kw == {"output_file": "fields.json", "json_output": True}


def test_executor_full_run():
    mock_func = MagicMock(return_value="Success")
    test_registry = Registry()

    with patch("pdfform.core.registry.registry", test_registry):
        register_operation("test_op", args=([c.INPUT_FILENAME], {}, {}))(mock_func)

    with patch("pdfform.core.executor.registry", test_registry):
        result = run_operation("test_op", {c.INPUT_FILENAME: "test.pdf"})

    assert result == "Success"
    mock_func.assert_called_once_with("test.pdf")


def test_executor_unknown_operation():
    with patch("pdfform.core.executor.registry", Registry()):
        with pytest.raises(UserCommandLineError, match="Unknown operation"):
            run_operation("nope", {})


def test_register_operation_can_be_stacked():
    test_registry = Registry()
    with patch("pdfform.core.registry.registry", test_registry):

        @register_operation("one", desc="first", tags=["a"])
        @register_operation("two", desc="second")
        def func():
            return 1

    assert set(test_registry.operations) == {"one", "two"}
    assert test_registry.operations["one"].function is func
    assert test_registry.operations["one"].tags == ["a"]
    assert test_registry.operations["two"].desc == "second"
