# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/fields/mutate.py

"""Validate and write new values into field dictionaries.

Every setter re-reads the field's state first, so a field whose /FT or /Ff
was changed behind our back is rejected with TypeMismatchError rather than
written with the wrong shape.
"""

import logging

import pikepdf

import pdfform.core.constants as c
from pdfform.core.types import FieldType
from pdfform.exceptions import (
    InvalidSelectionError,
    PdfFormError,
    ReadonlyFieldError,
    TooManySelectedError,
    TypeMismatchError,
)
from pdfform.fields.appearance import regenerate_text_appearance
from pdfform.fields.classify import classify
from pdfform.fields.state import get_on_value, normal_appearance_states, read_state

logger = logging.getLogger(__name__)


def _current_state(field, expected: FieldType, enforce_readonly: bool):
    state = read_state(field, classify(field))
    if state.field_type != expected:
        raise TypeMismatchError(
            f"Field is a {state.field_type} field, cannot set it as {expected}"
        )
    if enforce_readonly and state.readonly:
        raise ReadonlyFieldError(f"Field {_field_label(field)} is read-only")
    return state


def _field_label(field):
    name = field.get("/T")
    return repr(str(name)) if name is not None else str(field.objgen)


def set_text(pdf, field, text: str, *, enforce_readonly=False, regenerate_appearances=True):
    """Replaces the value of a text field and refreshes its appearance if possible."""
    _current_state(field, FieldType.TEXT, enforce_readonly)

    field.V = pikepdf.String(text)

    if regenerate_appearances:
        # The value is committed even if the appearance cannot be rebuilt
        try:
            regenerate_text_appearance(pdf, field)
        except (PdfFormError, pikepdf.PdfError, ValueError, TypeError) as exc:
            logger.debug("Appearance of %s not regenerated: %s", _field_label(field), exc)


def set_checkbox(field, is_checked: bool, *, enforce_readonly=False):
    """Checks or unchecks a checkbox, using its own "on" state name."""
    _current_state(field, FieldType.CHECKBOX, enforce_readonly)

    state_name = get_on_value(field) if is_checked else c.OFF_STATE
    field.V = pikepdf.Name("/" + state_name)
    field.AS = pikepdf.Name("/" + state_name)
    _sync_kid_states(field, state_name)


def set_radio(field, choice: str, *, enforce_readonly=False):
    """Selects `choice`, which must be one of the group's options."""
    state = _current_state(field, FieldType.RADIO, enforce_readonly)
    if choice not in state.options:
        raise InvalidSelectionError(
            f"{choice!r} is not an option of {_field_label(field)}: {state.options}"
        )

    field.V = pikepdf.Name("/" + choice)
    _sync_kid_states(field, choice)


def _sync_kid_states(field, choice):
    """Turn on the kid widgets that have `choice` as a state, and the others off."""
    kids = field.get("/Kids")
    if not isinstance(kids, pikepdf.Array):
        return
    for kid in kids:
        if not isinstance(kid, pikepdf.Dictionary):
            continue
        states = normal_appearance_states(kid)
        if not states:
            continue
        kid.AS = pikepdf.Name("/" + (choice if choice in states else c.OFF_STATE))


def set_list_selection(field, choices, *, enforce_readonly=False):
    """
    Selects `choices` in a list box. Every choice must be an option, and only
    multiselect list boxes accept more than one.
    """
    choices = list(choices)
    state = _current_state(field, FieldType.LISTBOX, enforce_readonly)

    invalid = [choice for choice in choices if choice not in state.options]
    if invalid:
        raise InvalidSelectionError(
            f"Not options of {_field_label(field)}: {invalid} (options: {state.options})"
        )
    if len(choices) > 1 and not state.multiselect:
        raise TooManySelectedError(
            f"{_field_label(field)} accepts a single selection, got {len(choices)}"
        )

    if not choices:
        field.V = None
    elif len(choices) == 1:
        field.V = pikepdf.String(choices[0])
    else:
        field.V = pikepdf.Array([pikepdf.String(choice) for choice in choices])


def set_combo_selection(field, choice: str, *, enforce_readonly=False):
    """Selects `choice` in a combo box; editable combo boxes accept any text."""
    state = _current_state(field, FieldType.COMBOBOX, enforce_readonly)
    if choice not in state.options and not state.editable:
        raise InvalidSelectionError(
            f"{choice!r} is not an option of {_field_label(field)}: {state.options}"
        )

    field.V = pikepdf.String(choice)
