# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/fields/state.py

"""Reconstruct the observable state of a field from its dictionary.

Public methods:

read_state
get_on_value
get_radio_options

"""

import pikepdf

import pdfform.core.constants as c
from pdfform.core.flags import ChoiceFlags, choice_flags, is_read_only, is_required
from pdfform.core.types import (
    ButtonState,
    CheckBoxState,
    ComboBoxState,
    FieldType,
    ListBoxState,
    RadioState,
    TextState,
    UnknownState,
)

# --- Helpers ---


def _name_str(obj):
    """The text of a pikepdf Name without its leading slash, or None."""
    if isinstance(obj, pikepdf.Name):
        return str(obj).lstrip("/")
    return None


def _is_string(obj):
    return isinstance(obj, (pikepdf.String, str))


def _current_name(field):
    """/V if it is a name, else /AS if it is a name, else None."""
    value = _name_str(field.get("/V"))
    if value is None:
        value = _name_str(field.get("/AS"))
    return value


def normal_appearance_states(annot):
    """The state names of an annotation's /AP /N dictionary, in key order."""
    ap = annot.get("/AP")
    if not isinstance(ap, pikepdf.Dictionary):
        return []
    normal = ap.get("/N")
    if not isinstance(normal, pikepdf.Dictionary):
        return []
    return [str(key).lstrip("/") for key in normal.keys()]


def _first_on_state(annot):
    for state in normal_appearance_states(annot):
        if state != c.OFF_STATE:
            return state
    return None


def _kids(field):
    kids = field.get("/Kids")
    if isinstance(kids, pikepdf.Array):
        return list(kids)
    return []


def get_on_value(field) -> str:
    """
    The name a checkbox takes when checked: the first non-Off state of its
    normal appearance, looking at the first kid widget if the field has no
    appearance itself, and "Yes" if neither has one.
    """
    on_value = _first_on_state(field)
    if on_value is None:
        for kid in _kids(field)[:1]:
            if isinstance(kid, pikepdf.Dictionary):
                on_value = _first_on_state(kid)
    return on_value or c.DEFAULT_ON_STATE


def get_radio_options(field) -> list[str]:
    """
    One option per kid widget: the first non-Off appearance state of the kid,
    or the kid's index when it has none. Always as long as /Kids.
    """
    options = []
    for i, kid in enumerate(_kids(field)):
        on_state = _first_on_state(kid) if isinstance(kid, pikepdf.Dictionary) else None
        options.append(on_state if on_state is not None else str(i))
    return options


def _selected_strings(field):
    """/V of a choice field may be a string, an array of strings, or null."""
    value = field.get("/V")
    if _is_string(value):
        return [str(value)]
    if isinstance(value, pikepdf.Array):
        return [str(item) for item in value if _is_string(item)]
    return []


def _choice_options(field):
    """/Opt entries are either strings or [export, display] pairs."""
    opts = field.get("/Opt")
    if not isinstance(opts, pikepdf.Array):
        return []

    options = []
    for opt in opts:
        if _is_string(opt):
            text = str(opt)
        elif isinstance(opt, pikepdf.Array) and len(opt) >= 2 and _is_string(opt[1]):
            text = str(opt[1])
        else:
            continue
        if text:
            options.append(text)
    return options


# --- Main entry point ---


def read_state(field, field_type: FieldType):
    """Builds a fresh FieldState for `field`, interpreted as `field_type`."""
    if field_type == FieldType.BUTTON:
        return ButtonState()

    if field_type == FieldType.RADIO:
        return RadioState(
            selected=_current_name(field) or "",
            options=get_radio_options(field),
            readonly=is_read_only(field),
            required=is_required(field),
        )

    if field_type == FieldType.CHECKBOX:
        current = _current_name(field)
        return CheckBoxState(
            is_checked=current is not None
            and current in (c.DEFAULT_ON_STATE, get_on_value(field)),
            readonly=is_read_only(field),
            required=is_required(field),
        )

    if field_type == FieldType.LISTBOX:
        return ListBoxState(
            selected=_selected_strings(field),
            options=_choice_options(field),
            multiselect=bool(choice_flags(field) & ChoiceFlags.MULTISELECT),
            readonly=is_read_only(field),
            required=is_required(field),
        )

    if field_type == FieldType.COMBOBOX:
        return ComboBoxState(
            selected=_selected_strings(field),
            options=_choice_options(field),
            editable=bool(choice_flags(field) & ChoiceFlags.EDIT),
            readonly=is_read_only(field),
            required=is_required(field),
        )

    if field_type == FieldType.TEXT:
        value = field.get("/V")
        return TextState(
            text=str(value) if _is_string(value) else "",
            readonly=is_read_only(field),
            required=is_required(field),
        )

    return UnknownState()
