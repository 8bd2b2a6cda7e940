# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/fields/classify.py

"""Derive the FieldType of a raw field dictionary"""

import pdfform.core.constants as c
from pdfform.core.flags import ButtonFlags, ChoiceFlags, button_flags, choice_flags
from pdfform.core.types import FieldType


def classify(field) -> FieldType:
    """
    Returns the type of a field from its /FT code and /Ff flags.

    Radio, pushbutton and checkbox share /FT /Btn; radio-ness is tested
    before pushbutton-ness, and anything else is a checkbox.
    """
    type_str = str(field.get("/FT", ""))

    if type_str == c.FT_BUTTON:
        flags = button_flags(field)
        if flags & (ButtonFlags.RADIO | ButtonFlags.NO_TOGGLE_TO_OFF):
            return FieldType.RADIO
        if flags & ButtonFlags.PUSHBUTTON:
            return FieldType.BUTTON
        return FieldType.CHECKBOX

    if type_str == c.FT_CHOICE:
        if choice_flags(field) & ChoiceFlags.COMBO:
            return FieldType.COMBOBOX
        return FieldType.LISTBOX

    if type_str == c.FT_TEXT:
        return FieldType.TEXT

    return FieldType.UNKNOWN
