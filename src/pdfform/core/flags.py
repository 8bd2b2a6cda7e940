# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/core/flags.py

"""Field flag (/Ff) bit tables, ISO 32000-1:2008 Tables 221, 226 and 230"""

from enum import IntFlag


class FieldFlags(IntFlag):
    """Table 221 – Field flags common to all field types"""

    READONLY = 0x1
    REQUIRED = 0x2
    NO_EXPORT = 0x4


class ButtonFlags(IntFlag):
    """Table 226 – Field flags specific to button fields"""

    NO_TOGGLE_TO_OFF = 0x8000
    RADIO = 0x10000
    PUSHBUTTON = 0x20000
    RADIO_IN_UNISON = 0x4000000


class ChoiceFlags(IntFlag):
    """Table 230 – Field flags specific to choice fields"""

    COMBO = 0x20000
    EDIT = 0x40000
    SORT = 0x80000
    MULTISELECT = 0x200000
    DO_NOT_SPELLCHECK = 0x400000
    COMMIT_ON_CHANGE = 0x4000000


def get_field_flags(field) -> int:
    """Return the /Ff bitset of a field dictionary, 0 if absent or not an integer."""
    flags = field.get("/Ff", 0)
    if not isinstance(flags, int) or isinstance(flags, bool):
        return 0
    return flags


def is_read_only(field) -> bool:
    return bool(get_field_flags(field) & FieldFlags.READONLY)


def is_required(field) -> bool:
    return bool(get_field_flags(field) & FieldFlags.REQUIRED)


def button_flags(field) -> ButtonFlags:
    # Keep only the bits this table knows about
    return ButtonFlags(get_field_flags(field) & _all_bits(ButtonFlags))


def choice_flags(field) -> ChoiceFlags:
    return ChoiceFlags(get_field_flags(field) & _all_bits(ChoiceFlags))


def _all_bits(flag_cls) -> int:
    mask = 0
    for member in flag_cls:
        mask |= member.value
    return mask
