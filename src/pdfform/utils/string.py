# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/utils/string.py

"""String utilities"""

_XML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
}


def xml_encode_for_info(value: str) -> str:
    """
    XML-style escaping for stanza output, as pdftk does: markup characters
    become entities and non-ASCII characters become numeric references.
    """
    out = []
    for char in value:
        if char in _XML_ESCAPES:
            out.append(_XML_ESCAPES[char])
        elif ord(char) > 126:
            out.append(f"&#{ord(char)};")
        else:
            out.append(char)
    return "".join(out)
