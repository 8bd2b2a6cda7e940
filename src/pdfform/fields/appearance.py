# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/fields/appearance.py

"""Regenerate the normal appearance stream of a text field.

This is a minimal single-line renderer: it does not handle multiline text,
alignment (/Q), combs or rich text, and only the field's own /DA is used,
not the document-wide one.
"""

import logging
import zlib
from decimal import Decimal

import pikepdf
from pikepdf import ContentStreamInstruction, Name, Operator
from pikepdf.exceptions import PdfParsingError

import pdfform.core.constants as c
from pdfform.exceptions import AppearanceError

logger = logging.getLogger(__name__)


def _instruction(operator, *operands):
    return ContentStreamInstruction(list(operands), Operator(operator))


def _number(token):
    """Parse a content stream number, keeping integers as int."""
    try:
        return int(token)
    except ValueError:
        value = Decimal(token)
    # PDF has no NaN or infinity
    if not value.is_finite():
        raise ValueError(f"Not a finite number: {token}")
    return value


def parse_default_appearance(da):
    """
    Splits a default appearance string such as "/Helv 12 Tf 0 g" into
    (font name, font size, color operand, color operator).

    Anything that is not exactly five tokens with numeric size and color
    gives the default font.
    """
    if not isinstance(da, (pikepdf.String, str)):
        logger.debug("No default appearance, using default font")
        return c.DEFAULT_FONT

    values = str(da).strip().lstrip("/").split()
    if len(values) != c.DA_TOKEN_COUNT:
        logger.debug("Unsupported default appearance %r, using default font", str(da))
        return c.DEFAULT_FONT

    try:
        font_size = _number(values[1])
        color = _number(values[3])
    except (ValueError, ArithmeticError):
        logger.debug("Non-numeric default appearance %r, using default font", str(da))
        return c.DEFAULT_FONT

    return values[0], font_size, color, values[4]


def text_matrix_offset(rect, font_size):
    """The (x, y) origin of the text line inside the field's rectangle."""
    x = c.TEXT_LEFT_MARGIN
    # Formula picked up from Poppler
    y = 0.5 * (rect[3] - rect[1]) - c.TEXT_BASELINE_FACTOR * float(font_size)
    return x, y


def _read_rect(widget):
    rect = widget.get("/Rect")
    if not isinstance(rect, pikepdf.Array) or len(rect) != 4:
        raise AppearanceError("Field has no usable /Rect")
    try:
        return [float(value) for value in rect]
    except (TypeError, ValueError) as exc:
        raise AppearanceError(f"Non-numeric /Rect: {exc}") from exc


def _normal_appearance_stream(widget):
    ap = widget.get("/AP")
    if not isinstance(ap, pikepdf.Dictionary):
        raise AppearanceError("Field has no appearance dictionary (/AP)")
    normal = ap.get("/N")
    if not isinstance(normal, pikepdf.Stream):
        raise AppearanceError("Normal appearance (/AP /N) is not a stream")
    return normal


def _read_instructions(pdf, stream):
    """Parse the stream's instructions, decoding first and falling back to the raw data."""
    try:
        return list(pikepdf.parse_content_stream(stream))
    except (pikepdf.PdfError, PdfParsingError):
        logger.debug("Could not decode appearance stream, parsing raw bytes")
        raw = stream.read_raw_bytes()
        return list(pikepdf.parse_content_stream(pdf.make_stream(raw)))


def build_text_instructions(instructions, value, da, rect):
    """
    Returns `instructions` without stale text state, followed by a fresh
    single-line text object showing `value`.
    """
    content = [
        inst
        for inst in instructions
        if str(inst.operator).lower() not in c.IGNORED_APPEARANCE_OPERATORS
    ]

    font_name, font_size, color, color_op = parse_default_appearance(da)
    x, y = text_matrix_offset(rect, font_size)

    content.extend(
        [
            _instruction("BMC", Name(c.MARKED_CONTENT_TAG)),
            _instruction("q"),
            _instruction("BT"),
            _instruction("Tf", Name("/" + font_name), font_size),
            _instruction(color_op, color),
            _instruction("Tm", 1, 0, 0, 1, x, y),
            _instruction("Tj", value),
            _instruction("ET"),
            _instruction("Q"),
            _instruction("EMC"),
        ]
    )
    return content


def _link_font_resource(pdf, stream, font_name):
    """Point the stream's /Resources /Font at the form's /DR font if it lacks one."""
    acroform = pdf.Root.get("/AcroForm")
    if not isinstance(acroform, pikepdf.Dictionary):
        return
    dr = acroform.get("/DR")
    if not isinstance(dr, pikepdf.Dictionary):
        return
    dr_fonts = dr.get("/Font")
    font_key = "/" + font_name
    if not isinstance(dr_fonts, pikepdf.Dictionary) or font_key not in dr_fonts:
        return

    if not isinstance(stream.get("/Resources"), pikepdf.Dictionary):
        stream.Resources = pikepdf.Dictionary()
    resources = stream.Resources
    if not isinstance(resources.get("/Font"), pikepdf.Dictionary):
        resources.Font = pikepdf.Dictionary()
    if font_key not in resources.Font:
        resources.Font[font_key] = dr_fonts[font_key]
        logger.debug("Linked /DR font %s into appearance resources", font_key)


def _widgets(field):
    """The annotations carrying the field's appearance: itself, or its kids."""
    if "/AP" in field:
        return [field]
    kids = field.get("/Kids")
    if isinstance(kids, pikepdf.Array):
        return [kid for kid in kids if isinstance(kid, pikepdf.Dictionary) and "/AP" in kid]
    return []


def regenerate_widget_appearance(pdf, widget, value, da):
    rect = _read_rect(widget)
    stream = _normal_appearance_stream(widget)

    content = build_text_instructions(_read_instructions(pdf, stream), value, da, rect)

    # If this raises, the old stream is left as it was
    encoded = pikepdf.unparse_content_stream(content)

    stream.write(zlib.compress(encoded), filter=Name.FlateDecode)
    _link_font_resource(pdf, stream, parse_default_appearance(da)[0])


def regenerate_text_appearance(pdf, field):
    """
    Rewrites the /AP /N stream of a text field so that it shows the current /V.

    Raises AppearanceError (or a pikepdf error) when the field lacks the data
    needed; callers treat this as best-effort.
    """
    value = field.get("/V")
    if value is None:
        raise AppearanceError("Field has no value (/V)")

    widgets = _widgets(field)
    if not widgets:
        raise AppearanceError("Field has no appearance dictionary (/AP)")

    for widget in widgets:
        # A missing /DA falls back to the default font
        da = widget.get("/DA", field.get("/DA"))
        regenerate_widget_appearance(pdf, widget, value, da)
