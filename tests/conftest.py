import pikepdf
import pytest
from pikepdf import Array, Dictionary, Name, String

from pdfform.core.flags import ButtonFlags, ChoiceFlags, FieldFlags

TEXT_APPEARANCE = b"/Tx BMC q BT /Helv 12 Tf 0 g 1 0 0 1 2 5 Tm (Old) Tj ET Q EMC"


@pytest.fixture
def pdf():
    """A blank one-page PDF with an empty AcroForm."""
    p = pikepdf.new()
    p.add_blank_page()
    p.Root.AcroForm = Dictionary(
        Fields=Array(),
        DA=String("/Helv 0 Tf 0 g"),
    )
    return p


@pytest.fixture
def add_field(pdf):
    """
    Returns a function adding an indirect field dictionary to the form,
    either at the top level or as a kid of `parent`.
    """

    def _add(parent=None, **entries):
        field = pdf.make_indirect(Dictionary(**entries))
        if parent is None:
            pdf.Root.AcroForm.Fields.append(field)
        else:
            if "/Kids" not in parent:
                parent.Kids = Array()
            parent.Kids.append(field)
            field.Parent = parent
        return field

    return _add


@pytest.fixture
def on_off_appearance(pdf):
    """Returns a function building an /AP dictionary with the given on state."""

    def _make(on_state):
        return Dictionary(
            N=Dictionary({f"/{on_state}": pdf.make_stream(b""), "/Off": pdf.make_stream(b"")})
        )

    return _make


@pytest.fixture
def text_field(pdf, add_field):
    """A text field with a real appearance stream."""
    return add_field(
        FT=Name.Tx,
        T=String("Name"),
        V=String("Old"),
        DA=String("/Helv 12 Tf 0 g"),
        Rect=[0, 0, 100, 20],
        AP=Dictionary(N=pdf.make_stream(TEXT_APPEARANCE)),
    )


@pytest.fixture
def all_types_pdf(pdf, add_field, on_off_appearance):
    """
    A form with one field of every type, in this order:

    0 Text, 1 CheckBox, 2 Radio, 3 ListBox, 4 ComboBox, 5 Button, 6 Unknown
    """
    add_field(
        FT=Name.Tx,
        T=String("Name"),
        V=String("Ada"),
        DA=String("/Helv 12 Tf 0 g"),
        Rect=[0, 0, 100, 20],
        AP=Dictionary(N=pdf.make_stream(TEXT_APPEARANCE)),
    )
    add_field(
        FT=Name.Btn,
        T=String("Agree"),
        V=Name.Off,
        AS=Name.Off,
        AP=on_off_appearance("Yes"),
        Rect=[0, 30, 10, 40],
    )
    radio = add_field(FT=Name.Btn, T=String("Color"), Ff=int(ButtonFlags.RADIO))
    add_field(parent=radio, AP=on_off_appearance("Red"), AS=Name.Off, Rect=[0, 50, 10, 60])
    add_field(parent=radio, AP=on_off_appearance("Blue"), AS=Name.Off, Rect=[20, 50, 30, 60])
    add_field(
        FT=Name.Ch,
        T=String("Fruit"),
        Opt=Array([String("Apple"), String("Banana"), String("Cherry")]),
        Rect=[0, 70, 100, 120],
    )
    add_field(
        FT=Name.Ch,
        T=String("Size"),
        Ff=int(ChoiceFlags.COMBO),
        Opt=Array([Array([String("s"), String("Small")]), Array([String("l"), String("Large")])]),
        Rect=[0, 130, 100, 150],
    )
    add_field(
        FT=Name.Btn,
        T=String("Submit"),
        Ff=int(ButtonFlags.PUSHBUTTON),
        Rect=[0, 160, 50, 180],
    )
    add_field(
        FT=Name.Sig,
        T=String("Signature"),
        Ff=int(FieldFlags.REQUIRED),
        Rect=[0, 190, 100, 220],
    )
    return pdf


@pytest.fixture
def all_types_path(all_types_pdf, tmp_path):
    """The all_types_pdf form saved to disk."""
    path = tmp_path / "form.pdf"
    all_types_pdf.save(path)
    return path
