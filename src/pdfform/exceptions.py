# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# src/pdfform/exceptions.py

"""Exceptions raised by pdfform"""


class PdfFormError(Exception):
    """Base class for all pdfform errors"""


# --- Load-time errors ---


class LoadError(PdfFormError):
    """The document could not be analyzed as a fillable form"""


class FormStructureError(LoadError):
    """The /Root, /AcroForm or /Fields entry is missing or malformed"""


class NoSuchReferenceError(LoadError):
    """A reference did not point to any object"""

    def __init__(self, objgen=None):
        self.objgen = objgen
        if objgen is None:
            super().__init__("Reference does not resolve to any object")
        else:
            super().__init__(f"Reference {objgen[0]} {objgen[1]} R does not resolve to any object")


class NotAReferenceError(LoadError):
    """An element that was expected to be a reference was not a reference"""

    def __init__(self, found=None):
        self.found = found
        super().__init__(f"Expected an indirect reference, found {type(found).__name__}")


# --- Value errors ---


class FieldValueError(PdfFormError, ValueError):
    """A value could not be written to a field"""


class TypeMismatchError(FieldValueError):
    """The method used to set the state is incompatible with the type of the field"""


class InvalidSelectionError(FieldValueError):
    """One or more selected values are not valid choices"""


class TooManySelectedError(FieldValueError):
    """Multiple values were selected when only one was allowed"""


class ReadonlyFieldError(FieldValueError):
    """Readonly field cannot be edited"""


# --- Appearance ---


class AppearanceError(PdfFormError):
    """The cached appearance of a field could not be regenerated"""


# --- Command line ---


class UserCommandLineError(PdfFormError):
    """Bad arguments or data given on the command line"""


class MissingArgumentError(UserCommandLineError):
    pass


class InvalidArgumentError(UserCommandLineError):
    pass
