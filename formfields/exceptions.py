"""
Exceptions raised by the formfields app.
"""


class FormFieldError(Exception):
    """Base class for form field errors."""


class MissingTranslatorError(FormFieldError, RuntimeError):
    """A field needed a translator before one was attached."""


class UnknownFieldTypeError(FormFieldError, LookupError):
    """No field class is registered for the requested type."""


class InvalidFieldDefinitionError(FormFieldError, ValueError):
    """A field definition could not be parsed."""
