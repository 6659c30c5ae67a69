"""
Form context shared by the fields of one form.
"""
from django.conf import settings


class FormContext:
    """
    Carries the form control prefix.

    Every field attached to the same context is namespaced under it, so two
    forms on one page do not produce clashing names or ids.
    """

    def __init__(self, form_control: str = ''):
        self.form_control = form_control or ''

    def get_form_control(self) -> str:
        return self.form_control

    @classmethod
    def from_settings(cls) -> 'FormContext':
        """Context using the configured default form control prefix."""
        return cls(getattr(settings, 'FORMFIELDS_DEFAULT_FORM_CONTROL', ''))

    def __repr__(self):
        return f"<FormContext {self.form_control!r}>"
