"""
Built-in field types.
"""
from django.forms.utils import flatatt
from django.utils.html import format_html, format_html_join

from .field import FormField
from .registry import register_field_type


def _as_text(value) -> str:
    return '' if value is None else str(value)


@register_field_type('text')
class TextField(FormField):
    """Single line text input."""

    def get_input(self):
        attrs = {
            'type': 'text',
            'name': self.name,
            'id': self.id,
            'value': _as_text(self.value),
            'class': self.element.get('class') or None,
            'size': self.element.get('size') or None,
            'maxlength': self.element.get('maxlength') or None,
            'required': self.required,
            'disabled': self.disabled,
            'readonly': self.readonly,
        }
        return format_html('<input{}>', flatatt(attrs))


@register_field_type('hidden')
class HiddenField(FormField):
    """Hidden input. Never has a label."""

    def get_input(self):
        attrs = {
            'type': 'hidden',
            'name': self.name,
            'id': self.id,
            'value': _as_text(self.value),
        }
        return format_html('<input{}>', flatatt(attrs))


@register_field_type('list')
class ListField(FormField):
    """Select box built from the <option /> children of the definition."""

    def get_options(self):
        return [(value, self.translate_option(text)) for value, text in self.element.options]

    def selected_values(self):
        if self.value is None:
            return set()
        if isinstance(self.value, (list, tuple, set)):
            return {_as_text(value) for value in self.value}
        return {_as_text(self.value)}

    def get_input(self):
        selected = self.selected_values()
        attrs = {
            'name': self.name,
            'id': self.id,
            'class': self.element.get('class') or None,
            'multiple': self.multiple,
            'required': self.required,
            'disabled': self.disabled or self.readonly,
        }
        options = format_html_join(
            '',
            '<option value="{}"{}>{}</option>',
            (
                (value, flatatt({'selected': value in selected}), text)
                for value, text in self.get_options()
            ),
        )
        return format_html('<select{}>{}</select>', flatatt(attrs), options)


@register_field_type('checkboxes')
class CheckboxesField(ListField):
    """Group of checkboxes; always submits a list of values."""

    def force_multiple(self):
        return True

    def get_input(self):
        selected = self.selected_values()
        boxes = format_html_join(
            '',
            '<input type="checkbox" id="{0}{1}" name="{2}" value="{3}"{4}>'
            '<label for="{0}{1}">{5}</label>',
            (
                (self.id, index, self.name, value,
                 flatatt({'checked': value in selected, 'disabled': self.disabled}), text)
                for index, (value, text) in enumerate(self.get_options())
            ),
        )
        return format_html('<fieldset id="{}" class="checkboxes">{}</fieldset>', self.id, boxes)
