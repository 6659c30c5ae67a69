"""Template tags rendering configured form fields: label, input, title and rows."""

from django import template
from django.utils.html import format_html

register = template.Library()


@register.simple_tag
def field_label(field):
    """
    Render the label of a configured field.

    Usage:
        {% field_label field %}
    """
    return field.label


@register.simple_tag
def field_input(field):
    """
    Render the input control of a configured field.

    Usage:
        {% field_input field %}
    """
    return field.input


@register.simple_tag
def field_title(field):
    """Plain, escaped label text of a field."""
    return field.title


@register.simple_tag
def field_row(field, class_='control-group'):
    """
    Render label and input wrapped in a div. Hidden fields render the input only.

    Usage:
        {% field_row field %}
        {% field_row field class_="control-group span6" %}
    """
    if field.hidden:
        return field.input
    return format_html('<div class="{}">{}{}</div>', class_, field.label, field.input)
