"""
Abstract form field.

A FormField is configured once per rendering pass from a <field /> definition
and a value. It derives the HTML name and id of the field (taking the form
control prefix, the group path and multiple values into account) and renders
the label. Concrete field types implement get_input() for the control itself.
"""
import logging
import re
import threading
from abc import ABC, abstractmethod
from typing import Any, Optional

from django.utils.html import escape
from django.utils.safestring import mark_safe

from .exceptions import MissingTranslatorError

logger = logging.getLogger('formfields.field')

GENERATED_FIELDNAME = '__field'

_count = 0
_count_lock = threading.Lock()

_INVALID_ID_CHARS = re.compile(r'\W', re.ASCII)


def next_generated_fieldname() -> str:
    """Return the next '__field<N>' name of the current rendering pass."""
    global _count
    with _count_lock:
        _count += 1
        return f'{GENERATED_FIELDNAME}{_count}'


def reset_field_counter() -> None:
    """Start a new rendering pass; the next generated name is '__field1'."""
    global _count
    with _count_lock:
        _count = 0
    logger.debug("Generated field name counter reset")


class FormField(ABC):
    """
    Base class for all form field types.

    Subclasses are registered with a type name (see formfields.registry) and
    implement get_input(). The label, title and input markup are computed on
    first access and cached until the field is configured again.
    """

    # Set by register_field_type()
    type = ''

    def __init__(self, form=None):
        self._form = None
        self._form_control = ''
        self._translator = None

        self._element = None
        self._value = None
        self._group = None
        self._fieldname = ''
        self._name = ''
        self._id = ''

        self._required = False
        self._disabled = False
        self._readonly = False
        self._hidden = False
        self._multiple = False
        self._translate_label = True
        self._translate_description = True
        self._translate_options = True
        self._description = ''
        self._label_class = ''
        self._validate = ''

        self._input = None
        self._label = None
        self._title = None

        if form is not None:
            self.set_form(form)

    def set_form(self, form) -> 'FormField':
        """Attach the form context whose control prefix namespaces this field."""
        self._form = form
        self._form_control = form.form_control or ''
        return self

    def set_translator(self, translator) -> 'FormField':
        self._translator = translator
        return self

    def get_translator(self):
        """
        Translator attached to this field.

        Raises:
            MissingTranslatorError: if no translator has been attached
        """
        if self._translator is None:
            raise MissingTranslatorError(
                f"A translator is not attached to field '{self._fieldname or self.type}'"
            )
        return self._translator

    def force_multiple(self) -> Optional[bool]:
        """
        Override the declared multiple attribute.

        Field types that always submit several values return True. None keeps
        the declared value.
        """
        return None

    def configure(self, element, value: Any, group: Optional[str] = None) -> bool:
        """
        Configure the field from its definition.

        Args:
            element: FieldElement describing the <field /> tag
            value: Current value of the field
            group: Dotted group path acting as array container for the field,
                   e.g. name="foo" in group "bar" is submitted as "bar[foo]"

        Returns:
            bool: False if element is not a field definition; the field is
                  left untouched in that case
        """
        tag = getattr(element, 'tag', None)
        if tag != 'field':
            logger.warning(f"Rejected <{tag}> definition for a {self.__class__.__name__}")
            return False

        self._input = None
        self._label = None
        self._title = None

        self._element = element

        self._required = element.get('required') == 'true'
        self._disabled = element.get('disabled') == 'true'
        self._readonly = element.get('readonly') == 'true'
        self._validate = element.get('validate')

        self._multiple = element.get('multiple') in ('true', 'multiple')
        forced = self.force_multiple()
        if forced is not None:
            self._multiple = bool(forced)

        self._description = element.get('description')
        self._hidden = element.get('type') == 'hidden' or element.get('hidden') == 'true'

        # Translation is on unless explicitly switched off
        self._translate_label = element.get('translate_label') != 'false'
        self._translate_description = element.get('translate_description') != 'false'
        self._translate_options = element.get('translate_options') != 'false'

        self._group = group or None

        self._fieldname = self.get_field_name(element.get('name'))
        self._name = self.get_name(self._fieldname)
        self._id = self.get_id(element.get('id'), self._fieldname)

        self._value = value
        self._label_class = element.get('labelclass')

        logger.debug(f"Configured {self.type or 'field'} '{self._name}'", extra={'field': self})
        return True

    def setup(self, element, value: Any, group: Optional[str] = None) -> bool:
        return self.configure(element, value, group)

    def get_id(self, field_id: str, field_name: str) -> str:
        """
        Id used for the field input tag.

        Form control, group path and the explicit id (or the field name) are
        joined with underscores; any other non-word character becomes '_'.
        """
        id_ = self._form_control

        if self._group:
            group = self._group.replace('.', '_')
            id_ = f'{id_}_{group}' if id_ else group

        leaf = field_id or field_name
        id_ = f'{id_}_{leaf}' if id_ else leaf

        return _INVALID_ID_CHARS.sub('_', id_)

    def get_name(self, field_name: str) -> str:
        """
        Name used for the field input tag, e.g. 'jform[params][title][]'.
        """
        name = self._form_control

        if self._group:
            groups = self._group.split('.')
            if not name:
                name = groups.pop(0)
            name += ''.join(f'[{group}]' for group in groups)

        name = f'{name}[{field_name}]' if name else field_name

        if self._multiple:
            name += '[]'

        return name

    def get_field_name(self, field_name: str) -> str:
        if field_name:
            return field_name

        generated = next_generated_fieldname()
        logger.debug(f"Generated field name {generated}")
        return generated

    def get_title(self) -> str:
        """Plain label text, translated when translate_label is on."""
        if self._hidden:
            return ''

        text = self._element.get('label') or self._element.get('name')
        if self._translate_label:
            text = self.get_translator().translate(text)
        return text

    def get_label(self) -> str:
        """
        Label markup for the field.

        A description turns into a 'Title::Description' tooltip on the label.
        """
        if self._hidden:
            return ''

        text = self.title

        classes = []
        if self._description:
            classes.append('hasTip')
        if self._required:
            classes.append('required')
        if self._label_class:
            classes.append(self._label_class)
        class_attr = escape(' '.join(classes))

        label = f'<label id="{self._id}-lbl" for="{self._id}" class="{class_attr}"'

        if self._description:
            description = self._description
            if self._translate_description:
                description = self.get_translator().translate(description)
            tooltip = text.strip(':') + '::' + description
            label += f' title="{escape(tooltip)}"'

        # Label text comes from the form definition or its translation and may
        # carry inline markup, so it is inserted unescaped
        label += f'>{text}</label>'

        return mark_safe(label)

    @abstractmethod
    def get_input(self) -> str:
        """Markup of the field's editable control."""

    def translate_option(self, text: str) -> str:
        if self._translate_options:
            return self.get_translator().translate(text)
        return text

    @property
    def input(self) -> str:
        if self._input is None:
            self._input = self.get_input()
        return self._input

    @property
    def label(self) -> str:
        if self._label is None:
            self._label = self.get_label()
        return self._label

    @property
    def title(self) -> str:
        if self._title is None:
            self._title = self.get_title()
        return self._title

    @property
    def form(self):
        return self._form

    @property
    def form_control(self) -> str:
        return self._form_control

    @property
    def element(self):
        return self._element

    @property
    def value(self) -> Any:
        return self._value

    @property
    def group(self) -> Optional[str]:
        return self._group

    @property
    def fieldname(self) -> str:
        return self._fieldname

    @property
    def name(self) -> str:
        return self._name

    @property
    def id(self) -> str:
        return self._id

    @property
    def required(self) -> bool:
        return self._required

    @property
    def disabled(self) -> bool:
        return self._disabled

    @property
    def readonly(self) -> bool:
        return self._readonly

    @property
    def hidden(self) -> bool:
        return self._hidden

    @property
    def multiple(self) -> bool:
        return self._multiple

    @property
    def translate_label(self) -> bool:
        return self._translate_label

    @property
    def translate_description(self) -> bool:
        return self._translate_description

    @property
    def translate_options(self) -> bool:
        return self._translate_options

    @property
    def description(self) -> str:
        return self._description

    @property
    def label_class(self) -> str:
        return self._label_class

    @property
    def validate(self) -> str:
        return self._validate

    def __repr__(self):
        return f"<{self.__class__.__name__} {self._name or '(unconfigured)'}>"
