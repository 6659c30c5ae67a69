"""
Parsed field definitions.

A FieldElement is the attribute bag a form field is configured from. It is
usually built from the <field /> elements of an XML form definition.
"""
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from lxml import etree

from .exceptions import InvalidFieldDefinitionError

logger = logging.getLogger('formfields.elements')


class FieldElement:
    """
    Tag name plus string attributes of one field definition.

    Absent and empty attributes are treated the same: get() returns ''.
    """

    def __init__(self, tag: str = 'field', attributes: Optional[Dict[str, str]] = None,
                 options: Optional[Iterable[Tuple[str, str]]] = None):
        self.tag = tag
        self.attributes = {key: str(value) for key, value in (attributes or {}).items()}
        self.options: List[Tuple[str, str]] = list(options or [])

    def get(self, name: str) -> str:
        return self.attributes.get(name) or ''

    def __contains__(self, name):
        return bool(self.get(name))

    def __repr__(self):
        return f"<FieldElement {self.tag} {self.attributes!r}>"

    @classmethod
    def from_etree(cls, node) -> 'FieldElement':
        """
        Build a FieldElement from an lxml element.

        Child <option value="...">text</option> elements are collected as
        (value, text) pairs for list style fields.
        """
        options = [
            (option.get('value', ''), (option.text or '').strip())
            for option in node.iterchildren('option')
        ]
        return cls(etree.QName(node).localname, dict(node.attrib), options)

    @classmethod
    def from_xml(cls, markup) -> 'FieldElement':
        """Parse a single element from XML markup."""
        return cls.from_etree(_parse(markup))


def _parse(markup):
    if isinstance(markup, str):
        markup = markup.encode('utf-8')
    try:
        return etree.fromstring(markup)
    except etree.XMLSyntaxError as e:
        raise InvalidFieldDefinitionError(f"Invalid field definition: {e}") from e


def group_for(node) -> Optional[str]:
    """
    Dotted group path of a <field /> node.

    Every enclosing <fields name="..."> element contributes one segment,
    outermost first.
    """
    names = [
        ancestor.get('name')
        for ancestor in node.iterancestors('fields')
        if ancestor.get('name')
    ]
    if not names:
        return None
    return '.'.join(reversed(names))


def load_field_definitions(markup) -> List[Tuple[FieldElement, Optional[str]]]:
    """
    Read every <field /> of a form definition document.

    Returns (element, group) pairs in document order.
    """
    root = _parse(markup)
    if etree.QName(root).localname == 'field':
        return [(FieldElement.from_etree(root), None)]

    definitions = [
        (FieldElement.from_etree(node), group_for(node))
        for node in root.iter('field')
    ]
    logger.debug(f"Loaded {len(definitions)} field definitions from <{etree.QName(root).localname}>")
    return definitions
