"""
Tests for parsed field definitions.
"""

from django.test import SimpleTestCase

from formfields.elements import FieldElement, load_field_definitions
from formfields.exceptions import InvalidFieldDefinitionError


FORM_XML = """<?xml version="1.0" encoding="utf-8"?>
<form>
    <fields name="params">
        <fields name="meta">
            <fieldset name="basic">
                <field name="keywords" type="text" label="Keywords" />
            </fieldset>
        </fields>
        <field name="layout" type="list">
            <option value="grid">Grid</option>
            <option value="list">List</option>
        </field>
    </fields>
    <!-- top level field -->
    <field name="title" required="true" />
</form>
"""


class FieldElementTestCase(SimpleTestCase):
    """Test cases for FieldElement."""

    def test_absent_attribute_is_empty_string(self):
        element = FieldElement('field', {'name': 'title', 'label': ''})
        self.assertEqual(element.get('name'), 'title')
        self.assertEqual(element.get('label'), '')
        self.assertEqual(element.get('missing'), '')
        self.assertIn('name', element)
        self.assertNotIn('label', element)

    def test_attribute_values_are_strings(self):
        element = FieldElement('field', {'size': 30, 'required': True})
        self.assertEqual(element.get('size'), '30')
        self.assertEqual(element.get('required'), 'True')

    def test_defaults_to_field_tag(self):
        self.assertEqual(FieldElement().tag, 'field')

    def test_from_xml_reads_attributes_and_options(self):
        element = FieldElement.from_xml(
            '<field name="color" type="list">'
            '<option value="r">Red</option>'
            '<option value="g"> Green </option>'
            '<option>Blue</option>'
            '</field>'
        )
        self.assertEqual(element.tag, 'field')
        self.assertEqual(element.get('name'), 'color')
        self.assertEqual(element.options, [('r', 'Red'), ('g', 'Green'), ('', 'Blue')])

    def test_from_xml_keeps_other_tags(self):
        element = FieldElement.from_xml(b'<fieldset name="basic" />')
        self.assertEqual(element.tag, 'fieldset')

    def test_from_xml_rejects_malformed_markup(self):
        with self.assertRaises(InvalidFieldDefinitionError):
            FieldElement.from_xml('<field name="title"')
        with self.assertRaises(ValueError):
            FieldElement.from_xml('not xml at all')


class LoadFieldDefinitionsTestCase(SimpleTestCase):
    """Test cases for load_field_definitions."""

    def test_fields_and_groups_in_document_order(self):
        definitions = load_field_definitions(FORM_XML)

        self.assertEqual(
            [(element.get('name'), group) for element, group in definitions],
            [('keywords', 'params.meta'), ('layout', 'params'), ('title', None)]
        )

    def test_options_are_collected(self):
        definitions = dict(
            (element.get('name'), element) for element, _ in load_field_definitions(FORM_XML)
        )
        self.assertEqual(definitions['layout'].options, [('grid', 'Grid'), ('list', 'List')])
        self.assertEqual(definitions['title'].get('required'), 'true')

    def test_single_field_document(self):
        definitions = load_field_definitions('<field name="title" />')
        self.assertEqual(len(definitions), 1)
        element, group = definitions[0]
        self.assertEqual(element.get('name'), 'title')
        self.assertIsNone(group)

    def test_unnamed_fields_element_adds_no_group(self):
        definitions = load_field_definitions('<form><fields><field name="a" /></fields></form>')
        self.assertEqual(definitions[0][1], None)

    def test_malformed_document(self):
        with self.assertRaises(InvalidFieldDefinitionError):
            load_field_definitions('<form><field></form>')
