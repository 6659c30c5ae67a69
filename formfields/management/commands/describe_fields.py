"""
Django management command to list the names and ids of the fields in a form definition
"""
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from formfields.context import FormContext
from formfields.elements import load_field_definitions
from formfields.exceptions import InvalidFieldDefinitionError, UnknownFieldTypeError
from formfields.field import reset_field_counter
from formfields.registry import create_field
from formfields.translation import DjangoTranslator


class Command(BaseCommand):
    help = 'Show the HTML name, id and type of every field in an XML form definition'

    def add_arguments(self, parser):
        parser.add_argument(
            'path',
            type=str,
            help='XML file holding a <form> or <fields> definition'
        )
        parser.add_argument(
            '--form-control',
            type=str,
            default=None,
            help='Form control prefix (default: FORMFIELDS_DEFAULT_FORM_CONTROL)'
        )
        parser.add_argument(
            '--group',
            type=str,
            default=None,
            help='Dotted group path wrapping every field'
        )
        parser.add_argument(
            '--labels',
            action='store_true',
            help='Also print the label text of each field'
        )

    def handle(self, *args, **options):
        path = Path(options['path'])
        if not path.exists():
            raise CommandError(f'Definition file {path} does not exist')

        try:
            definitions = load_field_definitions(path.read_bytes())
        except InvalidFieldDefinitionError as e:
            raise CommandError(str(e)) from e

        if options['form_control'] is None:
            form = FormContext.from_settings()
        else:
            form = FormContext(options['form_control'])

        # Each run is a fresh rendering pass
        reset_field_counter()
        translator = DjangoTranslator()

        described = 0
        for element, group in definitions:
            if options['group']:
                group = f"{options['group']}.{group}" if group else options['group']

            try:
                field = create_field(element, None, group, form=form, translator=translator)
            except UnknownFieldTypeError as e:
                self.stdout.write(self.style.WARNING(f'Skipping {element.get("name") or "unnamed field"}: {e}'))
                continue

            line = f'{field.type:<12} {field.name:<40} {field.id}'
            if options['labels']:
                line += f'  {field.title}'
            self.stdout.write(line)
            described += 1

        self.stdout.write(self.style.SUCCESS(f'Described {described} fields from {path.name}'))
