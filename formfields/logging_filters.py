"""
Custom logging filters for formfields
"""
import logging


class FieldContextFilter(logging.Filter):
    """
    Add the field id and form control to log records
    """

    def filter(self, record):
        field = getattr(record, 'field', None)
        if field is not None:
            record.field_id = field.id or '-'
            record.form_control = field.form_control or '-'
        else:
            record.field_id = '-'
            record.form_control = '-'

        return True
