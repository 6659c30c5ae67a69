"""
Field type registry.

Field classes register under an explicit type name, which is also stored on
the class as its `type`.
"""
import logging
from typing import Any, Dict, List, Optional, Type

from .exceptions import UnknownFieldTypeError

logger = logging.getLogger('formfields.registry')

DEFAULT_FIELD_TYPE = 'text'

_field_types: Dict[str, Type] = {}


def register_field_type(type_name: str):
    """Class decorator registering a FormField subclass under type_name."""
    def decorator(cls):
        cls.type = type_name
        _field_types[type_name.lower()] = cls
        logger.debug(f"Registered field type '{type_name}': {cls.__name__}")
        return cls
    return decorator


def get_field_class(type_name: str):
    try:
        return _field_types[type_name.lower()]
    except KeyError:
        raise UnknownFieldTypeError(f"No field type registered as '{type_name}'") from None


def registered_field_types() -> List[str]:
    return sorted(_field_types)


def create_field(element, value: Any = None, group: Optional[str] = None,
                 form=None, translator=None):
    """
    Instantiate and configure the field class matching a definition.

    The class is looked up by the definition's type attribute, 'text' when
    absent.

    Returns:
        The configured field, or None when the definition is not a field
    """
    tag = getattr(element, 'tag', None)
    if tag != 'field':
        logger.warning(f"Rejected <{tag}> definition: not a field")
        return None

    field_class = get_field_class(element.get('type') or DEFAULT_FIELD_TYPE)
    field = field_class(form)
    if translator is not None:
        field.set_translator(translator)

    if not field.configure(element, value, group):
        return None
    return field
