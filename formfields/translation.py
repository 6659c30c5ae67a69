"""
Translation lookup used for field labels, descriptions and options.
"""
from typing import Protocol, runtime_checkable

from django.utils.translation import gettext


@runtime_checkable
class Translator(Protocol):
    def translate(self, text: str) -> str:
        ...


class DjangoTranslator:
    """Translator backed by Django's active translation catalog."""

    def translate(self, text: str) -> str:
        # gettext('') returns the catalog header, not an empty string
        if not text:
            return text
        return gettext(text)
