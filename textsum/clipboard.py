"""Clipboard source and sink backed by pyperclip."""

import pyperclip

from .errors import InputValidationError


class Clipboard:
    """Read text from and write text to the system clipboard."""

    def read(self) -> str:
        text = pyperclip.paste()
        if not text:
            raise InputValidationError("Clipboard is empty")
        return text

    def write(self, text: str) -> str:
        pyperclip.copy(text)
        return text
