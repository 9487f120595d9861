"""
Text Normalizer

Cleans pasted text before it is split: joins multiple pieces, removes
artifacts left by copying character vectors, strips transcript
timestamps and collapses repeated spaces.
"""

import re
from typing import Sequence, Union

from ..errors import InputValidationError

# Left behind when a printed character vector is copied
_VECTOR_SEPARATOR = '", \n"'

_TIMESTAMP_MM_SS = re.compile(r"\([0-9][0-9]:[0-9][0-9]\)")
_TIMESTAMP_H_MM_SS = re.compile(r"\([0-9]:[0-9][0-9]:[0-9][0-9]\)")
_SPACES = re.compile(r" {2,}")


def normalize_text(text: Union[str, Sequence[str]]) -> str:
    """Return the cleaned text; raise InputValidationError on bad input."""
    if isinstance(text, str):
        joined = text
    elif isinstance(text, (list, tuple)):
        if not text or not all(isinstance(t, str) for t in text):
            raise InputValidationError("text must be a string or a list of strings")
        joined = " ".join(text)
    else:
        raise InputValidationError(
            f"text must be a string or a list of strings, got {type(text).__name__}"
        )

    joined = joined.replace(_VECTOR_SEPARATOR, " ")
    joined = _TIMESTAMP_MM_SS.sub("", joined)
    joined = _TIMESTAMP_H_MM_SS.sub("", joined)
    joined = _SPACES.sub(" ", joined).strip()

    if not joined:
        raise InputValidationError("text is empty")
    return joined
