"""
Block Splitter

Partitions normalized text into ordered blocks of at most `nch`
characters. The blocks always concatenate back to the input.
"""

import math
from typing import List, Union

from ..config import SplitStrategy
from ..errors import InputValidationError
from .base import Block


def split_blocks(
    text: str,
    nch: int,
    strategy: Union[SplitStrategy, str] = SplitStrategy.EVEN,
) -> List[Block]:
    """
    Split `text` into ceil(len / nch) blocks.

    Strategies:
    - "even": boundaries at i * len // n, sizes differ by at most one
    - "fixed": nch-sized slices, the last one may be shorter
    """
    if not isinstance(nch, int) or isinstance(nch, bool) or nch <= 0:
        raise InputValidationError(f"nch must be a positive integer, got {nch!r}")
    if not isinstance(text, str):
        raise InputValidationError("text must be a string")
    try:
        strategy = SplitStrategy(strategy)
    except ValueError:
        raise InputValidationError(f"Unknown split strategy: {strategy!r}") from None

    length = len(text)
    if length <= nch:
        return [Block(index=0, start=0, text=text)]

    n = math.ceil(length / nch)
    if strategy == SplitStrategy.FIXED:
        bounds = [min(i * nch, length) for i in range(n + 1)]
    else:
        bounds = [i * length // n for i in range(n + 1)]

    return [
        Block(index=i, start=bounds[i], text=text[bounds[i]:bounds[i + 1]])
        for i in range(n)
    ]
