"""
Summarization Pipeline Package

## How it works

Long text is summarized in blocks:

    text -> normalize_text() -> split_blocks(nch) -> per-block summary
         -> (optional) one more summary over the joined block summaries

Each block summary is retried while it is longer than the target budget
plus a fixed slack. The conversation history sent to the endpoint is
pruned after every block to the system prompt and the latest summary.

## Files

- base.py: Data classes (Block, Message, ConversationHistory, SummaryResult)
- normalizer.py: Input cleaning
- splitter.py: Block partitioning
- summarizer.py: Retry-bounded block summaries and the chunked loop
- bullets.py: Short text to N bullet points
- session.py: Chat with window memory
"""

from .base import Block, BlockSummary, ConversationHistory, Message, SummaryResult
from .normalizer import normalize_text
from .splitter import split_blocks
from .summarizer import ChunkedSummarizer, RetryBoundedSummarizer, LENGTH_SLACK
from .bullets import BulletSummarizer, BULLET_CHOICES
from .session import ConversationSession

__all__ = [
    "Block",
    "BlockSummary",
    "ConversationHistory",
    "Message",
    "SummaryResult",
    "normalize_text",
    "split_blocks",
    "ChunkedSummarizer",
    "RetryBoundedSummarizer",
    "LENGTH_SLACK",
    "BulletSummarizer",
    "BULLET_CHOICES",
    "ConversationSession",
]
