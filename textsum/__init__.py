"""
textsum - summarize long text through a chat-completion API.

    from textsum import ChunkedSummarizer, OpenAIClient, SummaryConfig

    client = OpenAIClient(api_key="sk-...")
    result = ChunkedSummarizer(client, SummaryConfig(nch=1000)).summarize(text)
    print(result.joined)
"""

from .config import SummaryConfig, Settings, settings
from .llm import OpenAIClient
from .pipeline import ChunkedSummarizer, ConversationHistory, SummaryResult

__all__ = [
    "SummaryConfig",
    "Settings",
    "settings",
    "OpenAIClient",
    "ChunkedSummarizer",
    "ConversationHistory",
    "SummaryResult",
]
