"""
Pipeline Base Classes

Simple data structures shared by the summarization pipeline.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

ROLES = ("system", "user", "assistant")


@dataclass
class Block:
    """A contiguous slice of the normalized text."""
    index: int   # 0-based position in the text
    start: int   # offset of the first character
    text: str

    @property
    def end(self) -> int:
        return self.start + len(self.text)


@dataclass
class Message:
    """One role-tagged chat message."""
    role: str
    content: str

    def __post_init__(self):
        if self.role not in ROLES:
            raise ValueError(f"Unknown role: {self.role!r}")

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


class ConversationHistory:
    """
    The message list sent to the chat endpoint.

    Holds at most one system message, always first. `prune()` drops every
    user message and all but the latest assistant message, so the history
    stays small no matter how many blocks have been processed.

    Owned by the caller: create one per run or pass the same one to several
    runs, and call `reset()` to start over.
    """

    def __init__(self, system_prompt: Optional[str] = None):
        self.system_prompt = system_prompt
        self.messages: List[Message] = []
        self.reset()

    def reset(self) -> None:
        self.messages = []
        if self.system_prompt:
            self.messages.append(Message("system", self.system_prompt))

    def add_user(self, content: str) -> None:
        self.messages.append(Message("user", content))

    def add_assistant(self, content: str) -> None:
        self.messages.append(Message("assistant", content))

    def prune(self) -> None:
        """Keep only the system message and the latest assistant reply."""
        system = [m for m in self.messages if m.role == "system"]
        assistants = [m for m in self.messages if m.role == "assistant"]
        self.messages = system + assistants[-1:]

    @property
    def dialog_count(self) -> int:
        """Number of user + assistant messages."""
        return sum(1 for m in self.messages if m.role != "system")

    def to_list(self) -> List[Dict[str, str]]:
        return [m.to_dict() for m in self.messages]

    def __len__(self) -> int:
        return len(self.messages)


@dataclass
class BlockSummary:
    """Summary of one block."""
    index: int
    text: str
    attempts: int          # remote calls spent on this block
    within_budget: bool    # False when the last attempt was still too long

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "text": self.text,
            "attempts": self.attempts,
            "within_budget": self.within_budget,
        }


@dataclass
class SummaryResult:
    """
    Result of a chunked summarization run.

    `summaries` is in block order. `final_summary` is only set when a
    final reduction was requested.
    """
    text_length: int
    block_count: int
    summaries: List[BlockSummary] = field(default_factory=list)
    final_summary: Optional[str] = None
    total_llm_calls: int = 0

    @property
    def texts(self) -> List[str]:
        return [s.text for s in self.summaries]

    @property
    def joined(self) -> str:
        return " ".join(self.texts)

    def to_dict(self) -> dict:
        return {
            "text_length": self.text_length,
            "block_count": self.block_count,
            "summaries": [s.to_dict() for s in self.summaries],
            "final_summary": self.final_summary,
            "total_llm_calls": self.total_llm_calls,
        }
