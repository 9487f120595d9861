"""
Bullet Summarizer - summarize short text into N bullet points.
"""

from typing import Sequence, Union

from ..config import resolve_model
from ..errors import InputValidationError
from .base import ConversationHistory
from .normalizer import normalize_text

BULLET_CHOICES = (3, 6, 10, 15, 20)
MAX_INPUT_CHARS = 10000

SYSTEM_PROMPT = """You are a great assistant and a highly skilled copilot.
You have to summarize some input text into bullet points.
Your output is just the summarized and bulleted form text.
You must strictly reproduce and reconsider every detail without being overly concise in your writing.
The language used in the summary is the same as the input text."""

BULLET_PROMPT = "Please summarize the following text in {n} bullet points.: {text}"


class BulletSummarizer:
    """Single-call bullet summary; no chunking."""

    def __init__(self, llm_client, model: str = "gpt-4o-mini", temperature: float = 1.0):
        if not 0 <= temperature <= 1:
            raise InputValidationError(f"temperature must be between 0 and 1, got {temperature!r}")
        self.llm = llm_client
        self.model = resolve_model(model)
        self.temperature = temperature

    def summarize(self, text: Union[str, Sequence[str]], bullet_points: int = 6) -> str:
        if bullet_points not in BULLET_CHOICES:
            raise InputValidationError(
                f"bullet_points must be one of {BULLET_CHOICES}, got {bullet_points!r}"
            )
        normalized = normalize_text(text)
        if len(normalized) > MAX_INPUT_CHARS:
            raise InputValidationError(
                f"Too long text input: nchar > {MAX_INPUT_CHARS}"
            )

        history = ConversationHistory(SYSTEM_PROMPT)
        history.add_user(BULLET_PROMPT.format(n=bullet_points, text=normalized))
        return self.llm.complete(
            history.to_list(),
            model=self.model,
            temperature=self.temperature,
        )
