"""
Chunked Summarizer

For long text, this summarizer:
1. Normalizes and splits the text into blocks
2. Summarizes each block, retrying when the summary is too long
3. Keeps only the system prompt and the latest summary in the history
4. Optionally summarizes the joined block summaries once more

Everything runs in order, one remote call at a time.
"""

from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from ..config import SummaryConfig
from ..errors import InputValidationError, LengthBudgetExceeded
from ..logger_config import get_logger
from .base import BlockSummary, ConversationHistory, SummaryResult
from .normalizer import normalize_text
from .splitter import split_blocks

logger = get_logger(__name__)

# A summary is accepted when shorter than budget + LENGTH_SLACK characters
LENGTH_SLACK = 100

SYSTEM_PROMPT = """You are a great assistant and an excellent co-pilot.
Your response should always be both response speed and accuracy.
You summarize and itemize the user's input. Your output is only the summarized text.
You must strictly reproduce and reconsider every detail without being overly concise in your writing.
The language used in the summary is the same as the input text."""

BLOCK_PROMPT = "Please summarize the following text within {budget} characters.: {text}"


class RetryBoundedSummarizer:
    """
    One summary per call, retried while the answer is too long.

    Only the length check is retried. Errors raised by the client go
    straight to the caller.

    Usage:
        retry = RetryBoundedSummarizer(client, max_attempts=3)
        text, attempts, ok = retry.summarize_block(history.to_list(), 500)
    """

    def __init__(
        self,
        llm_client,
        model: str = "gpt-4o-mini",
        temperature: float = 1.0,
        max_attempts: int = 3,
        strict_length: bool = False,
    ):
        if max_attempts < 1:
            raise InputValidationError("max_attempts must be at least 1")
        self.llm = llm_client
        self.model = model
        self.temperature = temperature
        self.max_attempts = max_attempts
        self.strict_length = strict_length

    def summarize_block(
        self,
        messages: List[Dict[str, str]],
        budget: int,
    ) -> Tuple[str, int, bool]:
        """
        Call the endpoint until the answer fits `budget + LENGTH_SLACK`.

        Returns:
            (text, attempts, within_budget). When every attempt overruns,
            the last answer is returned with within_budget=False, or
            LengthBudgetExceeded is raised in strict mode.
        """
        if budget <= 0:
            raise InputValidationError("budget must be positive")

        limit = budget + LENGTH_SLACK
        text = ""
        for attempt in range(1, self.max_attempts + 1):
            text = self.llm.complete(
                messages,
                model=self.model,
                temperature=self.temperature,
            )
            if len(text) < limit:
                return text, attempt, True
            if attempt < self.max_attempts:
                logger.info(
                    "Summary too long (%d >= %d), retrying (%d/%d)",
                    len(text), limit, attempt, self.max_attempts,
                )

        if self.strict_length:
            raise LengthBudgetExceeded(len(text), budget, self.max_attempts)
        logger.warning(
            "Accepting oversized summary (%d chars, budget %d) after %d attempts",
            len(text), budget, self.max_attempts,
        )
        return text, self.max_attempts, False

    def summarize_text(
        self, text: str, budget: int, system_prompt: str = SYSTEM_PROMPT
    ) -> Tuple[str, int, bool]:
        """Summarize a standalone text with a fresh system + user pair."""
        history = ConversationHistory(system_prompt)
        history.add_user(BLOCK_PROMPT.format(budget=budget, text=text))
        return self.summarize_block(history.to_list(), budget)


class ChunkedSummarizer:
    """
    Summarize long text block by block.

    Usage:
        summarizer = ChunkedSummarizer(client, SummaryConfig(nch=1000))
        result = summarizer.summarize(long_text)
        print(result.joined)
    """

    def __init__(
        self,
        llm_client,
        config: Optional[SummaryConfig] = None,
        progress: Optional[Callable[[str], None]] = None,
    ):
        self.llm = llm_client
        self.config = config or SummaryConfig()
        self.progress = progress
        self.retry = RetryBoundedSummarizer(
            llm_client,
            model=self.config.model,
            temperature=self.config.temperature,
            max_attempts=self.config.max_attempts,
            strict_length=self.config.strict_length,
        )

    def _report(self, message: str) -> None:
        if self.progress is not None:
            self.progress(message)
        elif self.config.verbose:
            logger.info(message)

    def summarize(
        self,
        text: Union[str, Sequence[str]],
        history: Optional[ConversationHistory] = None,
        final_reduction: Optional[bool] = None,
    ) -> SummaryResult:
        """
        Summarize `text`.

        Args:
            text: Raw text or a list of text pieces
            history: Caller-owned history; a fresh one is used when omitted
            final_reduction: Override config.final_reduction

        Returns:
            SummaryResult with one summary per block, in order
        """
        # Validate everything before the first remote call
        normalized = normalize_text(text)
        budget = self.config.resolved_summary_block()
        blocks = split_blocks(normalized, self.config.nch, self.config.strategy)
        if final_reduction is None:
            final_reduction = self.config.final_reduction

        if history is None:
            history = ConversationHistory(SYSTEM_PROMPT)

        self._report(f"Text nchar: {len(normalized)}")
        self._report(f"Text block: {len(blocks)}")

        result = SummaryResult(text_length=len(normalized), block_count=len(blocks))

        for block in blocks:
            self._report(f"Text: {block.index + 1}")
            history.add_user(BLOCK_PROMPT.format(budget=budget, text=block.text))
            try:
                summary, attempts, within_budget = self.retry.summarize_block(
                    history.to_list(), budget
                )
                history.add_assistant(summary)
            finally:
                # Drops the pending user message when the call failed
                history.prune()

            result.total_llm_calls += attempts
            result.summaries.append(
                BlockSummary(
                    index=block.index,
                    text=summary,
                    attempts=attempts,
                    within_budget=within_budget,
                )
            )
            self._report(summary)

        if final_reduction:
            if len(result.summaries) == 1:
                result.final_summary = result.summaries[0].text
            else:
                final, attempts, _ = self.retry.summarize_text(
                    result.joined, self.config.final_summary_block
                )
                result.total_llm_calls += attempts
                result.final_summary = final

        self._report(f"Summarized text nchar: {len(result.final_summary or result.joined)}")
        return result
