"""
Clipboard commands.

Copy text, run a command, paste the summary. These are the only places
that touch the clipboard; the pipeline itself never does.
"""

from typing import List, Optional, Sequence, Union

from .clipboard import Clipboard
from .config import SummaryConfig
from .logger_config import get_logger
from .pipeline import BulletSummarizer, ChunkedSummarizer

logger = get_logger(__name__)

TextInput = Optional[Union[str, Sequence[str]]]


def text_summary(
    text: TextInput = None,
    *,
    client,
    clipboard: Optional[Clipboard] = None,
    config: Optional[SummaryConfig] = None,
) -> Union[str, List[str]]:
    """
    Summarize long text, reading from the clipboard when `text` is None.

    Returns the per-block summaries when config.return_text is set.
    Otherwise the joined summary (or the final summary, when reduction is
    on) is written to the clipboard and returned.
    """
    config = config or SummaryConfig()
    clipboard = clipboard or Clipboard()
    if text is None:
        text = clipboard.read()

    result = ChunkedSummarizer(client, config).summarize(text)

    if config.return_text:
        return result.texts

    output = result.final_summary if result.final_summary is not None else result.joined
    clipboard.write(output)
    if config.verbose:
        logger.info("Finished!! %d characters copied to the clipboard", len(output))
    return output


def text_summary_as_bullet(
    text: TextInput = None,
    *,
    client,
    bullet_points: int = 6,
    clipboard: Optional[Clipboard] = None,
    model: str = "gpt-4o-mini",
    temperature: float = 1.0,
    verbose: bool = True,
) -> str:
    """Summarize text into bullet points and copy the result to the clipboard."""
    clipboard = clipboard or Clipboard()
    if text is None:
        text = clipboard.read()

    summarizer = BulletSummarizer(client, model=model, temperature=temperature)
    result = summarizer.summarize(text, bullet_points=bullet_points)

    clipboard.write(result)
    if verbose:
        logger.info("Finished!! %d bullet points copied to the clipboard", bullet_points)
    return result
