"""
Configuration for textsum.

All options are resolved here, before a pipeline runs. Nothing is
chosen interactively.
"""

import os
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


# Menu names accepted by the CLI / API, mapped to model identifiers
MODEL_PRESETS = {
    "gpt-3.5": "gpt-3.5-turbo",
    "gpt-4": "gpt-4-0613",
    "gpt-4o-mini": "gpt-4o-mini",
}


def resolve_model(name: str) -> str:
    """Map a preset name to a model id; unknown names pass through."""
    return MODEL_PRESETS.get(name, name)


class CompressionRate(str, Enum):
    """Summary size as a fraction of the block size."""

    HIGH = "high"
    MIDDLE = "middle"
    LOW = "low"

    @property
    def ratio(self) -> float:
        return {"high": 0.1, "middle": 0.25, "low": 0.4}[self.value]


class SplitStrategy(str, Enum):
    EVEN = "even"    # evenly spaced boundaries
    FIXED = "fixed"  # nch-sized slices, short tail


class OpenAIConfig(BaseModel):
    """Configuration for the chat-completion API."""

    base_url: str = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
    api_key: str = os.getenv("OPENAI_API_KEY", "")
    model: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    timeout: int = 120  # seconds


class SummaryConfig(BaseModel):
    """
    Options for the chunked summarization pipeline.

    - nch: maximum characters per block
    - summary_block: target characters per block summary; when unset it is
      derived from `compression` and `nch`
    - final_summary_block: target size of the optional consolidated summary
    - max_attempts: remote calls allowed per block (length retries included)
    - strict_length: raise instead of accepting an oversized last attempt
    """

    nch: int = Field(2000, gt=0)
    summary_block: Optional[int] = Field(None, gt=0)
    compression: CompressionRate = CompressionRate.MIDDLE
    final_summary_block: int = Field(1000, gt=0)
    model: str = Field(default_factory=lambda: os.getenv("OPENAI_MODEL", "gpt-4o-mini"))
    temperature: float = Field(1.0, ge=0, le=1)
    max_attempts: int = Field(3, ge=1, le=5)
    strategy: SplitStrategy = SplitStrategy.EVEN
    final_reduction: bool = False
    strict_length: bool = False
    verbose: bool = True
    return_text: bool = False

    @model_validator(mode="after")
    def check_budget(self):
        if self.summary_block is not None and self.summary_block > self.nch:
            raise ValueError("summary_block must not exceed nch")
        self.model = resolve_model(self.model)
        return self

    def resolved_summary_block(self) -> int:
        if self.summary_block is not None:
            return self.summary_block
        return max(1, int(self.nch * self.compression.ratio))


class Settings(BaseModel):
    """Main settings container."""

    openai: OpenAIConfig = OpenAIConfig()
    summary: SummaryConfig = SummaryConfig()

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    debug: bool = False


# Global settings instance
settings = Settings()
