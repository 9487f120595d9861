"""
LLM Package - OpenAI Integration

This package provides the chat-completion and embeddings client.
"""

from .openai_client import OpenAIClient, EMBEDDING_MODELS

__all__ = ["OpenAIClient", "EMBEDDING_MODELS"]
