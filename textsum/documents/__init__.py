"""
Document Processing Package

Extracts plain text from uploaded files so it can be summarized.
- processor.py: Parse TXT, MD, PDF and DOCX
"""

from .processor import DocumentProcessor, ExtractedDocument

__all__ = ["DocumentProcessor", "ExtractedDocument"]
