"""Text ingestion."""

from kalam_style.ingest.loader import load_text

__all__ = ["load_text"]
