"""
Retrieval: threshold-filtered near-text search with ranked reporting.
"""

from docsearch.retrieval.retriever import RETURN_FIELDS, RetrievalService

__all__ = ["RETURN_FIELDS", "RetrievalService"]
