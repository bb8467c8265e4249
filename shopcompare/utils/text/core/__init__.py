"""Core text processing (tokenization)."""

from .tokenize import split_words, tokenize_query

__all__ = [
    "split_words",
    "tokenize_query",
]
