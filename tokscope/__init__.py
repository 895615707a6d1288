"""Tokenizer, bracket-scope helpers, a prefix trie and a fixed-size matrix."""

__version__ = "0.1.0"