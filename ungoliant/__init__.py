"""Corpus building blocks: document types, annotators, sentence filters, Zipf statistics, compression and packaging."""

__version__ = "0.1.0"