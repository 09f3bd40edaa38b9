"""Lexicology: vocabulary-learning core (dictionary lookup, word store, word of the day)."""

__version__ = "0.1.0"
