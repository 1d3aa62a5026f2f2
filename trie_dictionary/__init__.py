"""Trie dictionary: prefix lookup, autosuggestion and spelling suggestions."""

from trie_dictionary.core import (
    MAX_SPELLING_DISTANCE,
    Trie,
    TrieNode,
    levenshtein,
    levenshtein_with_cutoff,
    load_words,
)

__all__ = [
    "MAX_SPELLING_DISTANCE",
    "Trie",
    "TrieNode",
    "levenshtein",
    "levenshtein_with_cutoff",
    "load_words",
]

__version__ = "0.1.0"
