"""
trie_dictionary.core

The dictionary engine.
Contains:
 - the prefix tree itself (Trie, TrieNode)
 - Levenshtein helpers used for spelling suggestions
 - word list loading
"""

from .edit_distance import levenshtein, levenshtein_with_cutoff, next_row
from .trie import MAX_SPELLING_DISTANCE, Trie, TrieNode
from .wordlist import load_words

__all__ = [
    "MAX_SPELLING_DISTANCE",
    "Trie",
    "TrieNode",
    "levenshtein",
    "levenshtein_with_cutoff",
    "load_words",
    "next_row",
]
