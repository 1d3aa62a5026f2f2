# trie.py
# Prefix tree dictionary: insert / search / delete with pruning,
# prefix autosuggestion, full enumeration and edit-distance spelling suggestions.
# Children are plain dicts, so enumeration follows insertion order and is stable.
# Every walk uses an explicit stack (no recursion), long words are safe.

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from .edit_distance import next_row

logger = logging.getLogger(__name__)

# fixed edit-distance threshold for spelling suggestions
MAX_SPELLING_DISTANCE = 2

ROOT_LABEL = "(root)"


def _check_word(word: object, name: str = "word") -> str:
    """Reject anything that is not a str (None included)."""
    if not isinstance(word, str):
        raise TypeError(f"{name} must be str, not {type(word).__name__}")
    return word


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode (owned, insertion-ordered)
    is_terminal: True if the path from the root to here spells a live word
    value: char on the edge into this node (display only, "" for the root)
    """

    __slots__ = ("children", "is_terminal", "value")

    def __init__(self, value: str = "") -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_terminal = False
        self.value = value

    def has_child(self, ch: str) -> bool:
        return ch in self.children

    def __repr__(self) -> str:
        return f"TrieNode({self.value!r}, terminal={self.is_terminal}, children={len(self.children)})"


class Trie:
    """
    Dictionary of words stored as a prefix tree.

    All outcomes are reported through return values:
     - insert() -> False when the word is already present
     - delete() -> False when the word is absent
     - auto_suggest() -> [] when nothing matches
    Passing a non-str raises TypeError. The empty string is a valid word.

    Not thread-safe: wrap the instance in a lock if several threads mutate it.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Trie":
        """Build a trie holding every word in `words`."""
        trie = cls()
        trie.insert_many(words)
        return trie

    @property
    def root(self) -> TrieNode:
        return self._root

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> bool:
        """
        Insert a word, creating any missing nodes along its path.
        Returns False (and changes nothing) if the word was already present.
        """
        _check_word(word)
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = TrieNode(ch)
                node.children[ch] = child
            node = child

        if node.is_terminal:
            logger.debug("insert %r: already present", word)
            return False
        node.is_terminal = True
        self._size += 1
        logger.debug("insert %r: added", word)
        return True

    def insert_many(self, words: Iterable[str]) -> int:
        """Bulk insert. Returns how many words were new."""
        added = 0
        for w in words:
            if self.insert(w):
                added += 1
        return added

    # lookup --------------------------------------------------------
    def _walk(self, s: str) -> Optional[TrieNode]:
        """Node at the end of path `s`, or None if the path breaks."""
        node = self._root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """True iff `word` was inserted as a complete word and not deleted."""
        node = self._walk(_check_word(word))
        return node is not None and node.is_terminal

    def starts_with(self, prefix: str) -> bool:
        """True if any live word begins with `prefix`."""
        node = self._walk(_check_word(prefix, "prefix"))
        # only the root can be a childless non-terminal node
        return node is not None and (node.is_terminal or bool(node.children))

    # deletion ------------------------------------------------------
    def delete(self, word: str) -> bool:
        """
        Un-mark `word` and prune the dead-end nodes it leaves behind.

        Pruning walks back up the path and removes each child edge while the
        child has no children and is not terminal. It stops at the first node
        that is terminal for another word or still has other children, so
        shared prefixes survive.

        Returns True iff the word existed. Absent words leave the tree untouched.
        """
        _check_word(word)
        node = self._root
        path: List[Tuple[TrieNode, str]] = []
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            path.append((node, ch))
            node = child

        if not node.is_terminal:
            return False

        node.is_terminal = False
        self._size -= 1

        pruned = 0
        while path and not node.children and not node.is_terminal:
            parent, ch = path.pop()
            del parent.children[ch]
            pruned += 1
            node = parent

        logger.debug("delete %r: removed, pruned %d node(s)", word, pruned)
        return True

    # enumeration ---------------------------------------------------
    @staticmethod
    def _collect(start: TrieNode, prefix: str) -> Iterator[str]:
        """Pre-order walk below `start`, yielding every terminal path."""
        stack: List[Tuple[TrieNode, str]] = [(start, prefix)]
        while stack:
            node, path = stack.pop()
            if node.is_terminal:
                yield path
            # reversed push keeps children popping in insertion order
            for ch, child in reversed(list(node.children.items())):
                stack.append((child, path + ch))

    def auto_suggest(self, prefix: str) -> List[str]:
        """
        Every live word starting with `prefix`, in pre-order.
        Includes `prefix` itself when it is a word. [] if the path does not exist.
        """
        node = self._walk(_check_word(prefix, "prefix"))
        if node is None:
            return []
        return list(self._collect(node, prefix))

    def get_all_words(self) -> List[str]:
        """Every live word, same order as auto_suggest("")."""
        return list(self._collect(self._root, ""))

    # spelling ------------------------------------------------------
    def get_spelling_suggestions(self, word: str) -> List[str]:
        """
        Words within edit distance MAX_SPELLING_DISTANCE of `word`,
        in get_all_words() order.

        Walks the trie once, carrying a Levenshtein row per branch; a branch
        is dropped as soon as its row minimum exceeds the threshold, since no
        descendant can come back under it.
        """
        _check_word(word)
        limit = MAX_SPELLING_DISTANCE
        first_row = list(range(len(word) + 1))

        out: List[str] = []
        stack: List[Tuple[TrieNode, str, List[int]]] = [(self._root, "", first_row)]
        while stack:
            node, path, row = stack.pop()
            if node.is_terminal and row[-1] <= limit:
                out.append(path)
            for ch, child in reversed(list(node.children.items())):
                child_row = next_row(row, ch, word)
                if min(child_row) <= limit:
                    stack.append((child, path + ch, child_row))
        return out

    # structural dump -----------------------------------------------
    def to_rich_tree(self) -> Tree:
        """Outline of every node as a rich Tree; terminal nodes in bold green."""
        tree = Tree(Text(ROOT_LABEL, style="bold green" if self._root.is_terminal else "dim"))
        stack: List[Tuple[TrieNode, Tree]] = [(self._root, tree)]
        while stack:
            node, branch = stack.pop()
            pending = []
            for child in node.children.values():
                label = Text(child.value, style="bold green" if child.is_terminal else "")
                pending.append((child, branch.add(label)))
            stack.extend(pending)
        return tree

    def print_structure(self, console: Optional[Console] = None) -> None:
        """Print the outline (debug aid)."""
        (console or Console()).print(self.to_rich_tree())

    # convenience/debugging -----------------------------------------
    def node_count(self) -> int:
        """Number of nodes, root included. O(N) walk, for inspection."""
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def clear(self) -> None:
        """Drop every word."""
        self._root = TrieNode()
        self._size = 0

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        return self._collect(self._root, "")
