from trie_dictionary.cli.cli import CLI, main

__all__ = ["CLI", "main"]
