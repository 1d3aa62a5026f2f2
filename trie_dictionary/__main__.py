import sys

from trie_dictionary.cli import main

if __name__ == "__main__":
    sys.exit(main())
