"""
cli.py - interactive dictionary console
Features:
- Add, find and delete words in a live Trie
- Prefix suggestions and spelling suggestions shown as Rich tables
- Word list loading and a tree view of the structure
- JSON config for display options, optional timing readout
"""

import argparse
import shlex
from typing import List, Optional, Sequence

# ui styling with Rich
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from trie_dictionary.core.trie import MAX_SPELLING_DISTANCE, Trie
from trie_dictionary.core.edit_distance import levenshtein
from trie_dictionary.core.wordlist import load_words
from trie_dictionary.utils.config_manager import Config
from trie_dictionary.utils.logger_utils import Log, setup_logging


HELP = [
    ("/add <word>", "insert a word"),
    ("/find <word>", "check whether a word is present"),
    ("/del <word>", "delete a word"),
    ("/suggest <prefix>", "words starting with prefix"),
    ("/spell <word>", f"words within edit distance {MAX_SPELLING_DISTANCE}"),
    ("/words", "list every word"),
    ("/tree", "show the trie structure"),
    ("/load <path>", "insert every word from a file"),
    ("/stats", "word and node counts"),
    ("/config [key val]", "show or change an option"),
    ("/help", "this table"),
    ("/quit", "leave"),
]


class CLI:
    """Command-line interface holding one Trie for the session."""

    def __init__(self, trie: Optional[Trie] = None, cfg: Optional[Config] = None,
                 console: Optional[Console] = None):
        self.trie = trie if trie is not None else Trie()
        self.cfg = cfg if cfg is not None else Config()
        self.console = console or Console()
        self.running = True

    def run(self):
        """
        Main interactive loop:
        - Prompts for a command
        - Dispatches it until /quit or EOF
        """
        self.console.rule("[bold magenta]Trie Dictionary[/bold magenta]")
        self.console.print("[cyan]Type /help for commands.[/cyan]\n")

        while self.running:
            try:
                line = Prompt.ask("[green]trie[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self.console.print("\nbye.")
                break
            if not line.strip():
                continue
            self.handle(line)

    # COMMAND HANDLING -----------------------------------------------------------
    def handle(self, line: str) -> None:
        """Run one command line."""
        try:
            parts = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]Bad input:[/red] {escape(str(e))}")
            return
        if not parts:
            return

        cmd, args = parts[0].lower(), parts[1:]
        if not cmd.startswith("/"):
            # bare word is shorthand for /find
            cmd, args = "/find", parts

        if cmd in ("/q", "/quit", "/exit"):
            self.running = False
            self.console.print("bye.")
            return

        handler = self._commands().get(cmd)
        if handler is None:
            self.console.print(f"[red]Unknown command:[/red] {escape(cmd)}")
            return

        with Log.time_block(cmd.lstrip("/")) as timer:
            handler(args)
        if self.cfg.get("show_timing"):
            self.console.print(f"[dim]{timer.elapsed * 1000:.2f} ms[/dim]")

    def _commands(self):
        return {
            "/add": self._add,
            "/find": self._find,
            "/del": self._delete,
            "/suggest": self._suggest,
            "/spell": self._spell,
            "/words": self._words,
            "/tree": self._tree,
            "/load": self._load,
            "/stats": self._stats,
            "/config": self._config,
            "/help": self._help,
        }

    @staticmethod
    def _word_arg(args: List[str]) -> Optional[str]:
        # words may contain spaces when quoted; "" is a legal (empty) word
        return " ".join(args) if args else None

    def _add(self, args):
        word = self._word_arg(args)
        if word is None:
            self.console.print("usage: /add <word>")
            return
        if self.trie.insert(word):
            self.console.print(f"[green]Added:[/green] {escape(word)}")
        else:
            self.console.print(f"[yellow]Already present:[/yellow] {escape(word)}")

    def _find(self, args):
        word = self._word_arg(args)
        if word is None:
            self.console.print("usage: /find <word>")
            return
        if self.trie.search(word):
            self.console.print(f"[green]Found:[/green] {escape(word)}")
        else:
            self.console.print(f"[red]Not found:[/red] {escape(word)}")

    def _delete(self, args):
        word = self._word_arg(args)
        if word is None:
            self.console.print("usage: /del <word>")
            return
        if self.trie.delete(word):
            self.console.print(f"[green]Deleted:[/green] {escape(word)}")
        else:
            self.console.print(f"[red]Not found:[/red] {escape(word)}")

    def _suggest(self, args):
        prefix = self._word_arg(args) or ""
        words = self.trie.auto_suggest(prefix)
        if not words:
            self.console.print("[dim](no suggestions)[/dim]")
            return
        self._display_words(f"Suggestions for '{escape(prefix)}'", words)

    def _spell(self, args):
        word = self._word_arg(args)
        if word is None:
            self.console.print("usage: /spell <word>")
            return
        words = self.trie.get_spelling_suggestions(word)
        if not words:
            self.console.print("[dim](no suggestions)[/dim]")
            return
        self._display_words(f"Spelling suggestions for '{escape(word)}'", words,
                            distances=[levenshtein(word, w) for w in words])

    def _words(self, args):
        words = self.trie.get_all_words()
        if not words:
            self.console.print("[dim](empty dictionary)[/dim]")
            return
        self._display_words("All words", words)

    def _tree(self, args):
        self.trie.print_structure(self.console)

    def _load(self, args):
        path = self._word_arg(args) or self.cfg.get("wordlist")
        if not path:
            self.console.print("usage: /load <path>")
            return
        try:
            words = load_words(path)
        except OSError as e:
            self.console.print(f"[red]Could not read {escape(path)}:[/red] {escape(str(e))}")
            return
        added = self.trie.insert_many(words)
        Log.metric("words loaded", added)
        self.console.print(f"[cyan]Loaded[/cyan] {added} new word(s) from {escape(path)} ({len(words)} read)")

    def _stats(self, args):
        table = Table(box=box.SIMPLE_HEAVY, show_header=False)
        table.add_column("stat", style="bold")
        table.add_column("value", justify="right")
        table.add_row("words", str(len(self.trie)))
        table.add_row("nodes", str(self.trie.node_count()))
        self.console.print(table)

    def _config(self, args):
        if not args:
            table = Table(title="Config", box=box.SIMPLE_HEAVY)
            table.add_column("key", style="bold")
            table.add_column("value")
            for k, v in self.cfg.show().items():
                table.add_row(k, escape(repr(v)))
            self.console.print(table)
            return
        if len(args) != 2:
            self.console.print(escape("usage: /config [key val]"))
            return
        key, val = args
        if key == "log_level":
            try:
                setup_logging(val, console=self.console)
            except ValueError as e:
                self.console.print(f"[red]{escape(str(e))}[/red]")
                return
        try:
            new = self.cfg.set(key, val)
        except KeyError:
            self.console.print(f"[red]No such option:[/red] {escape(key)}")
            return
        except (TypeError, ValueError) as e:
            self.console.print(f"[red]Bad value for {escape(key)}:[/red] {escape(str(e))}")
            return
        except OSError as e:
            self.console.print(f"[red]Could not save config:[/red] {escape(str(e))}")
            return
        self.console.print(f"{key} = {new!r}")

    def _help(self, args):
        table = Table(title="Commands", box=box.SIMPLE_HEAVY)
        table.add_column("command", style="cyan")
        table.add_column("does")
        for c, d in HELP:
            table.add_row(escape(c), d)
        self.console.print(table)

    # DISPLAY -------------------------------------------------------------------------------
    def _display_words(self, title: str, words: List[str], distances: Optional[List[int]] = None):
        """Numbered table of words, capped at max_display rows."""
        limit = self.cfg.get("max_display")
        table = Table(title=title, box=box.SIMPLE_HEAVY)
        table.add_column("#", justify="right", style="dim")
        table.add_column("word", style="bold")
        if distances is not None:
            table.add_column("distance", justify="right")
        for i, w in enumerate(words[:limit], 1):
            row = [str(i), escape(w)]
            if distances is not None:
                row.append(str(distances[i - 1]))
            table.add_row(*row)
        self.console.print(table)
        if len(words) > limit:
            self.console.print(f"[dim]... {len(words) - limit} more[/dim]")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="trie-dictionary", description="Interactive trie dictionary")
    parser.add_argument("--wordlist", help="word list to load at startup (one word per line)")
    parser.add_argument("--config", default="trie_config.json", help="JSON config path")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("-c", "--command", action="append", default=[],
                        help="run a command and exit (repeatable), e.g. -c '/spell teh'")
    return parser


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    cfg = Config(args.config)

    try:
        setup_logging(args.log_level or cfg.get("log_level"), console=console)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return 2

    cli = CLI(cfg=cfg, console=console)
    wordlist = args.wordlist or cfg.get("wordlist")
    if wordlist:
        cli.handle(f"/load {shlex.quote(wordlist)}")

    if args.command:
        for line in args.command:
            cli.handle(line)
            if not cli.running:
                break
        return 0

    cli.run()
    return 0
