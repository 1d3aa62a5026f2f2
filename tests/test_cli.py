# tests/test_cli.py - CLI command handling, run against an in-memory console
import io
import re
import shlex

import pytest
from rich.console import Console

from trie_dictionary.cli import CLI, main
from trie_dictionary.utils.config_manager import Config


def make_console():
    return Console(file=io.StringIO(), width=120, color_system=None)


def output(console):
    return console.file.getvalue()


@pytest.fixture
def cli(tmp_path):
    return CLI(cfg=Config(str(tmp_path / "cfg.json")), console=make_console())


def test_add_find_delete(cli):
    cli.handle("/add test")
    cli.handle("/add test")
    cli.handle("/find test")
    cli.handle("/del test")
    cli.handle("/del test")
    out = output(cli.console)
    assert "Added: test" in out
    assert "Already present: test" in out
    assert "Found: test" in out
    assert "Deleted: test" in out
    assert "Not found: test" in out
    assert len(cli.trie) == 0


def test_bare_word_is_lookup(cli):
    cli.trie.insert("cat")
    cli.handle("cat")
    assert "Found: cat" in output(cli.console)


def test_suggest_and_spell(cli):
    for w in ["cat", "caterpillar", "catastrophe"]:
        cli.trie.insert(w)
    cli.handle("/suggest cate")
    cli.handle("/spell caterpiller")
    cli.handle("/suggest dog")
    out = output(cli.console)
    assert "caterpillar" in out
    assert "(no suggestions)" in out


def test_words_respects_max_display(cli):
    cli.trie.insert_many(["a", "b", "c", "d"])
    cli.cfg.set("max_display", 2)
    cli.handle("/words")
    out = output(cli.console)
    assert "... 2 more" in out


def test_markup_in_words_is_printed_literally(cli):
    cli.handle("/add [bold]x")
    assert "Added: [bold]x" in output(cli.console)
    assert cli.trie.search("[bold]x")


def test_load_wordlist(cli, tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("alpha\nbeta\nalpha\n", encoding="utf-8")
    cli.handle(f"/load {shlex.quote(str(p))}")
    assert cli.trie.get_all_words() == ["alpha", "beta"]
    assert "Loaded 2 new word(s)" in output(cli.console)


def test_load_missing_file_reports_error(cli, tmp_path):
    cli.handle(f"/load {tmp_path / 'missing.txt'}")
    assert "Could not read" in output(cli.console)
    assert cli.running


def test_tree_and_stats(cli):
    cli.trie.insert_many(["to", "tea"])
    cli.handle("/tree")
    cli.handle("/stats")
    out = output(cli.console)
    assert "(root)" in out
    assert re.search(r"words\s+2\b", out)
    assert re.search(r"nodes\s+5\b", out)


def test_max_display_below_one_is_rejected(cli):
    cli.trie.insert_many(["a", "b", "c"])
    cli.handle("/config max_display -1")
    cli.handle("/config max_display 0")
    cli.handle("/words")
    out = output(cli.console)
    assert "Bad value for max_display" in out
    assert cli.cfg.get("max_display") == 20
    assert "more" not in out


def test_config_commands(cli):
    cli.handle("/config max_display 5")
    cli.handle("/config nope 1")
    cli.handle("/config max_display lots")
    cli.handle("/config log_level LOUD")
    cli.handle("/config")
    out = output(cli.console)
    assert "max_display = 5" in out
    assert "No such option: nope" in out
    assert "Bad value for max_display" in out
    assert "unknown log level" in out
    assert cli.cfg.get("log_level") == "WARNING"


def test_unknown_command_and_quit(cli):
    cli.handle("/frobnicate")
    assert cli.running
    cli.handle("/quit")
    assert not cli.running
    out = output(cli.console)
    assert "Unknown command: /frobnicate" in out
    assert "bye." in out


def test_unbalanced_quotes_are_reported(cli):
    cli.handle('/add "oops')
    assert "Bad input" in output(cli.console)


def test_main_runs_commands(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("cat\ncaterpillar\ncatastrophe\n", encoding="utf-8")
    console = make_console()
    rc = main(
        ["--wordlist", str(p), "--config", str(tmp_path / "cfg.json"),
         "-c", "/spell caterpiller", "-c", "/quit", "-c", "/words"],
        console=console,
    )
    out = output(console)
    assert rc == 0
    assert "Loaded 3 new word(s)" in out
    assert "caterpillar" in out
    assert "All words" not in out


def test_main_rejects_bad_log_level(tmp_path):
    console = make_console()
    rc = main(["--config", str(tmp_path / "cfg.json"), "--log-level", "LOUD", "-c", "/words"],
              console=console)
    assert rc == 2


def test_main_with_unwritable_config_keeps_going(tmp_path):
    console = make_console()
    rc = main(["--config", str(tmp_path / "nodir" / "cfg.json"), "-c", "/add cat", "-c", "/words"],
              console=console)
    assert rc == 0
    assert "Added: cat" in output(console)
    assert not (tmp_path / "nodir").exists()
