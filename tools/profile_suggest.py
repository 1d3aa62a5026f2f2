# tools/profile_suggest.py
"""
Small profiling harness for Trie.auto_suggest and Trie.get_spelling_suggestions.
Usage:
  python tools/profile_suggest.py --words 20000 --iters 500
  python tools/profile_suggest.py --wordlist /usr/share/dict/words --query recieve

Prints mean/median/p90/max latency per operation.
"""
import argparse
import random
import statistics
import string
import time
from typing import Callable, Dict, List

from trie_dictionary.core.trie import Trie
from trie_dictionary.core.wordlist import load_words
from trie_dictionary.utils.logger_utils import Log, setup_logging


def synthetic_vocab(n: int, seed: int = 7) -> List[str]:
    rng = random.Random(seed)
    letters = string.ascii_lowercase[:12]  # small alphabet -> realistic shared prefixes
    return ["".join(rng.choice(letters) for _ in range(rng.randint(3, 10))) for _ in range(n)]


def benchmark(fn: Callable[[str], object], queries: List[str], iterations: int, seed: int = 11) -> List[float]:
    rng = random.Random(seed)
    times = []
    for _ in range(iterations):
        q = rng.choice(queries)
        t0 = time.perf_counter()
        fn(q)
        times.append((time.perf_counter() - t0) * 1000.0)  # ms
    return times


def summarize(times: List[float]) -> Dict[str, float]:
    times_sorted = sorted(times)
    return {
        "count": len(times_sorted),
        "mean_ms": statistics.mean(times_sorted),
        "median_ms": statistics.median(times_sorted),
        "p90_ms": times_sorted[max(0, int(0.9 * len(times_sorted)) - 1)],
        "max_ms": times_sorted[-1],
    }


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--words", type=int, default=10000, help="synthetic vocabulary size")
    parser.add_argument("--wordlist", type=str, default=None, help="load words from file instead")
    parser.add_argument("--iters", type=int, default=300, help="measured iterations per operation")
    parser.add_argument("--query", type=str, default=None, help="also print suggestions for this word")
    args = parser.parse_args(argv)

    setup_logging("INFO")

    vocab = load_words(args.wordlist) if args.wordlist else synthetic_vocab(args.words)
    with Log.time_block("build"):
        trie = Trie.from_words(vocab)
    print(f"{len(trie)} words, {trie.node_count()} nodes")

    rng = random.Random(3)
    sample = rng.sample(vocab, min(50, len(vocab)))
    prefixes = [w[: max(1, len(w) // 2)] for w in sample]
    typos = [w[:-1] + "z" if w else "z" for w in sample]

    print("auto_suggest (ms):", summarize(benchmark(trie.auto_suggest, prefixes, args.iters)))
    print("spelling (ms):", summarize(benchmark(trie.get_spelling_suggestions, typos, args.iters)))

    if args.query:
        print("suggest:", trie.auto_suggest(args.query)[:10])
        print("spell:", trie.get_spelling_suggestions(args.query)[:10])


if __name__ == "__main__":
    main()
