# Huffman text coder
# huffman_demo.py
# 10/19/26

"""
Huffman text coder demo

Builds a Huffman coder from a corpus, prints the code table, encodes a text
with it and decodes the bitstring back.

How to run:
  python huffman_demo.py --text "heellllooo" --encode hello
  python huffman_demo.py --input notes.txt --plot --outdir results
  python huffman_demo.py --generator english_like --size 2000 --seed 7 --plot
"""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from huffman import CodeTableUnavailableError, HuffmanCoder


# Corpus generators

ENGLISH_CHARS = " etaoinshrdlcumwfgypbvkjxq" "ETAOINSHRDLCUMWFGYPBVKJXQ" "\n"

def gen_english_like(size: int, seed: int = 0) -> str:
    rng = random.Random(seed)
    weights = []
    for ch in ENGLISH_CHARS:
        if ch == ' ':
            weights.append(13.0)
        elif ch == '\n':
            weights.append(1.5)
        elif ch.lower() in "etaoinshrdlu":
            weights.append(6.0)
        elif ch.lower() in "cmfwgypbvk":
            weights.append(2.5)
        else:
            weights.append(1.2)
    return "".join(rng.choices(ENGLISH_CHARS, weights=weights, k=size))

def gen_repetitive(size: int, dominant: str = 'A', dom_frac: float = 0.90, seed: int = 0) -> str:
    rng = random.Random(seed)
    others = [chr(i) for i in range(32, 127) if chr(i) != dominant]
    return "".join(dominant if rng.random() < dom_frac else rng.choice(others) for _ in range(size))

def gen_uniform_ascii(size: int, seed: int = 0) -> str:
    rng = random.Random(seed)
    return "".join(chr(rng.randrange(32, 127)) for _ in range(size))

GENERATOR_REGISTRY: Dict[str, Callable[[int, int], str]] = {
    "english_like": lambda size, seed: gen_english_like(size, seed=seed),
    "repetitive90": lambda size, seed: gen_repetitive(size, dominant='A', dom_frac=0.90, seed=seed),
    "uniform_ascii": lambda size, seed: gen_uniform_ascii(size, seed=seed),
}

def generate_corpus(name: str, size: int, seed: int) -> Tuple[str, str]:
    """
    Unknown generator names fall back to english_like rather than failing
    """
    fn = GENERATOR_REGISTRY.get(name)
    if fn is None:
        return f"{name}_fallback_english_like", gen_english_like(size, seed=seed)
    return name, fn(size, seed)


@dataclass
class RoundTrip:
    source: str
    text: str
    bitstring: str
    decoded: str

    @property
    def ok(self) -> bool:
        return self.decoded == self.text


def run_round_trip(coder: HuffmanCoder, text: str, source: str = "") -> RoundTrip:
    bitstring = coder.encode(text)
    return RoundTrip(source=source, text=text, bitstring=bitstring, decoded=coder.decode(bitstring))


def format_code_table(code_table: Dict[str, str]) -> List[str]:
    # shortest codes first
    rows = sorted(code_table.items(), key=lambda item: (len(item[1]), item[0]))
    return [f"  {character!r:>8}  {code if code else '(empty)'}" for character, code in rows]


def load_corpus(args: argparse.Namespace) -> Tuple[str, str]:
    if args.text is not None:
        return "text", args.text
    if args.input is not None:
        path = Path(args.input)
        return str(path), path.read_text(encoding="utf-8")
    return generate_corpus(args.generator, max(0, args.size), args.seed)


# Main

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Build a Huffman code from a corpus and round-trip a text through it")
    source = ap.add_mutually_exclusive_group()
    source.add_argument("--text", type=str, default=None, help="Corpus given inline")
    source.add_argument("--input", type=str, default=None, help="Corpus read from a UTF-8 file")
    ap.add_argument("--generator", type=str, default="english_like",
                    help="Corpus generator when neither --text nor --input is given: " + ",".join(GENERATOR_REGISTRY))
    ap.add_argument("--size", type=int, default=200, help="Generated corpus length in characters")
    ap.add_argument("--seed", type=int, default=123, help="Random seed for generated corpora")
    ap.add_argument("--encode", type=str, default=None, help="Text to encode (defaults to the corpus itself)")
    ap.add_argument("--outdir", type=str, default="results", help="Output directory for the tree plot")
    ap.add_argument("--plot", action="store_true", help="Save the Huffman tree as huffman_tree.png in --outdir")

    args = ap.parse_args(argv)

    try:
        source_name, corpus = load_corpus(args)
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read corpus from {args.input}: {e}", file=sys.stderr)
        return 1

    coder = HuffmanCoder()
    coder.build(corpus)

    try:
        result = run_round_trip(coder, corpus if args.encode is None else args.encode, source_name)
    except CodeTableUnavailableError as e:
        print(f"error: {e} (corpus from {source_name} is empty)", file=sys.stderr)
        return 1

    print(f"Built code table from {source_name} ({len(corpus)} characters, {len(coder.code_table)} distinct)")
    for line in format_code_table(coder.code_table):
        print(line)
    print(f"Encoded: {result.bitstring}")
    print(f"Decoded: {result.decoded}")
    print(f"Round trip ok: {result.ok}")

    if args.plot:
        from tree_plot import plot_huffman_tree

        outdir = Path(args.outdir)
        outdir.mkdir(parents=True, exist_ok=True)
        plot_path = outdir / "huffman_tree.png"
        plot_huffman_tree(coder.tree, plot_path, title=f"Huffman Tree ({source_name})")
        print("Tree plot saved to:", plot_path.resolve())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
