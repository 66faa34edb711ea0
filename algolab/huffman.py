"""Huffman coding of text, with a bit stream closed by an end-of-data symbol."""

from __future__ import annotations

import argparse
import heapq
import itertools
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

END_SYMBOL = "\x07"
_ENCODING = "latin-1"


@dataclass
class _Node:
    weight: int
    symbol: str | None = None
    left: _Node | None = None
    right: _Node | None = None


class HuffmanCode:
    """A prefix code for a set of symbols, including the end-of-data symbol."""

    def __init__(self, codes: Mapping[str, str]) -> None:
        if END_SYMBOL not in codes:
            raise ValueError("the code has no end-of-data symbol")
        self._codes = dict(codes)
        self._symbols = {code: symbol for symbol, code in self._codes.items()}

    @property
    def codes(self) -> Mapping[str, str]:
        """Symbol to bit-string mapping, in tree order (left branch first)."""
        return MappingProxyType(self._codes)

    @classmethod
    def from_text(cls, text: str) -> HuffmanCode:
        """Build the code from the symbol frequencies of ``text``.

        The end-of-data symbol is added with weight 1. Of two trees of equal
        weight, the one created earlier is taken first and becomes the left
        branch.
        """
        if END_SYMBOL in text:
            raise ValueError("text contains the end-of-data symbol")
        counts: dict[str, int] = {}
        for char in text:
            counts[char] = counts.get(char, 0) + 1
        counts[END_SYMBOL] = 1

        order = itertools.count()
        heap = [(weight, next(order), _Node(weight, symbol)) for symbol, weight in counts.items()]
        heapq.heapify(heap)
        while len(heap) > 1:
            left_weight, _, left = heapq.heappop(heap)
            right_weight, _, right = heapq.heappop(heap)
            weight = left_weight + right_weight
            heapq.heappush(heap, (weight, next(order), _Node(weight, left=left, right=right)))

        codes: dict[str, str] = {}
        pending: list[tuple[_Node, str]] = [(heap[0][2], "")]
        while pending:
            node, prefix = pending.pop()
            if node.symbol is not None:
                codes[node.symbol] = prefix
            else:
                assert node.left is not None and node.right is not None
                pending.append((node.right, prefix + "1"))
                pending.append((node.left, prefix + "0"))
        return cls(codes)

    def _bits(self, text: str) -> Iterator[str]:
        for char in text:
            try:
                yield self._codes[char]
            except KeyError:
                raise ValueError(f"symbol {char!r} has no code") from None
        yield self._codes[END_SYMBOL]

    def encode(self, text: str) -> bytes:
        """Encode ``text`` and the end marker, eight bits per byte, low bit first.

        The last byte is padded with zero bits.
        """
        bits = "".join(self._bits(text))
        return bytes(
            int(bits[start : start + 8].ljust(8, "0")[::-1], 2)
            for start in range(0, len(bits), 8)
        )

    def decode(self, data: bytes) -> str:
        """Decode bytes produced by :meth:`encode`, stopping at the end marker."""
        if self._codes[END_SYMBOL] == "":
            return ""
        decoded: list[str] = []
        current = ""
        for byte in data:
            for bit in f"{byte:08b}"[::-1]:
                current += bit
                symbol = self._symbols.get(current)
                if symbol is None:
                    continue
                if symbol == END_SYMBOL:
                    return "".join(decoded)
                decoded.append(symbol)
                current = ""
        raise ValueError("data ends before the end-of-data marker")

    def key_lines(self) -> list[str]:
        """Return one ``"<symbol> <code>"`` line per symbol, in tree order."""
        return [f"{symbol} {code}" for symbol, code in self._codes.items()]


def main(argv: list[str] | None = None) -> int:
    """Encode input.txt into shifr.txt, write key.txt, and decode into deshifr.txt."""
    parser = argparse.ArgumentParser(description="Huffman-encode input.txt and decode it back.")
    parser.add_argument("directory", nargs="?", default=".", help="directory holding input.txt")
    args = parser.parse_args(argv)

    directory = Path(args.directory)
    text = (directory / "input.txt").read_bytes().decode(_ENCODING)
    code = HuffmanCode.from_text(text)
    key = "".join(line + "\n" for line in code.key_lines())
    (directory / "key.txt").write_bytes(key.encode(_ENCODING))
    encoded = code.encode(text)
    (directory / "shifr.txt").write_bytes(encoded)
    decoded = code.decode((directory / "shifr.txt").read_bytes())
    (directory / "deshifr.txt").write_bytes(decoded.encode(_ENCODING))
    return 0