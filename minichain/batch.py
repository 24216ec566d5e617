"""A chain where every block after the genesis block holds a batch of transfers."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Optional

from minichain.ledger import append_text, format_amount, mine
from minichain.transfer import (
    DEFAULT_AMOUNTS,
    DEFAULT_CURRENCIES,
    DEFAULT_NAMES,
    Transfer,
    random_transfer,
)

GENESIS_CONTENT = "Genesis Block"
DEFAULT_BATCH_SIZE = 5


@dataclass(frozen=True)
class BatchBlock:
    """A mined block; block 1 is the genesis block and carries no transfers."""

    index: int
    nonce: int
    data: str
    digest: str
    previous_hash: str
    transfers: tuple[Transfer, ...] = ()

    @property
    def is_genesis(self) -> bool:
        return self.index == 1

    def render(self) -> str:
        """Text shown and written to the log for this block."""
        if self.is_genesis:
            return (
                f"\n┌ Khoi: {self.index}"
                f"\n├ So nonce: {self.nonce}"
                f"\n├ Noi dung: {GENESIS_CONTENT}"
                f"\n└ Ma bam: {self.digest}\n"
            )
        parts = [f"\n┌ Khoi: {self.index}", f"\n├ So nonce: {self.nonce}"]
        for number, t in enumerate(self.transfers, start=1):
            parts.append(
                f"\n├─────── Giao dich {number} ───────"
                f"\n├ Nguoi gui: {t.sender}"
                f"\n├ Nguoi nhan: {t.receiver}"
                f"\n├ So luong: {format_amount(t.amount)} {t.currency}"
                f"\n├ Noi dung: {t.content()}"
            )
        parts.append(
            f"\n├ Ma bam truoc do: {self.previous_hash}"
            f"\n└ Ma bam hien tai: {self.digest}\n"
        )
        return "".join(parts)


def random_batch(
    rng: random.Random,
    size: int = DEFAULT_BATCH_SIZE,
    names: Sequence[str] = DEFAULT_NAMES,
    amounts: Sequence[float] = DEFAULT_AMOUNTS,
    currencies: Sequence[str] = DEFAULT_CURRENCIES,
) -> tuple[Transfer, ...]:
    """Draw ``size`` random transfers whose sender and receiver differ."""
    if size < 0:
        raise ValueError(f"batch size must not be negative, got {size}")
    return tuple(
        random_transfer(rng, names, amounts, currencies, distinct=True)
        for _ in range(size)
    )


def _block_data(index: int, transfers: Sequence[Transfer], previous_hash: str) -> str:
    if index == 1:
        return f"{index}{GENESIS_CONTENT}"
    body = "".join(
        f"{t.sender}{t.receiver}{t.amount:g}{t.currency}{t.content()}"
        for t in transfers
    )
    return f"{index}{body}{previous_hash}"


def _mine_blocks(
    count: int,
    difficulty: int,
    rng: random.Random,
    size: int,
    names: Sequence[str],
    amounts: Sequence[float],
    currencies: Sequence[str],
) -> Iterator[BatchBlock]:
    previous_hash = ""
    for index in range(1, count + 1):
        transfers = (
            () if index == 1 else random_batch(rng, size, names, amounts, currencies)
        )
        data = _block_data(index, transfers, previous_hash)
        nonce, digest = mine(data, difficulty)
        yield BatchBlock(index, nonce, data, digest, previous_hash, transfers)
        previous_hash = digest


def build_chain(
    count: int,
    difficulty: int,
    rng: random.Random,
    size: int = DEFAULT_BATCH_SIZE,
    names: Sequence[str] = DEFAULT_NAMES,
    amounts: Sequence[float] = DEFAULT_AMOUNTS,
    currencies: Sequence[str] = DEFAULT_CURRENCIES,
) -> list[BatchBlock]:
    """Mine ``count`` blocks, each linked to the hash of the one before."""
    return list(
        _mine_blocks(count, difficulty, rng, size, names, amounts, currencies)
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Mine a chain of batch blocks, print it and append it to a file."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--count", type=int, default=10, help="number of blocks")
    parser.add_argument("--difficulty", type=int, default=5, help="trailing zeros")
    parser.add_argument(
        "--size", type=int, default=DEFAULT_BATCH_SIZE, help="transfers per block"
    )
    parser.add_argument(
        "--output", default="thongtinblock5transfer.txt", help="file to append to"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    for block in _mine_blocks(
        args.count,
        args.difficulty,
        rng,
        args.size,
        DEFAULT_NAMES,
        DEFAULT_AMOUNTS,
        DEFAULT_CURRENCIES,
    ):
        text = block.render()
        append_text(args.output, text)
        print(text, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())