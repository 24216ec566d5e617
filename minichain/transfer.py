"""A chain where every block after the genesis block holds one transfer."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Optional

from minichain.ledger import append_text, format_amount, mine

GENESIS_CONTENT = "Geneis Block"

DEFAULT_NAMES: tuple[str, ...] = (
    "An", "Bao", "Cuong", "Duy", "Em", "Giang", "Hai", "Hung", "Khoa", "Lam",
    "Linh", "Minh", "Nam", "Phong", "Quang", "Quoc", "Son", "Tai", "Thanh", "Thien",
    "Thinh", "Tien", "Trung", "Tuan", "Viet", "Vu", "Yen", "Anh", "Binh", "Chi",
    "Dao", "Dung", "Hanh", "Hoa", "Hoang", "Huong", "Khanh", "Loan", "Mai", "Nga",
    "Ngan", "Ngoc", "Nhi", "Oanh", "Phuong", "Quynh", "Sang", "Thao", "Thu", "Trang",
    "Trinh", "Tu", "Vy", "Xuan", "Yen", "Loc", "Anhtu", "Camtu", "Kiet", "Thaochi",
    "Phuoc", "Hieu", "Nhan", "Thuy", "Khanhlinh", "Kimanh", "Trong", "Tinh", "Dai", "Kiet",
    "Trieu", "Thanhdat", "Giahan", "Phat", "Duong", "Haiyen", "Le", "Baoan", "Tinhdo", "Kimchi",
    "Long", "Lan", "Daoanh", "Ngoctuan", "Myanh", "Nhut", "Dang", "Ngocthuy", "Phuc", "Thuan",
    "Nghi", "Tam", "Tan", "Kha", "Thanhtruc", "Bich", "Thuytien", "Kimngan", "Sonlam", "Vankhanh",
)

DEFAULT_AMOUNTS: tuple[float, ...] = tuple(step / 2 for step in range(1, 201))

DEFAULT_CURRENCIES: tuple[str, ...] = (
    "BTC", "ETH", "BNB", "SOL", "ADA", "XRP", "DOGE", "DOT", "TRX", "AVAX",
    "MATIC", "SHIB", "LTC", "BCH", "XLM", "ATOM", "LINK", "NEAR", "HBAR", "ICP",
    "FIL", "APT", "ARB", "SUI", "OP", "XTZ", "VET", "EGLD", "FTM", "THETA",
    "AAVE", "MKR", "SNX", "KSM", "ZEC", "DASH", "ENJ", "GRT", "CHZ", "CRV",
    "1INCH", "COMP", "DYDX", "LDO",
)


@dataclass(frozen=True)
class Transfer:
    """One payment of an amount of a currency from sender to receiver."""

    sender: str
    receiver: str
    amount: float
    currency: str

    def content(self) -> str:
        """Human-readable description of the transfer."""
        return (
            f"{self.sender} chuyen khoan toi {self.receiver} "
            f"{format_amount(self.amount)} ({self.currency})"
        )


def random_transfer(
    rng: random.Random,
    names: Sequence[str],
    amounts: Sequence[float],
    currencies: Sequence[str],
    distinct: bool = True,
) -> Transfer:
    """Draw a random transfer; with ``distinct`` sender and receiver differ by position."""
    if not names or not amounts or not currencies:
        raise ValueError("names, amounts and currencies must not be empty")
    if distinct and len(names) < 2:
        raise ValueError("at least two names are needed for distinct parties")
    sender = rng.randrange(len(names))
    receiver = rng.randrange(len(names))
    amount = amounts[rng.randrange(len(amounts))]
    currency = currencies[rng.randrange(len(currencies))]
    while distinct and receiver == sender:
        receiver = rng.randrange(len(names))
    return Transfer(names[sender], names[receiver], amount, currency)


@dataclass(frozen=True)
class TransferBlock:
    """A mined block; block 1 is the genesis block and carries no transfer."""

    index: int
    nonce: int
    data: str
    digest: str
    previous_hash: str
    transfer: Optional[Transfer] = None

    @property
    def content(self) -> str:
        return self.transfer.content() if self.transfer else GENESIS_CONTENT

    def render(self) -> str:
        """Text shown and written to the log for this block."""
        if self.transfer is None:
            return (
                f"\n┌ Khoi: {self.index}"
                f"\n├ So nonce: {self.nonce}"
                f"\n├ Noi dung: {self.content}"
                f"\n└ Ma bam: {self.digest}\n"
            )
        t = self.transfer
        return (
            f"\n┌ Khoi: {self.index}"
            f"\n├ So nonce: {self.nonce}"
            f"\n├ Nguoi gui: {t.sender}"
            f"\n├ Nguoi nhan: {t.receiver}"
            f"\n├ So luong: {format_amount(t.amount)} {t.currency}"
            f"\n├ Noi dung: {t.content()}"
            f"\n├ Ma bam truoc do: {self.previous_hash}"
            f"\n└ Ma bam hien tai: {self.digest}\n"
        )


def _block_data(index: int, transfer: Optional[Transfer], previous_hash: str) -> str:
    if transfer is None:
        return f"{index}{GENESIS_CONTENT}"
    return (
        f"{index}{transfer.sender}{transfer.receiver}{transfer.amount:.6f}"
        f"{transfer.currency}{transfer.content()}{previous_hash}"
    )


def _mine_blocks(
    count: int,
    difficulty: int,
    rng: random.Random,
    names: Sequence[str],
    amounts: Sequence[float],
    currencies: Sequence[str],
) -> Iterator[TransferBlock]:
    previous_hash = ""
    for index in range(1, count + 1):
        transfer = (
            None
            if index == 1
            else random_transfer(rng, names, amounts, currencies, distinct=False)
        )
        data = _block_data(index, transfer, previous_hash)
        nonce, digest = mine(data, difficulty)
        yield TransferBlock(index, nonce, data, digest, previous_hash, transfer)
        previous_hash = digest


def build_chain(
    count: int,
    difficulty: int,
    rng: random.Random,
    names: Sequence[str] = DEFAULT_NAMES,
    amounts: Sequence[float] = DEFAULT_AMOUNTS,
    currencies: Sequence[str] = DEFAULT_CURRENCIES,
) -> list[TransferBlock]:
    """Mine ``count`` blocks, each linked to the hash of the one before."""
    return list(_mine_blocks(count, difficulty, rng, names, amounts, currencies))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Mine a chain of single-transfer blocks, print it and append it to a file."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--count", type=int, default=100, help="number of blocks")
    parser.add_argument("--difficulty", type=int, default=5, help="trailing zeros")
    parser.add_argument(
        "--output", default="thongtinblock1transfer.txt", help="file to append to"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    for block in _mine_blocks(
        args.count, args.difficulty, rng, DEFAULT_NAMES, DEFAULT_AMOUNTS, DEFAULT_CURRENCIES
    ):
        text = block.render()
        append_text(args.output, text)
        print(text, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())