"""A chain of student records, each block mined over the student's name and id."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Optional

from minichain.ledger import PathLike, hash_data, mine
from minichain.transfer import DEFAULT_NAMES

SEED_TEXT = "KHOI TAO"
NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class StudentBlock:
    """A student record; block 0 is the initial block."""

    index: int
    name: str
    student_id: int
    previous_hash: str
    digest: str
    nonce: int = 0

    def render(self) -> str:
        """Text written to the log for this block."""
        if self.index == 0:
            return (
                "\n┌ Khoi: Khoi tao"
                f"\n├ Ten sinh vien: {NOT_AVAILABLE}"
                f"\n├ Ma sinh vien: {NOT_AVAILABLE}"
                f"\n└ Ma bam khoi tao: {self.digest}\n"
            )
        return (
            f"\n┌ Khoi: {self.index}"
            f"\n├ Ten sinh vien: {self.name}"
            f"\n├ Ma sinh vien: {self.student_id}"
            f"\n├ Ma bam truoc do: {self.previous_hash}"
            f"\n└ Ma bam hien tai: {self.digest}\n"
        )

    def summary(self) -> str:
        if self.index == 0:
            return f"{self.name}\n{self.student_id}\n{self.digest}\n\n"
        return (
            f"{self.name}\n{self.student_id}\n"
            f"{self.previous_hash}\n{self.digest}\n\n"
        )


def build_chain(
    count: int,
    difficulty: int,
    rng: random.Random,
    names: Sequence[str] = DEFAULT_NAMES,
) -> list[StudentBlock]:
    """Mine blocks 0 through ``count`` with randomly chosen student names.

    Block 0 is reported with the name "N/A" though it was mined over a drawn name.
    """
    if not names:
        raise ValueError("names must not be empty")
    previous_hash = hash_data(SEED_TEXT)
    blocks: list[StudentBlock] = []
    for index in range(count + 1):
        name = names[rng.randrange(len(names))]
        nonce, digest = mine(f"{name}{index}", difficulty)
        blocks.append(StudentBlock(index, name, index, previous_hash, digest, nonce))
        previous_hash = digest
    if blocks:
        blocks[0] = replace(blocks[0], name=NOT_AVAILABLE)
    return blocks


def write_blocks(path: PathLike, blocks: Iterable[StudentBlock]) -> None:
    """Replace the file at ``path`` with the rendered blocks."""
    with open(path, "w", encoding="utf-8") as handle:
        for block in blocks:
            handle.write(block.render())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Mine a chain of student blocks, write it to a file and print a summary."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--count", type=int, default=100, help="number of students")
    parser.add_argument("--difficulty", type=int, default=5, help="trailing zeros")
    parser.add_argument(
        "--output", default="blockstudentmanage.txt", help="file to write"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    blocks = build_chain(args.count, args.difficulty, random.Random(args.seed))
    write_blocks(args.output, blocks)
    print("Hoan thanh ghi vao file\n")
    for block in blocks:
        print(block.summary(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())