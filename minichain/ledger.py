"""Hashing, proof-of-work and output helpers shared by the chain builders."""

from __future__ import annotations

import hashlib
import os
from itertools import count
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def hash_data(data: str) -> str:
    """Return a deterministic 64-bit hash of ``data`` as a decimal string."""
    digest = hashlib.blake2b(data.encode("utf-8"), digest_size=8).digest()
    return str(int.from_bytes(digest, "little"))


def is_valid_hash(digest: str, difficulty: int) -> bool:
    """Tell whether ``digest`` ends with ``difficulty`` zero characters."""
    if difficulty < 0:
        raise ValueError(f"difficulty must not be negative, got {difficulty}")
    if difficulty > len(digest):
        raise ValueError(
            f"difficulty {difficulty} exceeds hash length {len(digest)}"
        )
    return digest.endswith("0" * difficulty)


def mine(data: str, difficulty: int) -> tuple[int, str]:
    """Find the smallest nonce whose hash of ``data + nonce`` is valid.

    Returns the nonce and the matching hash.
    """
    for nonce in count():
        digest = hash_data(data + str(nonce))
        if is_valid_hash(digest, difficulty):
            return nonce, digest
    raise AssertionError("unreachable")


def format_amount(amount: float) -> str:
    """Format an amount with exactly two decimal places."""
    return f"{amount:.2f}"


def append_text(path: PathLike, text: str) -> None:
    """Append ``text`` to the file at ``path``, creating it if needed."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(text)