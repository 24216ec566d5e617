import pytest

from minichain.ledger import (
    append_text,
    format_amount,
    hash_data,
    is_valid_hash,
    mine,
)


def test_hash_is_deterministic_across_mining():
    nonce, digest = mine("1Geneis Block", 1)
    assert hash_data("1Geneis Block" + str(nonce)) == digest
    assert mine("1Geneis Block", 1) == (nonce, digest)


def test_hash_is_decimal_and_fits_64_bits():
    digest = hash_data("some data")
    assert digest.isdigit()
    assert 0 <= int(digest) < 2**64


def test_hash_differs_for_different_input():
    assert len({hash_data(str(i)) for i in range(200)}) == 200


@pytest.mark.parametrize(
    "digest, difficulty, expected",
    [
        ("12300", 2, True),
        ("12300", 3, False),
        ("12345", 0, True),
        ("00000", 5, True),
        ("10", 1, True),
        ("01", 1, False),
    ],
)
def test_is_valid_hash(digest, difficulty, expected):
    assert is_valid_hash(digest, difficulty) is expected


def test_is_valid_hash_rejects_excess_difficulty():
    with pytest.raises(ValueError):
        is_valid_hash("100", 4)


def test_is_valid_hash_rejects_negative_difficulty():
    with pytest.raises(ValueError):
        is_valid_hash("100", -1)


@pytest.mark.parametrize("difficulty", [0, 1, 2])
def test_mine_finds_smallest_valid_nonce(difficulty):
    nonce, digest = mine("block-data", difficulty)
    assert digest == hash_data("block-data" + str(nonce))
    assert is_valid_hash(digest, difficulty)
    assert all(
        not is_valid_hash(hash_data("block-data" + str(n)), difficulty)
        for n in range(nonce)
    )


def test_mine_with_zero_difficulty_uses_nonce_zero():
    assert mine("x", 0) == (0, hash_data("x0"))


@pytest.mark.parametrize(
    "amount, expected", [(12.5, "12.50"), (0.5, "0.50"), (100.0, "100.00")]
)
def test_format_amount(amount, expected):
    assert format_amount(amount) == expected


def test_append_text_appends(tmp_path):
    target = tmp_path / "out.txt"
    append_text(target, "first\n")
    append_text(target, "second\n")
    assert target.read_text(encoding="utf-8") == "first\nsecond\n"