import random

import pytest

from minichain.ledger import hash_data, is_valid_hash
from minichain.transfer import (
    DEFAULT_AMOUNTS,
    GENESIS_CONTENT,
    Transfer,
    TransferBlock,
    build_chain,
    main,
    random_transfer,
)


def test_transfer_content():
    t = Transfer("An", "Bao", 12.5, "BTC")
    assert t.content() == "An chuyen khoan toi Bao 12.50 (BTC)"


def test_default_amounts_used_by_build_chain():
    assert DEFAULT_AMOUNTS[0] == 0.5
    assert DEFAULT_AMOUNTS[-1] == 100.0
    assert len(DEFAULT_AMOUNTS) == 200
    chain = build_chain(12, 0, random.Random(9))
    for block in chain[1:]:
        amount = block.transfer.amount
        assert amount in DEFAULT_AMOUNTS
        assert 0.5 <= amount <= 100.0
        assert (amount * 2).is_integer()


def test_random_transfer_draws_from_lists():
    rng = random.Random(3)
    names, amounts, currencies = ["A", "B", "C"], [1.0, 2.5], ["ETH"]
    for _ in range(50):
        t = random_transfer(rng, names, amounts, currencies, distinct=True)
        assert t.sender in names and t.receiver in names
        assert t.amount in amounts
        assert t.currency == "ETH"
        assert t.sender != t.receiver


def test_random_transfer_rejects_empty_lists():
    with pytest.raises(ValueError):
        random_transfer(random.Random(0), [], [1.0], ["BTC"], distinct=False)


def test_random_transfer_distinct_needs_two_names():
    with pytest.raises(ValueError):
        random_transfer(random.Random(0), ["A"], [1.0], ["BTC"], distinct=True)


def test_random_transfer_single_name_without_distinct():
    t = random_transfer(random.Random(0), ["A"], [1.0], ["BTC"], distinct=False)
    assert (t.sender, t.receiver) == ("A", "A")


def test_build_chain_links_and_hashes():
    chain = build_chain(6, 1, random.Random(42))
    assert [b.index for b in chain] == [1, 2, 3, 4, 5, 6]
    assert chain[0].transfer is None
    assert chain[0].previous_hash == ""
    assert chain[0].data == "1" + GENESIS_CONTENT
    for prev, block in zip(chain, chain[1:]):
        assert block.previous_hash == prev.digest
    for block in chain:
        assert is_valid_hash(block.digest, 1)
        assert block.digest == hash_data(block.data + str(block.nonce))


def test_build_chain_is_reproducible_with_seed():
    first = build_chain(4, 1, random.Random(7))
    second = build_chain(4, 1, random.Random(7))
    assert first == second


def test_block_data_includes_transfer_fields():
    chain = build_chain(2, 0, random.Random(1), ["A", "B"], [2.5], ["SOL"])
    block = chain[1]
    t = block.transfer
    assert block.data == (
        "2" + t.sender + t.receiver + "2.500000" + "SOL" + t.content() + chain[0].digest
    )


def test_render_genesis():
    block = TransferBlock(1, 7, "1" + GENESIS_CONTENT, "123450", "")
    assert block.render() == (
        "\n┌ Khoi: 1\n├ So nonce: 7\n├ Noi dung: Geneis Block\n└ Ma bam: 123450\n"
    )


def test_render_transfer_block():
    t = Transfer("An", "Bao", 12.5, "BTC")
    block = TransferBlock(2, 3, "data", "990", "880", t)
    assert block.render() == (
        "\n┌ Khoi: 2"
        "\n├ So nonce: 3"
        "\n├ Nguoi gui: An"
        "\n├ Nguoi nhan: Bao"
        "\n├ So luong: 12.50 BTC"
        "\n├ Noi dung: An chuyen khoan toi Bao 12.50 (BTC)"
        "\n├ Ma bam truoc do: 880"
        "\n└ Ma bam hien tai: 990\n"
    )


def test_main_writes_and_prints(tmp_path, capsys):
    out = tmp_path / "chain.txt"
    code = main(["--count", "3", "--difficulty", "1", "--output", str(out), "--seed", "5"])
    assert code == 0
    written = out.read_text(encoding="utf-8")
    assert capsys.readouterr().out == written
    assert written.count("┌ Khoi:") == 3
    expected = "".join(b.render() for b in build_chain(3, 1, random.Random(5)))
    assert written == expected


def test_main_appends_to_existing_file(tmp_path, capsys):
    out = tmp_path / "chain.txt"
    out.write_text("old\n", encoding="utf-8")
    main(["--count", "1", "--difficulty", "0", "--output", str(out), "--seed", "1"])
    capsys.readouterr()
    assert out.read_text(encoding="utf-8").startswith("old\n\n┌ Khoi: 1")