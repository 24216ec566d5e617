# minichain

A small blockchain for learning how proof of work and hash chaining fit
together. A block's data is hashed together with a nonce, and the nonce is
raised from 0 until the decimal digest ends in as many zeros as the
difficulty asks for. Every block records the hash of the block before it,
so the blocks form a linked chain.

Digests are 64-bit BLAKE2b hashes written as decimal numbers, so the same
data always gives the same digest, on every machine and in every run.

Three kinds of chains are included:

- **Transfers** (`minichain.transfer`): a genesis block (its content is the
  text `Geneis Block`), then one random transfer per block, described as for
  example `An chuyen khoan toi Bao 2.50 (BTC)`. In this chain the sender and
  the receiver may be the same person.
- **Batches** (`minichain.batch`): a genesis block (`Genesis Block`), then
  blocks that each hold a batch of random transfers (five by default), in
  which sender and receiver always differ.
- **Students** (`minichain.students`): student records numbered from 0 up to
  the requested count. Each block is mined over the student's name and
  number; block 0 is the initial block and is reported with the name `N/A`.
  The first previous hash is the hash of the text `KHOI TAO`.

## Installation

```
pip install .
```

## Command line

```
minichain-transfer  [--count N] [--difficulty D] [--output FILE] [--seed S]
minichain-batch     [--count N] [--difficulty D] [--size K] [--output FILE] [--seed S]
minichain-students  [--count N] [--difficulty D] [--output FILE] [--seed S]
```

| Command              | `--count` default | `--output` default            | Writing                  |
|----------------------|-------------------|-------------------------------|--------------------------|
| `minichain-transfer` | 100               | `thongtinblock1transfer.txt`  | appends to the file      |
| `minichain-batch`    | 10                | `thongtinblock5transfer.txt`  | appends to the file      |
| `minichain-students` | 100               | `blockstudentmanage.txt`      | replaces the file        |

`--difficulty` is the number of trailing zeros a digest needs (default 5).
`--seed` fixes the random choices so a run can be repeated; without it each
run differs. `--size` sets the number of transfers per batch block
(default 5).

`minichain-transfer` and `minichain-batch` print each block as it is mined
and append the same text to the output file. `minichain-students` writes
all blocks to the output file, prints `Hoan thanh ghi vao file`, and then
prints a short summary of each block: name, number, previous hash (left out
for block 0) and hash.

Mining gets slower as the difficulty rises, because every extra trailing
zero makes a valid digest about ten times rarer.

## Library use

The building blocks live in `minichain.ledger`:

- `hash_data(data)` turns a string into a decimal digest string.
- `is_valid_hash(digest, difficulty)` checks that the digest ends in
  `difficulty` zeros; it raises `ValueError` for a negative difficulty or
  one longer than the digest.
- `mine(data, difficulty)` returns `(nonce, digest)` for the first nonce
  whose digest of `data + str(nonce)` is valid.
- `format_amount(amount)` formats an amount with two decimals.
- `append_text(path, text)` appends text to a file, creating it if needed.

Each chain module has a `build_chain` function that takes a
`random.Random` instance, so a fixed seed always gives the same chain:

```python
import random
from minichain import transfer

blocks = transfer.build_chain(
    5, 2, random.Random(1), ["An", "Bao", "Cuong"], [0.5, 1.0], ["BTC", "ETH"]
)
for block in blocks:
    print(block.render())
```

- `minichain.transfer`: `Transfer` (with `content()`), `random_transfer(rng,
  names, amounts, currencies, distinct=True)`, `TransferBlock` and
  `build_chain(count, difficulty, rng, names, amounts, currencies)`. The
  name, amount and currency lists default to built-in ones.
- `minichain.batch`: `BatchBlock`, `random_batch(rng, size, names, amounts,
  currencies)` and `build_chain(count, difficulty, rng, size, names,
  amounts, currencies)`.
- `minichain.students`: `StudentBlock` (with `summary()`),
  `build_chain(count, difficulty, rng, names)`, which returns `count + 1`
  blocks, and `write_blocks(path, blocks)`, which writes a whole chain to a
  file, replacing what was there before.

`TransferBlock`, `BatchBlock` and `StudentBlock` each have a `render()`
method that gives the text shown on screen and written to the file.

## What it does not do

minichain only mines and prints chains. It does not check an existing
chain for tampering, read chains back from the files it writes, keep
balances, or talk to other nodes over a network. The output files are
plain-text logs.

## Running the tests

```
pip install ".[test]"
pytest
```