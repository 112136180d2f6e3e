# caesarsplit

A small Caesar cipher that moves every ASCII letter two places forward in the
alphabet. Case is kept, letters wrap around at the end (`y` becomes `a`, `Z`
becomes `B`), and every other character is left alone. Decryption moves each
letter two places back.

The package also holds three ways of encrypting or decrypting a whole file, so
that their running times can be compared:

- **`caesarsplit.sequential`**: the file is processed line by line;
- **`caesarsplit.processes`**: the whole contents are read and split in half;
  the first half is handled in the current process while the second half is
  handled in a child process;
- **`caesarsplit.threads`**: the contents are split in half and each half is
  handled by its own thread; the threads append their results in order, first
  half then second.

Files are read and written as Latin-1, so any byte passes through unchanged
and only ASCII letters are shifted. Every line written ends in a newline, so a
last line without one gains it. Apart from that, all three give the same
output for the same input.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Using the cipher from Python

```python
from caesarsplit.cipher import encrypt, decrypt

encrypt("Hello, World")   # 'Jgnnq, Yqtnf'
decrypt("Jgnnq, Yqtnf")   # 'Hello, World'
```

Each of the three file modules offers `encrypt_file(input_path, output_path)`
and `decrypt_file(input_path, output_path)`:

```python
from caesarsplit import sequential, processes, threads

sequential.encrypt_file("input.txt", "output.txt")
threads.decrypt_file("output.txt", "decrypted.txt")
```

If a file cannot be opened these raise `OSError`, whose `strerror` reads, for
example, `Error opening input file` (sequential) or `error opening encrypted
file` (processes and threads).

`caesarsplit.processes.process_text(text, encrypt_mode)` returns `text`
encrypted when `encrypt_mode` is true and decrypted otherwise.

## Commands

Each strategy has its own command:

```
caesarsplit-sequential [CHOICE] [--directory DIR]
caesarsplit-processes  [CHOICE] [--directory DIR]
caesarsplit-threads    [CHOICE] [--directory DIR]
```

The same runs with `python -m caesarsplit.sequential` and so on.

When `CHOICE` is not given, the command asks for it:

```
Do you want to encrypt or decrypt?
1 - encrypt
2 - decrypt
```

Choosing `1` encrypts `DIR/input.txt` into `DIR/output.txt`. Choosing `2`
decrypts `DIR/output.txt` into `DIR/decrypted.txt`. `DIR` defaults to
`../input-output`, relative to the directory the command is run from. Any
other choice prints `invalid choice`. On success the command prints a line
such as `file has been encrypted successfully`; if a file cannot be opened it
prints the error message instead. Either way it finishes by printing how many
seconds the operation took, which is how the three strategies can be compared,
and exits with status 0.

## What it does not do

The shift is fixed at two and there is no key to choose. The cipher offers no
real protection and is meant for timing comparisons and teaching, not for
keeping data secret. Only ASCII letters are changed; accented and other
non-ASCII letters are left as they are.