"""Encrypt or decrypt a file line by line in a single thread."""

import argparse
import os
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass

from caesarsplit.cipher import decrypt, encrypt

DEFAULT_DIRECTORY = os.path.join("..", "input-output")

# File labels used in error messages, keyed by encrypt mode.
_LABELS = {True: ("input", "output"), False: ("encrypted", "decrypted")}

# Menu choices: function name, source file, target file, past-tense verb.
_ACTIONS = {
    1: ("encrypt_file", "input.txt", "output.txt", "encrypted"),
    2: ("decrypt_file", "output.txt", "decrypted.txt", "decrypted"),
}


@dataclass(frozen=True)
class _Wording:
    """How one front end words its messages."""

    error: str
    success: str
    timing: str


_WORDING = _Wording("Error", "File", "operation took in normal way")


def _open(path, mode, message):
    try:
        return open(path, mode, encoding="latin-1", newline="\n")
    except OSError as exc:
        raise OSError(exc.errno, message, str(path)) from exc


@contextmanager
def _open_pair(input_path, output_path, encrypt_mode, wording):
    input_label, output_label = _LABELS[encrypt_mode]
    with _open(input_path, "r", f"{wording.error} opening {input_label} file") as src:
        with _open(
            output_path, "w", f"{wording.error} opening {output_label} file"
        ) as dst:
            yield src, dst


def _transform_file(input_path, output_path, encrypt_mode, wording, convert):
    """Write to ``output_path`` the pieces ``convert`` makes from ``input_path``."""
    with _open_pair(input_path, output_path, encrypt_mode, wording) as (src, dst):
        dst.writelines(convert(src, encrypt_mode))


def _by_line(src, encrypt_mode):
    transform = encrypt if encrypt_mode else decrypt
    for line in src:
        yield transform(line.removesuffix("\n")) + "\n"


def encrypt_file(input_path, output_path):
    """Encrypt each line of ``input_path`` into ``output_path``."""
    _transform_file(input_path, output_path, True, _WORDING, _by_line)


def decrypt_file(input_path, output_path):
    """Decrypt each line of ``input_path`` into ``output_path``."""
    _transform_file(input_path, output_path, False, _WORDING, _by_line)


def _read_choice():
    print("Do you want to encrypt or decrypt?")
    print("1 - encrypt")
    print("2 - decrypt")
    try:
        return input()
    except EOFError:
        return ""


def _parse_choice(text):
    try:
        return int(text.strip())
    except ValueError:
        return 0


def _run_cli(argv, description, handlers, wording):
    """Ask for a mode, run the matching handler on the fixed file names, time it."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("choice", nargs="?", help="1 to encrypt, 2 to decrypt")
    parser.add_argument("--directory", default=DEFAULT_DIRECTORY)
    args = parser.parse_args(argv)

    raw = args.choice if args.choice is not None else _read_choice()
    action = _ACTIONS.get(_parse_choice(raw))

    start = time.perf_counter()
    try:
        if action is None:
            print("invalid choice")
        else:
            name, source, target, done = action
            handlers[name](
                os.path.join(args.directory, source),
                os.path.join(args.directory, target),
            )
            print(f"{wording.success} has been {done} successfully")
    except OSError as exc:
        print(exc.strerror)
    elapsed = time.perf_counter() - start
    print(f"{wording.timing} {elapsed} seconds")
    return 0


def main(argv=None):
    """Ask for a mode, run it on the fixed file names and report the time."""
    return _run_cli(
        argv,
        "Caesar cipher, one line at a time.",
        {"encrypt_file": encrypt_file, "decrypt_file": decrypt_file},
        _WORDING,
    )


if __name__ == "__main__":
    sys.exit(main())