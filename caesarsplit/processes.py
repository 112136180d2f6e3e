"""Encrypt or decrypt a file by splitting it between two processes."""

import sys
from concurrent.futures import ProcessPoolExecutor

from caesarsplit.cipher import decrypt, encrypt
from caesarsplit.sequential import _run_cli, _transform_file, _Wording

_WORDING = _Wording("error", "file", "operation took")


def process_text(text, encrypt_mode):
    """Encrypt ``text`` when ``encrypt_mode`` is true, otherwise decrypt it."""
    return encrypt(text) if encrypt_mode else decrypt(text)


def _read_halves(src):
    """Read every line of ``src``, each ending in a newline, and split in two."""
    content = "".join(line if line.endswith("\n") else line + "\n" for line in src)
    mid = len(content) // 2
    return content[:mid], content[mid:]


def _split_between_processes(src, encrypt_mode):
    first, second = _read_halves(src)
    with ProcessPoolExecutor(max_workers=1) as pool:
        later = pool.submit(process_text, second, encrypt_mode)
        return [process_text(first, encrypt_mode), later.result()]


def encrypt_file(input_path, output_path):
    """Encrypt ``input_path`` into ``output_path``, one half in a child process."""
    _transform_file(input_path, output_path, True, _WORDING, _split_between_processes)


def decrypt_file(input_path, output_path):
    """Decrypt ``input_path`` into ``output_path``, one half in a child process."""
    _transform_file(input_path, output_path, False, _WORDING, _split_between_processes)


def main(argv=None):
    """Ask for a mode, run it on the fixed file names and report the time."""
    return _run_cli(
        argv,
        "Caesar cipher across two processes.",
        {"encrypt_file": encrypt_file, "decrypt_file": decrypt_file},
        _WORDING,
    )


if __name__ == "__main__":
    sys.exit(main())