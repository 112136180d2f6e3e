"""Encrypt or decrypt a file by splitting it between two ordered threads."""

import sys
import threading

from caesarsplit.cipher import decrypt, encrypt
from caesarsplit.processes import _read_halves
from caesarsplit.sequential import _run_cli, _transform_file, _Wording

_WORDING = _Wording("error", "file", "operation took")


def _transform_and_append(part, transform, result, my_turn, next_turn):
    processed = transform(part)
    with my_turn:
        result.append(processed)
    next_turn.release()


def _split_between_threads(src, encrypt_mode):
    transform = encrypt if encrypt_mode else decrypt
    halves = _read_halves(src)
    turns = [threading.Semaphore(1), threading.Semaphore(0)]
    result = []
    workers = [
        threading.Thread(
            target=_transform_and_append,
            args=(half, transform, result, turns[index], turns[1 - index]),
        )
        for index, half in enumerate(halves)
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return result


def encrypt_file(input_path, output_path):
    """Encrypt ``input_path`` into ``output_path`` using two threads."""
    _transform_file(input_path, output_path, True, _WORDING, _split_between_threads)


def decrypt_file(input_path, output_path):
    """Decrypt ``input_path`` into ``output_path`` using two threads."""
    _transform_file(input_path, output_path, False, _WORDING, _split_between_threads)


def main(argv=None):
    """Ask for a mode, run it on the fixed file names and report the time."""
    return _run_cli(
        argv,
        "Caesar cipher across two threads.",
        {"encrypt_file": encrypt_file, "decrypt_file": decrypt_file},
        _WORDING,
    )


if __name__ == "__main__":
    sys.exit(main())