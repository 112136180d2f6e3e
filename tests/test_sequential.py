import io

import pytest

from caesarsplit.cipher import encrypt
from caesarsplit.sequential import decrypt_file, encrypt_file, main

SAMPLE = (
    "This is a sample text meant to test encryption.\n"
    "The words are randomly chosen, but they will serve their purpose.\n"
    "\n"
    "Encryption works on the characters, shifting each letter.\n"
)


def _convert(func, tmp_path, data, name="result.bin"):
    source = tmp_path / f"{name}.src"
    target = tmp_path / name
    source.write_bytes(data)
    func(source, target)
    return target.read_bytes()


def test_encrypt_file_matches_cipher(tmp_path):
    result = _convert(encrypt_file, tmp_path, SAMPLE.encode("latin-1"))
    assert result.decode("latin-1") == encrypt(SAMPLE)


@pytest.mark.parametrize(
    "data, expected",
    [
        (SAMPLE.encode("latin-1"), SAMPLE.encode("latin-1")),
        (b"no newline at end", b"no newline at end\n"),
        (b"", b""),
    ],
)
def test_round_trip(tmp_path, data, expected):
    plain = tmp_path / "plain.txt"
    encrypted = tmp_path / "encrypted.txt"
    decrypted = tmp_path / "decrypted.txt"
    plain.write_bytes(data)
    encrypt_file(plain, encrypted)
    decrypt_file(encrypted, decrypted)
    assert decrypted.read_bytes() == expected


def test_carriage_returns_are_kept(tmp_path):
    result = _convert(encrypt_file, tmp_path, b"ab\r\ncd\r\n")
    assert result == encrypt("ab\r\ncd\r\n").encode("latin-1")


@pytest.mark.parametrize(
    "func, message",
    [
        (encrypt_file, "Error opening input file"),
        (decrypt_file, "Error opening encrypted file"),
    ],
)
def test_missing_source_raises(tmp_path, func, message):
    with pytest.raises(FileNotFoundError) as info:
        func(tmp_path / "absent.txt", tmp_path / "out.txt")
    assert info.value.strerror == message


def test_main_encrypts_from_argument(tmp_path, capsys):
    (tmp_path / "input.txt").write_text(SAMPLE, encoding="latin-1")
    assert main(["1", "--directory", str(tmp_path)]) == 0
    assert (tmp_path / "output.txt").read_text(encoding="latin-1") == encrypt(SAMPLE)
    out = capsys.readouterr().out
    assert "File has been encrypted successfully" in out
    assert "operation took in normal way" in out


def test_main_reads_choice_from_stdin(tmp_path, capsys, monkeypatch):
    (tmp_path / "output.txt").write_text(encrypt(SAMPLE), encoding="latin-1")
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    main(["--directory", str(tmp_path)])
    assert (tmp_path / "decrypted.txt").read_text(encoding="latin-1") == SAMPLE
    out = capsys.readouterr().out
    assert "Do you want to encrypt or decrypt?" in out
    assert "File has been decrypted successfully" in out


@pytest.mark.parametrize(
    "choice, message",
    [("7", "invalid choice"), ("abc", "invalid choice"), ("1", "Error opening input file")],
)
def test_main_reports_problems(tmp_path, capsys, choice, message):
    main([choice, "--directory", str(tmp_path)])
    assert message in capsys.readouterr().out