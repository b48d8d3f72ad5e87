import sys

import pytest

from check_vectors import check_vector, load_vectors, main, run_vectors, vector_message


ABC_SHA256 = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


def test_shipped_vectors_all_pass(capsys):
    vectors = load_vectors()
    assert len(vectors) == 26
    assert run_vectors(vectors) is True
    assert "26 passed, 0 failed" in capsys.readouterr().out


def test_vector_message():
    assert vector_message({"input_hex": "c0ffee"}) == b"\xc0\xff\xee"
    assert vector_message({"input_hex": ""}) == b""
    assert vector_message({"input_text": "abc"}) == b"abc"


def test_check_vector_reports_mismatch():
    ok, computed = check_vector(
        {"algorithm": "SHA-256", "input_text": "abc", "digest_hex": "00"}
    )
    assert not ok
    assert computed.startswith("ba7816bf")


def test_run_vectors_counts_failures(capsys):
    vectors = [
        {"algorithm": "SHA-512/t", "t": 8, "input_hex": "c0ffee", "digest_hex": "B1"},
        {"algorithm": "SHA-512/t", "t": 8, "input_hex": "c0ffee", "digest_hex": "00"},
    ]
    assert run_vectors(vectors) is False
    out = capsys.readouterr().out
    assert "[FAIL]" in out
    assert "1 passed, 1 failed" in out


@pytest.mark.parametrize(
    "content",
    [
        "algorithm: SHA-256\n",
        "- algorithm: SHA-256\n  input_hex: ''\n",
        "- algorithm: SHA-256\n  digest_hex: '00'\n",
        "- algorithm: SHA-256\n  input_hex: ''\n  input_text: ''\n  digest_hex: '00'\n",
        "- just a string\n",
    ],
)
def test_load_vectors_rejects_malformed_files(tmp_path, content):
    path = tmp_path / "vectors.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError):
        load_vectors(str(path))


def test_main_with_custom_file(tmp_path, monkeypatch, capsys):
    path = tmp_path / "vectors.yaml"
    path.write_text(
        "- algorithm: sha256\n"
        "  input_text: abc\n"
        "  digest_hex: ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad\n",
        encoding="utf-8",
    )
    monkeypatch.setattr(sys, "argv", ["check_vectors.py", "-f", str(path)])

    assert main() == 0
    assert "1 passed, 0 failed" in capsys.readouterr().out


def test_main_with_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["check_vectors.py", "-f", str(tmp_path / "none.yaml")])

    assert main() == 1
    assert "could not load vectors" in capsys.readouterr().out


@pytest.mark.parametrize(
    "entry",
    [
        {"algorithm": "SHA-1", "input_hex": "", "digest_hex": "00"},
        {"algorithm": "SHA-512/t", "t": 384, "input_hex": "", "digest_hex": "00"},
        {"algorithm": "SHA-256", "input_hex": "zz", "digest_hex": "00"},
    ],
)
def test_run_vectors_reports_bad_entries_as_failures(entry, capsys):
    good = {"algorithm": "SHA-256", "input_text": "abc", "digest_hex": ABC_SHA256}

    assert run_vectors([entry, good]) is False
    out = capsys.readouterr().out
    assert "[FAIL]   0" in out
    assert "error:" in out
    assert "[OK]     1" in out
    assert "1 passed, 1 failed" in out


@pytest.mark.parametrize(
    "content",
    [
        "- algorithm: SHA-256\n  input_hex: 0123\n  digest_hex: '00'\n",
        "- algorithm: SHA-256\n  input_hex: ''\n  digest_hex: 1234\n",
    ],
)
def test_load_vectors_rejects_unquoted_hex(tmp_path, content):
    path = tmp_path / "vectors.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError, match="quoted string"):
        load_vectors(str(path))


def test_main_fails_when_a_vector_errors(tmp_path, monkeypatch, capsys):
    path = tmp_path / "vectors.yaml"
    path.write_text(
        "- algorithm: SHA-1\n"
        "  input_hex: ''\n"
        "  digest_hex: '00'\n",
        encoding="utf-8",
    )
    monkeypatch.setattr(sys, "argv", ["check_vectors.py", "-f", str(path)])

    assert main() == 1
    assert "0 passed, 1 failed" in capsys.readouterr().out
