import pytest
import yaml

from sha2_cli import DEFAULTS, load_config, main


ABC_SHA256 = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
ABC_SHA384 = (
    "cb00753f45a35e8bb5a03d699ac65007272c32ab0eded1631a8b605a43ff5bed"
    "8086072ba1e7cc2358baeca134c825a7"
)


def test_default_is_sha256_of_utf8_text(capsys):
    assert main(["abc"]) == 0
    assert capsys.readouterr().out.strip() == ABC_SHA256


def test_algorithm_flag(capsys):
    assert main(["-a", "sha_384", "abc"]) == 0
    assert capsys.readouterr().out.strip() == ABC_SHA384


def test_sha512_t_with_text(capsys):
    assert main(["-a", "SHA-512/t", "-t", "8", "Green ch√°"]) == 0
    assert capsys.readouterr().out.strip() == "9c"


def test_file_input_is_hashed_raw(tmp_path, capsys):
    path = tmp_path / "coffee.bin"
    path.write_bytes(bytes([0xC0, 0xFF, 0xEE]))

    assert main(["-a", "SHA512t", "-t", "8", "-f", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "b1"


def test_missing_file(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "nope.bin")]) == 1
    assert "Error reading file" in capsys.readouterr().err


def test_message_that_is_not_utf8_encodable(capsys):
    # Lone surrogates arrive in sys.argv when the shell passes undecodable bytes.
    assert main(["\udcff"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "cannot be encoded as UTF-8" in captured.err


@pytest.mark.parametrize("argv", [[], ["-f", "x.bin", "abc"]])
def test_needs_exactly_one_input(argv, capsys):
    assert main(argv) == 1
    assert "exactly one" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv",
    [
        ["-a", "SHA-1", "abc"],
        ["-a", "SHA-512/t", "abc"],
        ["-a", "SHA-512/t", "-t", "384", "abc"],
        ["-a", "SHA-512/t", "-t", "0", "abc"],
        ["-a", "SHA-256", "-t", "128", "abc"],
    ],
)
def test_invalid_parameters(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_yaml_output(capsys):
    assert main(["--format", "yaml", "-a", "sha512t", "-t", "12", "abc"]) == 0
    record = yaml.safe_load(capsys.readouterr().out)

    assert record["algorithm"] == "SHA-512/12"
    assert record["t"] == 12
    assert record["output_bits"] == 12
    assert record["input_length"] == 3
    assert len(record["digest_hex"]) == 4


def test_yaml_output_fixed_variant_has_no_t(capsys):
    assert main(["--format", "yaml", "abc"]) == 0
    record = yaml.safe_load(capsys.readouterr().out)

    assert record == {
        "algorithm": "SHA-256",
        "output_bits": 256,
        "input_length": 3,
        "digest_hex": ABC_SHA256,
    }


def test_config_file(tmp_path, capsys):
    path = tmp_path / "sha2.yaml"
    path.write_text("algorithm: SHA-384\n", encoding="utf-8")

    assert main(["--config", str(path), "abc"]) == 0
    assert capsys.readouterr().out.strip() == ABC_SHA384


def test_flags_override_config(tmp_path, capsys):
    path = tmp_path / "sha2.yaml"
    path.write_text("algorithm: SHA-384\nformat: yaml\n", encoding="utf-8")

    assert main(["--config", str(path), "-a", "sha256", "--format", "hex", "abc"]) == 0
    assert capsys.readouterr().out.strip() == ABC_SHA256


def test_config_supplies_t(tmp_path, capsys):
    path = tmp_path / "sha2.yaml"
    path.write_text("algorithm: sha512_t\nt: 8\n", encoding="utf-8")

    assert main(["--config", str(path), "Green ch√°"]) == 0
    assert capsys.readouterr().out.strip() == "9c"


@pytest.mark.parametrize(
    "content",
    [
        "algorithm: SHA-256\ncolour: blue\n",
        "- SHA-256\n",
        "format: base64\n",
        "algorithm: [unclosed\n",
    ],
)
def test_bad_config_files(tmp_path, capsys, content):
    path = tmp_path / "sha2.yaml"
    path.write_text(content, encoding="utf-8")

    assert main(["--config", str(path), "abc"]) == 1
    assert "Error loading config" in capsys.readouterr().err


def test_load_config_merges_defaults(tmp_path):
    path = tmp_path / "sha2.yaml"
    path.write_text("t: 64\n", encoding="utf-8")

    config = load_config(str(path))
    assert config == {"algorithm": DEFAULTS["algorithm"], "t": 64, "format": "hex"}


def test_empty_config_file(tmp_path):
    path = tmp_path / "sha2.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == DEFAULTS
