# pylint: disable=missing-module-docstring,redefined-outer-name
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pathlib

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed448
from cryptography.hazmat.primitives.asymmetric import rsa
import pytest

from pemkeys import __main__ as cli


@pytest.fixture(scope="module")
def files(tmp_path_factory, rsa_key, ec_key, make_certificate) -> dict[str, pathlib.Path]:
    base = tmp_path_factory.mktemp("keys")
    contents = {
        "rsa.key": rsa_key.private_bytes(serialization.Encoding.PEM, serialization.PrivateFormat.TraditionalOpenSSL,
                                         serialization.NoEncryption()),
        "rsa.crt": make_certificate(rsa_key),
        "ec.pub": ec_key.public_key().public_bytes(serialization.Encoding.PEM,
                                                   serialization.PublicFormat.SubjectPublicKeyInfo),
        "ec.key": ec_key.private_bytes(serialization.Encoding.PEM, serialization.PrivateFormat.PKCS8,
                                       serialization.NoEncryption()),
        "ed448.crt": make_certificate(ed448.Ed448PrivateKey.generate()),
        "junk.txt": b"not a pem\n",
        "junk.der": b"\x30\x82\xff\xfe\x80\x81",
        "commented.pub": "Schlüssel für den Server\n".encode("utf-8") + ec_key.public_key().public_bytes(
            serialization.Encoding.PEM, serialization.PublicFormat.SubjectPublicKeyInfo),
    }
    for name, data in contents.items():
        (base / name).write_bytes(data)
    return {name: base / name for name in contents}


def test_inspect(files, capsys):
    assert cli.main(["-q", "inspect", str(files["rsa.crt"])]) == 0
    assert capsys.readouterr().out == "RSA public key, 2048 bits\n"
    assert cli.main(["-q", "inspect", str(files["ec.key"])]) == 0
    assert capsys.readouterr().out == "EC (P-256) public key, 256 bits\n"


def test_inspect_banner(files, capsys):
    assert cli.main(["inspect", str(files["ec.pub"])]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Welcome to PEM Keys!")
    assert "EC (P-256) public key, 256 bits" in out
    assert out.endswith("Goodbye!\n")


@pytest.mark.parametrize("first, second, status, verdict", [
    ("rsa.key", "rsa.crt", 0, "equal"),
    ("ec.pub", "ec.key", 0, "equal"),
])
def test_compare_equal(files, capsys, first, second, status, verdict):
    assert cli.main(["-q", "compare", str(files[first]), str(files[second])]) == status
    assert capsys.readouterr().out == verdict + "\n"


def test_compare_different(files, capsys, tmp_path, make_certificate):
    other = tmp_path / "other.crt"
    other.write_bytes(make_certificate(rsa.generate_private_key(65537, 2048)))
    assert cli.main(["-q", "compare", str(files["rsa.key"]), str(other)]) == 1
    assert capsys.readouterr().out == "different\n"


def test_compare_incomparable(files, capsys):
    assert cli.main(["-q", "compare", str(files["rsa.key"]), str(files["ec.pub"])]) == 2
    assert "key types do not match" in capsys.readouterr().err


def test_size(files, capsys):
    assert cli.main(["-q", "size", str(files["rsa.key"])]) == 0
    assert capsys.readouterr().out == "2048\n"


@pytest.mark.parametrize("name, message", [
    ("junk.txt", "does not contain a valid PEM block"),
    ("junk.der", "does not contain a valid PEM block"),
    ("ed448.crt", "unsupported key type: Ed448PublicKey"),
])
def test_unreadable(files, capsys, name, message):
    assert cli.main(["-q", "size", str(files[name])]) == 2
    assert message in capsys.readouterr().err


def test_non_ascii_preamble(files, capsys):
    assert cli.main(["-q", "inspect", str(files["commented.pub"])]) == 0
    assert capsys.readouterr().out == "EC (P-256) public key, 256 bits\n"

def test_missing_file(tmp_path, capsys):
    assert cli.main(["-q", "inspect", str(tmp_path / "absent.pem")]) == 2
    assert capsys.readouterr().err.startswith("error: ")


def test_non_interactive_missing_argument(capsys):
    assert cli.main(["-q", "-n", "inspect"]) == 2
    assert "non-interactive" in capsys.readouterr().err
    assert cli.main(["-q", "-n"]) == 2


def test_interactive_prompts(files, mocker, capsys):
    prompt = mocker.patch("builtins.input", side_effect=["bogus", "compare", str(files["rsa.key"]),
                                                         str(files["rsa.crt"])])
    assert cli.main(["-q"]) == 0
    assert prompt.call_count == 4
    assert capsys.readouterr().out == "equal\n"


def test_version(capsys):
    with pytest.raises(SystemExit):
        cli.main(["--version"])
    assert capsys.readouterr().out.startswith("pemkeys ")
