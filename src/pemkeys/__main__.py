"""The Command Line Interface for the utility, including Interactive elements.

Any key file left out on the command line is asked for interactively, unless non-interactive mode is active, in
which case a missing file is an error.

Typical usage example:

    pemkeys inspect server.crt
    pemkeys compare server.crt server.key
    python -m pemkeys size -n server.key
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import pathlib
import sys
import typing

import pemkeys


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in PEM Keys.",
            choices=["inspect", "compare", "size"],
        ),
    "inspect":
        HelpData("Describe the public key held in a key or certificate file."),
    "compare":
        HelpData("Check whether two files hold the same public key."),
    "size":
        HelpData("Report the size of a key in bits."),
    "key":
        HelpData(
            description="Location of the PEM key or certificate file.",
            format=pathlib.Path,
        ),
    "other":
        HelpData(
            description="Location of the second PEM key or certificate file.",
            format=pathlib.Path,
        ),
}

needs = {
    "inspect": ("key",),
    "compare": ("key", "other"),
    "size": ("key",),
}

keyfile = argparse.ArgumentParser(add_help=False)
keyfile.add_argument("key", nargs="?", type=help_dict["key"].format, help=help_dict["key"].description)
corep = argparse.ArgumentParser(prog="pemkeys")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {pemkeys.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--quiet", "-q", action="store_true", help="Print results only")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

inspect = commands.add_parser("inspect", parents=[keyfile], help=help_dict["inspect"].description)
compare = commands.add_parser("compare", parents=[keyfile], help=help_dict["compare"].description)
compare.add_argument("other", nargs="?", type=help_dict["other"].format, help=help_dict["other"].description)
size = commands.add_parser("size", parents=[keyfile], help=help_dict["size"].description)


def choice_handler(arg: str, interactive: bool, prntr: typing.Callable = print):
    helper_data = help_dict[arg]
    if not interactive:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    for choice in helper_data.choices:
        prntr(f"{choice} - {help_dict[choice].description}")
    while True:
        ch = input(f"{arg}: ")
        if ch in helper_data.choices:
            return ch
        prntr("Please select an option from the list.")


def input_handler(arg: str, interactive: bool, prntr: typing.Callable = print):
    helper_data = help_dict[arg]
    if not interactive:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    while True:
        ch = input(f"{arg}: ")
        if ch:
            return helper_data.format(ch)
        prntr("Please provide a value.")


def read_key(file: pathlib.Path) -> pemkeys.PublicKey | pemkeys.PrivateKey:
    """Reads whatever key a PEM file holds.

    Public keys and certificates are tried first, then RSA and EC private keys.

    Args:
        file: The PEM file.

    Returns:
        The public or private key found.

    Raises:
        PemKeysError: If the file holds nothing we can read.
    """
    with open(file, "rb") as f:
        data = f.read()
    try:
        return pemkeys.parse_public_key(data)
    except pemkeys.MalformedCertificate as pub_err:
        for parser in (pemkeys.parse_rsa_private_key, pemkeys.parse_ec_private_key):
            try:
                return parser(data)
            except pemkeys.MalformedPrivateKey:
                continue
        raise pub_err


def read_public_key(file: pathlib.Path) -> pemkeys.PublicKey:
    key = read_key(file)
    if isinstance(key, (pemkeys.RSAPrivateKey, pemkeys.ECPrivateKey)):
        return key.public_key()
    return key


def describe(key: pemkeys.PublicKey | pemkeys.PrivateKey) -> str:
    """Human-readable key family."""
    match key:
        case pemkeys.RSAPublicKey() | pemkeys.RSAPrivateKey():
            return "RSA"
        case pemkeys.ECPublicKey(curve=curve) | pemkeys.ECPrivateKey(curve=curve):
            return f"EC ({curve.name})"
        case pemkeys.Ed25519PublicKey() | pemkeys.Ed25519PrivateKey():
            return "Ed25519"
        case _:
            return type(key).__name__


def run(args: argparse.Namespace, pspr: typing.Callable) -> int:
    """Executes a fully specified subcommand and returns the exit status."""
    match args.subcommand:
        case "inspect":
            key = read_public_key(args.key)
            bits = pemkeys.key_size_bits(key)
            print(f"{describe(key)} public key, {bits} bits")
        case "compare":
            first = read_public_key(args.key)
            second = read_public_key(args.other)
            if not pemkeys.compare_public_keys(first, second):
                print("different")
                return 1
            print("equal")
        case "size":
            bits = pemkeys.key_size_bits(read_key(args.key))
            pspr("Key size:")
            print("unsupported" if bits is None else bits)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    interactive = not args.non_interactive

    def pspr(text: str):
        """Print only when not asked to be quiet."""
        if not args.quiet:
            print(text)

    pspr("Welcome to PEM Keys!\n")
    try:
        if not args.subcommand:
            args.subcommand = choice_handler("subcommand", interactive, pspr)
        for reqs in needs[args.subcommand]:
            if getattr(args, reqs, None) is None:
                setattr(args, reqs, input_handler(reqs, interactive, pspr))
            else:
                pspr(f"{reqs}: {getattr(args, reqs)}")
        status = run(args, pspr)
    except (OSError, pemkeys.PemKeysError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 2
    pspr("Goodbye!")
    return status


if __name__ == "__main__":
    sys.exit(main())
