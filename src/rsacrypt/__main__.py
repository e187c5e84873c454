"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that asks on-the-fly for whatever the
command line left out, including the subcommand itself. With `--non-interactive` a missing argument is an error.

Typical usage example:

    rsacrypt find-prime 1000
    rsacrypt generate-keys 1009 1013
    rsacrypt encrypt 5 1022117 notes.txt
    rsacrypt decrypt 408365 1022117 notes.txt
    OR
    python -m rsacrypt
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import pathlib
import sys
import typing
import warnings

import rsacrypt
from rsacrypt.arith import WORD_BITS
from rsacrypt.arith import WORD_MAX
from rsacrypt.errors import InvalidArguments
from rsacrypt.errors import RSACryptError


def word(text: str) -> int:
    """Parse an unsigned machine word from decimal text."""
    value = int(text, 10)
    if not 0 <= value <= WORD_MAX:
        raise ValueError(f"{value} does not fit an unsigned {WORD_BITS}-bit word")
    return value


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Callable = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in rsacrypt.",
            choices=["find-prime", "generate-keys", "encrypt", "decrypt"],
        ),
    "find-prime":
        HelpData("Find a prime number, starting from the given integer."),
    "generate-keys":
        HelpData("Generate a key pair from two primes."),
    "encrypt":
        HelpData("Encrypt a file in place with a public key pair."),
    "decrypt":
        HelpData("Decrypt a file in place with a private key pair."),
    "start":
        HelpData(description="Number from which to start testing for a prime.", format=word),
    "p":
        HelpData(description="First prime used in key generation.", format=word),
    "q":
        HelpData(description="Second prime used in key generation.", format=word),
    "e":
        HelpData(description="Public exponent of the key pair.", format=word),
    "d":
        HelpData(description="Private exponent of the key pair.", format=word),
    "n":
        HelpData(description="Modulus of the key pair.", format=word),
    "file":
        HelpData(description="File to rewrite in place.", format=pathlib.Path),
    "pem":
        HelpData(
            description="Also print the generated keys as PKCS#1 PEM blocks?",
            choices=["Y", "N"],
            default="N",
            advanced=True,
        ),
}

needs = {
    "find-prime": ("start",),
    "generate-keys": ("p", "q", "pem"),
    "encrypt": ("e", "n", "file"),
    "decrypt": ("d", "n", "file"),
}


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser reporting malformed command lines as `InvalidArguments` instead of exiting."""

    def error(self, message: str) -> typing.NoReturn:
        raise InvalidArguments(f"{self.prog}: {message}")


def _positional(parser: argparse.ArgumentParser, name: str) -> None:
    parser.add_argument(name, nargs="?", type=help_dict[name].format, help=help_dict[name].description)


corep = ArgumentParser(prog="rsacrypt")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {rsacrypt.__version__}")
corep.add_argument("--non-interactive", "-N", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
corep.add_argument("--verbose", "-V", action="store_true", help="Log diagnostic details to stderr")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

for cmd in needs:
    subp = commands.add_parser(cmd, help=help_dict[cmd].description)
    for arg in needs[cmd]:
        if help_dict[arg].advanced:
            continue
        _positional(subp, arg)
commands.choices["generate-keys"].add_argument("--pem",
                                               action="store_const",
                                               const="Y",
                                               help=help_dict["pem"].description)


def checkmodes(arg: str, mode: tuple[bool, bool]):
    helper_data = help_dict[arg]
    if (mode[0] or (helper_data.advanced and not mode[1])) and helper_data.default is not None:
        return helper_data.default
    if mode[0]:
        raise InvalidArguments(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    choices = helper_data.choices
    vald = set(choices)
    for choice in choices:
        defstring = " (Default)" if choice == helper_data.default else ""
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}" + defstring)
        else:
            prntr(f"{choice}" + defstring)
    if helper_data.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        if not ch and helper_data.default is not None:
            return helper_data.default
        prntr("Please select an option from the list.")


def input_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def run(args: argparse.Namespace, pspr: typing.Callable = print) -> None:
    """Execute the fully populated subcommand."""
    match args.subcommand:
        case "find-prime":
            rsacrypt.find_next_prime(args.start)
        case "generate-keys":
            for name in ("p", "q"):
                if not rsacrypt.is_prime(getattr(args, name)):
                    warnings.warn(f"{name} = {getattr(args, name)} is not a prime, the keys will not work.",
                                  RuntimeWarning)
            rpk = rsacrypt.RSAPrivKey.generate(args.p, args.q)
            print(f"Public key:  e = {rpk.pub.expo}, n = {rpk.mod}")
            print(f"Private key: d = {rpk.expo}")
            if args.pem == "Y":
                print(rpk.pub.to_pem(), end="")
                print(rpk.to_pem(), end="")
        case "encrypt":
            frame = rsacrypt.encrypt_file(args.file, rsacrypt.RSAPubKey(args.n, args.e))
            pspr(f"Encrypted {frame.original_length} bytes into {args.file}.")
        case "decrypt":
            clear = rsacrypt.decrypt_file(args.file, rsacrypt.RSAPrivKey(args.n, args.d))
            pspr(f"Decrypted {len(clear)} bytes into {args.file}.")


def main(argv: list[str] | None = None) -> int:
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)

    Returns:
        The process exit code, 0 on success and 1 on any failure.
    """
    try:
        args = corep.parse_args(argv)
    except InvalidArguments as exc:
        corep.print_usage(sys.stderr)
        print(exc, file=sys.stderr)
        return 1
    pstatus = (args.non_interactive, args.advanced)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    try:
        pspr("Welcome to rsacrypt!\n")
        if not args.subcommand:
            args.subcommand = choice_handler("subcommand", pstatus, pspr)
        for reqs in needs[args.subcommand]:
            if getattr(args, reqs, None) is None:
                if help_dict[reqs].choices is not None:
                    res = choice_handler(reqs, pstatus, pspr)
                else:
                    res = input_handler(reqs, pstatus, pspr)
                setattr(args, reqs, res)
            else:
                pspr(f"{reqs}: {getattr(args, reqs)}")
        pspr("\nInput Complete! Executing...")
        run(args, pspr)
    except InvalidArguments as exc:
        corep.print_usage(sys.stderr)
        print(exc, file=sys.stderr)
        return 1
    except (RSACryptError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"{exc.filename or 'I/O'}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except MemoryError:
        print("Out of memory", file=sys.stderr)
        return 1
    pspr("Thank you for using rsacrypt!")
    pspr("Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
