#!/usr/bin/env python3
"""
onetime CLI - Command-line interface for one-time passcodes.

Usage:
    onetime hotp <secret> <counter> [--digits N] [--algorithm NAME] [--raw] [--group]
    onetime totp <secret> [--digits N] [--algorithm NAME] [--step SECONDS]
                 [--base-time TIME] [--at TIME] [--raw] [--group] [--remaining]
    onetime remaining [--step SECONDS] [--base-time TIME] [--at TIME]

Examples:
    # Authenticator-style TOTP code
    onetime totp JBSWY3DPEHPK3PXP

    # 8-digit SHA-256 code at a fixed time
    onetime totp JBSWY3DPEHPK3PXP --digits 8 --algorithm sha256 --at 2020-01-01T00:00:00Z

    # RFC 4226 test secret, counter 1
    onetime hotp 12345678901234567890 1 --raw
"""

import argparse
import logging
import math
import sys
from datetime import datetime, timedelta
from typing import Optional

from onetime import __version__
from onetime.config import UNIX_EPOCH, OTPConfig
from onetime.display import decode_secret, format_code, format_grouped, time_remaining
from onetime.engine import Moment, compute_hotp, compute_totp
from onetime.errors import OTPError
from onetime.hashes import HashAlgorithm


def parse_time(value: str) -> Moment:
    """Unix timestamp or ISO 8601 string ('Z' suffix allowed)."""
    try:
        timestamp = float(value)
    except ValueError:
        pass
    else:
        if not math.isfinite(timestamp):
            raise argparse.ArgumentTypeError(f"timestamp must be finite: {value!r}")
        return timestamp
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a timestamp or ISO 8601 time: {value!r}")


def positive_seconds(value: str) -> timedelta:
    """Step length in seconds."""
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if not seconds > 0:
        raise argparse.ArgumentTypeError("step must be positive")
    try:
        return timedelta(seconds=seconds)
    except OverflowError:
        raise argparse.ArgumentTypeError(f"step too large: {value!r}")


def to_datetime(moment: Moment) -> datetime:
    """Base time as a datetime; Unix timestamps must fall in years 1-9999."""
    if isinstance(moment, datetime):
        return moment
    return UNIX_EPOCH + timedelta(seconds=moment)


def build_config(args: argparse.Namespace) -> OTPConfig:
    """Configuration from the shared command options."""
    base_time = getattr(args, "base_time", None)
    return OTPConfig(
        digits=getattr(args, "digits", 6),
        step=getattr(args, "step", None) or timedelta(seconds=30),
        base_time=to_datetime(base_time) if base_time is not None else UNIX_EPOCH,
        hash_algorithm=HashAlgorithm(getattr(args, "algorithm", "sha1")),
    )


def read_secret(args: argparse.Namespace) -> bytes:
    """Secret bytes from the positional argument."""
    if args.raw:
        return args.secret.encode("utf-8")
    return decode_secret(args.secret)


def show(config: OTPConfig, code: int, grouped: bool) -> str:
    text = format_code(config, code)
    return format_grouped(text) if grouped else text


def cmd_hotp(args: argparse.Namespace) -> int:
    """Print a HOTP code."""
    config = build_config(args)
    code = compute_hotp(config, read_secret(args), args.counter)
    print(show(config, code, args.group))
    return 0


def cmd_totp(args: argparse.Namespace) -> int:
    """Print a TOTP code."""
    config = build_config(args)
    code = compute_totp(config, read_secret(args), args.at)
    print(show(config, code, args.group))
    if args.remaining:
        print(f"Expires in {time_remaining(config, args.at)}s")
    return 0


def cmd_remaining(args: argparse.Namespace) -> int:
    """Print seconds left in the current time step."""
    config = build_config(args)
    print(time_remaining(config, args.at))
    return 0


def add_code_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("secret", help="Base32 secret (or text with --raw)")
    parser.add_argument("--digits", type=int, default=6, help="Code length, 6-9")
    parser.add_argument("--algorithm", default="sha1", help="HMAC hash (sha1, sha256, sha512)")
    parser.add_argument("--raw", action="store_true", help="Use the secret text as-is, not base32")
    parser.add_argument("--group", action="store_true", help="Print the code in groups of three")


def add_time_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--step", type=positive_seconds, help="Step length in seconds (default: 30)")
    parser.add_argument("--base-time", type=parse_time, help="Counter zero (default: Unix epoch)")
    parser.add_argument("--at", type=parse_time, help="Query time (default: now)")


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="onetime",
        description="onetime - HOTP/TOTP one-time passcodes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"onetime {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # hotp command
    hotp_parser = subparsers.add_parser("hotp", help="Counter-based code")
    add_code_options(hotp_parser)
    hotp_parser.add_argument("counter", type=int, help="HOTP counter")

    # totp command
    totp_parser = subparsers.add_parser("totp", help="Time-based code")
    add_code_options(totp_parser)
    add_time_options(totp_parser)
    totp_parser.add_argument("--remaining", action="store_true", help="Also print seconds left")

    # remaining command
    remaining_parser = subparsers.add_parser("remaining", help="Seconds left in the current step")
    add_time_options(remaining_parser)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "hotp": cmd_hotp,
        "totp": cmd_totp,
        "remaining": cmd_remaining,
    }

    try:
        return commands[args.command](args)
    except (OTPError, ValueError, OverflowError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
