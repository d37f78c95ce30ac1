#!/usr/bin/env python3
"""
otp_cli.py - Command-line wrapper for totp_core.

Subcommands:
- secret : create a new Base32 secret
- code   : show the current TOTP code for a secret
- verify : check a submitted code (exit status 0 = valid, 1 = invalid)
- uri    : print the otpauth:// provisioning URI
- qr     : print the provisioning URI as a PNG data URI

Secrets are taken from --secret or the TOTP_SECRET environment variable and
are never written to disk.
"""

import argparse
import logging
import os
import sys

from .codes import time_step, totp
from .config import OtpSettings
from .errors import OtpError
from .provisioning import QrOptions, build_provisioning_uri, provisioning_qr
from .qr import QrCodeEncoder
from .secret import create_secret
from .verify import verify_code

ENV_SECRET = "TOTP_SECRET"


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[+] %(message)s",
    )


def _secret(args) -> str:
    secret = args.secret or os.environ.get(ENV_SECRET)
    if not secret:
        raise OtpError(f"no secret given; pass --secret or set {ENV_SECRET}")
    return secret


# --- CLI command handlers ---
def cmd_secret(args) -> int:
    print(create_secret(args.length))
    return 0


def cmd_code(args) -> int:
    code, remaining = totp(_secret(args), timestamp=args.timestamp, digits=args.digits)
    print(f"TOTP ({args.digits}d): {code}  (valid ~{remaining:2d}s)")
    return 0


def cmd_verify(args) -> int:
    reference = None
    if args.timestamp is not None:
        reference = time_step(args.timestamp)

    ok = verify_code(
        _secret(args),
        args.code,
        discrepancy=args.window,
        reference_step=reference,
        digits=args.digits,
    )
    if ok:
        print("[+] TOTP code is VALID")
        return 0
    print("[-] TOTP code is INVALID")
    return 1


def cmd_uri(args) -> int:
    print(build_provisioning_uri(args.account, _secret(args)))
    return 0


def cmd_qr(args) -> int:
    options = QrOptions(size=args.size, margin=args.margin, level=args.level)
    print(provisioning_qr(args.account, _secret(args), QrCodeEncoder(), options))
    return 0


# --- Argparse builder ---
def build_parser(settings: OtpSettings = None) -> argparse.ArgumentParser:
    if settings is None:
        settings = OtpSettings.from_env()

    p = argparse.ArgumentParser(description="TOTP (RFC 6238) secret, code and verification tool")
    p.add_argument("--verbose", action="store_true", help="Verbose output")
    sub = p.add_subparsers(dest="cmd")

    # secret
    ps = sub.add_parser("secret", help="Create a new Base32 secret")
    ps.add_argument("--length", type=int, default=settings.secret_length,
                    help="Secret length in characters (10-80)")
    ps.set_defaults(func=cmd_secret)

    # code
    pc = sub.add_parser("code", help="Show the TOTP code for a secret")
    pc.add_argument("--secret", help=f"Base32 secret (default: ${ENV_SECRET})")
    pc.add_argument("--digits", type=int, default=settings.digits, help="Number of OTP digits")
    pc.add_argument("--timestamp", type=int, help="Unix time to use instead of now")
    pc.set_defaults(func=cmd_code)

    # verify
    pv = sub.add_parser("verify", help="Verify a TOTP code")
    pv.add_argument("--secret", help=f"Base32 secret (default: ${ENV_SECRET})")
    pv.add_argument("--code", required=True, help="OTP code to verify")
    pv.add_argument("--digits", type=int, default=settings.digits, help="Expected number of digits")
    pv.add_argument("--window", type=int, default=settings.discrepancy, help="Allowed +/- step window")
    pv.add_argument("--timestamp", type=int, help="Unix time to verify against instead of now")
    pv.set_defaults(func=cmd_verify)

    # uri
    pu = sub.add_parser("uri", help="Print the otpauth provisioning URI")
    pu.add_argument("--account", required=True, help="Account label (not URL-encoded)")
    pu.add_argument("--secret", help=f"Base32 secret (default: ${ENV_SECRET})")
    pu.set_defaults(func=cmd_uri)

    # qr
    pq = sub.add_parser("qr", help="Print the provisioning URI as a QR code data URI")
    pq.add_argument("--account", required=True, help="Account label (not URL-encoded)")
    pq.add_argument("--secret", help=f"Base32 secret (default: ${ENV_SECRET})")
    pq.add_argument("--size", type=int, default=200, help="Image size in pixels")
    pq.add_argument("--margin", type=int, default=0, help="Quiet zone in modules")
    pq.add_argument("--level", default="M", choices=["L", "M", "Q", "H"], help="Error correction level")
    pq.set_defaults(func=cmd_qr)

    return p


def main(argv=None) -> int:
    try:
        parser = build_parser()
    except OtpError as e:
        print(f"[!] {e}", file=sys.stderr)
        return 2
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    if not hasattr(args, "func"):
        parser.print_help()
        return 2
    try:
        return args.func(args)
    except OtpError as e:
        print(f"[!] {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
