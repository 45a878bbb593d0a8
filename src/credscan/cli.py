# SPDX-License-Identifier: MIT
"""
credscan - Command Line Interface

This CLI provides:
- credscan version
- credscan detectors
- credscan scan [PATHS...] [--stdin] --format {text,json} --config <path>
- credscan init-config [PATH]

Exit codes for scan: 0 no findings, 1 findings, 2 configuration error.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from . import __version__

logger = logging.getLogger("credscan")


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[credscan] %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    p = argparse.ArgumentParser(prog="credscan", description="Hard-coded credential scanner")
    p.add_argument("--version", action="store_true", help="print version and exit")

    sub = p.add_subparsers(dest="cmd")
    sub.add_parser("version", help="print version")
    sub.add_parser("detectors", help="list the secret types in the catalog")

    sp = sub.add_parser("scan", help="scan files, directories or stdin")
    sp.add_argument("paths", nargs="*", help="paths to scan (default: .)")
    sp.add_argument("--stdin", action="store_true", help="read the text to scan from stdin")
    sp.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="output format (default: text)",
    )
    sp.add_argument("--config", help="path to a .credscan.yml config file")
    sp.add_argument(
        "--show-secrets",
        action="store_true",
        help="print matched values instead of redacted hints",
    )
    sp.add_argument("--json-out", dest="json_out", help="write JSON results to file")
    sp.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug")

    ip = sub.add_parser("init-config", help="write a default config file")
    ip.add_argument("path", nargs="?", default=".credscan.yml", help="destination (default: .credscan.yml)")
    ip.add_argument("--force", action="store_true", help="overwrite an existing file")

    args = p.parse_args(argv)

    if args.version or args.cmd == "version":
        print(__version__)
        return 0

    if args.cmd == "detectors":
        return handle_detectors_command()

    if args.cmd == "scan":
        _configure_logging(args.verbose)
        return handle_scan_command(args)

    if args.cmd == "init-config":
        return handle_init_config_command(args)

    p.print_help()
    return 0


def handle_detectors_command():
    from .detectors import get_catalog

    for detector in get_catalog():
        print(f"{detector.secret_type}\t{len(detector.definition)} pattern(s)")
    return 0


def handle_scan_command(args):
    """Handle the scan subcommand."""
    from .core.exceptions import ConfigError
    from .scanner.config import load_scanner_config
    from .scanner.files import build_scanner, scan_paths, scan_text

    paths = args.paths or ["."]
    try:
        config = load_scanner_config(args.config, repo_root=paths[0])
        scanner = build_scanner(config)
    except ConfigError as e:
        print(f"credscan: configuration error: {e}", file=sys.stderr)
        return 2

    if args.stdin:
        findings = scan_text(sys.stdin.read(), scanner)
    else:
        try:
            findings = scan_paths(paths, config, scanner=scanner)
        except FileNotFoundError as e:
            print(f"credscan: {e}", file=sys.stderr)
            return 2

    redact = not args.show_secrets
    results = {
        "total": len(findings),
        "findings": [f.to_dict(redact=redact) for f in findings],
    }

    if args.json_out:
        Path(args.json_out).write_text(json.dumps(results, indent=2))
        logger.info("JSON output written to %s", args.json_out)

    if args.format == "json":
        print(json.dumps(results, indent=2))
    else:
        for f in results["findings"]:
            print(f"{f['path']}:{f['line']}:{f['column']}: {f['secret_type']}: {f['value']}")
        print(f"{results['total']} finding(s)")

    return 1 if findings else 0


def handle_init_config_command(args):
    from .scanner.config import create_default_config_template

    dest = Path(args.path)
    if dest.exists() and not args.force:
        print(f"credscan: {dest} already exists (use --force to overwrite)", file=sys.stderr)
        return 1
    dest.write_text(create_default_config_template(), encoding="utf-8")
    print(f"Wrote {dest}")
    return 0
