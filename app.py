#!/usr/bin/env python3
"""Vault Typecheck Server — REST API over the frontmatter type checker."""

import argparse
import logging
import sys

from flask import Flask

from config import PORT, VAULT_DIR

app = Flask(__name__)

from routes.checker import bp as checker_bp  # noqa: E402
from routes.checker import checker  # noqa: E402
from routes.settings import bp as settings_bp  # noqa: E402
from services.checker import summarize  # noqa: E402

app.register_blueprint(checker_bp)
app.register_blueprint(settings_bp)


def run_check(out=None) -> int:
    """Check the whole vault, print one line per error. Returns the process exit code."""
    out = out or sys.stdout
    results = checker.check_all_files()
    for record, errors in results:
        for e in errors:
            print(f"{record.path}: {e.property}: {e.message}", file=out)

    totals = summarize(results)
    if totals["total_errors"] == 0:
        print("No frontmatter type errors found", file=out)
        return 0
    print(
        f"Found {totals['total_errors']} errors in {totals['files_with_errors']} files",
        file=out,
    )
    return 1


def main():
    """Entry point for `vault-typecheck` CLI command."""
    parser = argparse.ArgumentParser(description="Vault Typecheck")
    parser.add_argument(
        "--port", type=int, default=PORT, help=f"Port to listen on (default: {PORT})"
    )
    parser.add_argument(
        "--vault", default=VAULT_DIR, help=f"Vault directory (default: {VAULT_DIR})"
    )
    parser.add_argument(
        "--check", action="store_true", help="Check the whole vault once and exit"
    )
    parser.add_argument("--verbose", action="store_true", help="Log cache and timing detail")
    cli_args = parser.parse_args()

    if cli_args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s"
        )

    if cli_args.vault != checker.vault_dir:
        checker.set_vault(cli_args.vault)

    if cli_args.check:
        sys.exit(run_check())

    print("\n  Vault Typecheck v0.1.0")
    print(f"  Port: {cli_args.port}")
    print(f"  Vault: {checker.vault_dir}")
    print(f"  Property types: {len(checker.property_types)}\n")

    app.run(port=cli_args.port, threaded=True)


if __name__ == "__main__":
    main()
