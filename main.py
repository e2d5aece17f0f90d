"""
Entry point for the student finance calculators.

Usage:
    python main.py          # launches the web app at localhost:5000
    python main.py --cli    # runs the terminal interface
"""

import argparse
import logging

from logging_config import setup_logging


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Student finance calculators: graphing, statistics, IDR estimator",
    )
    parser.add_argument(
        "--cli",
        action="store_true",
        help="Run in terminal mode instead of launching the web app",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Verbose logging and the Flask debugger",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write logs to this file",
    )
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not open a browser tab when the web app starts",
    )
    args = parser.parse_args()

    if args.cli:
        # keep the terminal clean unless asked otherwise
        setup_logging(logging.DEBUG if args.debug else logging.WARNING, args.log_file)
        from cli import run_cli
        run_cli()
    else:
        setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_file)
        from app import run_web
        run_web(debug=args.debug, open_browser=not args.no_browser)


if __name__ == "__main__":
    main()
