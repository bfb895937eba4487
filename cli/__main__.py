#!/usr/bin/env python3
"""
Spendlog CLI - track expenses and review where the money goes.

Usage:
    python -m cli <command> [subcommand] [options]

Commands:
    expenses     Add, list and delete expenses
    dashboard    Totals, category breakdown, trend and recent expenses
    reports      Spending over time and category comparison
    migrate      Database migrations

Examples:
    python -m cli migrate apply
    python -m cli expenses add --amount 12.50 --category food --date 2024-01-05
    python -m cli expenses list
    python -m cli dashboard --period week
    python -m cli reports --period month --csv report.csv
"""

import sys
import argparse
from cli import dashboard, expenses, migrate, reports
from config import load_config
from services.base import Services
from db.manager import DatabaseManager
from logger import get_logger, setup_logging

_SERVICE_COMMANDS = ("expenses", "dashboard", "reports")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Spendlog - Personal expense tracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    expenses.setup_parser(subparsers)
    dashboard.setup_parser(subparsers)
    reports.setup_parser(subparsers)
    migrate.setup_parser(subparsers)

    return parser


def main():
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    try:
        config = load_config()
        setup_logging(config)

        db_manager = DatabaseManager(config)
        if args.command in _SERVICE_COMMANDS:
            if not db_manager.is_initialized():
                get_logger().error(
                    "Database is not set up. Run 'python -m cli migrate apply' first."
                )
                sys.exit(1)
            args.func(args, Services(config, db_manager=db_manager))
        else:
            args.func(args, db_manager)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
