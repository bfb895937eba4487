#!/usr/bin/env python3

import sys
from datetime import date
from pathlib import Path
from models.expense import Category
from models.period import Period
from tools.reports import build_report, write_report_csv
from logger import get_logger

logger = get_logger()


def cmd_show(args, services):
    """Print the report for the selected period, optionally exporting CSV."""
    period = Period.parse(args.period)
    today = date.fromisoformat(args.as_of) if args.as_of else date.today()

    report = build_report(services.expenses.list("-date"), period, today)

    logger.info(f"\nSpending Over Time ({period.value})")
    logger.info("=" * 80)
    for bucket in report.series:
        parts = [
            f"{Category.label_for(c)}: ${amount:,.2f}"
            for c, amount in bucket.by_category.items()
            if amount
        ]
        logger.info(f"{bucket.label:<10} ${bucket.total:>10,.2f}  {', '.join(parts)}")

    logger.info(f"\nCategory Comparison (vs previous {period.value})")
    logger.info("-" * 80)
    if not report.comparison:
        logger.info("No data available for comparison")
    for row in report.comparison:
        sign = "+" if row.change > 0 else ""
        logger.info(
            f"{row.label:<20} ${row.current:>10,.2f}  "
            f"Previous: ${row.previous:>10,.2f}  {sign}{row.change}% ({row.direction.value})"
        )

    if args.csv:
        csv_path = Path(args.csv)
        try:
            with open(csv_path, "w", newline="") as f:
                rows = write_report_csv(report, f)
        except OSError as e:
            logger.error(f"Could not write CSV to {csv_path}: {e}")
            sys.exit(1)
        logger.info(f"\n✓ Exported {rows} row(s) to {csv_path}")


def setup_parser(subparsers):
    """Setup reports command parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "reports",
        help="Show spending reports",
        description="Show spending over time and category comparison",
    )
    parser.add_argument(
        "--period",
        choices=[p.value for p in Period],
        default=Period.MONTH.value,
        help="Reporting period (default: month)",
    )
    parser.add_argument(
        "--as-of", help="Reference date as YYYY-MM-DD (default: today)"
    )
    parser.add_argument("--csv", help="Also write the series to this CSV file")
    parser.set_defaults(func=cmd_show)
