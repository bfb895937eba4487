#!/usr/bin/env python3

from datetime import date
from models.period import Period
from tools.comparison import Direction
from tools.dashboard import build_dashboard
from logger import get_logger

logger = get_logger()

_ARROWS = {Direction.UP: "▲", Direction.DOWN: "▼", Direction.FLAT: "–"}


def cmd_show(args, services):
    """Print the dashboard for the selected period."""
    period = Period.parse(args.period)
    today = date.fromisoformat(args.as_of) if args.as_of else date.today()

    dashboard = build_dashboard(
        services.expenses.list("-date"), period, today, services.config
    )
    summary = dashboard.summary
    comparison = dashboard.comparison
    window = dashboard.current_window

    logger.info(f"\nFinancial Overview: this {period.value}")
    logger.info(f"{window.start.isoformat()} to {window.end.isoformat()} (exclusive)")
    logger.info("=" * 80)
    logger.info(
        f"Total Spent:   ${summary.total:,.2f}  "
        f"{_ARROWS[comparison.direction]} {abs(comparison.change)}% "
        f"vs previous {period.value} (${dashboard.previous_total:,.2f})"
    )
    logger.info(f"Transactions:  {summary.count}")
    logger.info(f"Average:       ${summary.average:,.2f} per transaction")
    logger.info(f"Daily Avg:     ${summary.daily_average:,.2f}")

    logger.info("\nSpending by Category")
    logger.info("-" * 80)
    if not dashboard.categories:
        logger.info("No expenses yet")
    for share in dashboard.top_categories:
        logger.info(f"{share.label:<20} ${share.amount:>10,.2f}  {share.percentage}%")
    hidden = len(dashboard.categories) - len(dashboard.top_categories)
    if hidden > 0:
        logger.info(f"(+{hidden} more)")

    logger.info("\nSpending Trend")
    logger.info("-" * 80)
    for bucket in dashboard.trend:
        logger.info(f"{bucket.label:<8} ${bucket.total:>10,.2f}")

    logger.info("\nRecent Transactions")
    logger.info("-" * 80)
    if not dashboard.recent:
        logger.info("No transactions this period")
    for expense in dashboard.recent:
        logger.info(
            f"{expense.expense_date.isoformat()}  {expense.category_label:<18} "
            f"${expense.amount:>10,.2f}  {expense.description or ''}"
        )


def setup_parser(subparsers):
    """Setup dashboard command parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "dashboard",
        help="Show spending overview",
        description="Show totals, category breakdown, trend and recent expenses",
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
    parser.set_defaults(func=cmd_show)
