#!/usr/bin/env python3

import sys
from models.expense import Category, ExpenseValidationError, PaymentMethod
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List all stored expenses."""
    try:
        expenses = services.expenses.list(args.sort)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    if not expenses:
        logger.info("No expenses found.")
        return

    logger.info("\nExpenses:")
    logger.info("=" * 80)
    for expense in expenses:
        logger.info(
            f"{expense.expense_date.isoformat()}  {expense.amount:>10.2f}  "
            f"{expense.category_label:<18} {expense.payment_method_label:<14} "
            f"{expense.description or ''}"
        )
        logger.info(f"  ID: {expense.id}")

    logger.info("-" * 80)
    logger.info(f"Total expenses: {len(expenses)}")


def cmd_add(args, services):
    """Add a new expense from command-line options."""
    fields = {
        "amount": args.amount,
        "category": args.category,
        "date": args.date,
        "description": args.description,
        "payment_method": args.payment_method,
    }

    try:
        expense = services.expenses.create(fields)
    except ExpenseValidationError as e:
        logger.error(f"Invalid expense: {e}")
        sys.exit(1)

    logger.info(f"✓ Expense added with ID: {expense.id}")
    logger.info(f"  {expense.expense_date.isoformat()} {expense.amount:.2f} {expense.category_label}")


def cmd_delete(args, services):
    """Delete an expense by ID."""
    if services.expenses.delete(args.expense_id):
        logger.info(f"✓ Expense {args.expense_id} deleted.")
    else:
        logger.error(f"Expense with ID '{args.expense_id}' not found.")
        sys.exit(1)


def cmd_clear(args, services):
    """Delete every expense after confirmation."""
    if not args.yes:
        confirm = (
            input("Delete ALL expenses? This cannot be undone. (yes/no): ")
            .strip()
            .lower()
        )
        if confirm != "yes":
            logger.info("Clear cancelled.")
            return

    services.expenses.clear()
    logger.info("✓ All expenses deleted.")


def setup_parser(subparsers):
    """Setup expenses subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "expenses",
        help="Manage expenses",
        description="Add, list and delete expenses",
    )

    expenses_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available expense commands",
        dest="subcommand",
        required=True,
    )

    # expenses list
    list_parser = expenses_subparsers.add_parser("list", help="List all expenses")
    list_parser.add_argument(
        "--sort",
        choices=["-date", "date"],
        default="-date",
        help="Sort by date, '-date' for newest first (default)",
    )
    list_parser.set_defaults(func=cmd_list)

    # expenses add
    add_parser = expenses_subparsers.add_parser("add", help="Add an expense")
    add_parser.add_argument("--amount", required=True, help="Amount, e.g. 12.50")
    add_parser.add_argument(
        "--category",
        required=True,
        help=f"One of: {', '.join(c.value for c in Category)}",
    )
    add_parser.add_argument("--date", required=True, help="Date as YYYY-MM-DD")
    add_parser.add_argument("--description", help="Optional description")
    add_parser.add_argument(
        "--payment-method",
        default=PaymentMethod.CASH.value,
        help=f"One of: {', '.join(m.value for m in PaymentMethod)} (default: cash)",
    )
    add_parser.set_defaults(func=cmd_add)

    # expenses delete
    delete_parser = expenses_subparsers.add_parser("delete", help="Delete an expense")
    delete_parser.add_argument("expense_id", help="ID of the expense to delete")
    delete_parser.set_defaults(func=cmd_delete)

    # expenses clear
    clear_parser = expenses_subparsers.add_parser("clear", help="Delete all expenses")
    clear_parser.add_argument(
        "--yes", action="store_true", help="Skip the confirmation prompt"
    )
    clear_parser.set_defaults(func=cmd_clear)
