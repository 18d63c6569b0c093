"""Command line interface of the expense tracker."""

from __future__ import annotations

import argparse
import csv
import sys
from datetime import date
from typing import Callable, Sequence

import yaml

from expensetracker.config import load_config
from expensetracker.expenses import (
    ExpenseError,
    Filter,
    add_expense,
    delete_expense,
    export_csv,
    get_expenses,
    sum_expenses,
    update_expense,
    validate_date,
)

_UINT64_MAX = 2**64 - 1
_FAILURES = (ExpenseError, OSError, csv.Error)


def _uint64(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid unsigned integer {text!r}") from None
    if not 0 <= value <= _UINT64_MAX:
        raise argparse.ArgumentTypeError(f"value out of range {text!r}")
    return value


def _changed(args: argparse.Namespace, name: str) -> bool:
    return getattr(args, name, None) is not None


def _date_values(args: argparse.Namespace) -> tuple[int, int, int]:
    today = date.today()
    year = args.year if args.year is not None else today.year
    month = args.month if args.month is not None else today.month
    day = args.day if args.day is not None else today.day
    return year, month, day


def _check_date_flags(args: argparse.Namespace) -> None:
    validate_date(*_date_values(args))
    if _changed(args, "year") and not _changed(args, "month"):
        raise ExpenseError("--month and --day flags  must be provided if --year is provided")
    if _changed(args, "month") and not _changed(args, "day"):
        raise ExpenseError("--day flag must be provided if --month is provided")


def _list_filters(args: argparse.Namespace) -> list[Filter]:
    year, month, day = _date_values(args)
    month_or_day = _changed(args, "month") or _changed(args, "day")
    filters = []
    if month_or_day:
        filters.append(Filter("month", month))
    if _changed(args, "year") or month_or_day:
        filters.append(Filter("year", year))
    if _changed(args, "day"):
        filters.append(Filter("day", day))
    return filters


def _update_filters(args: argparse.Namespace) -> list[Filter]:
    return [
        Filter(name, getattr(args, name))
        for name in ("day", "month", "year", "amount", "description")
        if _changed(args, name)
    ]


def _fatal(error: Exception) -> int:
    print(f"expense: {error}", file=sys.stderr)
    return 1


def _run_add(args: argparse.Namespace, csv_path: str) -> int:
    try:
        _check_date_flags(args)
        expense_id = add_expense(csv_path, args.description, args.amount, *_date_values(args))
    except _FAILURES as exc:
        print(f"{args.command}: {exc}")
        return 1
    print(f"Expense added successfully (ID: {expense_id})")
    return 0


def _run_delete(args: argparse.Namespace, csv_path: str) -> int:
    try:
        delete_expense(csv_path, args.id)
    except _FAILURES as exc:
        return _fatal(exc)
    print("Expense deleted successfully")
    return 0


def _run_list(args: argparse.Namespace, csv_path: str) -> int:
    try:
        rows = get_expenses(csv_path, *_list_filters(args))
    except _FAILURES as exc:
        return _fatal(exc)
    if args.export is not None:
        try:
            export_csv(args.export, rows)
        except _FAILURES as exc:
            print(f"Could not export to {args.export}: {exc}")
            return 1
        print(f"Exported succesfully to {args.export}")
        return 0
    for expense_id, when, description, amount, *_ in rows:
        print(f"# {expense_id} {when} {description} ${amount}")
    return 0


def _run_summary(args: argparse.Namespace, csv_path: str) -> int:
    try:
        total = sum_expenses(csv_path, *_list_filters(args))
    except _FAILURES as exc:
        return _fatal(exc)
    print(f"Total expenses: ${total}")
    return 0


def _run_update(args: argparse.Namespace, csv_path: str) -> int:
    filters = _update_filters(args)
    if not filters:
        print(f"{args.command}: No flags provided")
        return 1
    try:
        update_expense(csv_path, args.id, *filters)
    except _FAILURES as exc:
        print(f"{args.command}: {exc}")
        return 1
    print("Update successfull")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        default="",
        help="config file (Default is $XDG_CONFIG_HOME/expense or $HOME/.config/expense)",
    )
    common.add_argument(
        "--file",
        default="",
        help="csv file to use (Default is $XDG_DATA_HOME/expense-tracker or "
        "$HOME/.local/share/expense-tracker)",
    )
    common.add_argument("-y", "--year", type=int, help="Year expense was made")
    common.add_argument("-m", "--month", type=int, help="Month expense was made")
    common.add_argument("-n", "--day", type=int, help="Day of month expense was made")

    parser = argparse.ArgumentParser(prog="expense", description="A CLI based expense tracker")
    commands = parser.add_subparsers(dest="command")

    add = commands.add_parser("add", parents=[common], help="Adds a new expense")
    add.add_argument("-d", "--description", required=True, help="Short description of expense")
    add.add_argument("-a", "--amount", type=_uint64, required=True, help="Cost of the expense")
    add.set_defaults(handler=_run_add)

    delete = commands.add_parser("delete", parents=[common], help="Delete expense(s)")
    delete.add_argument(
        "--id",
        type=_uint64,
        required=True,
        help="Unique id of expense to delete use 'list' command to view all expenses",
    )
    delete.set_defaults(handler=_run_delete)

    listing = commands.add_parser("list", parents=[common], help="List expenses")
    listing.add_argument("-e", "--export", help="File to export to")
    listing.set_defaults(handler=_run_list)

    summary = commands.add_parser("summary", parents=[common], help="Shows sum of expenses")
    summary.set_defaults(handler=_run_summary)

    update = commands.add_parser("update", parents=[common], help="Updates an expense")
    update.add_argument("-d", "--description", help="Short description of expense")
    update.add_argument("-a", "--amount", type=_uint64, help="Cost of the expense")
    update.add_argument("--id", type=_uint64, required=True, help="Id of expense to update")
    update.set_defaults(handler=_run_update)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the expense tracker and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0
    try:
        config = load_config(args.config or None, parser.prog)
    except (OSError, yaml.YAMLError, RuntimeError) as exc:
        print(exc)
        return 1
    csv_path = args.file or str(config["file"])
    handler: Callable[[argparse.Namespace, str], int] = args.handler
    return handler(args, csv_path)