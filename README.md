# expensetracker

A small command-line expense tracker. Expenses are kept in a CSV file with
the columns `ID`, `Date`, `Description` and `Amount`. Amounts are whole,
non-negative numbers. Dates are stored as `YYYY-MM-DD`.

## Installation

```
pip install .
```

## Usage

The package installs the `expense` command. Run it without a subcommand to
see the help.

Every subcommand accepts these options:

- `--config PATH`: the configuration file to use
- `--file PATH`: the CSV file to use
- `-y/--year`, `-m/--month`, `-n/--day`: a date

### Add

The date defaults to today:

```
expense add --description "Lunch" --amount 20
expense add -d "Dinner" -a 10 --year 2024 --month 8 --day 6
```

If `--year` is given, `--month` must be given too, and if `--month` is given,
`--day` must be given too. A date that does not exist (for example
`--month 2 --day 30`) is refused. On success the new id is printed. New ids
are one more than the highest id in the file.

### List

```
expense list
expense list --month 8
expense list --month 8 --year 2024
expense list --export august.csv --month 8
```

Each row, the header row included, is printed as
`# <id> <date> <description> $<amount>`. Filtering works like this:

- `--day` filters by day, month and year;
- `--month` filters by month and year;
- `--year` filters by year only.

When a filter needs a month or a year that was not given, the current one is
used, so `--month 8` alone means August of this year. With `--export FILE`
the selected rows, header included, are written to `FILE` as CSV instead of
being printed.

### Summary

Shows the total of the amounts, with the same date filters as `list`:

```
expense summary
expense summary --month 8 --year 2024
```

### Update

Changes fields of an expense by its id. Any of `--description`, `--amount`,
`--day`, `--month` and `--year` can be given; at least one is required.

```
expense update --id 2 --amount 25 --description "Late lunch"
expense update --id 2 --day 7
```

A change that would give a date that does not exist is refused.

### Delete

```
expense delete --id 2
```

The command exits with status 0 on success and 1 on failure.

## Files

- Configuration: `--config PATH`, otherwise
  `$XDG_CONFIG_HOME/expense/expense-config.yaml` (or
  `~/.config/expense/expense-config.yaml`). It is a YAML mapping and is
  created when it cannot be read. A config file that exists but is not a
  readable YAML mapping is an error.
- Data: `--file PATH`, otherwise a `file` entry in the configuration,
  otherwise `$XDG_DATA_HOME/expense-tracker/expenses.csv` (or
  `~/.local/share/expense-tracker/expenses.csv`). It is created with its
  header row when first needed, along with any missing directories.

## Use from Python

`expensetracker.expenses` provides `add_expense`, `delete_expense`,
`get_expenses`, `sum_expenses`, `update_expense`, `export_csv`,
`validate_date` and the `Filter` class. Failures raise `ExpenseError`.
`expensetracker.csvstore` reads and writes the CSV file, and
`expensetracker.config` locates and loads the configuration.

```python
from expensetracker.expenses import Filter, add_expense, sum_expenses, update_expense

expense_id = add_expense("expenses.csv", "Coffee", 3, 2024, 8, 6)
total = sum_expenses("expenses.csv", Filter("month", 8), Filter("year", 2024))
update_expense("expenses.csv", expense_id, Filter("amount", 4))
```

Filters for selecting expenses are named `day`, `month` and `year`. Filters
for updating are named `day`, `month`, `year`, `amount` and `description`.