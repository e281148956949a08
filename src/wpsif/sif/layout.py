"""Fixed column layout of the SIF CSV.

A SIF is three header lines followed by one line per employee:

  0. header labels (human readable)
  1. header record (employer and payroll metadata)
  2. employee column headers (human readable)
  3+ employee records

Fields are separated by bare commas. The format has no quoting or
escaping, so no value may contain a comma or a line break.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

SIF_VERSION = 1
SEPARATOR = ","
LINE_TERMINATOR = "\r\n"
MIME_TYPE = "text/csv"
FILENAME_PREFIX = "SIF"
FILENAME_DELIMITER = "_"

HEADER_LINE_COUNT = 3
MIN_LINE_COUNT = HEADER_LINE_COUNT + 1

HEADER_LABELS = (
    "Employer EID, File Creation Date, File Creation Time, Payer EID, Payer QID, "
    "Payer Bank Short Name, Payer IBAN, Salary Year and Month, Total Salaries, "
    "Total Records, SIF Version"
)

COLUMN_HEADERS = (
    "Record Sequence, Employee QID, Employee Visa ID, Employee Name, "
    "Employee Bank Short Name, Employee Account, Salary Frequency, "
    "Number of Working days, Net Salary, Basic Salary, Extra hours, Extra income, "
    "Deductions, Payment Type,Notes / Comments, Housing Allowance, Food Allowance, "
    "Transportation Allowance, Over Time Allowance, Deduction Reason Code, "
    "Extra Field 1, Extra Field 2"
)

# --- Header record columns ---
HDR_EMPLOYER_ID = 0
HDR_FILE_CREATION_DATE = 1
HDR_FILE_CREATION_TIME = 2
HDR_PAYER_EID = 3
HDR_PAYER_QID = 4
HDR_PAYER_BANK_SHORT_NAME = 5
HDR_PAYER_IBAN = 6
HDR_SALARY_YEAR_MONTH = 7
HDR_TOTAL_SALARIES = 8
HDR_TOTAL_RECORDS = 9
HDR_SIF_VERSION = 10
HEADER_COLUMN_COUNT = 11

# --- Employee record columns ---
COL_SEQUENCE = 0
COL_QID = 1
COL_VISA_ID = 2
COL_NAME = 3
COL_BANK_SHORT_NAME = 4
COL_IBAN = 5
COL_SALARY_FREQUENCY = 6
COL_WORKING_DAYS = 7
COL_NET_SALARY = 8
COL_BASIC_SALARY = 9
COL_EXTRA_HOURS = 10
COL_EXTRA_INCOME = 11
COL_DEDUCTIONS = 12
COL_PAYMENT_TYPE = 13
COL_NOTES = 14
COL_HOUSING = 15
COL_FOOD = 16
COL_TRANSPORTATION = 17
COL_OVERTIME = 18
COL_DEDUCTION_REASON = 19
COL_EXTRA1 = 20
COL_EXTRA2 = 21
EMPLOYEE_COLUMN_COUNT = 22

SEQUENCE_WIDTH = 6
NO_REASON_CODE = "0"

# Money columns are DECIMAL(18,2)
MAX_AMOUNT = Decimal("9999999999999999.99")

_CENT = Decimal("0.01")


def format_amount(value: Decimal | int | float) -> str:
    """Render with exactly two decimal digits, half-up."""
    amount = Decimal(str(value))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        amount = amount.quantize(_CENT, rounding=ROUND_HALF_UP)
    if amount.is_zero():
        amount = amount.copy_abs()
    return f"{amount:.2f}"


def split_labels(line: str) -> list[str]:
    """Column names of a label line, for error messages."""
    return [label.strip() for label in line.split(SEPARATOR)]
