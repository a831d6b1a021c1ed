"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_HISTORY_LIMIT = 30
DEFAULT_CALCULATION_LIMIT = 20
DEFAULT_CURRENCY_SYMBOL = "$"

# Natural precision of stored currency amounts (DECIMAL(10,2)).
CENT = Decimal("0.01")
ZERO = Decimal("0")

# Upper bounds of the DECIMAL(10,2) money and DECIMAL(5,2) hours columns.
MAX_MONEY = Decimal("99999999.99")
MAX_OVERTIME_HOURS = Decimal("999.99")
