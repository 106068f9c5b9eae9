API_PREFIX = "/api/sales-purchase-service"

SALES_PREFIX = API_PREFIX + "/sales"
PURCHASES_PREFIX = API_PREFIX + "/purchases"

LEDGER_BACKENDS = ("auto", "procedure", "table")

MONEY_QUANT = "0.01"

# request ids and quantities are 32-bit signed integers
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
