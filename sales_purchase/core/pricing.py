from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from sales_purchase.core.constants import MONEY_QUANT


@dataclass(frozen=True)
class TaxRates:
    cgst: Decimal
    sgst: Decimal
    igst: Decimal

    @classmethod
    def from_settings(cls, settings):
        return cls(
            cgst=_to_decimal(settings.SALE_CGST_RATE),
            sgst=_to_decimal(settings.SALE_SGST_RATE),
            igst=_to_decimal(settings.SALE_IGST_RATE),
        )


@dataclass(frozen=True)
class SaleQuote:
    unit_price: Decimal
    cgst: Decimal
    sgst: Decimal
    igst: Decimal
    net_amount: Decimal
    gross_amount: Decimal


def _to_decimal(value) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    # str() keeps float rates such as 0.09 exact
    return Decimal(str(value))


def round_money(value: Decimal) -> Decimal:
    return value.quantize(Decimal(MONEY_QUANT), rounding=ROUND_HALF_UP)


def quote_sale(unit_price, quantity: int, rates: TaxRates) -> SaleQuote:
    """Price a sale line.

    Each tax component is charged on the net amount and rounded on its own,
    so the gross amount is always the exact sum of the stored columns.
    """
    price = round_money(_to_decimal(unit_price))
    net = round_money(price * quantity)
    cgst = round_money(net * rates.cgst)
    sgst = round_money(net * rates.sgst)
    igst = round_money(net * rates.igst)
    return SaleQuote(
        unit_price=price,
        cgst=cgst,
        sgst=sgst,
        igst=igst,
        net_amount=net,
        gross_amount=net + cgst + sgst + igst,
    )


__all__ = ["SaleQuote", "TaxRates", "quote_sale", "round_money"]
