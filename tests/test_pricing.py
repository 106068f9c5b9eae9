import unittest
from decimal import Decimal

from sales_purchase.core.pricing import TaxRates, quote_sale, round_money


class PricingTest(unittest.TestCase):
    def setUp(self):
        self.rates = TaxRates(cgst=Decimal("0.09"), sgst=Decimal("0.09"), igst=Decimal("0"))

    def test_intra_state_sale_splits_gst(self):
        quote = quote_sale(Decimal("100"), 3, self.rates)
        self.assertEqual(quote.unit_price, Decimal("100.00"))
        self.assertEqual(quote.net_amount, Decimal("300.00"))
        self.assertEqual(quote.cgst, Decimal("27.00"))
        self.assertEqual(quote.sgst, Decimal("27.00"))
        self.assertEqual(quote.igst, Decimal("0.00"))
        self.assertEqual(quote.gross_amount, Decimal("354.00"))

    def test_gross_is_sum_of_rounded_components(self):
        quote = quote_sale("19.99", 3, self.rates)
        self.assertEqual(quote.net_amount, Decimal("59.97"))
        self.assertEqual(quote.cgst, Decimal("5.40"))
        self.assertEqual(
            quote.gross_amount,
            quote.net_amount + quote.cgst + quote.sgst + quote.igst,
        )

    def test_rounds_half_up(self):
        self.assertEqual(round_money(Decimal("0.045")), Decimal("0.05"))
        self.assertEqual(round_money(Decimal("0.044")), Decimal("0.04"))

    def test_missing_price_is_zero(self):
        quote = quote_sale(None, 2, self.rates)
        self.assertEqual(quote.gross_amount, Decimal("0.00"))

    def test_rates_from_settings_keep_float_values_exact(self):
        settings = type(
            "SettingsStub",
            (),
            {"SALE_CGST_RATE": 0.0, "SALE_SGST_RATE": 0.0, "SALE_IGST_RATE": 0.18},
        )()
        rates = TaxRates.from_settings(settings)
        self.assertEqual(rates.igst, Decimal("0.18"))
        quote = quote_sale("50", 2, rates)
        self.assertEqual(quote.igst, Decimal("18.00"))
        self.assertEqual(quote.gross_amount, Decimal("118.00"))


if __name__ == "__main__":
    unittest.main()
