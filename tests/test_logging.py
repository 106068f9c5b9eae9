import json
import logging
import unittest

from sales_purchase.core.logging import JsonFormatter, build_handler


class LoggingTest(unittest.TestCase):
    def test_json_formatter_includes_service_and_message(self):
        record = logging.LogRecord(
            name="sales_purchase.services.sale_service",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Sale recorded: id=%s",
            args=(7,),
            exc_info=None,
        )
        payload = json.loads(JsonFormatter("Sales Purchase Service").format(record))

        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["service"], "Sales Purchase Service")
        self.assertEqual(payload["message"], "Sale recorded: id=7")
        self.assertNotIn("exc_info", payload)

    def test_build_handler_selects_formatter(self):
        self.assertIsInstance(build_handler(True, "svc").formatter, JsonFormatter)
        self.assertNotIsInstance(build_handler(False, "svc").formatter, JsonFormatter)


if __name__ == "__main__":
    unittest.main()
