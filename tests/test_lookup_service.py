import io
import unittest
from unittest.mock import MagicMock, patch
from urllib import error

from sales_purchase.core.exceptions import LookupServiceError
from sales_purchase.services import lookup_service
from sales_purchase.services.lookup_service import HttpEntityLookup, build_lookup_url, fetch


def _response(body, status=200):
    response = MagicMock()
    response.__enter__.return_value = response
    response.getcode.return_value = status
    response.read.return_value = body
    return response


def _http_error(code):
    return error.HTTPError(
        "http://svc/api/products/get-by-id/1", code, "error", hdrs=None, fp=io.BytesIO(b"")
    )


class BuildLookupUrlTest(unittest.TestCase):
    def test_appends_get_by_id_path(self):
        self.assertEqual(
            build_lookup_url("http://localhost:8083/api/products/", 5),
            "http://localhost:8083/api/products/get-by-id/5",
        )

    def test_adds_missing_trailing_slash(self):
        self.assertEqual(
            build_lookup_url("http://localhost:8083/api/users", 7),
            "http://localhost:8083/api/users/get-by-id/7",
        )

    def test_rejects_non_http_base_url(self):
        with self.assertRaises(LookupServiceError):
            build_lookup_url("file:///etc/", 1)


class FetchTest(unittest.TestCase):
    def test_returns_decoded_payload(self):
        with patch.object(
            lookup_service.request, "urlopen", return_value=_response(b'{"productId": 5, "price": 10.5}')
        ) as urlopen:
            payload = fetch("http://svc/api/products/", 5)

        self.assertEqual(payload, {"productId": 5, "price": 10.5})
        sent = urlopen.call_args[0][0]
        self.assertEqual(sent.full_url, "http://svc/api/products/get-by-id/5")
        self.assertEqual(sent.get_method(), "GET")
        self.assertNotIn("timeout", urlopen.call_args[1])

    def test_passes_configured_timeout(self):
        with patch.object(lookup_service.request, "urlopen", return_value=_response(b"{}")) as urlopen:
            fetch("http://svc/api/products/", 5, timeout=2.5)
        self.assertEqual(urlopen.call_args[1]["timeout"], 2.5)

    def test_not_found_status_is_absent(self):
        with patch.object(lookup_service.request, "urlopen", side_effect=_http_error(404)):
            self.assertIsNone(fetch("http://svc/api/products/", 999))

    def test_empty_and_null_bodies_are_absent(self):
        for body in (b"", b"null", b"  "):
            with patch.object(lookup_service.request, "urlopen", return_value=_response(body)):
                self.assertIsNone(fetch("http://svc/api/products/", 1))

    def test_server_error_raises(self):
        with patch.object(lookup_service.request, "urlopen", side_effect=_http_error(500)):
            with self.assertRaises(LookupServiceError) as ctx:
                fetch("http://svc/api/products/", 1)
        self.assertIn("HTTP 500", str(ctx.exception))

    def test_connection_failure_raises(self):
        with patch.object(
            lookup_service.request, "urlopen", side_effect=error.URLError("connection refused")
        ):
            with self.assertRaises(LookupServiceError) as ctx:
                fetch("http://svc/api/products/", 1)
        self.assertIn("connection refused", str(ctx.exception))

    def test_invalid_json_raises(self):
        with patch.object(lookup_service.request, "urlopen", return_value=_response(b"<html>")):
            with self.assertRaises(LookupServiceError):
                fetch("http://svc/api/products/", 1)


class HttpEntityLookupTest(unittest.TestCase):
    def setUp(self):
        self.lookup = HttpEntityLookup(
            user_base_url="http://svc/api/users/",
            product_base_url="http://svc/api/products/",
            stock_base_url="http://svc/api/stocks/",
        )

    def test_product_accepts_camel_case_payload(self):
        body = b'{"productId": 5, "productName": "Widget", "unitPrice": "12.50", "sku": "W-1"}'
        with patch.object(lookup_service.request, "urlopen", return_value=_response(body)):
            product = self.lookup.get_product(5)
        self.assertEqual(product.id, 5)
        self.assertEqual(product.name, "Widget")
        self.assertEqual(str(product.price), "12.50")

    def test_user_without_id_uses_requested_id(self):
        with patch.object(lookup_service.request, "urlopen", return_value=_response(b'{"name": "Asha"}')):
            user = self.lookup.get_user(3)
        self.assertEqual(user.id, 3)
        self.assertEqual(user.name, "Asha")

    def test_stock_defaults_product_id(self):
        with patch.object(
            lookup_service.request, "urlopen", return_value=_response(b'{"stockId": 9, "availableQuantity": 40}')
        ):
            stock = self.lookup.get_stock(5)
        self.assertEqual(stock.product_id, 5)
        self.assertEqual(stock.available_quantity, 40)

    def test_missing_stock_is_none(self):
        with patch.object(lookup_service.request, "urlopen", side_effect=_http_error(404)):
            self.assertIsNone(self.lookup.get_stock(5))

    def test_malformed_payload_raises(self):
        body = b'{"productId": "not-a-number"}'
        with patch.object(lookup_service.request, "urlopen", return_value=_response(body)):
            with self.assertRaises(LookupServiceError):
                self.lookup.get_product(5)


if __name__ == "__main__":
    unittest.main()
