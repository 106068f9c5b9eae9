import json
import logging
from abc import ABC, abstractmethod
from typing import Optional
from urllib import error, request
from urllib.parse import urlparse

from pydantic import ValidationError

from sales_purchase.config import Settings, get_settings
from sales_purchase.core.exceptions import LookupServiceError
from sales_purchase.schemas.lookup import RemoteProduct, RemoteStock, RemoteUser

logger = logging.getLogger(__name__)

_ALLOWED_HTTP_SCHEMES = {"http", "https"}


def _validate_base_url(base_url):
    parsed = urlparse(base_url or "")
    if parsed.scheme.lower() not in _ALLOWED_HTTP_SCHEMES or not parsed.netloc:
        raise LookupServiceError(
            "Lookup base URL must be an absolute HTTP(S) URL: {!r}".format(base_url)
        )
    return base_url


def build_lookup_url(base_url, entity_id):
    base_url = _validate_base_url(str(base_url).strip())
    if not base_url.endswith("/"):
        base_url += "/"
    return "{}get-by-id/{}".format(base_url, int(entity_id))


def _decode_body(body_bytes, url):
    text = body_bytes.decode("utf-8", errors="replace").strip() if body_bytes else ""
    if not text:
        return None
    try:
        payload = json.loads(text)
    except ValueError as exc:
        raise LookupServiceError("Invalid JSON returned by {}".format(url)) from exc
    if payload is None:
        return None
    if not isinstance(payload, dict):
        raise LookupServiceError("Unexpected payload returned by {}".format(url))
    return payload


def fetch(base_url, entity_id, timeout=None):
    """GET ``{base_url}get-by-id/{entity_id}`` and return the decoded JSON object.

    Returns ``None`` when the sibling service reports the entity as missing
    (HTTP 404 or an empty/``null`` body). Transport failures and any other
    error status raise :class:`LookupServiceError`.
    """
    url = build_lookup_url(base_url, entity_id)
    req = request.Request(url, method="GET", headers={"Accept": "application/json"})

    kwargs = {}
    if timeout is not None:
        kwargs["timeout"] = timeout

    logger.debug("Lookup GET %s", url)
    try:
        with request.urlopen(req, **kwargs) as response:  # nosec B310
            status_code = response.getcode()
            body = response.read()
    except error.HTTPError as exc:
        if exc.code == 404:
            return None
        logger.warning("Lookup %s failed with HTTP %s", url, exc.code)
        raise LookupServiceError("Lookup failed for {}: HTTP {}".format(url, exc.code)) from exc
    except error.URLError as exc:
        logger.warning("Lookup %s unreachable: %s", url, exc.reason)
        raise LookupServiceError("Lookup failed for {}: {}".format(url, exc.reason)) from exc
    except OSError as exc:
        logger.warning("Lookup %s failed: %s", url, exc)
        raise LookupServiceError("Lookup failed for {}: {}".format(url, exc)) from exc

    if status_code == 204:
        return None
    if status_code < 200 or status_code >= 300:
        raise LookupServiceError("Lookup failed for {}: HTTP {}".format(url, status_code))
    return _decode_body(body, url)


class EntityLookup(ABC):
    """Read access to the entities owned by sibling services."""

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[RemoteUser]:
        raise NotImplementedError

    @abstractmethod
    def get_product(self, product_id: int) -> Optional[RemoteProduct]:
        raise NotImplementedError

    @abstractmethod
    def get_stock(self, product_id: int) -> Optional[RemoteStock]:
        raise NotImplementedError


class HttpEntityLookup(EntityLookup):
    def __init__(
        self,
        *,
        user_base_url: str,
        product_base_url: str,
        stock_base_url: str,
        timeout: Optional[float] = None,
    ):
        self.user_base_url = user_base_url
        self.product_base_url = product_base_url
        self.stock_base_url = stock_base_url
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpEntityLookup":
        return cls(
            user_base_url=settings.USER_SERVICE_URL,
            product_base_url=settings.PRODUCT_SERVICE_URL,
            stock_base_url=settings.STOCK_SERVICE_URL,
            timeout=settings.LOOKUP_TIMEOUT_SECONDS,
        )

    def _load(self, model, base_url, entity_id, **defaults):
        payload = fetch(base_url, entity_id, timeout=self.timeout)
        if payload is None:
            return None
        for key, value in defaults.items():
            payload.setdefault(key, value)
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise LookupServiceError(
                "Unexpected {} payload for id {}: {}".format(model.__name__, entity_id, exc)
            ) from exc

    def get_user(self, user_id):
        return self._load(RemoteUser, self.user_base_url, user_id, id=user_id)

    def get_product(self, product_id):
        return self._load(RemoteProduct, self.product_base_url, product_id, id=product_id)

    def get_stock(self, product_id):
        stock = self._load(RemoteStock, self.stock_base_url, product_id)
        if stock is not None and stock.product_id is None:
            stock.product_id = product_id
        return stock


def get_entity_lookup() -> EntityLookup:
    return HttpEntityLookup.from_settings(get_settings())


__all__ = [
    "EntityLookup",
    "HttpEntityLookup",
    "build_lookup_url",
    "fetch",
    "get_entity_lookup",
]
