# src/cbsummary/collectors/rest_client.py
"""
A thin client for the cluster management REST API of a single node.

Every request is an authenticated GET returning a JSON document. Failures
are translated into the RestClientError hierarchy from core.exceptions so
callers can tell network trouble, untrusted certificates and the various
HTTP error statuses apart.
"""

import json
import logging
import ssl
from typing import Any, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from ..core.exceptions import (
    BadRequestError,
    ForbiddenError,
    HttpError,
    ResponseDecodeError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnexpectedStatusError,
    UnknownAuthorityError,
)
from ..models.pools import PoolsDefaultInfo, PoolsInfo
from ..utils.http_client import get_async_http_client

logger = logging.getLogger(__name__)

POOLS_PATH = "/pools"
POOLS_DEFAULT_PATH = "/pools/default"

SUCCESS_STATUSES = (200, 201, 202)

# OpenSSL verify codes meaning "no trusted issuer for this chain".
_UNKNOWN_AUTHORITY_CODES = {2, 18, 19, 20, 21}
_UNKNOWN_AUTHORITY_MARKERS = ("self-signed certificate", "self signed certificate", "unable to get local issuer")

PayloadT = TypeVar("PayloadT", bound=BaseModel)


def _find_cert_error(exc: BaseException) -> Optional[ssl.SSLCertVerificationError]:
    """Walks the exception chain looking for the certificate verification error, if any."""
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, ssl.SSLCertVerificationError):
            return current
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return None


def is_unknown_authority(exc: BaseException) -> bool:
    """True when a transport failure was caused by a certificate from an untrusted authority."""
    cert_error = _find_cert_error(exc)
    if cert_error is not None:
        if getattr(cert_error, "verify_code", None) in _UNKNOWN_AUTHORITY_CODES:
            return True
        text = str(getattr(cert_error, "verify_message", "") or cert_error).lower()
    else:
        text = str(exc).lower()
    return any(marker in text for marker in _UNKNOWN_AUTHORITY_MARKERS)


class ClusterRestClient:
    """
    REST client bound to one node address and one set of credentials.

    Use as an async context manager so the underlying httpx client is closed:

        async with ClusterRestClient(node, login, password) as client:
            pools = await client.get_pools()
    """

    def __init__(
        self,
        host: str,
        username: str,
        password: str,
        verify: Union[bool, ssl.SSLContext] = True,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.host = host.rstrip("/")
        self.username = username
        self.secure = self.host.startswith("https://")
        self._owns_client = client is None
        self._client = client or get_async_http_client(verify=verify, auth=(username, password))

    async def __aenter__(self) -> "ClusterRestClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def close(self):
        if self._owns_client:
            await self._client.aclose()

    async def get(self, path: str) -> Any:
        """
        Performs a GET against `path` on this node and returns the decoded JSON body.

        Raises:
            TransportError: the request never produced a response.
            UnknownAuthorityError: TLS failed because the certificate authority is not trusted.
            HttpError: the response status is not 200, 201 or 202 (see subclasses).
            ResponseDecodeError: the response body is not valid JSON.
        """
        method = "GET"
        url = self.host + path
        try:
            response = await self._client.get(url)
        except httpx.InvalidURL as exc:
            raise TransportError(method, url, f"invalid node address: {exc}") from exc
        except httpx.RequestError as exc:
            if is_unknown_authority(exc):
                raise UnknownAuthorityError(method, url, str(exc)) from exc
            raise TransportError(method, url, str(exc) or exc.__class__.__name__) from exc

        logger.debug("(Rest) %s %s %d", method, url, response.status_code)
        self._raise_for_status(response, method, url)

        try:
            # json.loads keeps integers and floats apart.
            return json.loads(response.content)
        except ValueError as exc:
            logger.debug("Raw response content from %s: %s", url, response.text[:500])
            raise ResponseDecodeError(method, url, f"response is not valid JSON: {exc}") from exc

    async def get_model(self, path: str, model: Type[PayloadT]) -> PayloadT:
        """GETs `path` and validates the body against a payload model."""
        document = await self.get(path)
        try:
            return model.model_validate(document)
        except ValidationError as exc:
            raise ResponseDecodeError("GET", self.host + path, f"unexpected response shape: {exc}") from exc

    async def get_pools(self) -> PoolsInfo:
        return await self.get_model(POOLS_PATH, PoolsInfo)

    async def get_pools_default(self) -> PoolsDefaultInfo:
        return await self.get_model(POOLS_DEFAULT_PATH, PoolsDefaultInfo)

    def _raise_for_status(self, response: httpx.Response, method: str, url: str):
        status = response.status_code
        if status in SUCCESS_STATUSES:
            return

        error_class: Type[HttpError]
        body = ""
        if status == 400:
            error_class = BadRequestError
            body = response.text or "<no body>"
        elif status == 401:
            error_class = UnauthorizedError
        elif status == 403:
            error_class = ForbiddenError
            body = self._forbidden_message(response)
        elif 500 <= status < 600:
            error_class = ServerError
        else:
            error_class = UnexpectedStatusError
        raise error_class(status, method, url, body)

    @staticmethod
    def _forbidden_message(response: httpx.Response) -> str:
        """Builds `<message>: <permission>, ...` from a 403 body, or "" when it is not the usual JSON."""
        try:
            data = json.loads(response.content)
        except ValueError:
            return ""
        if not isinstance(data, dict):
            return ""
        message = str(data.get("message", ""))
        permissions = data.get("permissions") or []
        if not isinstance(permissions, list):
            permissions = [permissions]
        return message + ": " + ", ".join(str(p) for p in permissions)
