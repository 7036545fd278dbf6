import logging
import ssl
from typing import Optional, Tuple, Union

import httpx

from ..core.config import config

logger = logging.getLogger(__name__)


def build_verify(verify: bool = True, ca_cert: Optional[str] = None) -> Union[bool, ssl.SSLContext]:
    """
    Translates the TLS options into the value httpx expects for `verify`.

    A CA bundle path produces an SSLContext trusting that bundle; otherwise the
    boolean is passed through unchanged.
    """
    if not verify:
        return False
    if ca_cert:
        logger.debug("Trusting certificate authority from %s", ca_cert)
        return ssl.create_default_context(cafile=ca_cert)
    return True


def get_async_http_client(
    connect_timeout: float = None,
    read_timeout: float = None,
    verify: Union[bool, ssl.SSLContext] = True,
    auth: Optional[Tuple[str, str]] = None,
) -> httpx.AsyncClient:
    """
    Returns a configured httpx.AsyncClient with:
    - Default timeouts (connect and read).
    - Standard User-Agent header.
    - Optional HTTP Basic credentials.
    """
    c_timeout = connect_timeout if connect_timeout is not None else config.DEFAULT_TIMEOUT_CONNECT
    r_timeout = read_timeout if read_timeout is not None else config.DEFAULT_TIMEOUT_READ

    timeout = httpx.Timeout(r_timeout, connect=c_timeout)

    headers = {"User-Agent": config.USER_AGENT, "Accept": "application/json"}

    return httpx.AsyncClient(
        timeout=timeout,
        headers=headers,
        verify=verify,
        auth=httpx.BasicAuth(*auth) if auth else None,
        follow_redirects=True,
    )
