"""Blocking HTTP GET that keeps the raw body plus transport and HTTP status."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

import requests

from utils.logging_utils import get_tagged_logger, mask_url
logger = get_tagged_logger(__name__, tag="net")

# Swapped out by tests; one request per http_get call, no retry adapter.
session = requests.Session()

CHUNK_SIZE = 8192


class TransportCode(IntEnum):
    """Outcome of the transport layer; anything but OK means no usable response."""
    OK = 0
    UNSUPPORTED_PROTOCOL = 1
    MALFORMED_URL = 2
    CONNECT_FAILED = 3
    TIMEOUT = 4
    TOO_MANY_REDIRECTS = 5
    TLS_ERROR = 6
    RECEIVE_ERROR = 7
    OTHER = 99


class RawBuffer:
    """Growable byte buffer filled chunk by chunk while a response is read."""

    def __init__(self) -> None:
        self._data = bytearray()

    def append(self, chunk: bytes) -> int:
        """Append `chunk` after the bytes already written and return its length."""
        self._data.extend(chunk)
        return len(chunk)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def text(self, encoding: str = "utf-8") -> str:
        return self._data.decode(encoding, errors="replace")


@dataclass
class HttpRawData:
    """Result of a single GET: body bytes, transport code and HTTP status."""
    buffer: RawBuffer = field(default_factory=RawBuffer)
    transport_code: TransportCode = TransportCode.OK
    transport_error: Optional[str] = None
    http_status: int = 0

    @property
    def ok(self) -> bool:
        return self.transport_code == TransportCode.OK and self.http_status == 200

    @property
    def content(self) -> bytes:
        return bytes(self.buffer)


def _transport_code_for(exc: requests.RequestException) -> TransportCode:
    """Map a requests exception onto a TransportCode."""
    # Order matters: SSLError and ConnectTimeout are ConnectionError subclasses.
    if isinstance(exc, requests.exceptions.TooManyRedirects):
        return TransportCode.TOO_MANY_REDIRECTS
    if isinstance(exc, requests.exceptions.SSLError):
        return TransportCode.TLS_ERROR
    if isinstance(exc, requests.exceptions.Timeout):
        return TransportCode.TIMEOUT
    if isinstance(exc, (requests.exceptions.InvalidSchema, requests.exceptions.MissingSchema)):
        return TransportCode.UNSUPPORTED_PROTOCOL
    if isinstance(exc, (requests.exceptions.InvalidURL, requests.exceptions.URLRequired)):
        return TransportCode.MALFORMED_URL
    if isinstance(exc, requests.exceptions.ConnectionError):
        return TransportCode.CONNECT_FAILED
    if isinstance(exc, (requests.exceptions.ChunkedEncodingError, requests.exceptions.ContentDecodingError)):
        return TransportCode.RECEIVE_ERROR
    return TransportCode.OTHER


def http_get(url: str, *, timeout: Optional[float] = None) -> HttpRawData:
    """
    Perform exactly one GET on `url`, following redirects.

    The body is appended to the result's buffer as it arrives, whatever
    the status code. Transport failures do not raise: they are recorded
    in `transport_code`/`transport_error` and whatever was received so
    far stays in the buffer.
    """
    data = HttpRawData()
    logger.debug("HTTP GET %s", mask_url(url))
    try:
        resp = session.get(url, stream=True, allow_redirects=True, timeout=timeout)
        try:
            data.http_status = int(resp.status_code)
            for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
                if chunk:
                    data.buffer.append(chunk)
        finally:
            resp.close()
    except requests.RequestException as e:
        data.transport_code = _transport_code_for(e)
        data.transport_error = str(e)
        logger.warning(
            "HTTP GET %s failed (transport code %d): %s",
            mask_url(url),
            int(data.transport_code),
            e,
        )
        return data

    logger.debug("HTTP GET done: status %d, %d bytes", data.http_status, len(data.buffer))
    return data
