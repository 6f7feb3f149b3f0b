# btcrpc/services/transport.py

"""bitcoind HTTP Transport

Posts JSON-RPC requests to the daemon and hands back the raw ``result``
value (non-integer numbers as Decimal). Connection failures and HTTP 5xx
answers without a JSON-RPC error body are retried with exponential
backoff; daemon RPC errors and other HTTP errors are raised immediately.
"""

import itertools
import logging
import time
from typing import Any, Dict, List, Optional, Tuple, Union
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from btcrpc.core.config import Settings, settings
from btcrpc.core.exceptions import RpcError, TransportError
from btcrpc.models.jsonrpc import JSONRPCRequest, JSONRPCResponse
from btcrpc.schemas.base import parse_json

logger = logging.getLogger(__name__)

Params = Union[List[Any], Dict[str, Any]]


class RpcTransport:
    """Synchronous JSON-RPC transport over a reusable httpx.Client"""

    def __init__(
        self,
        url: Optional[str] = None,
        auth: Optional[Tuple[str, str]] = None,
        wallet: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        backoff_factor: float = 1.0,
        client: Optional[httpx.Client] = None,
        config: Optional[Settings] = None,
    ):
        """
        Initialize the transport

        Args:
            url: Daemon RPC endpoint (defaults to RPC_URL)
            auth: (user, password) for HTTP basic auth (defaults to the
                cookie file or RPC_USER/RPC_PASSWORD)
            wallet: Wallet name for wallet-scoped calls (defaults to RPC_WALLET)
            timeout: Per-request timeout in seconds
            max_retries: Attempts for retryable failures
            backoff_factor: Multiplier for the 2**attempt backoff in seconds
            client: Pre-built httpx.Client (tests pass one with a MockTransport)
            config: Settings to read defaults from (defaults to module settings)
        """
        config = config or settings

        self.url = (url or config.RPC_URL).rstrip("/")
        self.wallet = wallet if wallet is not None else (config.RPC_WALLET or None)
        self.timeout = timeout if timeout is not None else config.RPC_TIMEOUT
        self.max_retries = max(1, max_retries if max_retries is not None else config.RPC_MAX_RETRIES)
        self.backoff_factor = backoff_factor

        if auth is None:
            auth = config.rpc_auth()
        self._owns_client = client is None
        self._client = client or httpx.Client(auth=auth, timeout=self.timeout)
        self._ids = itertools.count(1)

        logger.info(f"RpcTransport initialized for {self.url} (wallet={self.wallet or '-'})")

    @property
    def endpoint(self) -> str:
        if self.wallet:
            return f"{self.url}/wallet/{quote(self.wallet, safe='')}"
        return self.url

    def call(self, method: str, params: Optional[Params] = None) -> Any:
        """
        Invoke an RPC method

        Args:
            method: Daemon method name
            params: Named (dict) or positional (list) arguments

        Returns:
            The response's ``result`` value, exactly as parsed

        Raises:
            RpcError: The daemon answered with an error object
            TransportError: The daemon could not be reached or the answer
                is not a JSON-RPC response
        """
        request = JSONRPCRequest(
            id=next(self._ids),
            method=method,
            params=params if params is not None else {},
        )
        body = request.model_dump_json()

        last_error: Optional[TransportError] = None
        for attempt in range(1, self.max_retries + 1):
            logger.debug(
                f"Calling {method} (attempt {attempt}/{self.max_retries})",
                extra={"rpc": {"method": method, "id": request.id}},
            )
            try:
                response = self._client.post(
                    self.endpoint,
                    content=body,
                    headers={"Content-Type": "application/json"},
                )
            except httpx.RequestError as e:
                last_error = TransportError(f"Cannot reach daemon at {self.url}: {e}")
                logger.warning(f"Request error on attempt {attempt}: {e}")
                if attempt < self.max_retries:
                    self._exponential_backoff(attempt)
                continue

            envelope = self._read_envelope(response)
            if envelope is not None and envelope.error is not None:
                raise RpcError(envelope.error.code, envelope.error.message, envelope.error.data)

            if response.status_code >= 500:
                last_error = TransportError(
                    f"Server error from daemon: {response.status_code}",
                    status_code=response.status_code,
                )
                logger.warning(f"HTTP error on attempt {attempt}: {response.status_code}")
                if attempt < self.max_retries:
                    self._exponential_backoff(attempt)
                continue

            if response.status_code >= 400:
                # Don't retry on client errors (4xx)
                raise TransportError(
                    f"Client error from daemon: {response.status_code} - {response.text[:200]}",
                    status_code=response.status_code,
                )

            if envelope is None:
                raise TransportError(
                    f"Response to {method} is not a JSON-RPC response",
                    status_code=response.status_code,
                )
            return envelope.result

        raise TransportError(
            f"Failed to call {method} after {self.max_retries} attempts: {last_error}",
            status_code=last_error.status_code if last_error else None,
        )

    def _read_envelope(self, response: httpx.Response) -> Optional[JSONRPCResponse]:
        """Parse the body as a JSON-RPC response, None if it is not one"""
        try:
            data = parse_json(response.content)
        except ValueError:
            return None
        if not isinstance(data, dict):
            return None
        try:
            return JSONRPCResponse.model_validate(data)
        except ValidationError:
            return None

    def _exponential_backoff(self, attempt: int) -> None:
        """
        Wait with exponential backoff

        Args:
            attempt: Current attempt number (1-indexed)
        """
        wait_time = min(self.backoff_factor * 2 ** attempt, 30)  # Max 30 seconds
        logger.debug(f"Waiting {wait_time}s before retry...")
        time.sleep(wait_time)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "RpcTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
