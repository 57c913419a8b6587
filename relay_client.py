# relay_client.py
import json
import logging
import time
from typing import Any, Iterable, List, Mapping, Optional, Union

import httpx
from pydantic import ValidationError as TurnValidationError

from errors import NetworkError, RelayTimeoutError, UpstreamError
from models import Turn

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
CHAT_PATH = "/api/chat"


def filter_turns(turns: Iterable[Union[Turn, Mapping[str, Any]]]) -> List[Turn]:
    """Keep only turns the generation API will accept (known role, non-blank text).

    Items may be ``Turn`` objects or ``{"role", "text"}`` mappings; anything that
    does not validate as a turn is dropped.
    """
    kept = []
    for item in turns:
        try:
            turn = Turn.model_validate(item)
        except TurnValidationError:
            logger.debug("Dropping malformed turn: %r", item)
            continue
        if turn.is_sendable():
            kept.append(turn)
    return kept


class RelayClient:
    """Sends a transcript to the relay endpoint and returns the reply text.

    ``timeout`` is a deadline for the whole call, body included; once it
    passes the response is abandoned.

    Raises:
        NetworkError: the endpoint could not be reached
        RelayTimeoutError: no complete response within ``timeout`` seconds
        UpstreamError: the endpoint answered with a non-success status
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def send(self, turns: Iterable[Union[Turn, Mapping[str, Any]]]) -> str:
        payload = [t.to_payload() for t in filter_turns(turns)]
        url = f"{self.base_url}{CHAT_PATH}"
        logger.debug("POST %s with %s turns", url, len(payload))

        deadline = time.monotonic() + self.timeout
        try:
            with self._client.stream(
                "POST",
                url,
                json={"conversation": payload},
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            ) as response:
                body = bytearray()
                self._check_deadline(deadline)
                for chunk in response.iter_bytes():
                    body.extend(chunk)
                    self._check_deadline(deadline)
        except httpx.TimeoutException as exc:
            raise RelayTimeoutError(f"No response within {self.timeout:g}s") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkError(f"Relay request failed: {exc}") from exc

        data = _json_or_none(bytes(body))
        if not response.is_success:
            message = None
            if isinstance(data, dict) and data.get("error"):
                message = str(data["error"])
            if not message:
                message = f"HTTP {response.status_code} {response.reason_phrase}".strip()
            raise UpstreamError(message, status_code=response.status_code)

        result = data.get("result") if isinstance(data, dict) else None
        return result if isinstance(result, str) else ""

    def _check_deadline(self, deadline: float) -> None:
        if time.monotonic() > deadline:
            raise RelayTimeoutError(f"No response within {self.timeout:g}s")

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "RelayClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def _json_or_none(content: bytes) -> Any:
    try:
        return json.loads(content)
    except ValueError:
        return None
