import asyncio
import logging
import time
from typing import Optional

import httpx

from metadata_gate.contracts.probe_configuration import ProbeConfiguration
from metadata_gate.contracts.probe_outcome import ProbeOutcome
from metadata_gate.core.profiler import Profiler

logger = logging.getLogger(__name__)


class MetadataProbe:
    """
    Issues one request to the instance metadata endpoint and reports the result
    as a ProbeOutcome. Ordinary errors never escape; they become failed outcomes.

    config.timeout is an overall deadline for the whole request, not only a
    per-operation socket timeout.
    """

    def __init__(
        self,
        config: Optional[ProbeConfiguration] = None,
        transport: Optional[httpx.BaseTransport] = None,  # e.g. httpx.MockTransport in tests
    ):
        self.config = config or ProbeConfiguration()
        self.transport = transport

    def _client_kwargs(self) -> dict:
        kwargs = {
            "timeout": self.config.timeout,
            "trust_env": False,  # link-local address must not go through a proxy
            "follow_redirects": False,
        }
        if self.transport is not None:
            kwargs["transport"] = self.transport
        return kwargs

    @Profiler.profile
    def probe(self) -> ProbeOutcome:
        deadline = time.monotonic() + self.config.timeout
        try:
            with httpx.Client(**self._client_kwargs()) as client:
                with client.stream(
                    "GET",
                    self.config.url,
                    params=self.config.params,
                    headers=self.config.headers,
                ) as resp:
                    if not 200 <= resp.status_code < 300:
                        return self._interpret(resp.status_code, None)
                    chunks = []
                    # Each read is bounded by the socket timeout; a slow sender
                    # is cut off here once the overall deadline passes.
                    for chunk in resp.iter_bytes():
                        if time.monotonic() > deadline:
                            return self._deadline_exceeded()
                        chunks.append(chunk)
                    if time.monotonic() > deadline:
                        return self._deadline_exceeded()
                    body = b"".join(chunks).decode(resp.encoding or "utf-8", errors="replace")
                    return self._interpret(resp.status_code, body)
        except Exception as e:
            return self._failure(e)

    @Profiler.profile
    async def aprobe(self) -> ProbeOutcome:
        try:
            return await asyncio.wait_for(self._aget(), self.config.timeout)
        except asyncio.TimeoutError:
            return self._deadline_exceeded()
        except Exception as e:
            return self._failure(e)

    async def _aget(self) -> ProbeOutcome:
        async with httpx.AsyncClient(**self._client_kwargs()) as client:
            resp = await client.get(
                self.config.url,
                params=self.config.params,
                headers=self.config.headers,
            )
        return self._interpret(resp.status_code, resp.text)

    @staticmethod
    def _interpret(status_code: int, body: Optional[str]) -> ProbeOutcome:
        if not 200 <= status_code < 300:
            logger.debug(f"Metadata probe returned status={status_code}")
            return ProbeOutcome.failed(f"unexpected status {status_code}", status_code=status_code)
        if not body or not body.strip():
            logger.debug("Metadata probe returned an empty body")
            return ProbeOutcome.failed("empty response body", status_code=status_code)
        return ProbeOutcome.succeeded(status_code, body)

    def _deadline_exceeded(self) -> ProbeOutcome:
        logger.debug(f"Metadata probe exceeded its {self.config.timeout}s deadline")
        return ProbeOutcome.failed(
            f"TimeoutError: no complete response within {self.config.timeout}s"
        )

    @staticmethod
    def _failure(error: Exception) -> ProbeOutcome:
        logger.debug(f"Metadata probe raised {type(error).__name__}: {error}")
        return ProbeOutcome.failed(f"{type(error).__name__}: {error}")
