import logging
from typing import Optional

import httpx

from metadata_gate.abstractions.record_filter import Record, RecordFilter
from metadata_gate.contracts.probe_configuration import ProbeConfiguration
from metadata_gate.contracts.probe_outcome import ProbeOutcome
from metadata_gate.core.metadata_probe import MetadataProbe

logger = logging.getLogger(__name__)


class MetadataReachabilityGate(RecordFilter):
    """
    Passes a log record through only when the instance metadata endpoint is
    reachable from this host. Every record triggers its own probe; any failure
    drops the record.
    """

    def __init__(
        self,
        config: Optional[ProbeConfiguration] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the gate.

        Args:
            config (ProbeConfiguration): Probe settings. Defaults to the values in Config.
            transport (httpx.BaseTransport): Optional transport override for the HTTP client.
        """
        self.config = config or ProbeConfiguration()
        self.probe = MetadataProbe(self.config, transport=transport)
        logger.info(
            f"MetadataReachabilityGate initialized with api-version={self.config.api_version}, "
            f"timeout={self.config.timeout}s"
        )

    def evaluate(self, tag: str, time: int, record: Record) -> Optional[Record]:
        return self._decide(tag, record, self.probe.probe())

    async def evaluate_async(self, tag: str, time: int, record: Record) -> Optional[Record]:
        """
        Non-blocking variant of evaluate(). Cancelling the awaiting task aborts the probe.
        """
        return self._decide(tag, record, await self.probe.aprobe())

    @staticmethod
    def _decide(tag: str, record: Record, outcome: ProbeOutcome) -> Optional[Record]:
        if outcome.ok:
            return record
        logger.error(f"Error probing instance metadata, dropping record for tag {tag}: {outcome.error}")
        return None
