from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from metadata_gate.config.config import Config


class ProbeConfiguration(BaseModel):
    """
    Immutable settings used to build the metadata probe request.
    """

    model_config = ConfigDict(frozen=True)

    api_version: str = Field(default_factory=lambda: Config.METADATA_API_VERSION, min_length=1)
    timeout: float = Field(default_factory=lambda: Config.METADATA_TIMEOUT_SECONDS, gt=0)

    @property
    def url(self) -> str:
        return Config.METADATA_URL

    @property
    def params(self) -> Dict[str, str]:
        return {"api-version": self.api_version}

    @property
    def headers(self) -> Dict[str, str]:
        return {"Metadata": "true"}
