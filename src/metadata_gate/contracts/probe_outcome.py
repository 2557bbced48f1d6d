from typing import Optional

from pydantic import BaseModel, ConfigDict


class ProbeOutcome(BaseModel):
    """
    Result of a single metadata probe. Either a success carrying the response
    body, or a failure carrying a description of what went wrong.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    status_code: Optional[int] = None
    body: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def succeeded(cls, status_code: int, body: str) -> "ProbeOutcome":
        return cls(ok=True, status_code=status_code, body=body)

    @classmethod
    def failed(cls, error: str, status_code: Optional[int] = None) -> "ProbeOutcome":
        return cls(ok=False, status_code=status_code, error=error)
