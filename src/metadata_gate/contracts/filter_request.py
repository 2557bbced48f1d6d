from typing import Any, Dict

from pydantic import BaseModel


class FilterRequest(BaseModel):
    """
    One log event submitted to the HTTP filter endpoint.
    """

    tag: str
    time: int
    record: Dict[str, Any]
