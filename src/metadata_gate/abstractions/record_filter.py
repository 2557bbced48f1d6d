from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, Mapping, Optional, Tuple

Record = Mapping[str, Any]


class RecordFilter(ABC):
    """
    Abstract base class for pipeline stages that pass or drop log records.
    """

    @abstractmethod
    def evaluate(self, tag: str, time: int, record: Record) -> Optional[Record]:
        """
        Decide whether a single record continues downstream.

        Args:
            tag (str): Routing tag of the event.
            time (int): Event timestamp.
            record (Mapping): The log record.

        Returns:
            Optional[Mapping]: The same record object to pass it, or None to drop it.
        """

    def filter_stream(
        self, tag: str, events: Iterable[Tuple[int, Record]]
    ) -> Iterator[Tuple[int, Record]]:
        """
        Apply evaluate() to every (time, record) pair, yielding the ones that pass.
        """
        for time, record in events:
            result = self.evaluate(tag, time, record)
            if result is not None:
                yield time, result
