from __future__ import annotations
import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from backend.services.errors import RecordNotFoundError
from backend.services.storage import JsonArrayFile

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)

class CollectionStore(Generic[R]):
    """
    Ordered records of one kind, an id counter and the JSON file that mirrors them.

    Rules:
    - ids come from a counter that only moves forward; a deleted id is never reissued.
    - records keep arrival order and are never edited, only created or deleted.
    - every create/delete rewrites the whole file right away. If that write fails the
      error is logged and memory stays the source of truth until the next good save.
    """

    def __init__(self, record_model: Type[R], path: str, label: str, noun: Optional[str] = None):
        self.record_model = record_model
        self.label = label
        self.noun = noun or label.rstrip("s").capitalize()
        self.file = JsonArrayFile(path)
        self._adapter = TypeAdapter(List[record_model])
        self._records: List[R] = []
        self._next_id = 0

    @property
    def path(self) -> str:
        return self.file.path

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._records)

    def initialize(self) -> None:
        """Load the backing file. Missing or broken files leave an empty collection."""
        self._records = []
        self._next_id = 0
        if not self.file.exists():
            logger.info("No %s file at %s, starting empty", self.label, self.path)
            return
        try:
            records = self._adapter.validate_python(self.file.load())
        except (OSError, ValueError, ValidationError) as e:
            logger.error("Error loading %s from %s: %s", self.label, self.path, e)
            return

        self._records = list(records)
        if self._records:
            self._next_id = max(r.id for r in self._records) + 1
        logger.info("Loaded %d %s from %s", len(self._records), self.label, self.path)

    def create(self, **fields: Any) -> R:
        record = self.record_model(id=self._next_id, **fields)
        self._next_id += 1
        self._records.append(record)
        self._persist()
        logger.info("%s created: %s", self.noun, record.model_dump())
        return record

    def delete_by_id(self, record_id: Optional[int]) -> R:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                del self._records[index]
                self._persist()
                logger.info("%s deleted: %s", self.noun, record.model_dump())
                return record
        raise RecordNotFoundError(self.noun, record_id)

    def list_all(self) -> List[R]:
        return list(self._records)

    def _persist(self) -> None:
        try:
            self.file.save([r.model_dump(mode="json") for r in self._records])
        except (OSError, TypeError, ValueError) as e:
            logger.error("Error saving %s to %s: %s", self.label, self.path, e)
            return
        logger.info("%s saved to %s", self.label, self.path)
