from __future__ import annotations
import json
import os
from typing import Any, List

class JsonArrayFile:
    """
    One JSON array on disk, rewritten in full on every save.
    Errors are left to the caller; the collection store decides how to recover.
    """
    def __init__(self, path: str):
        self.path = path

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def load(self) -> List[Any]:
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"{self.path} does not hold a JSON array")
        return data

    def save(self, items: List[Any]) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(items, f, indent=2, ensure_ascii=False)
