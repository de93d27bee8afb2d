from __future__ import annotations
from pydantic import BaseModel, ConfigDict
from typing import List

from .mapping import map_line

class ResultLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: str
    word: str

    @classmethod
    def from_source(cls, source: str) -> "ResultLine":
        return cls(source=source, word=map_line(source))

ResultSet = List[ResultLine]
