from __future__ import annotations
import csv
import io
from typing import Iterable, List, Optional

from .schema import ResultLine, ResultSet

def split_lines(raw_text: Optional[str]) -> List[str]:
    # every \r is dropped before splitting; empty lines are kept
    return (raw_text or "").replace("\r", "").split("\n")

def process(raw_text: Optional[str]) -> ResultSet:
    return [ResultLine.from_source(line) for line in split_lines(raw_text)]

def render_all_as_plain_text(result_set: Iterable[ResultLine]) -> str:
    return "\n".join(r.word for r in result_set)

def render_all_as_csv(result_set: Iterable[ResultLine]) -> str:
    """
    One ``"source","word"`` record per line, every field quoted and embedded
    quotes doubled. Records are separated by \\n with no trailing separator
    and no header row.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for r in result_set:
        writer.writerow([r.source, r.word])
    # every record ends with a quote, so only the final terminator is removed
    return buf.getvalue().rstrip("\n")
