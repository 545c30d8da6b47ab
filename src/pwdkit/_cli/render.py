from dataclasses import dataclass, field
from enum import StrEnum

from rich.console import Group, RenderableType
from rich.text import Text

from ..service import StrengthLevel


class RecordStyle(StrEnum):
    INFO = "steel_blue3"
    SUCCESS = "green"
    CRITICAL = "yellow"


LEVEL_STYLES = {
    StrengthLevel.WEAK: RecordStyle.CRITICAL,
    StrengthLevel.MEDIUM: RecordStyle.INFO,
    StrengthLevel.STRONG: RecordStyle.SUCCESS,
}


@dataclass(slots=True)
class Record:
    content: str
    style: str = ""


@dataclass(slots=True)
class RecordRenderer:
    _records: list[Record] = field(default_factory=list)

    def add_record(self, content: str, style: str = "") -> Record:
        record = Record(content=content, style=style)
        self._records.append(record)
        return record

    def compose_renderable(self) -> RenderableType:
        return Group(*(self._compose_record_content(r) for r in self._records))

    def _compose_record_content(self, record: Record) -> RenderableType:
        return Text(f"=> {record.content}", style=record.style)
