from dataclasses import asdict, dataclass
from typing import Dict, List

from . import display
from .base import Field, LabelTooLongError
from .deploy import Deploy
from .message import CasperMessage
from .parser import parse_deploy, parse_message

# Device screen geometry, in characters
LEDGER_VIEW_NAME_COUNT = 11
LEDGER_VIEW_TOP_COUNT = 17
LEDGER_VIEW_BOTTOM_COUNT = 17


class Page:
    """Two lines of a value, as shown under the field name on one screen."""

    def __init__(self):
        self.top = ""
        self.bottom = ""

    def add_char(self, c: str) -> bool:
        if len(self.top) < LEDGER_VIEW_TOP_COUNT:
            self.top += c
            return True
        if len(self.bottom) < LEDGER_VIEW_BOTTOM_COUNT:
            self.bottom += c
            return True
        return False

    def __str__(self):
        return f"{self.top}{self.bottom}"


class PagedField:
    # Example, a 64 characters long hash:
    #   Target [1/2]
    #   01001010101…
    #   10101010101…
    def __init__(self, name: str, expert: bool, pages: List[Page]):
        self.name = name
        self.expert = expert
        self.pages = pages

    @classmethod
    def from_field(cls, field: Field) -> "PagedField":
        if len(field.name) > LEDGER_VIEW_NAME_COUNT:
            raise LabelTooLongError(
                f"Name tag can only be {LEDGER_VIEW_NAME_COUNT} characters. Tag: {field.name}"
            )
        pages = []
        current = Page()
        for c in field.value:
            if not current.add_char(c):
                pages.append(current)
                current = Page()
                current.add_char(c)
        # an empty value still has its (empty) page
        pages.append(current)
        return cls(field.name, field.is_expert, pages)

    def to_lines(self) -> List[str]:
        total = len(self.pages)
        if total == 1:
            return [display.page_str(self.name, str(self.pages[0]))]
        return [
            display.multi_page_str(self.name, position, total, str(page))
            for position, page in enumerate(self.pages, start=1)
        ]


class LedgerView:
    def __init__(self, fields: List[PagedField]):
        self.fields = fields

    @classmethod
    def from_fields(cls, fields: List[Field]) -> "LedgerView":
        return cls([PagedField.from_field(field) for field in fields])

    def to_lines(self, expert: bool) -> List[str]:
        """
        Builds the lines shown by the device, e.g.:
            "0 | Type : Transfer",
            "1 | Target [1/2] : 0101010101010101010101010101010101",
            "2 | Target [2/2] : 010101010101010101010101010101",
            "3 | Amount : 100 000 000 motes",
        Expert fields are only kept when `expert` is set. Indices count lines, not fields.
        """
        visible = (field for field in self.fields if expert or not field.expert)
        lines = (line for field in visible for line in field.to_lines())
        return [display.line_str(index, line) for index, line in enumerate(lines)]


@dataclass(frozen=True)
class JsonRepr:
    index: int
    name: str
    valid: bool
    blob: str
    output: List[str]
    output_expert: List[str]

    def to_dict(self) -> Dict:
        return asdict(self)


def _json_repr(index: int, name: str, valid: bool, blob: bytes, fields: List[Field]) -> JsonRepr:
    view = LedgerView.from_fields(fields)
    return JsonRepr(
        index=index,
        name=name,
        valid=valid,
        blob=blob.hex(),
        output=view.to_lines(expert=False),
        output_expert=view.to_lines(expert=True),
    )


def from_deploy(index: int, name: str, deploy: Deploy, valid: bool = True) -> JsonRepr:
    return _json_repr(index, name, valid, deploy.to_bytes(), parse_deploy(deploy))


def from_message(index: int, name: str, message: CasperMessage, valid: bool = True) -> JsonRepr:
    return _json_repr(index, name, valid, message.inner, parse_message(message))
