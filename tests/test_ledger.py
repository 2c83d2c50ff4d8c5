import pytest

from casper_ledger.base import Field, LabelTooLongError
from casper_ledger.ledger import (
    LEDGER_VIEW_BOTTOM_COUNT,
    LEDGER_VIEW_NAME_COUNT,
    LEDGER_VIEW_TOP_COUNT,
    LedgerView,
    Page,
    PagedField,
)

PAGE_SIZE = LEDGER_VIEW_TOP_COUNT + LEDGER_VIEW_BOTTOM_COUNT


def test_page_fills_top_then_bottom():
    page = Page()
    for c in "a" * PAGE_SIZE:
        assert page.add_char(c)
    assert page.top == "a" * LEDGER_VIEW_TOP_COUNT
    assert page.bottom == "a" * LEDGER_VIEW_BOTTOM_COUNT
    assert not page.add_char("b")


@pytest.mark.parametrize("length", [0, 1, LEDGER_VIEW_TOP_COUNT, LEDGER_VIEW_TOP_COUNT + 1,
                                    PAGE_SIZE, PAGE_SIZE + 1, 3 * PAGE_SIZE, 3 * PAGE_SIZE + 5])
def test_pages_are_lossless(length):
    value = "".join(chr(ord("a") + i % 26) for i in range(length))
    paged = PagedField.from_field(Field.regular("Name", value))
    assert "".join(page.top + page.bottom for page in paged.pages) == value
    expected_pages = max(1, -(-length // PAGE_SIZE))
    assert len(paged.pages) == expected_pages


def test_exactly_top_capacity_stays_in_top():
    paged = PagedField.from_field(Field.regular("Amount", "24500000000 motes"))
    assert paged.pages[0].top == "24500000000 motes"
    assert paged.pages[0].bottom == ""


def test_one_more_char_spills_into_bottom():
    paged = PagedField.from_field(Field.regular("Amount", "245000000000 motes"))
    assert paged.pages[0].top == "245000000000 mote"
    assert paged.pages[0].bottom == "s"


def test_empty_value_has_one_empty_page():
    paged = PagedField.from_field(Field.regular("Name", ""))
    assert len(paged.pages) == 1
    assert paged.to_lines() == ["Name : "]


def test_label_at_capacity():
    name = "N" * LEDGER_VIEW_NAME_COUNT
    assert PagedField.from_field(Field.regular(name, "x")).name == name


def test_label_too_long():
    with pytest.raises(LabelTooLongError):
        PagedField.from_field(Field.regular("N" * (LEDGER_VIEW_NAME_COUNT + 1), "x"))


def test_single_page_line():
    view = LedgerView.from_fields([
        Field.regular("Type", "Transfer"),
        Field.regular("Chain ID", "casper-test"),
        Field.regular("Account", "01"),
        Field.regular("Amount", "24500000000 motes"),
    ])
    assert view.to_lines(expert=False)[3] == "3 | Amount : 24500000000 motes"


def test_multi_page_lines():
    view = LedgerView.from_fields([
        Field.regular("Type", "Transfer"),
        Field.regular("Target", "0" * 64),
        Field.regular("Amount", "100 000 000 motes"),
    ])
    assert view.to_lines(expert=False) == [
        "0 | Type : Transfer",
        "1 | Target [1/2] : " + "0" * PAGE_SIZE,
        "2 | Target [2/2] : " + "0" * (64 - PAGE_SIZE),
        "3 | Amount : 100 000 000 motes",
    ]


def test_expert_fields_are_filtered_before_indexing():
    view = LedgerView.from_fields([
        Field.regular("Type", "Transfer"),
        Field.expert("Ttl", "30m"),
        Field.regular("Amount", "1 motes"),
    ])
    assert view.to_lines(expert=False) == ["0 | Type : Transfer", "1 | Amount : 1 motes"]
    assert view.to_lines(expert=True) == [
        "0 | Type : Transfer",
        "1 | Ttl : 30m",
        "2 | Amount : 1 motes",
    ]
