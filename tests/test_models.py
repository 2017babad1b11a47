from dataclasses import FrozenInstanceError

import pytest

from dl_markdown.models import DlItem, TermHeader, Token, TokenType


def test_token_types_match_registered_names():
    assert TokenType.LIST_OPEN == "dl_list_open"
    assert TokenType.DESCRIPTION_CLOSE.value == "dl_dd_close"
    assert {token_type.value for token_type in TokenType} == {
        "dl_list_open",
        "dl_list_close",
        "dl_dt_open",
        "dl_dt_close",
        "dl_dd_open",
        "dl_dd_close",
        "inline",
    }


def test_token_defaults():
    token = Token(TokenType.LIST_CLOSE, "dl", -1)

    assert token.content == ""
    assert token.map is None


def test_items_do_not_share_description_lists():
    first = DlItem(term_line=0, term_text="a")
    second = DlItem(term_line=1, term_text="b")

    first.descriptions.append("x")

    assert second.descriptions == []


def test_headers_are_frozen():
    header = TermHeader(text="term", base_indent=0)

    with pytest.raises(FrozenInstanceError):
        header.text = "other"
