"""
Menu search.

A query is split on whitespace and every token has to match an item.
Tokens that look like numbers ("5", "5.50") match the item price exactly
or a whole word in the text, so "5" does not hit "15" or "50". Only
ASCII digits count as numbers. Other tokens are plain case-insensitive substrings ("burg" hits "Burger").
"""
import re
from typing import List

from menuboard.schemas.menu import ItemRead, MenuSection

NUMERIC_TOKEN = re.compile(r"^\d+(\.\d+)?$", re.ASCII)


def tokenize(query: str) -> List[str]:
    return (query or "").lower().split()


def is_numeric_token(token: str) -> bool:
    return NUMERIC_TOKEN.match(token) is not None


def _match_text(section_name: str, item: ItemRead) -> str:
    return f"{section_name or ''} {item.name or ''} {item.description or ''}".lower()


def token_matches(token: str, text: str, price) -> bool:
    if is_numeric_token(token):
        if price is not None and float(price) == float(token):
            return True
        return re.search(rf"\b{re.escape(token)}\b", text, re.ASCII) is not None
    return token in text


def item_matches(tokens: List[str], section_name: str, item: ItemRead) -> bool:
    text = _match_text(section_name, item)
    return all(token_matches(token, text, item.price) for token in tokens)


def filter_menu(query: str, menu: List[MenuSection]) -> List[MenuSection]:
    """
    Same grouped shape, restricted to matching items. Sections left with no
    items are dropped. A query without tokens returns ``menu`` as is.
    """
    tokens = tokenize(query)
    if not tokens:
        return menu

    filtered = []
    for section in menu:
        items = [item for item in section.items if item_matches(tokens, section.name, item)]
        if items:
            filtered.append(section.model_copy(update={"items": items}))
    return filtered
