"""
Review Extractor.

Turns profile page markup into an ordered list of Review records.
"""

import logging
import re
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import CData, NavigableString, Tag

from src.models.review import Review

logger = logging.getLogger(__name__)


# Selectors for the profile page review list
REVIEW_ITEM_SELECTOR = ".review-item"
USER_LINK_SELECTOR = ".review-item-user a"
ORDER_LINK_SELECTOR = ".review-item-order a"
TEXT_SELECTOR = ".review-item-text"
RATING_BLOCK_SELECTOR = ".review-item-rating .rating > div"

USER_ID_PATTERN = re.compile(r"/users/(\d+)/?", re.ASCII)
ORDER_ID_PATTERN = re.compile(r"/orders/([A-Z0-9]+)/?", re.ASCII)
RATING_CLASS_PATTERN = re.compile(r"rating(\d)", re.ASCII)

# Tags that separate words in rendered text
BREAK_TAGS = frozenset({
    "br", "p", "div", "li", "ul", "ol", "blockquote", "pre", "table", "tr", "td", "th",
    "h1", "h2", "h3", "h4", "h5", "h6",
})


class ReviewExtractor:
    """
    Parses review items from a profile page.

    Elements without a usable author link are skipped. Ids keep the
    element's position among all matched items, so skips leave gaps.
    """

    def parse(self, html: str) -> List[Review]:
        """
        Extract reviews in document order.

        Args:
            html: Raw profile page markup

        Returns:
            List of Review objects (empty if the page has none)
        """
        soup = BeautifulSoup(html, "html.parser")
        elements = soup.select(REVIEW_ITEM_SELECTOR)

        reviews = []
        for index, element in enumerate(elements):
            review = self._parse_element(element, index)
            if review is not None:
                reviews.append(review)

        skipped = len(elements) - len(reviews)
        if skipped:
            logger.info(f"Extracted {len(reviews)} reviews ({skipped} skipped)")
        else:
            logger.info(f"Extracted {len(reviews)} reviews")
        return reviews

    def _parse_element(self, element: Tag, index: int) -> Optional[Review]:
        user_id = self._parse_user_id(element)
        if user_id is None:
            logger.debug(f"Skipping review element {index}: no author id")
            return None

        try:
            return Review(
                id=f"review-{index}",
                user_id=user_id,
                order_id=self._parse_order_id(element),
                text=self._parse_text(element),
                rating=parse_review_rating(element),
            )
        except ValueError as e:
            logger.debug(f"Skipping review element {index}: {e}")
            return None

    def _parse_user_id(self, element: Tag) -> Optional[int]:
        href = _first_href(element, USER_LINK_SELECTOR)
        if href is None:
            return None
        match = USER_ID_PATTERN.search(href)
        if match is None:
            return None
        return int(match.group(1))

    def _parse_order_id(self, element: Tag) -> str:
        href = _first_href(element, ORDER_LINK_SELECTOR) or ""
        match = ORDER_ID_PATTERN.search(href)
        return match.group(1) if match else ""

    def _parse_text(self, element: Tag) -> str:
        node = element.select_one(TEXT_SELECTOR)
        if node is None:
            return ""
        return normalized_text(node)


def parse_review_rating(element: Tag) -> int:
    """
    Read the star rating from a review element.

    Scans rating blocks in document order and returns the digit from the
    first class matching "rating<digit>". First match wins.

    Args:
        element: A single review item

    Returns:
        Rating digit, or 0 when no block carries a rating class
    """
    for block in element.select(RATING_BLOCK_SELECTOR):
        class_name = " ".join(block.get("class") or [])
        match = RATING_CLASS_PATTERN.search(class_name)
        if match:
            return int(match.group(1))
    return 0


def _first_href(element: Tag, selector: str) -> Optional[str]:
    link = element.select_one(selector)
    if link is None:
        return None
    # Missing attribute reads as "", same as an empty href
    return link.get("href", "")


def normalized_text(node: Tag) -> str:
    """
    Rendered text of a node with whitespace collapsed.

    Line breaks and block boundaries become single spaces; inline markup
    does not split words.
    """
    parts = []
    _collect_text(node, parts)
    return " ".join("".join(parts).split())


def _collect_text(node: Tag, parts: list) -> None:
    for child in node.children:
        if isinstance(child, Tag):
            is_break = child.name in BREAK_TAGS
            if is_break:
                parts.append(" ")
            _collect_text(child, parts)
            if is_break:
                parts.append(" ")
        elif type(child) is NavigableString or isinstance(child, CData):
            parts.append(str(child))
