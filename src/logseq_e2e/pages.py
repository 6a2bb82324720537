"""Page creation and navigation via the search dialog.

These are plain functions, NOT pytest fixtures, so standalone scripts and
ad-hoc Playwright sessions can use them too.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from logseq_e2e import selectors
from logseq_e2e.randomness import random_string

if TYPE_CHECKING:
    from playwright.sync_api import Page

RANDOM_TITLE_LENGTH = 20


def create_page(page: Page, page_name: str) -> str:
    """Create a page titled *page_name* and wait for its first block editor.

    Returns:
        The page name, for chaining.
    """
    page.click(selectors.SEARCH_BUTTON)
    page.fill(selectors.SEARCH_INPUT, page_name)
    page.click(selectors.NEW_PAGE_OPTION)
    page.wait_for_selector(selectors.EDITING_TEXTAREA, state="visible")
    return page_name


def create_random_page(page: Page) -> str:
    """Create a page with a random 20 character title and return the title."""
    return create_page(page, random_string(RANDOM_TITLE_LENGTH))


def search_and_jump_to_page(page: Page, page_title: str) -> str:
    """Search for an existing page and open it from the results."""
    page.click(selectors.SEARCH_BUTTON)
    page.fill(selectors.SEARCH_INPUT, page_title)
    result = selectors.page_ref(page_title)
    page.wait_for_selector(result, state="visible")
    page.click(result)
    return page_title


def activate_new_page(page: Page) -> None:
    page.click(selectors.FIRST_BLOCK)
    page.wait_for_timeout(500)
