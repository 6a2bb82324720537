"""Block editing helpers for Logseq's outliner.

Logseq renders exactly one ``<textarea>`` while a block is being edited,
so ``textarea >> nth=0`` always addresses the active editor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from logseq_e2e import selectors

if TYPE_CHECKING:
    from playwright.sync_api import Locator, Page


def last_block(page: Page) -> Locator:
    """Start editing the last block of the current page.

    Args:
        page: Playwright page showing a Logseq page.

    Returns:
        Locator of the active block editor.
    """
    # discard any popups
    page.keyboard.press("Escape")
    if page.locator(selectors.CLICK_HERE_TO_EDIT).is_visible():
        page.click(selectors.CLICK_HERE_TO_EDIT)
    else:
        page.click(selectors.LAST_PAGE_BLOCK)
    page.wait_for_selector(selectors.EDITING_TEXTAREA, state="visible")
    page.wait_for_timeout(100)
    return page.locator(selectors.EDITING_TEXTAREA)


def enter_next_block(page: Page) -> Locator:
    """Press Enter in the active editor and wait for the next block."""
    block_count = page.locator(selectors.PAGE_BLOCKS).count()
    page.press(selectors.EDITING_TEXTAREA, "Enter")
    page.wait_for_timeout(10)
    page.wait_for_selector(selectors.block_textarea(block_count), state="visible")
    return page.locator(selectors.EDITING_TEXTAREA)


def new_inner_block(page: Page) -> Locator:
    """Create a block after the last one without waiting for it to render."""
    last_block(page)
    page.press(selectors.EDITING_TEXTAREA, "Enter")
    return page.locator(selectors.EDITING_TEXTAREA)


def new_block(page: Page) -> Locator:
    """Append a block to the end of the page and return its editor.

    Returns:
        Locator of the new block's editor, once it is visible.
    """
    block_count = page.locator(selectors.PAGE_BLOCKS).count()
    last_block(page)
    page.press(selectors.EDITING_TEXTAREA, "Enter")
    page.wait_for_selector(
        selectors.block_textarea(block_count, inner=True), state="visible"
    )
    return page.locator(selectors.EDITING_TEXTAREA)


def edit_first_block(page: Page) -> None:
    page.click(selectors.FIRST_BLOCK_CONTENT)


def escape_to_code_editor(page: Page) -> None:
    """Leave the block editor and focus the rendered CodeMirror code block."""
    page.press(selectors.BLOCK_EDITOR_TEXTAREA, "Escape")
    page.wait_for_selector(selectors.CODE_MIRROR_PRE, state="visible")

    page.wait_for_timeout(300)
    page.click(selectors.CODE_MIRROR_PRE)
    page.wait_for_timeout(300)

    page.wait_for_selector(selectors.CODE_MIRROR_TEXTAREA, state="visible")


def escape_to_block_editor(page: Page) -> None:
    """Leave CodeMirror and return to plain block editing."""
    page.wait_for_timeout(300)
    page.click(selectors.CODE_MIRROR_PRE)
    page.wait_for_timeout(300)

    page.press(selectors.CODE_MIRROR_TEXTAREA, "Escape")
    page.wait_for_timeout(300)
