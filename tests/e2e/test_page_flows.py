"""E2E tests for page creation and search navigation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from playwright.sync_api import expect

from logseq_e2e.blocks import last_block, new_block
from logseq_e2e.pages import create_page, create_random_page, search_and_jump_to_page
from logseq_e2e.randomness import random_string

if TYPE_CHECKING:
    from playwright.sync_api import Page


class TestCreatePage:
    def test_random_page_opens_first_block_editor(self, graph_page: Page) -> None:
        title = create_random_page(graph_page)

        assert len(title) == 20
        expect(graph_page.locator("textarea >> nth=0")).to_be_visible()

    def test_named_page_title_shown(self, graph_page: Page) -> None:
        name = f"e2e page {random_string(8)}"

        create_page(graph_page, name)

        expect(graph_page.locator(".page-title").first).to_contain_text(name)


def test_search_jumps_back_to_created_page(graph_page: Page) -> None:
    """A page created earlier is reachable from search after navigating away."""
    target = create_random_page(graph_page)
    editor = last_block(graph_page)
    editor.fill("marker block")

    create_random_page(graph_page)
    search_and_jump_to_page(graph_page, target)

    expect(graph_page.locator(".page-blocks-inner")).to_contain_text("marker block")


def test_blocks_added_to_new_page(graph_page: Page) -> None:
    create_random_page(graph_page)
    last_block(graph_page).fill("first")
    new_block(graph_page).fill("second")

    graph_page.keyboard.press("Escape")
    expect(graph_page.locator(".page-blocks-inner .ls-block")).to_have_count(2)
