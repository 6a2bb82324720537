"""Graph bootstrap: sidebar handling and loading a local folder as a graph.

The native folder picker cannot be driven by Playwright. Logseq's test
build reads ``window.__MOCKED_OPEN_DIR_PATH__`` instead of opening the
dialog, so the helpers set that global before clicking "Choose a folder".
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from playwright.sync_api import expect

from logseq_e2e import selectors
from logseq_e2e.config import get_settings

if TYPE_CHECKING:
    from playwright.sync_api import Page

logger = logging.getLogger(__name__)

_IS_OPEN = re.compile(r"is-open")


def set_mocked_open_dir_path(page: Page, path: str | None = None) -> None:
    """Set the folder the next "open directory" dialog resolves to."""
    page.evaluate(
        "([path]) => { Object.assign(window, { __MOCKED_OPEN_DIR_PATH__: path }) }",
        [path],
    )


def _sidebar_is_open(page: Page) -> bool:
    classes = page.locator(selectors.LEFT_SIDEBAR).get_attribute("class") or ""
    return bool(_IS_OPEN.search(classes))


def open_left_sidebar(page: Page) -> None:
    """Open the left sidebar unless it is already open.

    The sidebar is toggled by its ``is-open`` class.
    """
    if not _sidebar_is_open(page):
        page.click(selectors.LEFT_MENU_BUTTON)
        page.wait_for_timeout(10)
        expect(page.locator(selectors.LEFT_SIDEBAR)).to_have_class(_IS_OPEN)


def _add_graph_from_sidebar(page: Page, dropdown_timeout: int) -> None:
    """Walk the "Add new graph" flow from the repo switcher."""
    page.click(selectors.LEFT_MENU_BUTTON)
    if not _sidebar_is_open(page):
        page.click(selectors.LEFT_MENU_BUTTON)
        expect(page.locator(selectors.LEFT_SIDEBAR)).to_have_class(_IS_OPEN)

    page.click(selectors.REPO_SWITCH)
    page.wait_for_selector(
        selectors.ADD_NEW_GRAPH_ITEM, state="visible", timeout=dropdown_timeout
    )

    page.click(selectors.ADD_NEW_GRAPH)
    page.wait_for_selector(
        selectors.CHOOSE_FOLDER, state="visible", timeout=dropdown_timeout
    )
    page.click(selectors.CHOOSE_FOLDER)

    page.locator(selectors.SKIP_LINK).click()


def load_local_graph(page: Page, path: str | None = None) -> None:
    """Load the folder at *path* as a Logseq graph and wait for parsing.

    Uses the onboarding "Choose a folder" button when it is showing,
    otherwise adds a new graph through the sidebar repo switcher.

    Args:
        page: Playwright page with Logseq loaded.
        path: Folder to open. Passed to the app via the mocked dialog.

    Raises:
        playwright.sync_api.TimeoutError: If a step does not complete
            within its wait budget (parsing gets ``timeouts.graph_parse``).
    """
    settings = get_settings()
    set_mocked_open_dir_path(page, path)

    onboarding_open_button = page.locator(selectors.CHOOSE_FOLDER)
    if onboarding_open_button.is_visible():
        onboarding_open_button.click()
    else:
        _add_graph_from_sidebar(page, settings.timeouts.dropdown)

    set_mocked_open_dir_path(page, "")

    page.wait_for_selector(
        selectors.PARSING_FILES,
        state="hidden",
        timeout=settings.timeouts.graph_parse,
    )

    if page.title() in selectors.IMPORT_TITLES:
        page.click(selectors.SKIP_BUTTON)

    page.wait_for_function(
        "title => window.document.title === title", arg=settings.app.title
    )

    logger.info("Graph loaded for %s", path)
