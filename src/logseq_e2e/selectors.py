"""CSS/text selectors for Logseq's markup.

Playwright selector syntax (``>> nth=``, ``text=``, ``:has-text()``) is
used as-is; Logseq renames classes occasionally, so keep every selector
the helpers depend on in this one module.
"""

# Search / page creation
SEARCH_BUTTON = "#search-button"
SEARCH_INPUT = '[placeholder="Search or create page"]'
NEW_PAGE_OPTION = 'text=/.*New page: ".*/'

# Blocks and editors
EDITING_TEXTAREA = "textarea >> nth=0"
CLICK_HERE_TO_EDIT = 'text="Click here to edit..."'
PAGE_BLOCKS = ".page-blocks-inner .ls-block"
LAST_PAGE_BLOCK = f"{PAGE_BLOCKS} >> nth=-1"
FIRST_BLOCK = ".ls-block >> nth=0"
FIRST_BLOCK_CONTENT = ".ls-block .block-content >> nth=0"
BLOCK_EDITOR_TEXTAREA = ".block-editor textarea"
CODE_MIRROR_PRE = ".CodeMirror pre"
CODE_MIRROR_TEXTAREA = ".CodeMirror textarea"

# Sidebar and graph loading
LEFT_SIDEBAR = "#left-sidebar"
LEFT_MENU_BUTTON = "#left-menu.button"
REPO_SWITCH = "#left-sidebar #repo-switch"
ADD_NEW_GRAPH_ITEM = '#left-sidebar .dropdown-wrapper >> text="Add new graph"'
ADD_NEW_GRAPH = "text=Add new graph"
CHOOSE_FOLDER = 'strong:has-text("Choose a folder")'
SKIP_LINK = 'a:has-text("Skip")'
SKIP_BUTTON = "a.button >> text=Skip"
PARSING_FILES = ':has-text("Parsing files")'

# Page titles shown while a newly added graph is still being set up
IMPORT_TITLES = ("Import data into Logseq", "Add another repo")


def page_ref(title: str) -> str:
    """Selector for a search result linking to the page *title*."""
    return f'[data-page-ref="{title}"]'


def block_textarea(index: int, *, inner: bool = False) -> str:
    """Selector for the editing textarea of the block at *index*.

    With ``inner=True`` only blocks inside the main page body are counted.
    """
    blocks = PAGE_BLOCKS if inner else ".ls-block"
    return f"{blocks} >> nth={index} >> textarea"
