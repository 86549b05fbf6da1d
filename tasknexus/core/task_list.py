import re
import logging
from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------------
# Task List Primitives
# -------------------------------------------------------------------------

LIST_TAGS = {'ul', 'ol'}

LIST_CLASS = 'task-list'
ITEM_CLASS = 'task-list-item'
CHECKBOX_CLASS = 'task-list-item-checkbox'

INCOMPLETE_PATTERN = r'\[\s\]'
COMPLETE_PATTERN = r'\[[xX]\]'

# Optional list prefix ("-", "+", "*" or "1."), optional whitespace,
# then the checkbox, which must be followed by whitespace.
ITEM_PATTERN = re.compile(
    r'^(?:\s*[-+*]|(?:\d+\.))?'
    r'\s*'
    r'(' + COMPLETE_PATTERN + r'|' + INCOMPLETE_PATTERN + r')'
    r'(?=\s)'
)

_COMPLETE_RE = re.compile(COMPLETE_PATTERN)


class TaskItem:
    """
    A single checkbox item found in a list.

    Args:
        marker (str): The checkbox token that was matched, e.g. "[ ]" or "[x]".
        source (str): The inner HTML the item was built from.
    """

    def __init__(self, marker, source):
        self.marker = marker
        self.source = source

    @property
    def complete(self):
        return bool(_COMPLETE_RE.match(self.marker))

    def __repr__(self):
        state = 'complete' if self.complete else 'incomplete'
        return f"<TaskItem {self.marker} {state} {self.source[:30]!r}>"


class TaskListSummary:
    """Counts over the items discovered by one filter run."""

    def __init__(self, items):
        self.items = list(items)

    @property
    def item_count(self):
        return len(self.items)

    @property
    def complete_count(self):
        return sum(1 for item in self.items if item.complete)

    @property
    def incomplete_count(self):
        return sum(1 for item in self.items if not item.complete)

    def __bool__(self):
        return self.item_count > 0


def match_task_item(content):
    """
    Returns a TaskItem if `content` starts with a checkbox marker, else None.
    The trailing newline is ignored for matching but kept in the item source.
    """
    chomped = content[:-1] if content.endswith('\n') else content
    match = ITEM_PATTERN.match(chomped)
    if not match:
        return None
    return TaskItem(match.group(1), content)


def render_item_checkbox(item):
    checked = ' checked="checked"' if item.complete else ''
    return (
        f'<input type="checkbox" class="{CHECKBOX_CLASS}"'
        f'{checked} disabled="disabled"/>'
    )


def render_task_list_item(item):
    """Replaces the checkbox marker in the item source with an input tag."""
    checkbox = render_item_checkbox(item)
    return ITEM_PATTERN.sub(lambda _m: checkbox, item.source, count=1)


# -------------------------------------------------------------------------
# Node helpers
# -------------------------------------------------------------------------

def has_css_class(node, name):
    if not isinstance(node, Tag):
        return False
    return name in (node.get('class') or [])


def add_css_class(node, name):
    classes = list(node.get('class') or [])
    if name not in classes:
        classes.append(name)
    node['class'] = classes


def is_list(node):
    return isinstance(node, Tag) and node.name in LIST_TAGS


def is_list_item(node):
    return isinstance(node, Tag) and node.name == 'li'


def is_task_list_candidate(li):
    """True if the item's text starts with a checkbox marker."""
    return ITEM_PATTERN.match(li.get_text()) is not None


def list_items(node):
    """
    Checkbox `li` descendants of `node`, in document order.
    Items inside `pre` blocks are ignored.
    """
    return [
        li for li in node.find_all('li')
        if li.find_parent('pre') is None and is_task_list_candidate(li)
    ]


def item_paragraph(li):
    return li.find('p', recursive=False)


def inner_html(node):
    return node.decode_contents()


def set_inner_html(node, html):
    node.clear()
    if not html:
        return
    fragment = BeautifulSoup(html, 'html.parser')
    # list() because moving a child out of the fragment modifies it
    for child in list(fragment.contents):
        node.append(child)
