import logging
from bs4 import BeautifulSoup

from tasknexus.core.context import FilterContext
from tasknexus.core.rewriter import rewrite_task_items
from tasknexus.core.summary import prune_to_task_lists
from tasknexus.core.task_list import TaskListSummary

logger = logging.getLogger(__name__)

# Constants
MAX_FILTER_HTML_SIZE = 50 * 1024 * 1024  # 50 MB


class TaskListFilter:
    """
    Renders checkbox list items as task list items and, in todo-only mode,
    kills everything in the document except:

    - the first line, which usually has some hashtags for context
    - lists and items with checkboxes in them

    Must run on HTML that was already rendered from Markdown and sanitized.
    """

    def __init__(self, doc, context=None):
        self.doc = doc
        self.context = context or FilterContext()
        self.task_list_items = []

    def filter(self):
        self.task_list_items = rewrite_task_items(self.doc, self.context)
        return self.doc

    def call(self):
        self.filter()
        if self.context.todo_only:
            prune_to_task_lists(self.doc)
        return self.doc

    @property
    def summary(self):
        return TaskListSummary(self.task_list_items)


def filter_html(html_content: str, todo_only=False, context=None):
    """
    Runs the task list filter over an HTML string.

    Args:
        html_content (str): Rendered, sanitized HTML.
        todo_only (bool): Shortcut for `FilterContext(todo_only=True)`.
            Ignored when `context` is given.
        context (FilterContext): Full call configuration.

    Returns:
        tuple: (filtered HTML string, list of TaskItems)
    """
    html_size = len(html_content.encode('utf-8'))
    if html_size > MAX_FILTER_HTML_SIZE:
        raise ValueError(f"Content too large ({html_size/1024/1024:.2f} MB). Max {MAX_FILTER_HTML_SIZE/1024/1024} MB.")

    context = context or FilterContext(todo_only=todo_only)
    logger.debug(f"Filtering {html_size} bytes of HTML with {context!r}")

    soup = BeautifulSoup(html_content, 'html.parser')
    task_filter = TaskListFilter(soup, context)
    doc = task_filter.call()

    return str(doc), task_filter.task_list_items
