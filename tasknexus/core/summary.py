import logging

from tasknexus.core.task_list import (
    LIST_CLASS,
    ITEM_CLASS,
    has_css_class,
    is_list,
    is_list_item,
)

logger = logging.getLogger(__name__)

# Block tags dropped from the top level of a todo-only summary.
# Anything else (e.g. a leading div or table) is left alone.
TOP_LEVEL_TAGS = {'p', 'blockquote', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'hr', 'pre'}


def is_task_list(node):
    return is_list(node) and has_css_class(node, LIST_CLASS)


def is_task_list_item(node):
    return is_list_item(node) and has_css_class(node, ITEM_CLASS)


def _prune_task_list(task_list):
    """Once inside a task list, keep only the items that have a checkbox."""
    for li in task_list.find_all('li', recursive=False):
        if not is_task_list_item(li):
            li.decompose()


def _prune_plain_list(plain_list):
    """
    Keeps the items of an ordinary list that directly contain a task list.
    Only looks one level down: deeper task lists are not found.

    Returns:
        bool: True if the whole list was removed.
    """
    mark_for_deletion = []
    delete_list = True

    for li in plain_list.find_all('li', recursive=False):
        if any(is_task_list(child) for child in li.children):
            delete_list = False
        else:
            mark_for_deletion.append(li)

    if delete_list:
        plain_list.decompose()
        return True

    for li in mark_for_deletion:
        li.decompose()
    return False


def prune_to_task_lists(doc):
    """
    Reduces the top level of `doc` to its task lists.

    - task lists lose their items that are not task list items
    - other lists are kept only where an item directly holds a task list
    - paragraphs, headings, quotes, rules and pre blocks are removed
    - every other top-level node (usually the leading line) is kept

    Modifies the tree in-place and returns it.
    """
    removed = 0
    for node in list(doc.children):
        if is_list(node):
            if is_task_list(node):
                _prune_task_list(node)
            elif _prune_plain_list(node):
                removed += 1
        elif getattr(node, 'name', None) in TOP_LEVEL_TAGS:
            node.decompose()
            removed += 1

    logger.info(f"Todo summary removed {removed} top-level nodes.")
    return doc
