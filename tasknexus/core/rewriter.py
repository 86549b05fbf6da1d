import logging

from tasknexus.core.context import FilterContext
from tasknexus.core.task_list import (
    LIST_CLASS,
    ITEM_CLASS,
    add_css_class,
    inner_html,
    item_paragraph,
    list_items,
    match_task_item,
    render_task_list_item,
    set_inner_html,
)

logger = logging.getLogger(__name__)


def rewrite_task_items(doc, context=None):
    """
    Finds checkbox list items in `doc` and renders them as task list items.
    Modifies the tree in-place.

    Items are visited last-to-first: an outer item's content is read after its
    nested items were already rewritten, so re-rendering it keeps their markup.

    Args:
        doc: BeautifulSoup document or Tag to search.
        context (FilterContext): Call configuration. Defaults to a plain
            (not todo-only) context.

    Returns:
        list: The TaskItems that were rendered, in document order.
    """
    context = context or FilterContext()
    task_list_items = []

    for li in reversed(list_items(doc)):
        parent = li.parent
        if parent is None or not list_items(parent):
            continue

        add_css_class(parent, LIST_CLASS)

        outer = item_paragraph(li)
        if outer is None:
            outer = li
        item = match_task_item(inner_html(outer))
        if item is None:
            continue

        if context.should_suppress(item):
            logger.debug(f"Blanking suppressed task item {item!r}")
            set_inner_html(outer, "")
            continue

        # prepend because we're iterating in reverse
        task_list_items.insert(0, item)

        add_css_class(li, ITEM_CLASS)
        set_inner_html(outer, render_task_list_item(item))

    logger.info(f"Rendered {len(task_list_items)} task list items.")
    return task_list_items
