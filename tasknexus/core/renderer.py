import logging
import markdown

from tasknexus.core.filter import filter_html

logger = logging.getLogger(__name__)

# pymdownx.tasklist is left out on purpose: the task list filter does that job.
MARKDOWN_EXTENSIONS = ['toc', 'tables', 'fenced_code', 'sane_lists']


def render_baseline(text):
    """
    Renders Markdown to HTML.

    Returns:
        tuple: (html, toc_html)
    """
    md = markdown.Markdown(extensions=MARKDOWN_EXTENSIONS)
    html = md.convert(text)
    return html, getattr(md, 'toc', '')


def render_task_lists(text, todo_only=False, context=None):
    """
    Renders Markdown and runs the task list filter on the result.

    Returns:
        tuple: (html, list of TaskItems)
    """
    html, _ = render_baseline(text)
    logger.info(f"Rendered {len(text)} chars of Markdown to {len(html)} chars of HTML.")
    return filter_html(html, todo_only=todo_only, context=context)
