import sys
import os
import unittest
from bs4 import BeautifulSoup

# Setup paths
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(current_dir)
sys.path.insert(0, project_root)

from tasknexus.core.task_list import (
    TaskItem,
    TaskListSummary,
    add_css_class,
    has_css_class,
    inner_html,
    item_paragraph,
    list_items,
    match_task_item,
    render_task_list_item,
    set_inner_html,
)


class TestItemPattern(unittest.TestCase):
    """Checkbox marker detection at the start of item content."""

    def test_incomplete_marker(self):
        item = match_task_item("[ ] Buy milk")
        self.assertIsNotNone(item)
        self.assertEqual(item.marker, "[ ]")
        self.assertFalse(item.complete)

    def test_complete_markers(self):
        self.assertTrue(match_task_item("[x] Done").complete)
        self.assertTrue(match_task_item("[X] Done").complete)

    def test_list_prefixes(self):
        self.assertEqual(match_task_item("- [ ] dash").marker, "[ ]")
        self.assertEqual(match_task_item("* [x] star").marker, "[x]")
        self.assertEqual(match_task_item("1. [x] number").marker, "[x]")

    def test_leading_whitespace(self):
        self.assertIsNotNone(match_task_item("\n  [ ] indented"))

    def test_marker_needs_trailing_whitespace(self):
        self.assertIsNone(match_task_item("[ ]no space"))
        self.assertIsNone(match_task_item("[x]"))

    def test_trailing_newline_is_trimmed_for_matching_only(self):
        self.assertIsNone(match_task_item("[x]\n"))
        item = match_task_item("[ ] A\n")
        self.assertEqual(item.source, "[ ] A\n")

    def test_anchored_at_start_of_content(self):
        self.assertIsNone(match_task_item("Intro [ ] not a task"))
        self.assertIsNone(match_task_item("Intro\n[ ] second line"))

    def test_not_a_checkbox(self):
        self.assertIsNone(match_task_item("[y] maybe"))
        self.assertIsNone(match_task_item("plain text"))


class TestRendering(unittest.TestCase):

    def test_render_incomplete(self):
        html = render_task_list_item(TaskItem("[ ]", "[ ] A"))
        self.assertEqual(
            html,
            '<input type="checkbox" class="task-list-item-checkbox" disabled="disabled"/> A',
        )

    def test_render_complete_keeps_rest_of_source(self):
        html = render_task_list_item(TaskItem("[x]", "[x] <em>B</em>\n"))
        self.assertIn('checked="checked"', html)
        self.assertTrue(html.endswith(" <em>B</em>\n"))
        self.assertNotIn("[x]", html)

    def test_only_first_marker_is_replaced(self):
        html = render_task_list_item(TaskItem("[ ]", "[ ] keep [ ] this"))
        self.assertEqual(html.count("<input"), 1)
        self.assertIn("keep [ ] this", html)


class TestNodeHelpers(unittest.TestCase):

    def test_add_css_class_is_idempotent_and_keeps_existing(self):
        soup = BeautifulSoup('<ul class="contains-things"></ul>', 'html.parser')
        ul = soup.ul
        add_css_class(ul, "task-list")
        add_css_class(ul, "task-list")
        self.assertEqual(ul['class'], ["contains-things", "task-list"])
        self.assertTrue(has_css_class(ul, "task-list"))

    def test_has_css_class_on_strings(self):
        soup = BeautifulSoup('text', 'html.parser')
        self.assertFalse(has_css_class(soup.contents[0], "task-list"))

    def test_list_items_only_returns_checkbox_items(self):
        soup = BeautifulSoup(
            "<ul><li>[ ] A</li><li>plain</li><li>[x] B</li></ul>", 'html.parser'
        )
        self.assertEqual([li.get_text() for li in list_items(soup)], ["[ ] A", "[x] B"])

    def test_list_items_skips_preformatted(self):
        soup = BeautifulSoup("<pre><ul><li>[ ] code</li></ul></pre>", 'html.parser')
        self.assertEqual(list_items(soup), [])

    def test_item_paragraph(self):
        soup = BeautifulSoup("<li><p>[ ] A</p><p>more</p></li>", 'html.parser')
        self.assertEqual(item_paragraph(soup.li).get_text(), "[ ] A")

        bare = BeautifulSoup("<li>[ ] A</li>", 'html.parser')
        self.assertIsNone(item_paragraph(bare.li))

    def test_set_inner_html(self):
        soup = BeautifulSoup("<li>[ ] old</li>", 'html.parser')
        set_inner_html(soup.li, "<b>new</b> text")
        self.assertEqual(inner_html(soup.li), "<b>new</b> text")

        set_inner_html(soup.li, "")
        self.assertEqual(soup.li.contents, [])


class TestTaskListSummary(unittest.TestCase):

    def test_counts(self):
        summary = TaskListSummary([
            TaskItem("[ ]", "[ ] A"),
            TaskItem("[x]", "[x] B"),
            TaskItem("[ ]", "[ ] C"),
        ])
        self.assertTrue(summary)
        self.assertEqual(summary.item_count, 3)
        self.assertEqual(summary.complete_count, 1)
        self.assertEqual(summary.incomplete_count, 2)

    def test_empty_summary_is_falsy(self):
        self.assertFalse(TaskListSummary([]))


if __name__ == '__main__':
    unittest.main()
