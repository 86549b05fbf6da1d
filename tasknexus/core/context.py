import logging

logger = logging.getLogger(__name__)


def suppress_completed(item, context):
    """Default policy: in todo-only mode, completed items are blanked out."""
    return context.todo_only and item.complete


class FilterContext:
    """
    Per-call configuration for the task list filter.

    Args:
        todo_only (bool): Blank completed items and prune the document down
            to its task lists.
        suppress (callable): Policy `(item, context) -> bool` deciding whether
            a matched item is blanked instead of rendered. Defaults to
            `suppress_completed`.
    """

    def __init__(self, todo_only=False, suppress=None):
        self.todo_only = bool(todo_only)
        self.suppress = suppress or suppress_completed

    @classmethod
    def from_settings(cls, settings=None, **overrides):
        """Builds a context from the settings store; keyword arguments win."""
        if settings is None:
            from tasknexus.core.state import FilterSettings
            settings = FilterSettings.get_instance()

        todo_only = overrides.pop('todo_only', None)
        if todo_only is None:
            todo_only = settings.get('todo_only', False)

        logger.debug(f"FilterContext: todo_only={todo_only}")
        return cls(todo_only=todo_only, **overrides)

    def should_suppress(self, item):
        return bool(self.suppress(item, self))

    def __repr__(self):
        return f"<FilterContext todo_only={self.todo_only}>"
