"""
Minimado CLI - add and list your Minimado tasks from the terminal.

CLI Usage:
    $ mm "Buy milk"
    $ mm list --all
    $ mm config --show

Programmatic Usage:
    from minimado_cli import TaskClient, format_task_list

    client = TaskClient.from_settings()
    print(format_task_list(client.list_tasks("user_abc")))
"""

__version__ = "1.0.0"

# Re-export key classes for programmatic use
from .api import TaskApiError, TaskClient
from .formatters import format_relative_date, format_tags, format_task_list
from .models import Task, UserConfig
from .storage import ConfigStore

__all__ = [
    # Version info
    "__version__",
    # Models
    "Task",
    "UserConfig",
    # Core functionality
    "ConfigStore",
    "TaskClient",
    "TaskApiError",
    # Formatters
    "format_relative_date",
    "format_tags",
    "format_task_list",
]
