"""
Installer pipelines.

Orchestration functions combining services for each installer task.
"""

from installer.pipelines.select_language import (
    TASK_NAME as SELECT_LANGUAGE_TASK,
    LanguageRequiredException,
    is_valid_langcode,
    run_select_language_task,
    submit_select_language,
)

__all__ = [
    "SELECT_LANGUAGE_TASK",
    "LanguageRequiredException",
    "is_valid_langcode",
    "run_select_language_task",
    "submit_select_language",
]
