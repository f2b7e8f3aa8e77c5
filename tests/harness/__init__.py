"""Textual in-process test harness for studio-utilities.

Re-exports all public API for convenient imports:
    from tests.harness import run_app, press_and_settle, visible_card_ids, ...
"""

from tests.harness.app_runner import run_app
from tests.harness.interactions import (
    press_and_settle,
    click_and_settle,
)
from tests.harness.assertions import (
    get_dashboard,
    visible_card_ids,
    selected_chip_ids,
    heading_text,
    is_empty_state_visible,
)

__all__ = [
    "run_app",
    "press_and_settle",
    "click_and_settle",
    "get_dashboard",
    "visible_card_ids",
    "selected_chip_ids",
    "heading_text",
    "is_empty_state_visible",
]
