"""Category chips: lightweight clickable filter controls."""

from textual.message import Message
from textual.widgets import Static


class CategoryChip(Static):
    """Clickable chip for one filter bucket.

    Posts CategoryChip.Selected on click or Enter/Space; the dashboard owns
    the filter state and decides what the selection means.
    """

    ALLOW_SELECT = False
    can_focus = True

    DEFAULT_CSS = """
    CategoryChip {
        width: auto;
        height: 1;
        margin-right: 1;
        padding: 0 1;
        text-style: bold;
        background: $surface-lighten-1;
        color: $text-muted;
    }

    CategoryChip:hover {
        background: $surface-lighten-2;
        color: $text;
    }

    CategoryChip:focus {
        text-style: bold underline;
    }

    CategoryChip.-selected {
        background: $accent;
        color: $text;
    }

    CategoryChip.-selected:hover {
        background: $primary;
    }
    """

    class Selected(Message):
        def __init__(self, category_id: str) -> None:
            self.category_id = category_id
            super().__init__()

    def __init__(self, category_id: str, label: str, *, selected: bool = False, **kwargs):
        if selected:
            kwargs["classes"] = " ".join(filter(None, [kwargs.get("classes"), "-selected"]))
        super().__init__(label, **kwargs)
        self.category_id = category_id

    @property
    def selected(self) -> bool:
        return self.has_class("-selected")

    def set_selected(self, selected: bool) -> None:
        self.set_class(selected, "-selected")

    def on_click(self, event) -> None:
        self.post_message(self.Selected(self.category_id))

    def on_key(self, event) -> None:
        if event.key in ("enter", "space"):
            event.stop()
            event.prevent_default()
            self.post_message(self.Selected(self.category_id))
