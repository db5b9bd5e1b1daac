from dataclasses import dataclass, field

from scanner import GameEntry


@dataclass
class NavigationState:
    """Selection and scroll position over the scanned game list.

    Only ``move_up`` and ``move_down`` change the indices; drawing reads
    ``visible_window`` and never writes back.
    """

    entries: list[GameEntry] = field(default_factory=list)
    selected: int = 0
    scroll_offset: int = 0

    @property
    def selected_entry(self) -> GameEntry:
        return self.entries[self.selected]

    def move_up(self) -> None:
        if self.selected > 0:
            self.selected -= 1
            if self.selected < self.scroll_offset:
                self.scroll_offset = self.selected

    def move_down(self, visible_count: int) -> None:
        if self.selected < len(self.entries) - 1:
            self.selected += 1
            # A window too short for one row still has to keep the selection in view
            count = max(1, visible_count)
            if self.selected >= self.scroll_offset + count:
                self.scroll_offset = self.selected - count + 1

    def visible_window(self, visible_count: int) -> range:
        end = min(self.scroll_offset + max(0, visible_count), len(self.entries))
        return range(self.scroll_offset, max(self.scroll_offset, end))
