from rich.panel import Panel
from rich.text import Text

from prepare_template.tui.enums import UIStyle


class UISection:
    @staticmethod
    def wrap(title: str, body, style: str = UIStyle.BLUE.value) -> Panel:
        return Panel(body, title=title, border_style=style, padding=(0, 1))

    @staticmethod
    def note(title: str, body: str, style: str) -> Panel:
        return Panel(Text(body), title=title, border_style=style, padding=(0, 1))

    @staticmethod
    def line(*parts: tuple[str, str]) -> Text:
        """Plain styled text; ``parts`` are ``(text, style)`` pairs."""
        return Text.assemble(*parts)
