#
# A singleton environment for capturing global display options.
#
# This controls whether values render with their mathematical glyphs or
# with plain ASCII fallbacks, and how they are presented in a rich console.
# It is read by every rendering routine but, like any module-level state,
# it is not thread safe to change while other threads are rendering.
#
from __future__ import annotations

from dataclasses  import dataclass, field

from rich.console import Console
from rich.theme   import Theme

bright_theme = Theme({
    "repr.number": "#3333cc",
    "repr.str": "#330066",
    "symalg.sentinel": "bold #990033",
    "symalg.radical": "#006633",
})

dark_theme = Theme({
    "repr.number": "#cccc33",
    "repr.str": "#ccff99",
    "symalg.sentinel": "bold #ff66cc",
    "symalg.radical": "#66ffcc",
})


@dataclass
class Environment:
    """Options governing how algebraic values are displayed, globally available.
    """
    ascii_only: bool = False
    dark_mode: bool = False
    is_interactive: bool = False
    console: Console = field(default_factory=lambda: Console(highlight=True, theme=bright_theme))

    def on_ascii_only(self) -> None:
        "Require ASCII-only output: no glyphs, no rich panels."
        self.ascii_only = True

    def off_ascii_only(self) -> None:
        "Allow glyphs and rich output."
        self.ascii_only = False

    def on_dark_mode(self) -> None:
        "Changes text color to suit dark colored terminals"
        self.dark_mode = True
        self.console.push_theme(dark_theme)

    def on_bright_mode(self) -> None:
        "Text color default suited for light colored terminals"
        self.dark_mode = False
        self.console.push_theme(bright_theme)

    def interactive_mode(self, ascii=None) -> None:
        "Indicate that this session is interactive. No need to turn this off."
        self.is_interactive = True
        if ascii is not None:
            self.ascii_only = ascii

    def console_str(self, rich_str) -> str:
        with self.console.capture() as capture:
            self.console.print(rich_str)
        return capture.get()

environment = Environment()
