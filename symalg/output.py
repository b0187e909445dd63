# output.py - presenting algebraic values in the terminal

from __future__ import annotations

from dataclasses       import dataclass
from typing            import Literal

from rich              import box
from rich.panel        import Panel
from rich.text         import Text

from symalg.atoms      import Atom
from symalg.env        import environment
from symalg.exprs      import Radical
from symalg.sym        import Sym

#
# Rendered Output
#

def in_panel(
        s: str | Text,
        box=box.SQUARE,
        title: str | None = None,
        title_align: Literal['left', 'center', 'right'] = 'center',
        subtitle: str | None = None,
        subtitle_align: Literal['left', 'center', 'right'] = 'center',
) -> str | Text | Panel:
    if environment.ascii_only:
        return str(s)
    return Panel(
        s,
        expand=False,
        box=box,
        title=title,
        title_align=title_align,
        subtitle=subtitle,
        subtitle_align=subtitle_align,
    )

def styled(x: Sym) -> Text:
    "The display text of x, styled by the theme's sentinel and radical colors."
    text = x.render(environment.ascii_only)
    if isinstance(x, Atom) and x.is_sentinel():
        return Text(text, style='symalg.sentinel')
    if isinstance(x, Radical) and x.rad != 1:
        return Text(text, style='symalg.radical')
    return Text(text)


#
# Wrapped Values Providing Rich String Representations
#

@dataclass(frozen=True)
class RichSym:
    "A value shown in a panel, optionally titled, e.g., with the expression it came from."
    this: Sym
    title: str = ''

    def __str__(self) -> str:
        return self.title + str(self.this)

    def __repr__(self) -> str:
        return repr(self.this)

    def __symalg_repr__(self):
        if environment.ascii_only:
            return str(self)
        return in_panel(styled(self.this), title=self.title or None)
