"""Output surfaces that receive rendered blocks."""

from typing import List, Optional
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from snippet_reviewer.render.blocks import (
    SEVERITY_COLORS,
    Block,
    CategoryBlock,
    MessageBlock,
    SummaryBlock,
)


class OutputSurface:
    """Append-only list of blocks, cleared at the start of each render."""

    def __init__(self):
        self.blocks: List[Block] = []
        self.scroll_position: int = 0

    def clear(self) -> None:
        """Remove all blocks."""
        self.blocks = []
        self.scroll_position = 0

    def append(self, block: Block) -> None:
        """Append a block at the end."""
        self.blocks.append(block)

    def show(self, block: Block) -> None:
        """Replace the whole surface with a single block."""
        self.clear()
        self.append(block)

    def scroll_to_end(self) -> None:
        """Move the view to the last block."""
        self.scroll_position = len(self.blocks)


class ConsoleSurface(OutputSurface):
    """Surface that also draws every block to a rich console."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize console surface.

        Args:
            console: Console to draw on (defaults to stdout)
        """
        super().__init__()
        self.console = console or Console()

    def append(self, block: Block) -> None:
        super().append(block)
        self.console.print(to_renderable(block))

    def scroll_to_end(self) -> None:
        super().scroll_to_end()
        self.console.line()


def to_renderable(block: Block) -> Panel:
    """Convert a block to a rich panel."""
    color = SEVERITY_COLORS[block.severity]

    if isinstance(block, SummaryBlock):
        body = Group(
            Text(block.summary),
            Text(""),
            Text.assemble(
                ("Readability Score: ", "bold"),
                (block.score_label, f"bold {color}"),
            ),
        )
        return Panel(body, title=f"[bold]{block.title}[/bold]", title_align="left")

    if isinstance(block, CategoryBlock):
        body = Group(*(Text(f"• {item}") for item in block.items))
        return Panel(
            body,
            title=Text(block.title, style=f"bold {color}"),
            title_align="left",
            border_style=color,
        )

    if isinstance(block, MessageBlock):
        title = Text(block.title, style=f"bold {color}") if block.title else None
        return Panel(Text(block.text), title=title, title_align="left", border_style=color)

    raise TypeError(f"Unknown block type: {type(block).__name__}")
