"""
Coloured terminal renderings of pieces and boards, built as `rich` `Text`.
"""

import typing
from rich.text import Text
from pentomino_tiler.board import Placement, label_grid
from pentomino_tiler.utils.polyominos import Piece

BLOCK = "██"

def _style(piece: Piece) -> str:
    r, g, b = piece.colour
    return f"rgb({r},{g},{b})"

def render_piece(piece: Piece) -> Text:
    """
    Every orientation of `piece`, side by side, six columns apart.
    """
    style = _style(piece)
    text = Text()

    for row in range(5):
        text.append("\n")
        col = 0
        for i, shape in enumerate(piece.orientations):
            min_x = min(x for x, _ in shape)
            for x, y in shape:
                if y != row:
                    continue
                # Shapes are sorted by row then column, so `column` only grows within a row.
                column = 6 * i + x - min_x
                text.append("  " * (column - col))
                text.append(BLOCK, style=style)
                col = column + 1

    return text

def render_board(width: int, height: int, placements: typing.Iterable[Placement]) -> Text:
    placements = list(placements)
    labels = label_grid(width, height, placements)
    pieces = { placement.piece.name: placement.piece for placement in placements }

    text = Text("\n ")
    text.append("▁▁" * width + " \n")

    for row in labels:
        text.append("▕")
        for name in row:
            if name:
                text.append(BLOCK, style=_style(pieces[name]))
            else:
                text.append("  ")
        text.append("▏\n")

    text.append(" " + "▔▔" * width + " \n")
    return text
