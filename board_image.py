"""
Board image export for TicTacToe.
Draws a board snapshot with Pillow so it can be saved as a picture.
"""

from pathlib import Path
from typing import Iterable, Union

from PIL import Image, ImageDraw

from logic.game import GameSession
from logic.game_state import Board, Mark, check_board


class ImageConfig:
    """Colours and sizes for exported board images."""

    CELL_SIZE = 80        # pixels per cell
    GRID_WIDTH = 2
    MARK_WIDTH = 6
    MARK_PADDING = 0.2    # fraction of the cell left blank around a mark

    BACKGROUND = "#1a1a2e"
    CELL_COLOR = "#16213e"
    WINNER_COLOR = "#065f46"
    GRID_COLOR = "#00d4ff"
    X_COLOR = "#f87171"
    O_COLOR = "#10b981"


def render_board(
    board: Board,
    dimension: int,
    highlight: Iterable[int] = (),
    cell_size: int = ImageConfig.CELL_SIZE
) -> Image.Image:
    """
    Draw a board.

    Args:
        board: The board to draw.
        dimension: Board size N.
        highlight: Cells to paint in the winner colour.
        cell_size: Size of one cell in pixels.

    Returns:
        An RGB image of (N * cell_size) pixels square.
    """
    check_board(board, dimension)
    highlight = set(highlight)
    side = dimension * cell_size

    image = Image.new("RGB", (side, side), ImageConfig.BACKGROUND)
    draw = ImageDraw.Draw(image)
    pad = int(cell_size * ImageConfig.MARK_PADDING)

    for index, mark in enumerate(board):
        row, col = divmod(index, dimension)
        x0, y0 = col * cell_size, row * cell_size
        x1, y1 = x0 + cell_size - 1, y0 + cell_size - 1

        fill = ImageConfig.WINNER_COLOR if index in highlight else ImageConfig.CELL_COLOR
        draw.rectangle([x0, y0, x1, y1], fill=fill, outline=ImageConfig.GRID_COLOR,
                       width=ImageConfig.GRID_WIDTH)

        if mark is Mark.X:
            draw.line([x0 + pad, y0 + pad, x1 - pad, y1 - pad],
                      fill=ImageConfig.X_COLOR, width=ImageConfig.MARK_WIDTH)
            draw.line([x1 - pad, y0 + pad, x0 + pad, y1 - pad],
                      fill=ImageConfig.X_COLOR, width=ImageConfig.MARK_WIDTH)
        elif mark is Mark.O:
            draw.ellipse([x0 + pad, y0 + pad, x1 - pad, y1 - pad],
                         outline=ImageConfig.O_COLOR, width=ImageConfig.MARK_WIDTH)

    return image


def save_board_image(session: GameSession, path: Union[str, Path]) -> Path:
    """
    Save the board currently being viewed, winner highlighted.

    Returns:
        The path written to.
    """
    path = Path(path)
    image = render_board(session.board, session.dimension, session.winning_cells())
    image.save(path, format="PNG")
    print(f"Saved board image to {path}")
    return path
