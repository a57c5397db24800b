"""
TicTacToe UI
A graphical interface for time-travel TicTacToe using Tkinter.

Shows:
- The board (winning line highlighted)
- Game status and whose turn it is
- Board size slider (3x3 to 5x5)
- Move history with buttons to jump back to any move
"""

import tkinter as tk
from tkinter import ttk, filedialog
from typing import List

from board_image import save_board_image
from logic.config import GameConfig
from logic.game import GameSession
from logic.game_state import GameError, Mark


class UIConfig:
    """Colours and fonts for the UI."""

    BACKGROUND = '#1a1a2e'
    CELL_COLOR = '#16213e'
    WINNER_COLOR = '#065f46'
    TITLE_COLOR = '#00d4ff'
    STATUS_COLOR = '#ffd700'
    X_COLOR = '#f87171'
    O_COLOR = '#10b981'

    FONT = 'Segoe UI'
    # Cells shrink as the board grows so the window keeps its size
    CELL_FONT_SIZE = {3: 24, 4: 20, 5: 16}


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, dimension: int = GameConfig.DEFAULT_DIMENSION, fixed_size: bool = False):
        """Initialize the UI."""
        self.session = GameSession(dimension=dimension, fixed_size=fixed_size)
        self.board_cells: List[tk.Button] = []

        self._create_ui()
        self._rebuild_board()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg=UIConfig.BACKGROUND)
        self.root.minsize(640, 420)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=UIConfig.BACKGROUND)
        style.configure('TLabel', background=UIConfig.BACKGROUND, foreground='white', font=(UIConfig.FONT, 11))
        style.configure('Title.TLabel', font=(UIConfig.FONT, 16, 'bold'), foreground=UIConfig.TITLE_COLOR)
        style.configure('Status.TLabel', font=(UIConfig.FONT, 12), foreground=UIConfig.STATUS_COLOR)

        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 10))

        ttk.Label(left_frame, text="🎮 Game Board", style='Title.TLabel').pack(pady=(0, 5))

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Board size slider
        size_frame = ttk.Frame(left_frame)
        size_frame.pack(pady=5)
        ttk.Label(size_frame, text="Board size:").pack(side=tk.LEFT)

        self.size_var = tk.IntVar(value=self.session.dimension)
        self.size_slider = tk.Scale(
            size_frame,
            from_=GameConfig.MIN_DIMENSION,
            to=GameConfig.MAX_DIMENSION,
            resolution=1,
            orient=tk.HORIZONTAL,
            variable=self.size_var,
            showvalue=True,
            bg=UIConfig.BACKGROUND,
            fg='white',
            highlightthickness=0,
            command=self._on_resize
        )
        self.size_slider.pack(side=tk.LEFT, padx=5)
        if self.session.fixed_size:
            self.size_slider.configure(state='disabled')

        self.board_frame = ttk.Frame(left_frame)
        self.board_frame.pack(pady=10)

        # Control buttons
        control_frame = ttk.Frame(left_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="🔄 Reset",
            font=(UIConfig.FONT, 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="💾 Save image",
            font=(UIConfig.FONT, 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=self._save_image
        ).pack(side=tk.LEFT, padx=5)

        # Right panel - history
        right_frame = ttk.Frame(main_frame, width=260)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        ttk.Label(right_frame, text="📜 History", style='Title.TLabel').pack(pady=(0, 10))

        tk.Button(
            right_frame,
            text="Toggle order",
            font=(UIConfig.FONT, 10),
            bg='#2d3748',
            fg='white',
            width=20,
            command=self._toggle_order
        ).pack(pady=5)

        self.history_frame = ttk.Frame(right_frame)
        self.history_frame.pack(fill=tk.BOTH, expand=True, pady=5)

        tk.Button(
            right_frame,
            text="✕ Quit",
            font=(UIConfig.FONT, 10),
            bg='#ef4444',
            fg='white',
            width=20,
            command=self._quit
        ).pack(side=tk.BOTTOM, pady=10)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _rebuild_board(self):
        """Recreate the NxN grid of cell buttons for the current size."""
        for cell in self.board_cells:
            cell.destroy()
        self.board_cells = []

        dimension = self.session.dimension
        font_size = UIConfig.CELL_FONT_SIZE.get(dimension, 16)
        for index in range(dimension * dimension):
            row, col = divmod(index, dimension)
            cell = tk.Button(
                self.board_frame,
                text="",
                font=(UIConfig.FONT, font_size, 'bold'),
                width=3,
                height=1,
                bg=UIConfig.CELL_COLOR,
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

    def _refresh(self):
        """Redraw board, status and history from the session."""
        board = self.session.board
        winners = self.session.winning_cells()

        for index, cell in enumerate(self.board_cells):
            mark = board[index]
            if mark is Mark.X:
                fg_color = UIConfig.X_COLOR
            elif mark is Mark.O:
                fg_color = UIConfig.O_COLOR
            else:
                fg_color = 'white'
            bg_color = UIConfig.WINNER_COLOR if index in winners else UIConfig.CELL_COLOR
            cell.configure(text=mark.value.strip(), fg=fg_color, bg=bg_color)

        self.status_label.configure(text=self.session.status_text())
        self._refresh_history()

    def _refresh_history(self):
        """Rebuild the move list."""
        for child in self.history_frame.winfo_children():
            child.destroy()

        for entry in self.session.history_entries():
            if entry.is_current:
                ttk.Label(self.history_frame, text=entry.label).pack(anchor=tk.W, pady=1)
            else:
                tk.Button(
                    self.history_frame,
                    text=entry.label,
                    font=(UIConfig.FONT, 9),
                    bg='#2d3748',
                    fg='white',
                    anchor=tk.W,
                    command=lambda m=entry.move: self._jump_to(m)
                ).pack(fill=tk.X, pady=1)

    def _on_cell_click(self, index: int):
        """Play the clicked cell if the move is legal."""
        if self.session.play(index):
            print(f"{self.session.board[index].value} played cell {index}")
            self._refresh()

    def _jump_to(self, move: int):
        """Go back (or forward) to an earlier move."""
        self.session.jump_to(move)
        self._refresh()

    def _on_resize(self, value: str):
        """Start a new game when the slider moves to a new size."""
        dimension = int(float(value))
        if dimension == self.session.dimension:
            return
        try:
            self.session.resize(dimension)
        except GameError as e:
            print(f"Resize refused: {e}")
            self.size_var.set(self.session.dimension)
            return

        print(f"Board size set to: {dimension}x{dimension}")
        self._rebuild_board()
        self._refresh()

    def _toggle_order(self):
        self.session.toggle_order()
        self._refresh_history()

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        self.session.reset()
        self._refresh()

    def _save_image(self):
        """Ask for a file name and save the board as PNG."""
        path = filedialog.asksaveasfilename(
            defaultextension=".png",
            filetypes=[("PNG image", "*.png")],
            initialfile="tictactoe.png"
        )
        if path:
            save_board_image(self.session, path)

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--size",
        type=int,
        choices=GameConfig.dimensions(),
        default=GameConfig.DEFAULT_DIMENSION,
        help="Starting board size"
    )
    parser.add_argument(
        "--fixed",
        action="store_true",
        help="Play the classic 3x3 game with the size slider locked"
    )

    args = parser.parse_args()
    if args.fixed and args.size != GameConfig.FIXED_DIMENSION:
        parser.error(f"--fixed only supports --size {GameConfig.FIXED_DIMENSION}")

    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60)
    print(f"   Board: {args.size}x{args.size}{' (fixed)' if args.fixed else ''}")
    print("="*60 + "\n")

    ui = TicTacToeUI(dimension=args.size, fixed_size=args.fixed)
    ui.run()


if __name__ == "__main__":
    main()
