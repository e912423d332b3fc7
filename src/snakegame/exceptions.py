from __future__ import annotations


class BoardFullError(Exception):
    """Raised when food cannot be placed because the snake covers every cell."""

    def __init__(self, board_size: int) -> None:
        self.board_size = board_size
        super().__init__(f"no free cell left on a {board_size}x{board_size} board")
