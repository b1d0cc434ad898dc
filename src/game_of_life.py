import numpy as np

GRID_SIZE = 16   # board width and height in cells
DELAY_MS = 500   # pause between generations

# Live cells of the default seed, as (row, col).
SEED_CELLS = (
    (0, 7),
    (1, 7), (1, 8),
    (4, 10), (4, 11),
    (5, 11),
    (6, 10),
    (9, 4), (9, 5),      # block
    (10, 4), (10, 5),
    (11, 12), (11, 13),
    (12, 12), (12, 13), (12, 14),
    (13, 12), (13, 13),
)


def empty_board():
    return np.zeros((GRID_SIZE, GRID_SIZE), dtype=int)


def seed_board():
    """Return a fresh copy of the default starting pattern."""
    board = empty_board()
    for y, x in SEED_CELLS:
        board[y, x] = 1
    return board


def copy_board(dst, src):
    dst[:] = src
    return dst


def live_neighbours(board, x, y):
    """Count live cells around (x, y). Cells past the edge are skipped, not wrapped."""
    h, w = board.shape
    if not (0 <= x < w and 0 <= y < h):
        raise ValueError(f"cell ({x}, {y}) is outside the {w}x{h} board")
    window = board[max(0, y - 1):y + 2, max(0, x - 1):x + 2]
    return int(window.sum() - board[y, x])


def count_neighbours(board):
    """Compute number of live neighbours for each cell."""
    h, w = board.shape
    padded = np.pad(board, 1)
    return sum(
        padded[1 + i:1 + i + h, 1 + j:1 + j + w]
        for i in (-1, 0, 1)
        for j in (-1, 0, 1)
        if (i != 0 or j != 0)
    )


def lives_on(neighbour_count, alive):
    """Apply the survive-on-2-or-3, born-on-3 rule. Works on scalars or whole arrays."""
    n = np.asarray(neighbour_count)
    return np.where(alive, (n == 2) | (n == 3), n == 3)


def evolve(current, out=None):
    """Write the generation after `current` into `out` and return it.

    Neighbours are counted before anything is written, so `out` may alias
    `current`.
    """
    if out is None:
        out = np.zeros_like(current)
    out[:] = lives_on(count_neighbours(current), current == 1)
    return out


def _binary_cells(cells, what):
    cells = np.asarray(cells)
    if not np.isin(cells, (0, 1)).all():
        raise ValueError(f"{what} cells must be 0 or 1")
    return cells.astype(int)


def _check_board(board):
    board = np.asarray(board)
    if board.shape != (GRID_SIZE, GRID_SIZE):
        raise ValueError(f"board must be {GRID_SIZE}x{GRID_SIZE}, got {board.shape}")
    return _binary_cells(board, "board")


class GameOfLife:
    def __init__(self, initial=None):
        self.width = GRID_SIZE
        self.height = GRID_SIZE
        self.grid = seed_board() if initial is None else _check_board(initial).copy()
        self.next_grid = empty_board()
        self.generation = 0

    def step(self):
        """Advance the simulation by one generation."""
        evolve(self.grid, out=self.next_grid)
        copy_board(self.grid, self.next_grid)
        self.generation += 1
        return self.grid

    def set_pattern(self, pattern, x, y):
        """Stamp a 0/1 pattern with its top-left corner at (x, y).

        Raises ValueError if the pattern would run off the board or holds
        anything other than 0 and 1.
        """
        pattern = np.asarray(pattern)
        h, w = pattern.shape
        if x < 0 or y < 0 or x + w > self.width or y + h > self.height:
            raise ValueError(f"{w}x{h} pattern does not fit at ({x}, {y})")
        self.grid[y:y+h, x:x+w] = _binary_cells(pattern, "pattern")

    def count_alive(self):
        """Number of live cells on the current board."""
        return int(np.sum(self.grid))
