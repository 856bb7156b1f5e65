BLANK = 0  # Symbol used for a blank grid position
DIMENSION = 9  # Overall size of the grid
REGION_DIM = 3  # Size of a sub region


class SudokuGrid:
    """Clue grid plus the working solution grid of one puzzle.

    The clue is frozen at construction time. The solution starts as a copy
    of the clue and is the only thing the solver writes to.
    """

    def __init__(self, clue):
        if len(clue) != DIMENSION or any(len(row) != DIMENSION for row in clue):
            raise ValueError(f"Grid must be {DIMENSION}x{DIMENSION}")

        self.clue = tuple(tuple(int(value) for value in row) for row in clue)
        self.solution = [list(row) for row in self.clue]

    def get(self, row, col):
        return self.solution[row][col]

    def set(self, row, col, value):
        if self.is_clue(row, col):
            raise ValueError(f"Cell [{row},{col}] is given in the clue")
        self.solution[row][col] = value

    def clear(self, row, col):
        self.set(row, col, BLANK)

    def is_clue(self, row, col):
        return self.clue[row][col] != BLANK

    def is_blank(self, row, col):
        return self.solution[row][col] == BLANK

    def is_full(self):
        """Return True if every position in the solution is filled"""
        for row in self.solution:
            for value in row:
                if value == BLANK:
                    return False
        return True

    def snapshot(self):
        """Independent copy of the solution, safe to hand to printers and renderers"""
        return [row[:] for row in self.solution]
