from models.constraint_checker import is_valid_sudoku, position_is_safe
from models.sudoku_grid import DIMENSION, SudokuGrid


def next_position(row, col):
    """Advance column-major: down the rows of a column, then on to the next column"""
    if row + 1 < DIMENSION:
        return row + 1, col
    return 0, col + 1


class SudokuSolver:
    def __init__(self, trace=None):
        # trace(row, col, grid) is called once per search frame
        self.trace = trace
        self.assignments = 0
        self.backtracks = 0

    def solve(self, grid):
        """Fill the blanks of grid.solution in place using backtracking.

        Returns True when the grid was completed. On False every cell that was
        blank in the clue is blank again.
        """
        self.assignments = 0
        self.backtracks = 0

        # A clue that already repeats a digit can never be completed
        if not is_valid_sudoku(grid.clue):
            return False

        return self._solve_helper(grid, 0, 0)

    def solve_clue(self, clue):
        """Solve a plain 9x9 list without touching it; returns the solution or None"""
        grid = SudokuGrid(clue)
        if self.solve(grid):
            return grid.snapshot()
        return None

    def _solve_helper(self, grid, row, col):
        """Recursive helper for solving"""
        if self.trace is not None:
            self.trace(row, col, grid)

        if grid.is_full():
            return True

        if col >= DIMENSION:
            return False

        # Given cells are never branched on
        if grid.is_clue(row, col):
            return self._solve_helper(grid, *next_position(row, col))

        for num in range(1, DIMENSION + 1):
            grid.set(row, col, num)
            if position_is_safe(grid.solution, row, col):
                self.assignments += 1

                if self._solve_helper(grid, *next_position(row, col)):
                    return True

                self.backtracks += 1

            grid.clear(row, col)  # Backtrack

        return False
