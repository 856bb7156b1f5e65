import argparse
import sys

from models.constraint_checker import find_conflicts
from models.sudoku_grid import SudokuGrid
from models.sudoku_solver import SudokuSolver
from utils.puzzle_io import PuzzleFormatError, format_grid, load_puzzle


class SudokuApp:
    def __init__(self, debug=False, display=True, output=None):
        self.display = display
        self.output = output
        self.sudoku_solver = SudokuSolver(trace=self.debug_trace if debug else None)

    def run(self, puzzle_path):
        """Load, solve and present one puzzle. Returns the process exit code."""
        try:
            clue = load_puzzle(puzzle_path)
        except PuzzleFormatError as e:
            print(f"Invalid puzzle file: {e}")
            return 1
        except OSError:
            print("Couldn't open file.")
            return 1

        grid = SudokuGrid(clue)
        print(format_grid(grid.clue, "Clue:"))

        print("\nSolving Sudoku...")
        if not self.sudoku_solver.solve(grid):
            print("No solution is possible.")

            # Show what makes the clue invalid
            conflicts = find_conflicts(grid.clue)
            if conflicts:
                cells = ", ".join(f"[{r},{c}]" for r, c in conflicts)
                print(f"The clue contains duplicates or values outside 0-9 at: {cells}")
            return 0

        print("Sudoku solved!")
        print(format_grid(grid.snapshot(), "Solution:"))
        print(f"Assignments: {self.sudoku_solver.assignments}, "
              f"Backtracks: {self.sudoku_solver.backtracks}")

        clue_rows = [list(row) for row in grid.clue]
        solution = grid.snapshot()

        if self.output:
            from utils.board_renderer import save_boards
            try:
                save_boards(self.output, clue_rows, solution)
            except OSError as e:
                print(e)
                return 1
            print(f"Saved boards to {self.output}")

        if self.display:
            try:
                self.show_solution_window(clue_rows, solution)
            except OSError as e:
                print(e)
                return 1

        return 0

    def show_solution_window(self, clue, solution):
        """Pop up a window with the clue and the solution"""
        from utils.board_renderer import show_boards
        print("Press 'q' to close the window")
        show_boards(clue, solution)

    def debug_trace(self, row, col, grid):
        """Print every search frame and wait for Enter before continuing"""
        print(f"solve({row}, {col})")
        print(format_grid(grid.snapshot()))
        try:
            input()
        except EOFError:
            # Nothing left to wait on, keep stepping without pausing
            pass


def ask_for_puzzle():
    try:
        return input("Enter puzzle file path: ").strip()
    except EOFError:
        return ""


def main(argv=None):
    parser = argparse.ArgumentParser(description="Solve a 9x9 Sudoku puzzle by backtracking")
    parser.add_argument("puzzle", nargs="?",
                        help="file with nine lines of nine digits, 0 for blanks")
    parser.add_argument("--debug", action="store_true",
                        help="print every search step and wait for Enter")
    parser.add_argument("--no-display", dest="display", action="store_false",
                        help="do not open the solution window")
    parser.add_argument("--output", default=None,
                        help="save the clue and solution boards to this image file")
    args = parser.parse_args(argv)

    puzzle_path = args.puzzle or ask_for_puzzle()
    if not puzzle_path:
        print("No file selected: exiting.")
        return 0

    app = SudokuApp(debug=args.debug, display=args.display, output=args.output)
    return app.run(puzzle_path)


if __name__ == "__main__":
    sys.exit(main())
