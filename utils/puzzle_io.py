from models.sudoku_grid import BLANK, DIMENSION, REGION_DIM


DIGITS = set("0123456789")


class PuzzleFormatError(ValueError):
    """Raised when a puzzle file does not hold nine rows of nine digits"""


def parse_puzzle(text):
    """Parse nine lines of nine whitespace-separated digits into a 9x9 list.

    A digit from 1-9 is a given value in the clue and 0 marks a blank.
    Empty lines are skipped.
    """
    grid = []

    for line_number, line in enumerate(text.splitlines(), start=1):
        tokens = line.split()
        if not tokens:
            continue

        if len(grid) == DIMENSION:
            raise PuzzleFormatError(f"Line {line_number}: more than {DIMENSION} rows")

        if len(tokens) != DIMENSION:
            raise PuzzleFormatError(
                f"Line {line_number}: expected {DIMENSION} digits, found {len(tokens)}")

        row = []
        for token in tokens:
            if token not in DIGITS:
                raise PuzzleFormatError(f"Line {line_number}: '{token}' is not a digit 0-9")
            row.append(int(token))
        grid.append(row)

    if len(grid) != DIMENSION:
        raise PuzzleFormatError(f"Expected {DIMENSION} rows, found {len(grid)}")

    return grid


def load_puzzle(path):
    """Read a puzzle file. A missing file raises FileNotFoundError."""
    with open(path, encoding="utf-8") as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise PuzzleFormatError(f"Not a text file: {e}") from e
    return parse_puzzle(text)


def format_grid(grid, title=None):
    """Text rendering of a grid, blanks shown as '.'"""
    lines = []
    if title:
        lines.append(title)

    for i, row in enumerate(grid):
        if i % REGION_DIM == 0 and i != 0:
            lines.append("------+-------+------")

        row_str = ""
        for j, cell in enumerate(row):
            if j % REGION_DIM == 0 and j != 0:
                row_str += "| "
            row_str += str(cell if cell != BLANK else '.') + " "

        lines.append(row_str.rstrip())

    return "\n".join(lines)
