from models.sudoku_grid import BLANK, DIMENSION, REGION_DIM


def row_is_safe(grid, row, col):
    """Check the digit at (row, col) does not repeat elsewhere in its row"""
    value = grid[row][col]
    for j in range(DIMENSION):
        if j != col and grid[row][j] == value:
            return False
    return True


def col_is_safe(grid, row, col):
    """Check the digit at (row, col) does not repeat elsewhere in its column"""
    value = grid[row][col]
    for i in range(DIMENSION):
        if i != row and grid[i][col] == value:
            return False
    return True


def region_is_safe(grid, row, col):
    """Check the digit at (row, col) does not repeat elsewhere in its 3x3 region"""
    value = grid[row][col]
    start_row = (row // REGION_DIM) * REGION_DIM
    start_col = (col // REGION_DIM) * REGION_DIM

    for i in range(start_row, start_row + REGION_DIM):
        for j in range(start_col, start_col + REGION_DIM):
            # Only the target cell itself is excluded
            if (i, j) != (row, col) and grid[i][j] == value:
                return False
    return True


def position_is_safe(grid, row, col):
    """Check the digit already placed at (row, col) against its row, column and region.

    A blank position never conflicts with anything.
    """
    if grid[row][col] == BLANK:
        return True

    return (row_is_safe(grid, row, col)
            and col_is_safe(grid, row, col)
            and region_is_safe(grid, row, col))


def find_conflicts(grid):
    """Return the (row, col) of every filled cell that duplicates a peer or is not a digit 0-9"""
    conflicts = []
    for i in range(DIMENSION):
        for j in range(DIMENSION):
            value = grid[i][j]
            if not BLANK <= value <= DIMENSION:
                conflicts.append((i, j))
            elif value != BLANK and not position_is_safe(grid, i, j):
                conflicts.append((i, j))
    return conflicts


def is_valid_sudoku(grid):
    """Check if the current grid state is valid"""
    return not find_conflicts(grid)
