import cv2
import numpy as np

from models.sudoku_grid import BLANK, DIMENSION, REGION_DIM

CELL_SIZE = 50
CAPTION_HEIGHT = 40
GUTTER = 20
BOARD_SIZE = CELL_SIZE * DIMENSION

WINDOW_NAME = 'Sudoku Solver'

# BGR
WHITE = (255, 255, 255)
LIGHT_GRAY = (211, 211, 211)
BLACK = (0, 0, 0)
DIGIT_COLOR = (60, 60, 60)


def render_board(grid, label):
    """Draw one captioned 9x9 board; cells holding 0 stay empty"""
    img = np.full((CAPTION_HEIGHT + BOARD_SIZE, BOARD_SIZE, 3), 255, dtype=np.uint8)

    cv2.putText(img, label, (10, CAPTION_HEIGHT - 12),
                cv2.FONT_HERSHEY_SIMPLEX, 0.8, BLACK, 2)

    # Shade regions as a checkerboard
    region_size = CELL_SIZE * REGION_DIM
    for br in range(DIMENSION // REGION_DIM):
        for bc in range(DIMENSION // REGION_DIM):
            color = WHITE if (br + bc) % 2 == 0 else LIGHT_GRAY
            top_left = (bc * region_size, CAPTION_HEIGHT + br * region_size)
            bottom_right = ((bc + 1) * region_size, CAPTION_HEIGHT + (br + 1) * region_size)
            cv2.rectangle(img, top_left, bottom_right, color, -1)

    # Draw grid lines
    for i in range(DIMENSION + 1):
        thickness = 3 if i % REGION_DIM == 0 else 1
        offset = min(i * CELL_SIZE, BOARD_SIZE - 1)
        cv2.line(img, (offset, CAPTION_HEIGHT),
                 (offset, CAPTION_HEIGHT + BOARD_SIZE), BLACK, thickness)
        cv2.line(img, (0, CAPTION_HEIGHT + offset),
                 (BOARD_SIZE, CAPTION_HEIGHT + offset), BLACK, thickness)

    # Draw numbers
    for i in range(DIMENSION):
        for j in range(DIMENSION):
            digit = grid[i][j]
            if digit == BLANK:
                continue

            text = str(digit)
            (w, h), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, 0.8, 2)
            x = j * CELL_SIZE + (CELL_SIZE - w) // 2
            y = CAPTION_HEIGHT + i * CELL_SIZE + (CELL_SIZE + h) // 2
            cv2.putText(img, text, (x, y), cv2.FONT_HERSHEY_SIMPLEX, 0.8, DIGIT_COLOR, 2)

    return img


def render_side_by_side(clue, solution):
    """Clue board and solution board next to each other"""
    left = render_board(clue, "Clue")
    right = render_board(solution, "Solution")
    gutter = np.full((left.shape[0], GUTTER, 3), 255, dtype=np.uint8)
    return np.hstack([left, gutter, right])


def show_boards(clue, solution):
    """Pop up a window with both boards; blocks until 'q', Esc or the window is closed"""
    try:
        cv2.imshow(WINDOW_NAME, render_side_by_side(clue, solution))
    except cv2.error as e:
        raise OSError(f"Could not open a window (use --no-display): {e}") from e

    while True:
        key = cv2.waitKey(100) & 0xFF
        if key in (ord('q'), 27):
            break
        if cv2.getWindowProperty(WINDOW_NAME, cv2.WND_PROP_VISIBLE) < 1:
            break

    cv2.destroyWindow(WINDOW_NAME)


def save_boards(path, clue, solution):
    try:
        written = cv2.imwrite(str(path), render_side_by_side(clue, solution))
    except cv2.error as e:
        raise OSError(f"Could not write image to {path}: {e}") from e

    if not written:
        raise OSError(f"Could not write image to {path}")
