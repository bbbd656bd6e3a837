from rich import print

from asciicanvas import BoundsPolicy, TextCanvas

CELL_WIDTH = 9
CELL_HEIGHT = 3
GAP = 4

canvas = TextCanvas(3 * CELL_WIDTH + 2 * GAP, 3 * CELL_HEIGHT + 2 * GAP, BoundsPolicy.IGNORE)

names = [["A", "B", "C"], ["D", "E", "F"], ["G", "H", "I"]]
for row, labels in enumerate(names):
    for column, label in enumerate(labels):
        canvas.set_cursor(column * (CELL_WIDTH + GAP), row * (CELL_HEIGHT + GAP))
        canvas.draw_box("thin", CELL_WIDTH, CELL_HEIGHT, label)

for row in range(3):
    y = row * (CELL_HEIGHT + GAP) + 1
    for column in range(2):
        left = column * (CELL_WIDTH + GAP) + CELL_WIDTH
        canvas.draw_line(left, y, left + GAP - 1, y, "right_plain", "left_arrow")

for column in range(3):
    x = column * (CELL_WIDTH + GAP) + CELL_WIDTH // 2
    for row in range(2):
        top = row * (CELL_HEIGHT + GAP) + CELL_HEIGHT
        canvas.draw_line(x, top, x, top + GAP - 1, "bottom_plain", "top_arrow")

print(canvas)
