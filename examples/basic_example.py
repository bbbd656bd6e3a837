from rich import print

from asciicanvas import ConflictResolver, TextAlignment, TextCanvas


def main() -> None:
    canvas = TextCanvas(60, 13)

    canvas.set_cursor(1, 1)
    canvas.draw_box("thin", 12, 3, "Client")
    canvas.set_cursor(24, 1)
    canvas.draw_box("double", 12, 3, "API Server")
    canvas.set_cursor(47, 1)
    canvas.draw_box("thin", 12, 3, "Database")
    canvas.set_cursor(24, 8)
    canvas.draw_box("dotted", 12, 4, "Cache\nlayer")
    canvas.set_cursor(1, 8)
    canvas.draw_box("top_and_bottom", 16, 4, "async jobs", TextAlignment.LEFT_CENTER)

    canvas.draw_line(13, 2, 23, 2, "right_plain", "left_arrow")
    canvas.draw_line(36, 2, 46, 2, "right_plus", "left_arrow")
    canvas.draw_line(30, 4, 30, 7, "bottom_plain", "top_arrow")
    canvas.draw_line(23, 9, 18, 9, "left_plain", "right_arrow")

    canvas.set_cursor(38, 5)
    canvas.draw_box("none", 7, 1, "reads")
    canvas.draw_line(53, 4, 36, 10, "bottom_plain", "right_arrow", ConflictResolver.PRESERVE)

    print(canvas)


if __name__ == "__main__":
    main()
