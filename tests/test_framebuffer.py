import unittest

from src.dice.framebuffer import FrameBuffer


def _filled(buffer: FrameBuffer, char: str = "#") -> set:
    return {
        (x, y)
        for y in range(buffer.height)
        for x in range(buffer.width)
        if buffer.get(x, y) == char
    }


class FrameBufferTests(unittest.TestCase):
    def setUp(self) -> None:
        self.buffer = FrameBuffer(80, 30)

    def test_starts_blank(self) -> None:
        self.assertEqual(self.buffer.rows(), [" " * 80] * 30)

    def test_zero_length_line_plots_one_cell(self) -> None:
        self.buffer.draw_line(5, 5, 5, 5, "#")
        self.assertEqual(_filled(self.buffer), {(5, 5)})

    def test_horizontal_line(self) -> None:
        self.buffer.draw_line(2, 3, 8, 3, "#")
        self.assertEqual(_filled(self.buffer), {(x, 3) for x in range(2, 9)})

    def test_reverse_vertical_line(self) -> None:
        self.buffer.draw_line(4, 9, 4, 1, "#")
        self.assertEqual(_filled(self.buffer), {(4, y) for y in range(1, 10)})

    def test_diagonal_line(self) -> None:
        self.buffer.draw_line(0, 0, 5, 5, "#")
        self.assertEqual(_filled(self.buffer), {(i, i) for i in range(6)})

    def test_steep_line_hits_endpoints_one_cell_per_row(self) -> None:
        self.buffer.draw_line(10, 2, 13, 20, "#")
        cells = _filled(self.buffer)
        self.assertIn((10, 2), cells)
        self.assertIn((13, 20), cells)
        self.assertEqual(sorted(y for _, y in cells), list(range(2, 21)))

    def test_line_partly_off_grid_is_clipped_silently(self) -> None:
        self.buffer.draw_line(-3, 0, 2, 0, "#")
        self.assertEqual(_filled(self.buffer), {(0, 0), (1, 0), (2, 0)})

    def test_out_of_bounds_plot_ignored(self) -> None:
        before = self.buffer.rows()
        for x, y in ((-1, 0), (0, -1), (80, 0), (0, 30), (500, -500)):
            self.buffer.plot(x, y, "@")
        self.assertEqual(self.buffer.rows(), before)

    def test_get_rejects_out_of_range(self) -> None:
        self.buffer.plot(79, 29, "#")
        self.assertEqual(self.buffer.get(79, 29), "#")
        for x, y in ((-1, 29), (79, -1), (80, 0), (0, 30)):
            with self.assertRaises(IndexError):
                self.buffer.get(x, y)

    def test_plot_overwrites(self) -> None:
        self.buffer.draw_line(0, 0, 3, 0, "#")
        self.buffer.plot(1, 0, "7")
        self.assertEqual(self.buffer.rows()[0][:4], "#7##")

    def test_to_text_layout(self) -> None:
        text = FrameBuffer(4, 2, ".").to_text()
        self.assertEqual(text, "....\n....\n")

    def test_invalid_construction(self) -> None:
        with self.assertRaises(ValueError):
            FrameBuffer(0, 5)
        with self.assertRaises(ValueError):
            FrameBuffer(5, 5, fill="")


if __name__ == "__main__":
    unittest.main()
