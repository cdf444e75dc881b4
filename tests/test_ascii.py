import unittest

from PIL import Image

from term_image_viewer.ascii import best_glyph, render_ascii
from term_image_viewer.glyphs import ASCII_FONT


class BestGlyphTests(unittest.TestCase):
    def test_font_size(self):
        self.assertEqual(len(ASCII_FONT), 94)

    def test_extremes(self):
        self.assertEqual(best_glyph(0), '`')
        self.assertEqual(best_glyph(255), 'B')

    def test_ties_favor_earlier_entry(self):
        self.assertEqual(best_glyph(76), '(')
        self.assertEqual(best_glyph(88), '+')
        self.assertEqual(best_glyph(218), 'B')

    def test_nearest_brightness(self):
        self.assertEqual(best_glyph(23), '.')
        self.assertEqual(best_glyph(129), '1')


class RenderAsciiTests(unittest.TestCase):
    def test_one_cell_per_pixel(self):
        image = Image.new('RGBA', (6, 3), (255, 255, 255, 255))
        grid = render_ascii(image, (0, 0, 0))
        self.assertEqual(len(grid), 3)
        self.assertTrue(all(len(row) == 6 for row in grid))
        self.assertEqual(grid[0][0].glyph, 'B')
        self.assertEqual(grid[0][0].fg, (255, 255, 255))
        self.assertIsNone(grid[0][0].bg)

    def test_colour_is_premultiplied(self):
        image = Image.new('RGBA', (1, 1), (255, 0, 0, 0))
        grid = render_ascii(image, (0, 40, 80))
        self.assertEqual(grid[0][0].fg, (0, 40, 80))


if __name__ == "__main__":
    unittest.main()
