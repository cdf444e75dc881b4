import unittest

from PIL import Image

from term_image_viewer.resize import closest_multiple, fit_dimensions, resize_for_ascii, resize_to_cells


class ClosestMultipleTests(unittest.TestCase):
    def test_rounds_half_up(self):
        self.assertEqual(closest_multiple(6, 4), 8)
        self.assertEqual(closest_multiple(5, 4), 4)
        self.assertEqual(closest_multiple(12, 8), 16)
        self.assertEqual(closest_multiple(11, 8), 8)

    def test_never_below_base(self):
        self.assertEqual(closest_multiple(1, 8), 8)


class FitDimensionsTests(unittest.TestCase):
    def test_width_constrained(self):
        self.assertEqual(fit_dimensions((100, 37), (80, 80)), (80, 29))

    def test_height_constrained(self):
        self.assertEqual(fit_dimensions((50, 100), (80, 40)), (20, 40))

    def test_upscales_small_images(self):
        self.assertEqual(fit_dimensions((2, 1), (40, 40)), (40, 20))


class ResizeToCellsTests(unittest.TestCase):
    def test_dimensions_are_cell_multiples(self):
        sizes = [(100, 37), (37, 100), (640, 480), (3, 3), (1, 200)]
        for source in sizes:
            for grid in [(20, 10), (7, 3), (80, 25)]:
                for footprint in [(4, 8), (2, 4)]:
                    image = Image.new('RGBA', source)
                    out = resize_to_cells(image, grid, footprint)
                    width, height = out.size
                    self.assertEqual(width % footprint[0], 0)
                    self.assertEqual(height % footprint[1], 0)
                    self.assertLessEqual(width, grid[0] * footprint[0])
                    self.assertLessEqual(height, grid[1] * footprint[1])

    def test_aspect_within_one_cell(self):
        image = Image.new('RGBA', (100, 37))
        out = resize_to_cells(image, (20, 10), (4, 8))
        self.assertEqual(out.size, (80, 32))
        self.assertLessEqual(abs(out.size[1] - out.size[0] * 37 / 100), 8)

    def test_ascii_stretches_horizontally(self):
        image = Image.new('RGBA', (100, 50))
        self.assertEqual(resize_for_ascii(image, (40, 20)).size, (40, 10))

    def test_ascii_single_column_stays_within_width(self):
        image = Image.new('RGBA', (10, 10))
        self.assertEqual(resize_for_ascii(image, (1, 5)).size, (1, 1))


if __name__ == "__main__":
    unittest.main()
