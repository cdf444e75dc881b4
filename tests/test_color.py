import unittest

import numpy as np

from term_image_viewer.color import cube_component, premultiply, premultiply_array, rgb_to_ansi256


class PremultiplyTests(unittest.TestCase):
    def test_opaque_pixel_unchanged(self):
        for bg in [(0, 0, 0), (255, 255, 255), (12, 200, 99)]:
            self.assertEqual(premultiply((10, 20, 30, 255), bg), (10, 20, 30))

    def test_transparent_pixel_is_background(self):
        self.assertEqual(premultiply((10, 20, 30, 0), (200, 100, 50)), (200, 100, 50))

    def test_half_alpha_mixes(self):
        r, g, b = premultiply((255, 255, 255, 128), (0, 0, 0))
        self.assertEqual(r, g)
        self.assertEqual(g, b)
        self.assertIn(r, (127, 128))

    def test_array_matches_scalar(self):
        rng = np.random.default_rng(7)
        pixels = rng.integers(0, 256, size=(8, 4, 4), dtype=np.uint8)
        bg = (30, 60, 90)
        out = premultiply_array(pixels, bg)
        self.assertEqual(out.shape, (8, 4, 3))
        self.assertEqual(out.dtype, np.uint8)
        for y in range(8):
            for x in range(4):
                self.assertEqual(tuple(int(c) for c in out[y, x]), premultiply(pixels[y, x], bg))


class AnsiReductionTests(unittest.TestCase):
    def test_component_boundaries(self):
        self.assertEqual(cube_component(0), 0)
        self.assertEqual(cube_component(255), 5)
        self.assertEqual(cube_component(254), 4)

    def test_cube_index(self):
        self.assertEqual(rgb_to_ansi256((0, 0, 0)), 16)
        self.assertEqual(rgb_to_ansi256((255, 255, 255)), 231)
        self.assertEqual(rgb_to_ansi256((255, 0, 0)), 16 + 36 * 5)
        self.assertEqual(rgb_to_ansi256((0, 255, 0)), 16 + 6 * 5)
        self.assertEqual(rgb_to_ansi256((0, 0, 255)), 16 + 5)


if __name__ == "__main__":
    unittest.main()
