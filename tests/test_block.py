import unittest

import numpy as np

from term_image_viewer.analysis import CellAnalysis
from term_image_viewer.block import cell_from_analysis, gradient_glyph, match_glyph, render_block
from term_image_viewer.cells import Cell
from term_image_viewer.constants import Charset
from term_image_viewer.glyphs import GlyphTable


class GlyphTableTests(unittest.TestCase):
    def test_table_sizes(self):
        self.assertEqual(len(GlyphTable.for_charset(Charset.ALL)), 55)
        self.assertEqual(len(GlyphTable.for_charset(Charset.NO_SLOPES)), 51)
        self.assertEqual(len(GlyphTable.for_charset(Charset.BLOCKS)), 8)
        self.assertEqual(len(GlyphTable.for_charset(Charset.HALFS)), 2)

    def test_tables_are_shared(self):
        self.assertIs(GlyphTable.for_charset(Charset.ALL), GlyphTable.for_charset(Charset.ALL))


class MatchGlyphTests(unittest.TestCase):
    def test_exact_match(self):
        table = GlyphTable.for_charset(Charset.ALL)
        self.assertEqual(match_glyph(0x0000ffff, table), ('▄', 0, False))
        self.assertEqual(match_glyph(0xcccccccc, table), ('▌', 0, False))

    def test_every_entry_matches_itself(self):
        table = GlyphTable.for_charset(Charset.ALL)
        for bitmap, _ in table:
            glyph, distance, inverted = match_glyph(bitmap, table)
            first = next(g for b, g in table if b == bitmap)
            self.assertEqual((glyph, distance, inverted), (first, 0, False))

    def test_complement_match_is_inverted(self):
        table = GlyphTable.for_charset(Charset.HALFS)
        self.assertEqual(match_glyph(0xffff0000, table), ('▄', 0, True))

    def test_match_is_pure(self):
        table = GlyphTable.for_charset(Charset.NO_SLOPES)
        for bitmask in (0x12345678, 0xdeadbeef, 0x0f0f0f0f):
            self.assertEqual(match_glyph(bitmask, table), match_glyph(bitmask, table))

    def test_ties_keep_first_entry(self):
        table = GlyphTable.for_charset(Charset.HALFS)
        self.assertEqual(match_glyph(0xaaaaaaaa, table), (' ', 16, False))


class CellFromAnalysisTests(unittest.TestCase):
    def test_inverted_match_swaps_colours(self):
        analysis = CellAnalysis(0xffff0000, fg=(200, 0, 0), bg=(0, 0, 200), fg_count=16)
        cell = cell_from_analysis(analysis, GlyphTable.for_charset(Charset.ALL), True)
        self.assertEqual(cell, Cell('▄', fg=(0, 0, 200), bg=(200, 0, 0)))

    def test_poor_match_blends(self):
        analysis = CellAnalysis(0xaaaaaaaa, fg=(1, 2, 3), bg=(4, 5, 6), fg_count=16)
        cell = cell_from_analysis(analysis, GlyphTable.for_charset(Charset.HALFS), True)
        self.assertEqual(cell, Cell('▒', fg=(1, 2, 3), bg=(4, 5, 6)))

    def test_no_blend_keeps_table_glyph(self):
        analysis = CellAnalysis(0xaaaaaaaa, fg=(1, 2, 3), bg=(4, 5, 6), fg_count=16)
        cell = cell_from_analysis(analysis, GlyphTable.for_charset(Charset.HALFS), False)
        self.assertEqual(cell.glyph, ' ')

    def test_gradient_glyph_range(self):
        self.assertEqual(gradient_glyph(0), ' ')
        self.assertEqual(gradient_glyph(6), ' ')
        self.assertEqual(gradient_glyph(7), '░')
        self.assertEqual(gradient_glyph(13), '▒')
        self.assertEqual(gradient_glyph(25), '▓')
        self.assertEqual(gradient_glyph(32), '█')


class RenderBlockTests(unittest.TestCase):
    def test_grid_dimensions(self):
        pixels = np.zeros((16, 12, 4), dtype=np.uint8)
        pixels[..., 3] = 255
        grid = render_block(pixels, GlyphTable.for_charset(Charset.ALL), True, (0, 0, 0))
        self.assertEqual(len(grid), 2)
        self.assertTrue(all(len(row) == 3 for row in grid))

    def test_top_white_bottom_black(self):
        pixels = np.zeros((8, 4, 4), dtype=np.uint8)
        pixels[..., 3] = 255
        pixels[:4, :, :3] = 255
        grid = render_block(pixels, GlyphTable.for_charset(Charset.ALL), True, (0, 0, 0))
        self.assertEqual(grid, [[Cell('▄', fg=(0, 0, 0), bg=(255, 255, 255))]])


if __name__ == "__main__":
    unittest.main()
