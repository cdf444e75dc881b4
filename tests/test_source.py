import tempfile
import unittest
from pathlib import Path

from PIL import Image

from term_image_viewer.source import ImageSource, ImageSourceError


class ImageSourceTests(unittest.TestCase):
    def test_still_image(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "still.png"
            Image.new("RGB", (12, 6), (10, 20, 30)).save(path)
            source = ImageSource(str(path))
            self.assertFalse(source.is_animated())
            image = source.image()
            self.assertEqual(image.mode, "RGBA")
            self.assertEqual(image.size, (12, 6))

    def test_gif_frames_and_delays(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "anim.gif"
            frames = [Image.new("RGB", (8, 8), c) for c in [(255, 0, 0), (0, 255, 0), (0, 0, 255)]]
            frames[0].save(path, save_all=True, append_images=frames[1:],
                           duration=[100, 200, 300], loop=0)
            source = ImageSource(str(path))
            self.assertTrue(source.is_animated())
            decoded = list(source.frames())
            self.assertEqual(len(decoded), 3)
            self.assertEqual([delay for _, delay in decoded], [0.1, 0.2, 0.3])
            self.assertTrue(all(image.mode == "RGBA" for image, _ in decoded))

    def test_missing_file(self):
        with self.assertRaises(ImageSourceError):
            ImageSource("/nonexistent/picture.png").image()

    def test_not_an_image(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "notes.txt"
            path.write_text("hello", encoding="utf-8")
            with self.assertRaises(ImageSourceError):
                ImageSource(str(path)).image()


if __name__ == "__main__":
    unittest.main()
