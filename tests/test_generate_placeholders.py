import os
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import shutil
import tempfile
import unittest
import pygame
from core.heroes import HERO_POOLS
from utils.generate_placeholders import generate_placeholders


class TestGeneratePlaceholders(unittest.TestCase):
    def setUp(self):
        self.output_dir = os.path.join(tempfile.mkdtemp(), "images")

    def tearDown(self):
        shutil.rmtree(os.path.dirname(self.output_dir))
        pygame.quit()

    def test_one_image_per_hero(self):
        written = generate_placeholders(self.output_dir)
        total = sum(len(pool) for pool in HERO_POOLS.values())
        self.assertEqual(len(written), total)
        self.assertTrue(os.path.exists(os.path.join(self.output_dir, "D.Va.png")))
        self.assertTrue(os.path.exists(os.path.join(self.output_dir, "Soldier 76.png")))
        image = pygame.image.load(os.path.join(self.output_dir, "Ana.png"))
        self.assertEqual(image.get_size(), (320, 400))

    def test_existing_files_kept(self):
        generate_placeholders(self.output_dir)
        self.assertEqual(generate_placeholders(self.output_dir), [])
        rewritten = generate_placeholders(self.output_dir, pools={"Tank": ["Sigma"]}, overwrite=True)
        self.assertEqual(rewritten, [self.output_dir + "/Sigma.png"])


if __name__ == '__main__':
    unittest.main()
