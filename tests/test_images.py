import unittest
from core.images import hero_image_path, fit_within, center_in


class TestHeroImagePath(unittest.TestCase):
    def test_name_used_verbatim(self):
        self.assertEqual(hero_image_path("D.Va"), "images/D.Va.png")
        self.assertEqual(hero_image_path("Soldier 76"), "images/Soldier 76.png")
        self.assertEqual(hero_image_path("Wrecking Ball"), "images/Wrecking Ball.png")

    def test_custom_dir_and_ext(self):
        self.assertEqual(hero_image_path("Ana", "art", ".jpg"), "art/Ana.jpg")


class TestFitWithin(unittest.TestCase):
    def test_wide_image(self):
        # scale = min(400/800, 280/400) = 0.5
        self.assertEqual(fit_within((800, 400), (400, 280)), (400, 200))

    def test_tall_image(self):
        # scale = min(400/200, 280/560) = 0.5
        self.assertEqual(fit_within((200, 560), (400, 280)), (100, 280))

    def test_small_image_scaled_up(self):
        self.assertEqual(fit_within((100, 70), (400, 280)), (400, 280))

    def test_unknown_area_uses_fallback(self):
        self.assertEqual(fit_within((800, 400), (0, 0)), (400, 200))
        self.assertEqual(fit_within((800, 400), (400, -1)), (400, 200))

    def test_minimum_one_pixel(self):
        self.assertEqual(fit_within((10000, 1), (400, 280)), (400, 1))

    def test_rounds_half_up(self):
        # 5 * 0.5 = 2.5 rounds to 3, not to the even 2
        self.assertEqual(fit_within((4, 5), (2, 280)), (2, 3))

    def test_invalid_image_size(self):
        with self.assertRaises(ValueError):
            fit_within((0, 100), (400, 280))


class TestCenterIn(unittest.TestCase):
    def test_center(self):
        self.assertEqual(center_in((400, 200), (50, 60, 400, 280)), (50, 100))
        self.assertEqual(center_in((100, 280), (50, 60, 400, 280)), (200, 60))


if __name__ == '__main__':
    unittest.main()
