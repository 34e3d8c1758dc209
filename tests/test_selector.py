import random
import unittest
from collections import Counter
from core.heroes import HERO_POOLS, ROLES, TANKS, DAMAGES, SUPPORTS
from core.selector import pick_hero, pick_role_hero


class TestPickHero(unittest.TestCase):
    def test_empty_pool_reports_no_heroes(self):
        self.assertIsNone(pick_hero([]))
        self.assertIsNone(pick_hero([], random.Random(1)))

    def test_single_entry_pool(self):
        self.assertEqual(pick_hero(["Mercy"]), "Mercy")

    def test_pick_stays_in_role(self):
        rng = random.Random(7)
        for role in ROLES:
            others = {hero for other, pool in HERO_POOLS.items() if other != role for hero in pool}
            for _ in range(500):
                hero = pick_role_hero(role, rng=rng)
                self.assertIn(hero, HERO_POOLS[role])
                self.assertNotIn(hero, others)

    def test_uniform_distribution(self):
        # 1000 expected hits per hero; +-30% is far outside normal variation
        rng = random.Random(1234)
        for pool in (TANKS, DAMAGES, SUPPORTS):
            trials = len(pool) * 1000
            counts = Counter(pick_hero(pool, rng) for _ in range(trials))
            self.assertEqual(set(counts), set(pool))
            for hero in pool:
                self.assertGreater(counts[hero], 700, hero)
                self.assertLess(counts[hero], 1300, hero)

    def test_seeded_rng_is_reproducible(self):
        first = [pick_hero(DAMAGES, random.Random(42)) for _ in range(5)]
        second = [pick_hero(DAMAGES, random.Random(42)) for _ in range(5)]
        self.assertEqual(first, second)


class TestPickRoleHero(unittest.TestCase):
    def test_unknown_role(self):
        with self.assertRaises(ValueError):
            pick_role_hero("Healer")

    def test_custom_pools(self):
        pools = {"Tank": [], "Support": ["Ana"]}
        self.assertIsNone(pick_role_hero("Tank", pools))
        self.assertEqual(pick_role_hero("Support", pools), "Ana")


class TestHeroPools(unittest.TestCase):
    def test_pools_are_distinct_and_non_empty(self):
        self.assertEqual(tuple(HERO_POOLS), ROLES)
        for role, pool in HERO_POOLS.items():
            self.assertTrue(pool, role)
            self.assertEqual(len(pool), len(set(pool)), role)

    def test_pool_sizes(self):
        self.assertEqual(len(TANKS), 13)
        self.assertEqual(len(DAMAGES), 19)
        self.assertEqual(len(SUPPORTS), 11)


if __name__ == '__main__':
    unittest.main()
