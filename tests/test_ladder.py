import os
import random
import sys
import unittest

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from weaver.services.ladder import differs_by_one_letter, find_shortest_path, neighbours

from fixtures.dictionary_helpers import (
    DETOUR_WORDS,
    LADDER_WORDS,
    SALE_WORDS,
    create_test_wordlist,
)


def _hamming(a, b):
    return sum(1 for x, y in zip(a, b) if x != y)


def _assert_ladder(test, path, start, target):
    test.assertEqual(path[0], start)
    test.assertEqual(path[-1], target)
    for prev, curr in zip(path, path[1:]):
        test.assertEqual(_hamming(prev, curr), 1, f"{prev} -> {curr}")


class TestDiffersByOneLetter(unittest.TestCase):
    def test_examples(self):
        self.assertTrue(differs_by_one_letter("sale", "pale"))
        self.assertTrue(differs_by_one_letter("pale", "pane"))
        self.assertFalse(differs_by_one_letter("sale", "sale"))
        self.assertFalse(differs_by_one_letter("sale", "pane"))
        self.assertFalse(differs_by_one_letter("sale", "opal"))

    def test_different_lengths(self):
        self.assertFalse(differs_by_one_letter("sale", "sales"))
        self.assertFalse(differs_by_one_letter("", "a"))

    def test_matches_hamming_distance_and_is_symmetric(self):
        # Small alphabet so that distance-1 pairs are common
        rng = random.Random(2024)
        seen_one = 0
        for _ in range(2000):
            a = "".join(rng.choice("abc") for _ in range(4))
            b = "".join(rng.choice("abc") for _ in range(4))
            expected = _hamming(a, b) == 1
            seen_one += expected
            self.assertEqual(differs_by_one_letter(a, b), expected, (a, b))
            self.assertEqual(differs_by_one_letter(a, b), differs_by_one_letter(b, a))
        self.assertGreater(seen_one, 0)


class TestNeighbours(unittest.TestCase):
    def test_only_dictionary_words_one_step_away(self):
        wl = create_test_wordlist(LADDER_WORDS)
        self.assertEqual(set(neighbours("cold", wl)), {"cord", "bold"})
        self.assertEqual(set(neighbours("cord", wl)), {"cold", "card", "corm", "word"})

    def test_word_outside_dictionary(self):
        wl = create_test_wordlist(LADDER_WORDS)
        self.assertEqual(set(neighbours("cola", wl)), {"cold"})


class TestFindShortestPath(unittest.TestCase):
    def test_cold_to_warm(self):
        wl = create_test_wordlist(LADDER_WORDS)
        path = find_shortest_path("cold", "warm", wl)

        self.assertEqual(len(path), 5)
        _assert_ladder(self, path, "cold", "warm")
        for w in path:
            self.assertIn(w, wl)

    def test_prefers_shorter_route(self):
        wl = create_test_wordlist(DETOUR_WORDS)
        self.assertEqual(find_shortest_path("aaaa", "aabb", wl), ["aaaa", "aaab", "aabb"])

    def test_no_path(self):
        wl = create_test_wordlist(SALE_WORDS)
        self.assertEqual(find_shortest_path("sale", "opal", wl), [])

    def test_start_is_target(self):
        wl = create_test_wordlist(LADDER_WORDS)
        self.assertEqual(find_shortest_path("cold", "cold", wl), ["cold"])

    def test_single_step(self):
        wl = create_test_wordlist(SALE_WORDS)
        self.assertEqual(find_shortest_path("sale", "pale", wl), ["sale", "pale"])

    def test_path_length_is_hamming_when_everything_exists(self):
        # All 4-letter words over "ab": every hamming-k pair is k steps apart
        words = [format(i, "04b").replace("0", "a").replace("1", "b") for i in range(16)]
        wl = create_test_wordlist(words)
        path = find_shortest_path("aaaa", "bbbb", wl)
        self.assertEqual(len(path), 5)
        _assert_ladder(self, path, "aaaa", "bbbb")


if __name__ == '__main__':
    unittest.main()
