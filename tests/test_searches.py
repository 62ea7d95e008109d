"""
Tests for the linear and binary searchers.
"""

import math
import unittest

from search_benchmark.searches import (
    NOT_FOUND,
    BinarySearch,
    LinearSearch,
    SearchResult,
    Searcher,
    create_searcher,
)

ITEMS = [1, 3, 5, 7, 9]


class TestSearchResult(unittest.TestCase):

    def test_found_property(self):
        self.assertTrue(SearchResult(0, 1).found)
        self.assertFalse(SearchResult(NOT_FOUND, 3).found)

    def test_is_immutable(self):
        result = SearchResult(2, 3)
        with self.assertRaises(AttributeError):
            result.item_index = 4


class SearcherContractMixin:
    """Properties every searcher must satisfy on sorted input."""

    searcher: Searcher

    def test_finds_every_present_element(self):
        for n in (1, 2, 3, 7, 8, 100, 257):
            items = list(range(0, 2 * n, 2))
            for i, value in enumerate(items):
                result = self.searcher.find(items, value)
                self.assertEqual(result.item_index, i, f"n={n}, value={value}")
                self.assertGreaterEqual(result.required_iterations, 1)

    def test_reports_absent_values_as_not_found(self):
        for n in (1, 2, 3, 8, 100):
            items = list(range(0, 2 * n, 2))
            for value in range(-1, 2 * n + 1, 2):
                result = self.searcher.find(items, value)
                self.assertEqual(result.item_index, NOT_FOUND, f"n={n}, value={value}")
                self.assertFalse(result.found)

    def test_is_idempotent(self):
        self.assertEqual(self.searcher.find(ITEMS, 7), self.searcher.find(ITEMS, 7))
        self.assertEqual(self.searcher.find(ITEMS, 4), self.searcher.find(ITEMS, 4))

    def test_does_not_mutate_items(self):
        items = list(ITEMS)
        self.searcher.find(items, 9)
        self.searcher.find(items, 10)
        self.assertEqual(items, ITEMS)

    def test_works_on_tuples_and_strings(self):
        words = ("apple", "banana", "cherry", "date")
        self.assertEqual(self.searcher.find(words, "cherry").item_index, 2)
        self.assertEqual(self.searcher.find(words, "blueberry").item_index, NOT_FOUND)


class TestLinearSearch(SearcherContractMixin, unittest.TestCase):

    def setUp(self):
        self.searcher = LinearSearch()

    def test_name(self):
        self.assertEqual(self.searcher.get_name(), "LinearSearch")
        self.assertEqual(self.searcher.name, "LinearSearch")

    def test_scenario_present(self):
        self.assertEqual(self.searcher.find(ITEMS, 5), SearchResult(2, 3))

    def test_scenario_absent(self):
        self.assertEqual(self.searcher.find(ITEMS, 4), SearchResult(NOT_FOUND, 5))

    def test_iterations_equal_one_based_position(self):
        items = list(range(50))
        for i in items:
            self.assertEqual(self.searcher.find(items, i).required_iterations, i + 1)

    def test_empty_collection(self):
        self.assertEqual(self.searcher.find([], 1), SearchResult(NOT_FOUND, 0))

    def test_unsorted_input(self):
        self.assertEqual(self.searcher.find([9, 1, 5], 5), SearchResult(2, 3))


class TestBinarySearch(SearcherContractMixin, unittest.TestCase):

    def setUp(self):
        self.searcher = BinarySearch()

    def test_name(self):
        self.assertEqual(self.searcher.get_name(), "BinarySearch")

    def test_scenario_first_midpoint_hit(self):
        self.assertEqual(self.searcher.find(ITEMS, 5), SearchResult(2, 1))

    def test_scenario_absent(self):
        # 5 -> high=1, 1 -> low=1, 3 -> low=2, then low > high
        self.assertEqual(self.searcher.find(ITEMS, 4), SearchResult(NOT_FOUND, 4))

    def test_boundary_elements(self):
        self.assertEqual(self.searcher.find(ITEMS, 1).item_index, 0)
        self.assertEqual(self.searcher.find(ITEMS, 9).item_index, 4)
        self.assertEqual(self.searcher.find([42], 42), SearchResult(0, 1))

    def test_empty_collection(self):
        self.assertEqual(self.searcher.find([], 1), SearchResult(NOT_FOUND, 1))

    def test_iteration_bound_for_present_elements(self):
        for n in (1, 2, 5, 16, 17, 1000, 1024):
            items = list(range(n))
            bound = math.ceil(math.log2(n)) + 1
            for value in items:
                self.assertLessEqual(self.searcher.find(items, value).required_iterations, bound,
                                     f"n={n}, value={value}")

    def test_iteration_bound_for_absent_values(self):
        for n in (1, 2, 5, 16, 17, 1000, 1024):
            items = list(range(0, 2 * n, 2))
            bound = math.floor(math.log2(n)) + 2
            for value in range(-1, 2 * n + 1, 2):
                self.assertLessEqual(self.searcher.find(items, value).required_iterations, bound,
                                     f"n={n}, value={value}")

    def test_large_indices(self):
        items = range(0, 2 * 10**12, 2)
        result = self.searcher.find(items, 2 * (10**12 - 1))
        self.assertEqual(result.item_index, 10**12 - 1)
        self.assertLessEqual(result.required_iterations, math.ceil(math.log2(10**12)) + 1)

    def test_unsorted_input_never_returns_out_of_range_index(self):
        items = [9, 1, 7, 3, 5]
        for value in range(11):
            index = self.searcher.find(items, value).item_index
            self.assertTrue(index == NOT_FOUND or 0 <= index < len(items))


class TestCreateSearcher(unittest.TestCase):

    def test_known_keys(self):
        self.assertIsInstance(create_searcher("linear"), LinearSearch)
        self.assertIsInstance(create_searcher("binary"), BinarySearch)

    def test_unknown_key(self):
        with self.assertRaises(ValueError):
            create_searcher("exponential")

    def test_searcher_is_abstract(self):
        with self.assertRaises(TypeError):
            Searcher()


if __name__ == "__main__":
    unittest.main()
