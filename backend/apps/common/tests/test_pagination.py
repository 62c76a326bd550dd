import unittest

from apps.common.pagination import Page, PageRequest, paginate


class PaginationTests(unittest.TestCase):
    def test_metadata_for_partial_last_page(self):
        page = paginate(list(range(7)), PageRequest(page_number=2, page_size=3))
        self.assertEqual(page.items, [6])
        self.assertEqual(page.total_elements, 7)
        self.assertEqual(page.total_pages, 3)
        self.assertTrue(page.is_last)

    def test_first_page_is_not_last_when_more_remain(self):
        page = paginate(list(range(7)), PageRequest(page_number=0, page_size=3))
        self.assertEqual(page.items, [0, 1, 2])
        self.assertFalse(page.is_last)

    def test_out_of_range_page_is_empty_but_keeps_totals(self):
        page = paginate(list(range(4)), PageRequest(page_number=5, page_size=2))
        self.assertEqual(page.items, [])
        self.assertTrue(page.is_empty)
        self.assertEqual(page.total_elements, 4)
        self.assertEqual(page.total_pages, 2)

    def test_pages_concatenate_to_full_sequence(self):
        source = list("abcdefghij")
        collected = []
        for number in range(4):
            collected.extend(paginate(source, PageRequest(number, 3)).items)
        self.assertEqual(collected, source)

    def test_empty_source(self):
        page = Page(items=[], page_number=0, page_size=10, total_elements=0)
        self.assertEqual(page.total_pages, 0)
        self.assertTrue(page.is_last)
