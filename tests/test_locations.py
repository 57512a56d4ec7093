import unittest

from libweather.locations import LOCATIONS, SearchType, find_location, search_locations


class TestLocations(unittest.TestCase):
    def test_partial_name_is_case_insensitive(self):
        names = [loc.name for loc in search_locations("er", SearchType.PARTIAL_NAME)]
        self.assertEqual(names, ["TERNI", "PERUGIA"])

    def test_exact_name(self):
        self.assertEqual(len(search_locations("terni", SearchType.EXACT_NAME)), 1)
        self.assertEqual(search_locations("tern", SearchType.EXACT_NAME), [])

    def test_exact_code(self):
        matches = search_locations("30721", SearchType.EXACT_CODE)
        self.assertEqual([loc.name for loc in matches], ["PERUGIA"])

    def test_find_location_by_code_or_name(self):
        self.assertEqual(find_location("31553").name, "TERNI")
        self.assertEqual(find_location("Orvieto").code, "30625")
        self.assertIsNone(find_location("99999"))
        self.assertIsNone(find_location("ROMA"))

    def test_registry_is_immutable(self):
        self.assertIsInstance(LOCATIONS, tuple)
        with self.assertRaises(Exception):
            LOCATIONS[0].name = "ROMA"


if __name__ == "__main__":
    unittest.main()
