import unittest
from datetime import datetime, timezone

from app.utils.time import format_created_at, parse_iso_utc


class TestFormatCreatedAt(unittest.TestCase):
    def test_formats_github_timestamp(self) -> None:
        self.assertEqual(format_created_at("2011-01-25T18:44:36Z"), "Tue, 25 Jan 2011 18:44:36 GMT")

    def test_single_digit_day_is_zero_padded(self) -> None:
        self.assertEqual(format_created_at("2020-03-01T00:00:00Z"), "Sun, 01 Mar 2020 00:00:00 GMT")

    def test_passes_through_unusable_values(self) -> None:
        for value in [None, "", "   ", "yesterday", "2011-01-25", "2011-01-25T18:44:36+00:00", "2011-13-45T18:44:36Z"]:
            with self.subTest(value=value):
                self.assertEqual(format_created_at(value), value)

    def test_parse_iso_utc(self) -> None:
        self.assertEqual(
            parse_iso_utc("2024-01-02T03:04:05Z"),
            datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        )
        with self.assertRaises(ValueError):
            parse_iso_utc("2024-01-02 03:04:05")
