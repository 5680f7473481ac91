"""
Tests for the URL list loader and link extraction helpers.
"""
import os
import shutil
import tempfile
import unittest

from extractlinks.common.errors import ReadError
from extractlinks.common.utils import extract_links, get_memory_usage, read_url_list


class TestReadUrlList(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def _write(self, data, name='urls.txt'):
        path = os.path.join(self.temp_dir, name)
        with open(path, 'wb') as f:
            f.write(data)
        return path

    def test_lines_in_file_order(self):
        path = self._write(b"https://a.com\nhttps://b.com\nhttps://c.com\n")
        self.assertEqual(read_url_list(path), ["https://a.com", "https://b.com", "https://c.com"])

    def test_last_line_without_newline(self):
        path = self._write(b"https://a.com\nhttps://b.com")
        self.assertEqual(read_url_list(path), ["https://a.com", "https://b.com"])

    def test_blank_lines_are_kept(self):
        path = self._write(b"https://a.com\n\nhttps://b.com\n\n")
        self.assertEqual(read_url_list(path), ["https://a.com", "", "https://b.com", ""])

    def test_crlf_line_endings(self):
        path = self._write(b"https://a.com\r\nhttps://b.com\r\n")
        self.assertEqual(read_url_list(path), ["https://a.com", "https://b.com"])

    def test_empty_file(self):
        path = self._write(b"")
        self.assertEqual(read_url_list(path), [])

    def test_missing_file(self):
        path = os.path.join(self.temp_dir, 'missing.txt')
        with self.assertRaises(ReadError) as ctx:
            read_url_list(path)
        self.assertEqual(ctx.exception.path, path)
        self.assertIsInstance(ctx.exception.__cause__, OSError)

    def test_directory_is_a_read_error(self):
        with self.assertRaises(ReadError):
            read_url_list(self.temp_dir)

    def test_invalid_utf8_line_is_kept(self):
        path = self._write(b"https://a.com\nhttps://caf\xe9.com/\nhttps://b.com\n")
        self.assertEqual(
            read_url_list(path),
            ["https://a.com", "https://caf�.com/", "https://b.com"]
        )


class TestExtractLinks(unittest.TestCase):
    def test_two_links_and_trailing_punctuation(self):
        body = "Visit https://x.io/path1 and https://x.io/path2!"
        self.assertEqual(extract_links(body), ["https://x.io/path1", "https://x.io/path2"])

    def test_query_string_characters(self):
        self.assertEqual(extract_links("https://example.com/a?b=1_2"), ["https://example.com/a?b=1_2"])

    def test_http_scheme_does_not_match(self):
        self.assertEqual(extract_links("http://example.com/page"), [])

    def test_bare_scheme_does_not_match(self):
        self.assertEqual(extract_links("see https:// for details"), [])

    def test_stops_at_characters_outside_the_set(self):
        body = '<a href="https://site.org/x-y/z.html#top">https://site.org:8080/</a>'
        self.assertEqual(extract_links(body), ["https://site.org/x-y/z.html", "https://site.org"])

    def test_duplicates_are_kept_in_order(self):
        body = "https://b.com https://a.com https://b.com"
        self.assertEqual(extract_links(body), ["https://b.com", "https://a.com", "https://b.com"])

    def test_extraction_is_repeatable(self):
        body = "one https://a.io/1 two https://a.io/2?q=x three"
        self.assertEqual(extract_links(body), extract_links(body))

    def test_no_links(self):
        self.assertEqual(extract_links(""), [])


class TestMemoryUsage(unittest.TestCase):
    def test_reports_positive_megabytes(self):
        self.assertGreater(get_memory_usage(), 0)


if __name__ == '__main__':
    unittest.main()
