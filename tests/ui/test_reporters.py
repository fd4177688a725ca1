# tests/ui/test_reporters.py
import unittest
import os
import json
import tempfile

from dupfind.core.models import DigestEntry, ScanReport
from dupfind.core.errors import WriteError
from dupfind.ui import (
    pluralize, format_summary, format_group, render_text_report,
    groups_to_json, write_json_report, load_json_report
)

class TestTextReporter(unittest.TestCase):

    def test_pluralize(self):
        self.assertEqual(pluralize(1), "")
        self.assertEqual(pluralize(0), "s")
        self.assertEqual(pluralize(2), "s")
        self.assertEqual(pluralize(17), "s")

    def test_format_group_single_instance(self):
        lines = format_group("abc123", DigestEntry(size=5, files=["c.txt"]))
        self.assertEqual(lines, ["abc123: 5 bytes, 1 instance", "- c.txt"])

    def test_format_group_many_instances(self):
        lines = format_group("abc123", DigestEntry(size=5, files=["a.txt", "b.txt"]))
        self.assertEqual(lines, ["abc123: 5 bytes, 2 instances", "- a.txt", "- b.txt"])

    def test_format_group_undecodable_file_name(self):
        # os.walk hands back the byte 0xff as the surrogate \udcff
        lines = format_group("abc123", DigestEntry(size=5, files=["a\udcff.txt", "b.txt"]))
        self.assertEqual(lines[1], "- a\ufffd.txt")
        lines[1].encode("utf-8")

    def test_format_group_zero_instances(self):
        self.assertEqual(format_group("abc123", DigestEntry(size=0)), ["abc123: 0 bytes, 0 instances"])

    def test_render_text_report(self):
        groups = {
            "h1": DigestEntry(size=5, files=["a.txt", "b.txt"]),
            "h2": DigestEntry(size=7, files=["c.txt"]),
        }
        expected = "\n".join([
            "h1: 5 bytes, 2 instances",
            "- a.txt",
            "- b.txt",
            "h2: 7 bytes, 1 instance",
            "- c.txt",
        ])
        self.assertEqual(render_text_report(groups), expected)

    def test_format_summary_default(self):
        report = ScanReport(scanned_directory=".", total_files=2,
                            groups={"h1": DigestEntry(size=5, files=["a", "b"])})
        self.assertEqual(format_summary(report), ["Total files: 2", "Duplicate entries: 1"])

    def test_format_summary_include_all(self):
        report = ScanReport(scanned_directory=".", include_all=True, total_files=0)
        self.assertEqual(format_summary(report), ["Total files: 0"])


class TestJsonReporter(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_dir = self._tmp.name
        self.groups = {
            "5d41402abc4b2a76b9719d911017c592": DigestEntry(size=5, files=["b.txt", "a.txt"]),
            "7d793037a0760186574b0282f2f435e7": DigestEntry(size=5, files=["c.txt"]),
        }

    def tearDown(self):
        self._tmp.cleanup()

    def test_groups_to_json_shape(self):
        data = json.loads(groups_to_json(self.groups))
        self.assertEqual(data["5d41402abc4b2a76b9719d911017c592"], {"size": 5, "files": ["b.txt", "a.txt"]})
        self.assertEqual(len(data), 2)

    def test_empty_groups(self):
        self.assertEqual(json.loads(groups_to_json({})), {})

    def test_write_and_load_preserves_groups(self):
        path = os.path.join(self.tmp_dir, "report.json")
        write_json_report(self.groups, path)
        self.assertEqual(load_json_report(path), self.groups)

    def test_write_to_missing_directory_raises(self):
        path = os.path.join(self.tmp_dir, "missing", "report.json")
        with self.assertRaises(WriteError) as ctx:
            write_json_report(self.groups, path)
        self.assertEqual(ctx.exception.path, path)

if __name__ == '__main__':
    unittest.main()
