import os
import shutil
import unittest
from pathlib import Path

from pandoc_runner import convert_document, pandoc_available, pandoc_command
from tests.utils.fake_pandoc import FAILING_PANDOC_SCRIPT, write_script
from tests.utils.tempdir import managed_temp_dir

FAKE_PANDOC_OK = """#!/bin/sh
out=""
while [ "$#" -gt 0 ]; do
  if [ "$1" = "-o" ]; then
    out="$2"
    shift
  fi
  shift
done
printf '<!DOCTYPE html>\\n<html><head></head><body><p>ok</p></body></html>\\n' > "$out"
"""

FAKE_PANDOC_SILENT = """#!/bin/sh
exit 0
"""

FAKE_PANDOC_TEXT = """#!/bin/sh
out=""
while [ "$#" -gt 0 ]; do
  if [ "$1" = "-o" ]; then
    out="$2"
    shift
  fi
  shift
done
echo "plain words" > "$out"
"""


class PandocCommandTests(unittest.TestCase):
    def test_command_requests_standalone_html5_with_toc_and_css(self):
        command = pandoc_command(Path("a.md"), Path("_site/a.html"))
        self.assertEqual(
            command,
            [
                "pandoc",
                "--standalone",
                "--toc",
                "--css=style.css",
                "--to=html5",
                "-o",
                str(Path("_site/a.html")),
                "a.md",
            ],
        )

    def test_missing_executable_is_not_available(self):
        self.assertFalse(pandoc_available("mdwi-missing-converter"))


@unittest.skipIf(os.name == "nt", "uses POSIX shell scripts as fake pandoc")
class ConvertDocumentTests(unittest.TestCase):
    def test_successful_conversion(self):
        with managed_temp_dir("pandoc_ok") as tmp:
            exe = write_script(tmp, "fake-pandoc", FAKE_PANDOC_OK)
            source = tmp / "a.md"
            source.write_text("# A", encoding="utf-8")
            ok, error = convert_document(source, tmp / "a.html", executable=str(exe))
            self.assertTrue(ok, error)
            self.assertIsNone(error)
            self.assertIn("<p>ok</p>", (tmp / "a.html").read_text(encoding="utf-8"))

    def test_non_zero_exit_returns_diagnostics(self):
        with managed_temp_dir("pandoc_fail") as tmp:
            exe = write_script(tmp, "fake-pandoc", FAILING_PANDOC_SCRIPT)
            ok, error = convert_document(tmp / "a.md", tmp / "a.html", executable=str(exe))
            self.assertFalse(ok)
            self.assertIn("exit status 3", error)
            self.assertIn("unknown reader", error)

    def test_missing_output_is_a_failure(self):
        with managed_temp_dir("pandoc_silent") as tmp:
            exe = write_script(tmp, "fake-pandoc", FAKE_PANDOC_SILENT)
            ok, error = convert_document(tmp / "a.md", tmp / "a.html", executable=str(exe))
            self.assertFalse(ok)
            self.assertIn("no output", error)

    def test_output_without_head_is_a_failure(self):
        with managed_temp_dir("pandoc_text") as tmp:
            exe = write_script(tmp, "fake-pandoc", FAKE_PANDOC_TEXT)
            ok, error = convert_document(tmp / "a.md", tmp / "a.html", executable=str(exe))
            self.assertFalse(ok)
            self.assertIn("not an HTML document", error)

    def test_unlaunchable_executable_is_a_failure(self):
        with managed_temp_dir("pandoc_missing") as tmp:
            ok, error = convert_document(
                tmp / "a.md", tmp / "a.html", executable=str(tmp / "nope")
            )
            self.assertFalse(ok)
            self.assertTrue(error)


@unittest.skipUnless(shutil.which("pandoc"), "pandoc is not installed")
class RealPandocTests(unittest.TestCase):
    def test_real_pandoc_emits_injection_targets(self):
        with managed_temp_dir("pandoc_real") as tmp:
            source = tmp / "a.md"
            source.write_text("# A\n\n## Section\n\nSee {{b}}.\n", encoding="utf-8")
            ok, error = convert_document(source, tmp / "a.html")
            self.assertTrue(ok, error)
            content = (tmp / "a.html").read_text(encoding="utf-8")
            self.assertIn("<head>", content)
            self.assertIn("<nav", content)
            self.assertIn("</body>", content)
            self.assertIn("{{b}}", content)


if __name__ == "__main__":
    unittest.main()
