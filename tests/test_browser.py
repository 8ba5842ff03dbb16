import io
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

TESTS_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = TESTS_DIR.parent
sys.path.insert(0, str(PROJECT_ROOT))

import skia

import browser
from browser import Browser
from display.paint_command import DrawText, paint, raster
from layout.font import FontCache, FontError
from setting.config import LayoutConfig


def has_glyphs():
    return FontCache().get_font(12, "normal", "roman").measure("abc") > 0

PAGE = ("<!doctype html><html><head><title>Sample</title></head>"
        "<body><p>Hello <b>bold</b> and <i>italic</i> text.</p>"
        "<p><small>fine</small> <big>print</big></p></body></html>")


class BrowserTests(unittest.TestCase):
    def test_load_builds_tree_and_display_list(self):
        b = Browser()
        display_list = b.load(PAGE)
        self.assertEqual(b.nodes.tag, "html")
        self.assertEqual([run.text for run in display_list],
            ["Sample", "Hello", "bold", "and", "italic", "text.",
             "fine", "print"])
        self.assertGreater(b.height, 0)

    def test_font_error_falls_back_to_default_family(self):
        b = Browser(LayoutConfig(font_family="No Such Family"))
        real = browser.LineLayout
        calls = []

        def flaky(root, config, fonts):
            calls.append(fonts.family)
            if len(calls) == 1:
                raise FontError("backend down")
            return real(root, config, fonts)

        with mock.patch.object(browser, "LineLayout", flaky):
            b.load("<p>x</p>")
        self.assertEqual(calls, ["No Such Family", None])
        self.assertEqual([run.text for run in b.display_list], ["x"])

    def test_paint_commands_follow_the_display_list(self):
        b = Browser()
        b.load(PAGE)
        cmds = paint(b.display_list, scroll=10)
        self.assertEqual(len(cmds), len(b.display_list))
        self.assertIsInstance(cmds[0], DrawText)
        self.assertEqual(cmds[0].text, b.display_list[0].text)
        self.assertAlmostEqual(cmds[0].top, b.display_list[0].y - 10, places=3)

    def test_paint_rect_is_the_run_box_shifted_by_scroll(self):
        b = Browser()
        b.load(PAGE)
        run = b.display_list[1]
        rect = run.self_rect()
        cmd = DrawText(run, scroll=25)
        self.assertAlmostEqual(cmd.rect.left(), rect.left(), places=3)
        self.assertAlmostEqual(cmd.rect.right(), rect.right(), places=3)
        self.assertAlmostEqual(cmd.rect.top(), rect.top() - 25, places=3)
        self.assertAlmostEqual(cmd.rect.bottom(), rect.bottom() - 25, places=3)
        self.assertFalse(hasattr(cmd, "children"))

    def test_draw_executes_one_command_per_run(self):
        b = Browser()
        b.load(PAGE)
        surface = skia.Surface(800, 600)
        with mock.patch.object(DrawText, "execute") as execute:
            b.draw(surface.getCanvas())
        self.assertEqual(execute.call_count, len(b.display_list))

    @unittest.skipUnless(has_glyphs(), "no system fonts available to skia")
    def test_draw_paints_glyphs(self):
        b = Browser()
        b.load(PAGE)
        blank = skia.Surface(800, 600)
        blank.getCanvas().clear(skia.ColorWHITE)
        drawn = skia.Surface(800, 600)
        canvas = drawn.getCanvas()
        canvas.clear(skia.ColorWHITE)
        b.draw(canvas)
        self.assertNotEqual(drawn.makeImageSnapshot().tobytes(),
            blank.makeImageSnapshot().tobytes())

    def test_raster_produces_a_surface_of_the_viewport(self):
        b = Browser()
        b.load(PAGE)
        surface = raster(b.display_list, 800, 200)
        self.assertEqual((surface.width(), surface.height()), (800, 200))

    def test_save_png(self):
        b = Browser()
        b.load(PAGE)
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "page.png"
            b.save_png(str(path))
            self.assertTrue(path.read_bytes().startswith(b"\x89PNG"))


class MainTests(unittest.TestCase):
    def run_main(self, argv, stdin_text=""):
        stdout = io.StringIO()
        stderr = io.StringIO()
        with mock.patch("sys.stdout", stdout), \
                mock.patch("sys.stderr", stderr), \
                mock.patch("sys.stdin", io.StringIO(stdin_text)):
            code = browser.main(argv)
        return code, stdout.getvalue(), stderr.getvalue()

    def test_prints_runs_from_a_file(self):
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "page.html"
            path.write_text(PAGE, encoding="utf-8")
            code, out, _ = self.run_main([str(path)])
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 8)
        self.assertTrue(lines[2].endswith("12-bold-roman bold"))

    def test_tree_from_stdin(self):
        code, out, _ = self.run_main(["--tree"], "<p>hi</p>")
        self.assertEqual(code, 0)
        self.assertEqual([line.strip() for line in out.splitlines()],
            ["<html>", "<body>", "<p>", "'hi'"])

    def test_missing_file(self):
        code, _, err = self.run_main(["/nonexistent/page.html"])
        self.assertEqual(code, 1)
        self.assertIn("cannot read", err)


if __name__ == "__main__":
    unittest.main()
