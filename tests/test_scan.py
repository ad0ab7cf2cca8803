"""Tests for reference scanning."""

import unittest
from pathlib import Path

from htmlpack.inline.scan import (
    find_references,
    find_scripts,
    find_stylesheets,
    is_remote,
    resolve_reference,
)


class TestFindStylesheets(unittest.TestCase):
    def test_open_form(self) -> None:
        html = '<head><link rel="stylesheet" href="a.css"></head>'
        refs = find_stylesheets(html)
        self.assertEqual(len(refs), 1)
        self.assertEqual(refs[0].path, "a.css")
        self.assertEqual(refs[0].tag, '<link rel="stylesheet" href="a.css">')
        self.assertEqual(html[refs[0].start:refs[0].end], refs[0].tag)

    def test_self_closing_and_case_insensitive(self) -> None:
        html = "<LINK REL='STYLESHEET' HREF='css/site.css' />"
        refs = find_stylesheets(html)
        self.assertEqual([r.path for r in refs], ["css/site.css"])

    def test_href_before_rel(self) -> None:
        refs = find_stylesheets('<link href="b.css" rel="stylesheet">')
        self.assertEqual([r.path for r in refs], ["b.css"])

    def test_value_may_contain_other_quote(self) -> None:
        html = '<link rel="stylesheet" href="it\'s.css"><link href=\'say "hi".css\' rel=\'stylesheet\'>'
        refs = find_stylesheets(html)
        self.assertEqual([r.path for r in refs], ["it's.css", 'say "hi".css'])

    def test_ignores_other_link_types(self) -> None:
        html = '<link rel="icon" href="favicon.ico"><link rel="preload" href="a.css">'
        self.assertEqual(find_stylesheets(html), [])

    def test_ignores_extra_attributes(self) -> None:
        html = '<link rel="stylesheet" href="a.css" media="print">'
        self.assertEqual(find_stylesheets(html), [])


class TestFindScripts(unittest.TestCase):
    def test_paired_closing_tag(self) -> None:
        refs = find_scripts('<script src="b.js"></script>')
        self.assertEqual(len(refs), 1)
        self.assertEqual(refs[0].tag, '<script src="b.js"></script>')
        self.assertEqual(refs[0].path, "b.js")

    def test_whitespace_before_closing_tag(self) -> None:
        refs = find_scripts('<script src="b.js">\n  </script>')
        self.assertEqual(refs[0].tag, '<script src="b.js">\n  </script>')

    def test_value_may_contain_other_quote(self) -> None:
        html = '<script src="o\'neil.js"></script><script src=\'"odd".js\'></script>'
        refs = find_scripts(html)
        self.assertEqual([r.path for r in refs], ["o'neil.js", '"odd".js'])

    def test_missing_closing_tag(self) -> None:
        refs = find_scripts('<script src="b.js"><p>x</p>')
        self.assertEqual(refs[0].tag, '<script src="b.js">')

    def test_inline_script_not_matched(self) -> None:
        self.assertEqual(find_scripts("<script>\nconsole.log(1)\n</script>"), [])

    def test_other_attributes_not_matched(self) -> None:
        self.assertEqual(find_scripts('<script type="module" src="m.js"></script>'), [])


class TestFindReferences(unittest.TestCase):
    def test_sorted_by_position(self) -> None:
        html = (
            '<script src="first.js"></script>'
            '<link rel="stylesheet" href="second.css">'
            '<script src="third.js"></script>'
        )
        refs = find_references(html)
        self.assertEqual([r.path for r in refs], ["first.js", "second.css", "third.js"])
        self.assertEqual([r.kind for r in refs], ["script", "stylesheet", "script"])


class TestResolveReference(unittest.TestCase):
    def test_relative_to_base_dir(self) -> None:
        base = Path("/srv/site")
        self.assertEqual(resolve_reference("css/a.css", base), Path("/srv/site/css/a.css"))

    def test_strips_query_and_fragment(self) -> None:
        base = Path("/srv/site")
        self.assertEqual(resolve_reference("app.js?v=3", base), Path("/srv/site/app.js"))
        self.assertEqual(resolve_reference("a.css#top", base), Path("/srv/site/a.css"))

    def test_decodes_percent_escapes(self) -> None:
        base = Path("/srv/site")
        self.assertEqual(resolve_reference("my%20file.css", base), Path("/srv/site/my file.css"))

    def test_is_remote(self) -> None:
        self.assertTrue(is_remote("https://cdn.example.com/x.js"))
        self.assertTrue(is_remote("//cdn.example.com/x.js"))
        self.assertTrue(is_remote("data:text/css,body{}"))
        self.assertFalse(is_remote("js/x.js"))


if __name__ == "__main__":
    unittest.main()
