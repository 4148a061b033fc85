import sys
import time
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_compliance.normalize import (  # noqa: E402
    bullet_lines,
    normalize_ats_resume_markdown,
    normalize_text,
    shingles,
    split_sections,
    tokenize_words,
)


class TokenizerTests(unittest.TestCase):
    def test_normalize_text_replaces_bullet_glyphs_and_collapses_whitespace(self):
        self.assertEqual(normalize_text("•  Led\r\n  team · daily"), "- Led team - daily")
        self.assertEqual(normalize_text(None), "")

    def test_tokenize_words_lowercases_and_drops_short_tokens(self):
        self.assertEqual(tokenize_words("Built an ETL job in Go, C# & SQL!"), ["built", "etl", "job", "sql"])
        self.assertEqual(tokenize_words(""), [])

    def test_shingles_require_enough_words(self):
        self.assertEqual(shingles(["one", "two"], 3), set())
        self.assertEqual(shingles(["one", "two", "three", "four"], 3), {"one two three", "two three four"})

    def test_bullet_lines_only_keep_dash_bullets(self):
        text = "## EXPERIENCE\n- Built dashboards\n* Not a dash bullet\n  - Indented bullet\n-"
        self.assertEqual(bullet_lines(text), ["Built dashboards", "Indented bullet"])


class SectionSplitterTests(unittest.TestCase):
    def test_headings_are_upper_cased_and_leading_text_goes_to_other(self):
        sections = split_sections("Jane Doe\n## Summary\nAnalyst\n##  skills  \nSQL, Excel\n")
        self.assertEqual(list(sections), ["OTHER", "SUMMARY", "SKILLS"])
        self.assertEqual(sections["OTHER"], "Jane Doe")
        self.assertEqual(sections["SUMMARY"], "Analyst")
        self.assertEqual(sections["SKILLS"], "SQL, Excel\n")

    def test_repeated_heading_appends_body(self):
        sections = split_sections("## SKILLS\nSQL\n## EDUCATION\nBSc\n## SKILLS\nPython")
        self.assertEqual(sections["SKILLS"], "SQL\nPython")

    def test_empty_markdown_yields_only_other(self):
        sections = split_sections("")
        self.assertEqual(dict(sections), {"OTHER": ""})

    def test_result_is_read_only(self):
        sections = split_sections("## SUMMARY\nText")
        with self.assertRaises(TypeError):
            sections["SUMMARY"] = "changed"  # type: ignore[index]

    def test_level_three_headings_stay_in_body(self):
        sections = split_sections("## EXPERIENCE\n### Analyst | Acme | 2021\n- Built reports")
        self.assertEqual(list(sections), ["OTHER", "EXPERIENCE"])
        self.assertIn("### Analyst", sections["EXPERIENCE"])

    def test_empty_repeated_heading_keeps_body(self):
        sections = split_sections("## SKILLS\nSQL\n## SKILLS\n## EDUCATION\nBSc")
        self.assertEqual(sections["SKILLS"], "SQL")
        self.assertEqual(list(sections), ["OTHER", "SKILLS", "EDUCATION"])

    def test_many_repeats_of_one_heading_join_in_order(self):
        markdown = "".join(f"## SKILLS\nskill{index}\n" for index in range(2000))
        body = split_sections(markdown)["SKILLS"]
        self.assertEqual(body.split("\n")[:3], ["skill0", "skill1", "skill2"])
        self.assertEqual(body.count("skill"), 2000)

    def test_large_document_splits_in_linear_time(self):
        markdown = "## EXPERIENCE\n" + "- a\n" * 50000
        started = time.perf_counter()
        sections = split_sections(markdown)
        elapsed = time.perf_counter() - started
        self.assertEqual(sections["EXPERIENCE"].count("- a"), 50000)
        self.assertLess(elapsed, 1.0)


class AtsMarkdownNormalizerTests(unittest.TestCase):
    def test_title_dropped_and_headings_canonicalised(self):
        markdown = "# Jane Doe\n## summary\nText\n## Experiences\n### Analyst | Acme | 2020\n- Did things\n"
        self.assertEqual(
            normalize_ats_resume_markdown(markdown),
            "## SUMMARY\nText\n\n## EXPERIENCE\n\n### Analyst | Acme | 2020\n- Did things",
        )

    def test_inline_section_on_first_line_becomes_heading(self):
        markdown = "Jane Doe ## Summary of work\nText"
        self.assertEqual(normalize_ats_resume_markdown(markdown), "## SUMMARY\nText")

    def test_misspelled_and_singular_headings(self):
        markdown = "## SUMMARY\nx\n## experices\ny\n## skill\nz"
        self.assertEqual(
            normalize_ats_resume_markdown(markdown),
            "## SUMMARY\nx\n\n## EXPERIENCE\ny\n\n## SKILLS\nz",
        )

    def test_empty_input(self):
        self.assertEqual(normalize_ats_resume_markdown(None), "")


if __name__ == "__main__":
    unittest.main()
