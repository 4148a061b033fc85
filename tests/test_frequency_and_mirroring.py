import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_compliance.features import check_jd_mirroring, check_keyword_frequency, shingle_similarity  # noqa: E402
from resume_compliance.keywords import classify_keyword  # noqa: E402
from resume_compliance.normalize import split_sections  # noqa: E402

JD_WORDS = "design build maintain scalable data pipelines across cloud infrastructure using python tooling"
FILLER_WORDS = "river mountain orange violet thunder meadow canyon glacier harbor"


def _frequency_issues(markdown: str, keyword: str):
    return check_keyword_frequency(markdown, split_sections(markdown), keyword, classify_keyword(keyword))


class KeywordFrequencyTests(unittest.TestCase):
    def test_tool_used_at_allowed_frequency_passes(self):
        markdown = "## SUMMARY\nAnalyst using SQL daily.\n## SKILLS\nSQL, Python"
        self.assertEqual(_frequency_issues(markdown, "SQL"), [])

    def test_tool_used_above_allowed_frequency_fires(self):
        markdown = "## SUMMARY\nAnalyst using SQL daily.\n## EXPERIENCE\n- Wrote SQL queries\n## SKILLS\nSQL, Python"
        issues = _frequency_issues(markdown, "SQL")
        self.assertEqual(len(issues), 1)
        self.assertEqual(issues[0].severity, "hard")
        self.assertEqual(issues[0].validator, "keyword_frequency")
        self.assertEqual(issues[0].details, {"keyword": "SQL", "count": 3, "max": 2})

    def test_functional_keyword_allows_single_use(self):
        once = "## SUMMARY\nLed stakeholder management for vendors."
        twice = once + "\n## EXPERIENCE\n- Ran stakeholder management reviews"
        self.assertEqual(_frequency_issues(once, "Stakeholder management"), [])
        issues = _frequency_issues(twice, "Stakeholder management")
        self.assertEqual([issue.details.get("count") for issue in issues], [2])

    def test_repeat_within_a_section_fires(self):
        markdown = "## SKILLS\nSQL reporting and SQL tuning"
        issues = _frequency_issues(markdown, "SQL")
        self.assertEqual(len(issues), 1)
        self.assertEqual(issues[0].details["section"], "SKILLS")
        self.assertEqual(issues[0].details["max"], 1)

    def test_repeat_before_first_heading_is_not_a_section_violation(self):
        markdown = "SQL and SQL\n## SKILLS\nPython"
        self.assertEqual(_frequency_issues(markdown, "SQL"), [])


class MirroringTests(unittest.TestCase):
    def test_dense_overlap_fires(self):
        markdown = f"## SUMMARY\n{JD_WORDS}"
        issue = check_jd_mirroring(JD_WORDS, markdown)
        self.assertIsNotNone(issue)
        self.assertEqual(issue.validator, "jd_phrase_mirroring")
        self.assertEqual(issue.severity, "hard")
        self.assertGreaterEqual(issue.details["similarity"], 0.75)
        self.assertEqual(issue.details["n"], 7)

    def test_half_overlap_does_not_fire(self):
        shared = " ".join(JD_WORDS.split()[:9])
        markdown = f"{shared} {FILLER_WORDS}"
        result = shingle_similarity(JD_WORDS, markdown)
        self.assertAlmostEqual(result.similarity, 0.5)
        self.assertIsNone(check_jd_mirroring(JD_WORDS, markdown))

    def test_threshold_is_overridable(self):
        shared = " ".join(JD_WORDS.split()[:9])
        markdown = f"{shared} {FILLER_WORDS}"
        issue = check_jd_mirroring(JD_WORDS, markdown, threshold=0.5)
        self.assertIsNotNone(issue)
        self.assertEqual(issue.details["threshold"], 0.5)

    def test_short_texts_have_zero_similarity(self):
        result = shingle_similarity("too short", "too short")
        self.assertEqual((result.similarity, result.intersection), (0.0, 0))
        self.assertIsNone(check_jd_mirroring("", "", threshold=0.0))

    def test_token_streams_are_capped(self):
        long_jd = " ".join(f"word{index:04d}" for index in range(2000))
        tail = " ".join(f"word{index:04d}" for index in range(1700, 2000))
        self.assertEqual(shingle_similarity(long_jd, tail).intersection, 0)


if __name__ == "__main__":
    unittest.main()
