import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_compliance.features import build_dual_scoring, risk_tier  # noqa: E402
from resume_compliance.schemas import ComplianceIssue  # noqa: E402


def _hard(count: int) -> list[ComplianceIssue]:
    return [ComplianceIssue(severity="hard", validator="keyword_frequency", message="x") for _ in range(count)]


def _factor(factors, name: str) -> int:
    return next(factor.score for factor in factors if factor.factor == name)


class DualScoringTests(unittest.TestCase):
    def test_empty_inputs_use_neutral_defaults(self):
        report = build_dual_scoring("", "", [], [])
        self.assertEqual(report.ats_score, 53)
        self.assertEqual(report.recruiter_score, 92)
        self.assertEqual(report.risk, "Low")
        self.assertEqual(report.verdict, "Strong resume")

    def test_weights_sum_to_one_hundred(self):
        for markdown, keywords in (("", []), ("## SKILLS\nExcel", ["Excel", "SQL"])):
            report = build_dual_scoring(markdown, "Analyst role", keywords, _hard(3))
            self.assertEqual(len(report.ats_factors), 6)
            self.assertEqual(len(report.recruiter_factors), 6)
            self.assertEqual(sum(factor.weight for factor in report.ats_factors), 100)
            self.assertEqual(sum(factor.weight for factor in report.recruiter_factors), 100)
            self.assertTrue(0 <= report.ats_score <= 100)
            self.assertTrue(0 <= report.recruiter_score <= 100)

    def test_section_structure_factor(self):
        bare = build_dual_scoring("Plain resume text", "", [], [])
        full = build_dual_scoring("## SUMMARY\n## EXPERIENCE\n## SKILLS\n## EDUCATION", "", [], [])
        self.assertEqual(_factor(bare.ats_factors, "Section structure"), 0)
        self.assertEqual(_factor(full.ats_factors, "Section structure"), 100)

    def test_hard_issues_reduce_credibility(self):
        report = build_dual_scoring("", "", [], _hard(2))
        self.assertEqual(_factor(report.recruiter_factors, "Credibility"), 50)
        self.assertEqual(_factor(report.recruiter_factors, "Interview defensibility"), 67)
        self.assertEqual(report.risk, "High")
        self.assertEqual(
            report.summary,
            "Multiple compliance risks detected; rewrite required before using this resume.",
        )

    def test_keyword_load_and_tool_first_reduce_believability(self):
        keywords = [f"skill{index}" for index in range(30)]
        loaded = build_dual_scoring("", "", keywords, [])
        self.assertEqual(_factor(loaded.recruiter_factors, "Skill believability"), 60)
        tool_first = build_dual_scoring("- SQL tuning for reports", "", [], [])
        self.assertEqual(_factor(tool_first.recruiter_factors, "Skill believability"), 85)

    def test_keyword_presence_tracks_semantic_match(self):
        report = build_dual_scoring("Skills: Excel", "", ["Excel", "Tableau"], [])
        self.assertEqual(_factor(report.ats_factors, "Semantic skill match"), 50)
        self.assertEqual(_factor(report.ats_factors, "Keyword presence (non-repetitive)"), 55)


class RiskTierTests(unittest.TestCase):
    def test_tiers(self):
        self.assertEqual(risk_tier(2, 90), "High")
        self.assertEqual(risk_tier(0, 59), "High")
        self.assertEqual(risk_tier(1, 90), "Medium")
        self.assertEqual(risk_tier(0, 74), "Medium")
        self.assertEqual(risk_tier(0, 75), "Low")


if __name__ == "__main__":
    unittest.main()
