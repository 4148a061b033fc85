import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_compliance.features import extract_job_min_years, keyword_coverage, must_include_skills  # noqa: E402
from resume_compliance.services.compliance_service import build_keyword_coverage  # noqa: E402


class KeywordCoverageTests(unittest.TestCase):
    def test_coverage_splits_present_and_missing(self):
        present, missing = keyword_coverage("## SKILLS\nMicrosoft Excel, Tableau", ["MS Excel", "SQL", "", "Tableau"])
        self.assertEqual(present, ["MS Excel", "Tableau"])
        self.assertEqual(missing, ["SQL"])

    def test_must_include_skills_requires_both_texts(self):
        resume = "Python, SQL, Docker and Jira"
        jd = "We need SQL and Python; Kubernetes is a plus. Jira daily."
        self.assertEqual(must_include_skills(resume, jd), ["SQL", "Python", "Jira"])
        self.assertEqual(must_include_skills("", jd), [])


class JobMinYearsTests(unittest.TestCase):
    def test_patterns(self):
        self.assertEqual(extract_job_min_years("Minimum of 5 years in analytics"), 5)
        self.assertEqual(extract_job_min_years("3+ years of experience with SQL"), 3)
        self.assertEqual(extract_job_min_years("Role requires 4 yrs in retail"), 4)

    def test_missing_or_implausible(self):
        self.assertIsNone(extract_job_min_years(""))
        self.assertIsNone(extract_job_min_years("Great team, great snacks"))
        self.assertIsNone(extract_job_min_years("60 years experience"))


class KeywordCoverageReportTests(unittest.TestCase):
    def test_report_combines_coverage_skills_and_years(self):
        report = build_keyword_coverage(
            "## SKILLS\nExcel, SQL",
            "Minimum of 3 years with SQL and Excel",
            "",
            ["Excel", "excel", "Tableau"],
        )
        self.assertEqual(report.present, ["Excel"])
        self.assertEqual(report.still_missing, ["Tableau"])
        self.assertEqual(report.must_include_skills, ["Excel", "SQL"])
        self.assertEqual(report.min_years, 3)

    def test_must_include_skills_prefer_original_resume(self):
        report = build_keyword_coverage("## SKILLS\nExcel, SQL", "SQL and Excel", "Python scripting only", [])
        self.assertEqual(report.must_include_skills, [])
        self.assertEqual(report.present, [])
        self.assertIsNone(report.min_years)

    def test_none_inputs(self):
        report = build_keyword_coverage(None, None, None, None)
        self.assertEqual(report.model_dump(), {"present": [], "still_missing": [], "must_include_skills": [], "min_years": None})


if __name__ == "__main__":
    unittest.main()
