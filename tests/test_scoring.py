import unittest

from app.schemas.resume import ScoreResult
from app.scoring import (
    SIGNAL_NAMES,
    analyze_resume,
    detect_sections,
    has_quantified_achievement,
    keyword_density,
    score_resume,
)

NO_SIGNAL_TEXT = "Hello there. I enjoy cooking and hiking on weekends."

ALL_SIGNAL_TEXT = (
    "Developed a budgeting project for students.\n"
    "Software internship at Acme.\n"
    "Led a team of four as club captain.\n"
    "Improved page load time by 35%.\n"
    "Python, AWS, SQL"
)

FULL_RESUME = (
    "Jane Doe\n"
    "Email: jane@example.com | GitHub: github.com/jane\n"
    "Summary\nBackend engineer focused on APIs.\n"
    "Work Experience\nInternship at Acme: built REST services in Python and reduced latency by 40%.\n"
    "Served 1200 users daily with Docker and AWS.\n"
    "Education\nBachelor of Science in Computer Science\n"
    "Technical Skills\nPython, Java, SQL, React, Docker\n"
    "Projects\nLed a hackathon team as president of the coding club.\n"
    "Certifications\nAWS Certified Cloud Practitioner\n"
)


class HeuristicScorerTests(unittest.TestCase):
    def test_text_without_signals_scores_zero(self):
        result = score_resume(NO_SIGNAL_TEXT)
        self.assertEqual(result.score, 0)
        self.assertEqual(result.strengths, [])
        self.assertEqual(len(result.improvements), 5)
        self.assertEqual(set(result.signals), set(SIGNAL_NAMES))
        self.assertTrue(all(value == 0 for value in result.signals.values()))

    def test_text_with_all_signals_scores_hundred(self):
        result = score_resume(ALL_SIGNAL_TEXT)
        self.assertEqual(result.score, 100)
        self.assertEqual(len(result.strengths), 5)
        self.assertEqual(result.improvements, [])

    def test_impact_is_reported_before_leadership(self):
        result = score_resume("Led the migration and increased throughput.")
        self.assertEqual(
            result.strengths,
            ["Uses quantified impact and action verbs", "Demonstrates leadership or ownership"],
        )
        self.assertEqual(result.score, 40)
        self.assertEqual(
            result.improvements,
            [
                "Add 1-2 impact-driven projects with metrics",
                "Pursue internships or add practical experience",
                "Add relevant technical skills aligned to target roles",
            ],
        )

    def test_matching_is_case_insensitive(self):
        result = score_resume("INTERNSHIP with PYTHON")
        self.assertEqual(result.signals["internships"], 1)
        self.assertEqual(result.signals["skills"], 1)
        self.assertEqual(result.score, 40)

    def test_percent_sign_alone_counts_as_impact(self):
        self.assertEqual(score_resume("Grew signups 12%").signals["impact"], 1)

    def test_is_deterministic(self):
        self.assertEqual(score_resume(FULL_RESUME), score_resume(FULL_RESUME))


class ResumeAnalyzerTests(unittest.TestCase):
    def test_empty_text_stays_in_range(self):
        report = analyze_resume("", score_resume(""))
        self.assertGreaterEqual(report.overall_score, 0)
        self.assertLessEqual(report.overall_score, 10)
        self.assertEqual(report.ats_score, 0)
        self.assertEqual(report.overall_score, 4)
        self.assertEqual(
            report.sections,
            {
                "contact_info": 4,
                "summary": 4,
                "experience": 3,
                "education": 5,
                "skills": 4,
                "projects": 3,
                "certifications": 4,
            },
        )
        self.assertEqual(report.strengths, [])
        self.assertEqual(len(report.improvements), 8)

    def test_full_resume(self):
        heuristic = score_resume(FULL_RESUME)
        report = analyze_resume(FULL_RESUME, heuristic)

        self.assertTrue(all(detect_sections(FULL_RESUME).values()))
        self.assertEqual(report.overall_score, 8)
        self.assertEqual(report.ats_score, 100)
        self.assertEqual(report.strengths[: len(heuristic.strengths)], heuristic.strengths)
        self.assertEqual(
            report.strengths[-3:],
            ["Uses numbers/metrics to show impact", "Has a projects section", "Includes a skills section"],
        )
        self.assertEqual(report.improvements, heuristic.improvements)

    def test_extends_heuristic_lists_without_mutating_them(self):
        heuristic = ScoreResult(score=50, strengths=["given strength"], improvements=["given improvement"])
        report = analyze_resume(NO_SIGNAL_TEXT, heuristic)
        self.assertEqual(heuristic.strengths, ["given strength"])
        self.assertEqual(report.strengths, ["given strength"])
        self.assertEqual(
            report.improvements,
            [
                "given improvement",
                "Add quantified impact (%, time saved, users, revenue)",
                "Add a projects section with 2-3 concise bullets each",
                "Add a concise, role-aligned skills section",
            ],
        )

    def test_keyword_density_uses_word_boundaries(self):
        density = keyword_density("Python python PYTHON, JavaScript and HTML; data structures")
        self.assertEqual(density["python"], 3)
        self.assertEqual(density["javascript"], 1)
        self.assertEqual(density["java"], 0)
        self.assertEqual(density["ml"], 0)
        self.assertEqual(density["data structures"], 1)
        self.assertEqual(len(density), 18)

    def test_quantified_achievement_detection(self):
        self.assertTrue(has_quantified_achievement("Served 1200 users"))
        self.assertTrue(has_quantified_achievement("made builds 3x faster"))
        self.assertTrue(has_quantified_achievement("cut costs by 15 %"))
        self.assertTrue(has_quantified_achievement("closed 40 tickets per sprint"))
        self.assertFalse(has_quantified_achievement("served many users"))

    def test_section_vocabulary_is_fixed(self):
        presence = detect_sections("Profile\nE-mail me\nB.Sc Physics\nB.Tech, CSE")
        self.assertFalse(presence["summary"])
        self.assertFalse(presence["contact_info"])
        self.assertTrue(presence["education"])
        self.assertFalse(detect_sections("B.Sc Physics")["education"])

    def test_ats_score_counts_five_signals(self):
        report = analyze_resume("Skills: Python", score_resume("Skills: Python"))
        # skills section + keyword hit
        self.assertEqual(report.ats_score, 40)


if __name__ == "__main__":
    unittest.main()
