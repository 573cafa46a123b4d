"""Tests for header detection and section segmentation."""

from cv_import.core.section_segmenter import detect_section_header, find_first_header, segment_sections


class TestHeaderDetection:
    def test_plain_header(self):
        assert detect_section_header("Education") == "education"
        assert detect_section_header("PROFESSIONAL SUMMARY") == "summary"
        assert detect_section_header("Work History") == "experience"
        assert detect_section_header("Technical Skills") == "skills"
        assert detect_section_header("Languages") == "languages"

    def test_long_prose_line_is_not_a_header(self):
        line = "I spent most of my education studying distributed systems."
        assert len(line) >= 50
        assert detect_section_header(line) is None

    def test_short_prose_with_keyword_opens_section(self):
        # Known false positive of the length threshold
        assert detect_section_header("My work experience began in 2015") == "experience"

    def test_contact_lines_are_not_headers(self):
        assert detect_section_header("about.me@example.com") is None
        assert detect_section_header("https://example.com/profile") is None
        assert detect_section_header("linkedin.com/in/careerjane") is None

    def test_first_matching_tag_wins(self):
        # "profile" (summary) is checked before "skills"
        assert detect_section_header("Profile & Skills") == "summary"


class TestSegmentation:
    def test_lines_before_first_header_are_dropped(self):
        lines = ["Jane Doe", "Software Engineer", "Skills", "Python"]
        assert segment_sections(lines) == [("skills", ["Python"])]

    def test_sections_in_source_order(self):
        lines = ["Jane Doe", "Experience", "Dev - Acme", "Education", "BSc Physics, Oxford"]
        assert segment_sections(lines) == [
            ("experience", ["Dev - Acme"]),
            ("education", ["BSc Physics, Oxford"]),
        ]

    def test_education_header_after_content(self):
        lines = ["Jane Doe", "Summary", "Engineer.", "Education", "BSc Physics, Oxford"]
        tags = [tag for tag, _ in segment_sections(lines)]
        assert tags == ["summary", "education"]

    def test_empty_sections_are_not_emitted(self):
        lines = ["Jane Doe", "Summary", "Experience", "Dev - Acme"]
        assert segment_sections(lines) == [("experience", ["Dev - Acme"])]

    def test_repeated_header_restarts_accumulation(self):
        lines = ["Skills", "Python", "Experience", "Dev - Acme", "Skills", "Go"]
        assert segment_sections(lines) == [
            ("skills", ["Python"]),
            ("experience", ["Dev - Acme"]),
            ("skills", ["Go"]),
        ]

    def test_inline_header_content(self):
        lines = ["Jane Doe", "Skills: Python, FastAPI", "SQL"]
        assert segment_sections(lines) == [("skills", ["Python, FastAPI", "SQL"])]

    def test_blank_lines_ignored(self):
        lines = ["Skills", "", "   ", "Python"]
        assert segment_sections(lines) == [("skills", ["Python"])]

    def test_find_first_header(self):
        assert find_first_header(["Jane Doe", "jane@example.com", "Experience"]) == 2
        assert find_first_header(["Jane Doe"]) is None
