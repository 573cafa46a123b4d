"""Tests for education entry extraction."""

from cv_import.core.field_extractors import extract_education


class TestEducationLines:
    def test_comma_split(self):
        entries = extract_education(["BSc Computer Science, University of Mauritius"])
        assert len(entries) == 1
        assert entries[0].degree == "BSc Computer Science"
        assert entries[0].institution == "University of Mauritius"
        assert entries[0].year == ""

    def test_pipe_split_with_year(self):
        entries = extract_education(["Bachelor of Science in Computer Science | University Name | 2018"])
        assert entries[0].degree == "Bachelor of Science in Computer Science"
        assert entries[0].institution == "University Name"
        assert entries[0].year == "2018"

    def test_no_separator_whole_line_is_degree(self):
        entries = extract_education(["Diploma in Graphic Design"])
        assert entries[0].degree == "Diploma in Graphic Design"
        assert entries[0].institution == ""

    def test_year_segment_is_not_an_institution(self):
        entries = extract_education(["High School Diploma, 2012"])
        assert entries[0].institution == ""
        assert entries[0].year == "2012"

    def test_year_range_segment_is_not_an_institution(self):
        entries = extract_education(["University of Mauritius, 2012 - 2016"])
        assert entries[0].degree == "University of Mauritius"
        assert entries[0].institution == ""
        assert entries[0].year == "2012"

    def test_short_lines_are_skipped(self):
        assert extract_education(["BSc", "Oxford"]) == []


class TestFollowUpLines:
    def test_year_line_completes_previous_entry(self):
        entries = extract_education(["BSc Computer Science, University of Mauritius", "2016"])
        assert len(entries) == 1
        assert entries[0].year == "2016"

    def test_year_line_does_not_overwrite(self):
        entries = extract_education(["MSc Physics, ETH Zurich, 2019", "2020"])
        assert entries[0].year == "2019"

    def test_gpa_line(self):
        entries = extract_education(["MSc Data Science, Oxford University", "GPA: 3.9", "2019"])
        assert entries[0].gpa == "3.9"
        assert entries[0].year == "2019"

    def test_inline_gpa(self):
        entries = extract_education(["BA Economics, LSE, 2015, GPA 3.75"])
        assert entries[0].gpa == "3.75"
        assert entries[0].year == "2015"

    def test_each_long_line_is_an_entry(self):
        entries = extract_education([
            "MSc Data Science, Oxford University",
            "BSc Mathematics, University of Cape Town",
        ])
        assert [e.institution for e in entries] == ["Oxford University", "University of Cape Town"]
