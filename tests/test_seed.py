"""
Tests for the seed.py command-line wrapper and its file readers.
"""

from openpyxl import Workbook

from seed import main, read_rows


class TestSeedMain:

    def test_usage_error(self):
        assert main(["seed.py"]) == 1

    def test_missing_file(self, tmp_path):
        assert main(["seed.py", str(tmp_path / "missing.csv")]) == 2

    def test_unsupported_extension(self, tmp_path):
        notes = tmp_path / "jobs.txt"
        notes.write_text("Engineer, NYC\n")

        assert main(["seed.py", str(notes)]) == 1


class TestReadRows:

    def test_reads_header_row_and_strips_bom(self, tmp_path):
        csv_file = tmp_path / "jobs.csv"
        csv_file.write_text(
            "\ufeffJob Title,Location,Job Type\nEngineer,NYC,Contract\n", encoding="utf-8"
        )

        assert read_rows(csv_file) == [
            {"Job Title": "Engineer", "Location": "NYC", "Job Type": "Contract"}
        ]

    def test_reads_first_worksheet_of_xlsx(self, tmp_path):
        workbook = Workbook()
        sheet = workbook.active
        sheet.append(["Job Title", "Location", "Job Type", None])
        sheet.append(["Engineer", "NYC", "Contract", "ignored"])
        sheet.append([None, None, None, None])
        sheet.append(["Designer", "Berlin", None, None])
        workbook.create_sheet("Archive").append(["title", "location"])
        path = tmp_path / "jobs.xlsx"
        workbook.save(path)

        assert read_rows(path) == [
            {"Job Title": "Engineer", "Location": "NYC", "Job Type": "Contract"},
            {"Job Title": "Designer", "Location": "Berlin", "Job Type": None},
        ]

    def test_empty_workbook_has_no_rows(self, tmp_path):
        path = tmp_path / "empty.xlsx"
        Workbook().save(path)

        assert read_rows(path) == []
