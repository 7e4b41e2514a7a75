import json

import pandas as pd

from mentorium.main import main, EXIT_OK, EXIT_VALIDATION, EXIT_USAGE


def _write_roster(path, rows) -> None:
    pd.DataFrame(rows, columns=["STUDENTID", "INDEXNO", "NAME", "CWA"]).to_excel(path, index=False)


def test_demo_run_writes_outputs(tmp_path, capsys) -> None:
    code = main(["--demo", "--count", "12", "--seed", "5", "--mentors", "4", "--output-dir", str(tmp_path)])

    assert code == EXIT_OK
    output = json.loads((tmp_path / "allocation_results.json").read_text())
    assert output["summary"]["total_students"] == 12
    assert len(output["mentors"]) == 4
    assert output["passes"] == ["forward", "backward", "forward"]
    assert (tmp_path / "mentor_allocation.xlsx").exists()
    assert (tmp_path / "mentor_allocation.pdf").exists()
    assert "ALLOCATION RESULTS" in capsys.readouterr().out


def test_mentors_clamped_to_roster(tmp_path) -> None:
    code = main(["--count", "3", "--seed", "1", "--mentors", "10", "--no-report", "--output-dir", str(tmp_path)])

    assert code == EXIT_OK
    output = json.loads((tmp_path / "allocation_results.json").read_text())
    assert len(output["mentors"]) == 3
    assert not (tmp_path / "mentor_allocation.pdf").exists()


def test_zero_mentors_rejected(tmp_path) -> None:
    assert main(["--mentors", "0", "--output-dir", str(tmp_path)]) == EXIT_USAGE


def test_invalid_roster_blocks_allocation(tmp_path, capsys) -> None:
    roster = tmp_path / "roster.xlsx"
    _write_roster(roster, [
        ["12345678", "1234567", "Kofi", 70],
        ["1234567", "1234568", "Ama", 150],
    ])

    code = main(["--input", str(roster), "--output-dir", str(tmp_path / "out")])

    assert code == EXIT_VALIDATION
    out = capsys.readouterr().out
    assert "Row 3: STUDENTID must be 8 digits" in out
    assert "Row 3: CWA must be a number between 0 and 100" in out
    assert not (tmp_path / "out" / "allocation_results.json").exists()


def test_force_allocates_with_issues(tmp_path) -> None:
    roster = tmp_path / "roster.xlsx"
    _write_roster(roster, [
        ["12345678", "1234567", "Kofi", 70],
        ["12345679", "1234568", "Ama", "absent"],
        ["12345680", "1234569", "Yaw", 85],
    ])

    code = main(["--input", str(roster), "--mentors", "2", "--force", "--no-report",
                 "--output-dir", str(tmp_path)])

    assert code == EXIT_OK
    output = json.loads((tmp_path / "allocation_results.json").read_text())
    assert output["summary"]["total_students"] == 2


def test_unreadable_input(tmp_path) -> None:
    roster = tmp_path / "roster.xlsx"
    roster.write_text("not a spreadsheet")
    assert main(["--input", str(roster), "--output-dir", str(tmp_path)]) == EXIT_USAGE


def test_template(tmp_path) -> None:
    assert main(["--template", "--output-dir", str(tmp_path)]) == EXIT_OK
    sheet = pd.read_excel(tmp_path / "mentorium-template.xlsx")
    assert sheet.columns.tolist() == ["STUDENTID", "INDEXNO", "NAME", "CWA"]


def test_json_object_roster_is_unreadable(tmp_path) -> None:
    roster = tmp_path / "roster.json"
    roster.write_text(json.dumps({"STUDENTID": "12345678"}))
    assert main(["--input", str(roster), "--output-dir", str(tmp_path)]) == EXIT_USAGE
