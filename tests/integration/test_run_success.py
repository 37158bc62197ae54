from __future__ import annotations

from pathlib import Path

from flex_export.cli import main as cli_main

"""End-to-end runs of the CLI in a temporary working directory."""


def test_end_to_end_single_row(temp_workdir: Path, write_export, capsys):
    # prices 60 / 80 / 120, target 100 * 0.75 = 75 -> 80 ("Mid" + "Week")
    (temp_workdir / "Grid.csv").write_text(
        ",Week,Weekend\nLow,60,\nMid,80,120\n", encoding="utf-8"
    )
    write_export(["AKL,D5AWD Adventure Camper,25/12/2024,28/12/2024,100,3"])

    code = cli_main([])

    assert code == 0
    out_file = temp_workdir / "processed_Flexfiles_test.txt"
    assert out_file.read_text(encoding="utf-8") == (
        '"FIRST-BOOK-DATE","12/25/2024"\n'
        '"AKL","D5","","12/25/2024","12/28/2024","MidWeek","RQ"\n'
        "END OF FILE"
    )
    out = capsys.readouterr().out
    assert "INFO Found 1 Flexfiles files to process" in out
    assert "SUMMARY files=1 rows=1 elapsed_sec=" in out


def test_output_sorted_by_pickup_to(temp_workdir: Path, write_grid, write_export):
    write_grid()
    write_export([
        "AKL,MARCH,2024-02-20,2024-03-01,100,3",
        "AKL,JAN,2024-01-10,2024-01-15,100,3",
    ])
    assert cli_main([]) == 0
    lines = (temp_workdir / "processed_Flexfiles_test.txt").read_text(encoding="utf-8").split("\n")
    assert lines[0] == '"FIRST-BOOK-DATE","01/10/2024"'
    assert '"JAN"' in lines[1]
    assert '"MARCH"' in lines[2]
    assert lines[-1] == "END OF FILE"


def test_excluded_rows_never_written(temp_workdir: Path, write_grid, write_export):
    write_grid()
    write_export([
        "AKL,Mystery Machine 3,01/02/2024,05/02/2024,100,3",
        "AKL,JFG,01/02/2024,05/02/2024,100,14",
        "AKL,JFG,01/02/2024,05/02/2024,abc,2",
    ])
    assert cli_main([]) == 0
    text = (temp_workdir / "processed_Flexfiles_test.txt").read_text(encoding="utf-8")
    assert "Mystery Machine 3" not in text
    assert text.count('"JFG"') == 1
    # non-numeric price -> empty flex rate
    assert '"02/05/2024","","RQ"' in text


def test_rerun_is_byte_identical(temp_workdir: Path, write_grid, write_export):
    write_grid()
    write_export([
        "AKL,JFG,01/02/2024,05/02/2024,100,3",
        "CHC,Desert Sands,not-a-date,,160,5",
    ])
    assert cli_main([]) == 0
    out_file = temp_workdir / "processed_Flexfiles_test.txt"
    first = out_file.read_bytes()
    assert cli_main([]) == 0
    assert out_file.read_bytes() == first


def test_config_file_overrides_rules(temp_workdir: Path, write_export):
    (temp_workdir / "config").mkdir()
    (temp_workdir / "config" / "flex_export.yml").write_text(
        "grid_file: Rates.csv\nexcluded_from_days: []\navailability_code: OK\n", encoding="utf-8"
    )
    (temp_workdir / "Rates.csv").write_text(",A\n1,75\n", encoding="utf-8")
    write_export(["AKL,JFG,01/02/2024,05/02/2024,100,7"])

    assert cli_main([]) == 0
    text = (temp_workdir / "processed_Flexfiles_test.txt").read_text(encoding="utf-8")
    assert '"1A","OK"' in text
