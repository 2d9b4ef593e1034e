from openpyxl import load_workbook

from main_cli import main

CSV = """143,12,2013-11-01,2014-01-05
218,10,2012-05-16,NULL
143,10,2009-01-01,2011-04-27
218,12,2013-12-01,2014-01-10
"""


def write_input(tmp_path, text=CSV, name="data.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_cli_prints_top_pairs(tmp_path, capsys):
    assert main([write_input(tmp_path), "--today", "2024-03-15"]) == 0
    out = capsys.readouterr().out
    assert "Pairs Found: 1" in out
    assert "Employee ID #1" in out
    # 2013-12-01 .. 2014-01-05
    assert "36" in out


def test_cli_all_view_and_export(tmp_path, capsys):
    out_path = tmp_path / "result.xlsx"
    assert main([write_input(tmp_path), "--view", "all", "--today", "2024-03-15", "--out", str(out_path)]) == 0
    out = capsys.readouterr().out
    assert "[RESULT] OK" in out
    assert load_workbook(out_path).sheetnames == ["pairs", "totals"]


def test_cli_reports_no_pairs(tmp_path, capsys):
    path = write_input(tmp_path, "1,1,2024-01-01,2024-01-02\n2,2,2024-01-01,2024-01-02\n")
    assert main([path, "--today", "2024-03-15"]) == 0
    assert "None Pairs Found!" in capsys.readouterr().out


def test_cli_rejects_bad_batch(tmp_path, capsys):
    path = write_input(tmp_path, CSV + "abc,12,2013-11-01,2014-01-05\n")
    assert main([path, "--today", "2024-03-15"]) == 1
    out = capsys.readouterr().out
    assert out.startswith("[ERROR] Invalid data format in CSV")
    assert "Pairs Found" not in out


def test_cli_reports_read_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing.csv")]) == 1
    assert "[ERROR] Error reading file" in capsys.readouterr().out


def test_cli_rejects_bad_today(tmp_path, capsys):
    assert main([write_input(tmp_path), "--today", "15.03.2024"]) == 1
    assert "[ERROR]" in capsys.readouterr().out
