from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from sales_statistics.cli import EXIT_FAILURE, EXIT_SINK_FAILED, app

runner = CliRunner()


def test_report_command_prints_and_writes(write_log, tmp_path: Path):
    log = write_log(
        "2024-01-15, SKU1, 10.00, 2, 20.00",
        "2024-01-20, SKU2, 5.00, 10, 50.00",
        "2024-13-01, SKUX, 1.00, 1, 1.00",
    )
    out = tmp_path / "out" / "report.txt"

    result = runner.invoke(app, ["report", "--input-path", str(log), "--output-path", str(out)])

    assert result.exit_code == 0, result.output
    assert "Most popular item: SKU2 (Quantity: 10)" in result.output
    assert "2 accepted, 1 rejected" in result.output
    assert out.read_text(encoding="utf-8").startswith(
        "Monthly statistics:\n  Total sales: 70.00\nJanuary:\n"
    )


def test_missing_input_exits_with_failure(tmp_path: Path):
    out = tmp_path / "report.txt"
    result = runner.invoke(
        app, ["report", "--input-path", str(tmp_path / "missing.txt"), "--output-path", str(out)]
    )
    assert result.exit_code == EXIT_FAILURE
    assert "cannot read sales log" in result.output
    assert not out.exists()


def test_unwritable_output_still_prints_report(write_log, tmp_path: Path):
    log = write_log("2024-03-01, SKU9, 1.00, 3, 3.00")
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")

    result = runner.invoke(
        app,
        ["report", "--input-path", str(log), "--output-path", str(blocker / "report.txt")],
    )

    assert result.exit_code == EXIT_SINK_FAILED
    assert "March:" in result.output
    assert "failed to write report" in result.output


def test_settings_from_dotenv(write_log, tmp_path: Path):
    log = write_log("2024-05-01;A;1;2;4.00", name="semi.txt")
    out = tmp_path / "dotenv-report.txt"
    # conftest runs each test from tmp_path, where the CLI looks for .env
    (tmp_path / ".env").write_text(
        f"SALES_STATISTICS_INPUT={log}\n"
        f"SALES_STATISTICS_OUTPUT={out}\n"
        "SALES_STATISTICS_DELIMITER=;\n",
        encoding="utf-8",
    )

    result = runner.invoke(app, ["report"])

    assert result.exit_code == 0, result.output
    assert "May:" in out.read_text(encoding="utf-8")


def test_invalid_delimiter_option(write_log):
    log = write_log("2024-05-01,A,1,2,4.00")
    result = runner.invoke(app, ["report", "--input-path", str(log), "--delimiter", "::"])
    assert result.exit_code == EXIT_FAILURE
    assert "delimiter" in result.output


def test_no_subcommand_shows_help():
    result = runner.invoke(app, [])
    assert "Usage" in result.output
    assert "report" in result.output


def test_undecodable_line_does_not_abort_the_run(tmp_path: Path):
    log = tmp_path / "damaged.txt"
    log.write_bytes(
        b"Date,SKU,Unit Price,Quantity,Total Price\n"
        b"2024-01-01,A,1,2,2.00\n"
        b"2024-01-02,\xff\xfeB,1,1,1.00\n"
        b"2024-02-03,C,1,5,5.00\n"
    )
    out = tmp_path / "report.txt"

    result = runner.invoke(app, ["report", "--input-path", str(log), "--output-path", str(out)])

    assert result.exit_code == 0, result.output
    report = out.read_text(encoding="utf-8")
    assert "  Total sales: 8.00\n" in report
    assert "January:\n" in report
    assert "  Most popular item: C (Quantity: 5)\n" in report
