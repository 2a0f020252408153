from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from apps.cli.main import app

runner = CliRunner()


def test_cli_prints_substituted_url() -> None:
    result = runner.invoke(app, ["https://x/?q={search\\+}", "earth's", "biosphere"])

    assert result.exit_code == 0
    assert result.output == "https://x/?q=earth%27s+biosphere\n"


def test_cli_joins_multiple_urls() -> None:
    result = runner.invoke(
        app, ["https://a/{search\\+}<>data<|>https://b/{search!2\\-}", "x %% y z"]
    )

    assert result.exit_code == 0
    assert result.output == "https://a/x<>data<|>https://b/y-z\n"


def test_cli_without_arguments_returns_1() -> None:
    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert result.output == "error_: invalid number of arguments: 0\n"


def test_cli_empty_url_list_prints_nothing() -> None:
    result = runner.invoke(app, ["<|>", "query"])

    assert result.exit_code == 0
    assert result.output == ""


def test_cli_placeholder_error_returns_1() -> None:
    result = runner.invoke(app, ["{search\\+}", "query"])

    assert result.exit_code == 1
    assert result.output.startswith("error: ")
    assert "{search\\+}" in result.output
    assert "<|>" not in result.output


def test_cli_takes_dashed_queries_literally() -> None:
    result = runner.invoke(app, ["https://x/?q={search\\+}", "-v", "--flag"])

    assert result.exit_code == 0
    assert result.output == "https://x/?q=-v+--flag\n"


def test_cli_uses_config_file(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("max_placeholders: 2\n", encoding="utf-8")

    result = runner.invoke(
        app,
        ["--config", str(config), "x{search\\+}{search\\+}{search\\+}", "a%%b%%c"],
    )

    assert result.exit_code == 1
    assert "more than 2" in result.output


def test_cli_missing_config_file_returns_1(tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["--config", str(tmp_path / "missing.yaml"), "https://x/{search\\+}", "a"],
    )

    assert result.exit_code == 1
    assert result.output.startswith("error_: Config file not found")


def test_cli_encodes_undecodable_bytes() -> None:
    result = runner.invoke(app, ["https://x/?q={search\\+}", "caf\udce9"])

    assert result.exit_code == 0
    assert result.output == "https://x/?q=caf%E9\n"
