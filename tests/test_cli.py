"""Tests for the pseudoscss command-line entry point."""

import logging

import pytest

from pseudoscss.cli import main
from pseudoscss.utils.logger import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def _detach_cli_handlers():
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


class TestCli:
    """pseudoscss INPUT OUTPUT."""

    def test_writes_document(self, tmp_path) -> None:
        source = tmp_path / "index.html.scss"
        output = tmp_path / "index.html"
        source.write_text('p { content: "hi"; }', encoding="utf-8")

        assert main([str(source), str(output)]) == 0
        assert output.read_text(encoding="utf-8") == (
            f"<!DOCTYPE html><p>hi</p>\n<!-- Generated from {source} -->\n"
        )

    def test_compile_error(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        source = tmp_path / "bad.scss"
        output = tmp_path / "bad.html"
        source.write_text("p div;", encoding="utf-8")

        assert main([str(source), str(output)]) == 1
        err = capsys.readouterr().err
        assert err.startswith("pseudoscss: ")
        assert f"{source}:1:3" in err
        assert not output.exists()

    def test_missing_input(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path / "nope.scss"), str(tmp_path / "out.html")]) == 1
        assert "pseudoscss:" in capsys.readouterr().err

    def test_undecodable_input(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        source = tmp_path / "latin1.scss"
        source.write_bytes(b'content: "caf\xe9";')
        assert main([str(source), str(tmp_path / "out.html")]) == 1
        assert "pseudoscss:" in capsys.readouterr().err

    def test_missing_arguments(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_unencodable_output(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        # A lone surrogate decodes from the literal but cannot be written as UTF-8
        source = tmp_path / "surrogate.scss"
        output = tmp_path / "surrogate.html"
        source.write_text('p { content: "\\ud800"; }', encoding="utf-8")

        assert main([str(source), str(output)]) == 1
        assert "pseudoscss:" in capsys.readouterr().err
        assert not output.exists()

    def test_info_records_stay_quiet(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        source = tmp_path / "index.scss"
        source.write_text("br;", encoding="utf-8")
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.INFO)

        assert main([str(source), str(tmp_path / "index.html")]) == 0
        assert capsys.readouterr().err == ""
