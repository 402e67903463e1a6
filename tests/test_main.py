"""Tests for the command line entry point."""

from __future__ import annotations

import json
import pathlib

import pytest

from simple_html import load_document_file
from simple_html.__main__ import EXIT_INVALID_PAGE, build_parser, main


@pytest.fixture
def page(tmp_path: pathlib.Path) -> pathlib.Path:
    path = tmp_path / "page.json"
    path.write_text(
        json.dumps(
            {
                "title": "Cooked Crab",
                "body": [
                    {"header": 1, "text": "Cooked Crab"},
                    {"tag": "ul", "children": [{"tag": "li", "children": ["Sugar - 1kg"]}]},
                ],
            },
        ),
        encoding="utf-8",
    )
    return path


class TestRender:
    def test_render_to_stdout(self, page: pathlib.Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["render", str(page)]) == 0

        assert capsys.readouterr().out == load_document_file(page).render(0)

    def test_render_to_file(self, page: pathlib.Path, tmp_path: pathlib.Path) -> None:
        output = tmp_path / "page.html"

        assert main(["render", str(page), "-o", str(output)]) == 0
        assert output.read_text(encoding="utf-8") == (
            "<!DOCTYPE html>\n"
            "<head>\n"
            "  <title>Cooked Crab</title>\n"
            "</head>\n"
            "<body>\n"
            "  <h1>\n"
            "    Cooked Crab\n"
            "  </h1>\n"
            "  <ul>\n"
            "    <li>\n"
            "      Sugar - 1kg\n"
            "    </li>\n"
            "  </ul>\n"
            "</body>"
        )

    def test_invalid_page(self, tmp_path: pathlib.Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "page.json"
        path.write_text(json.dumps({"body": [{"tag": "table"}]}), encoding="utf-8")

        assert main(["render", str(path)]) == EXIT_INVALID_PAGE

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "body[0].tag" in captured.err

    def test_missing_page(self, tmp_path: pathlib.Path) -> None:
        assert main(["render", str(tmp_path / "missing.json")]) == EXIT_INVALID_PAGE

    def test_page_not_utf8(self, tmp_path: pathlib.Path) -> None:
        path = tmp_path / "page.json"
        path.write_bytes(b'{"title": "\xff\xfe"}')

        assert main(["render", str(path)]) == EXIT_INVALID_PAGE

    def test_render_ignores_port_setting(
        self,
        page: pathlib.Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("SIMPLE_HTML_PORT", "abc")

        assert main(["render", str(page)]) == 0

    def test_log_level_option(self, page: pathlib.Path) -> None:
        assert main(["--log-level", "warning", "render", str(page)]) == 0


class TestParser:
    def test_serve_defaults_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SIMPLE_HTML_HOST", "0.0.0.0")  # noqa: S104
        monkeypatch.setenv("SIMPLE_HTML_PORT", "9000")
        monkeypatch.setenv("SIMPLE_HTML_PRELOAD", "true")

        args = build_parser().parse_args(["serve", "page.json"])

        assert args.host == "0.0.0.0"  # noqa: S104
        assert args.port == 9000
        assert args.preload is True

    def test_serve_flags(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SIMPLE_HTML_PRELOAD", raising=False)

        args = build_parser().parse_args(["serve", "page.json", "--host", "::1", "--port", "81"])

        assert args.host == "::1"
        assert args.port == 81
        assert args.preload is False
        assert args.page == pathlib.Path("page.json")

    def test_unknown_log_level(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as info:
            build_parser().parse_args(["--log-level", "verbose", "render", "page.json"])

        assert info.value.code == 2
        assert "unknown log level 'verbose'" in capsys.readouterr().err

    def test_unknown_log_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SIMPLE_HTML_LOG_LEVEL", "chatty")

        with pytest.raises(SystemExit):
            build_parser().parse_args(["render", "page.json"])

    def test_log_level_is_case_insensitive(self) -> None:
        args = build_parser().parse_args(["--log-level", "debug", "render", "page.json"])

        assert args.log_level == "DEBUG"

    def test_invalid_port_only_affects_serve(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SIMPLE_HTML_PORT", "abc")

        assert build_parser().parse_args(["render", "page.json"]).command == "render"

        with pytest.raises(SystemExit) as info:
            build_parser().parse_args(["serve", "page.json"])

        assert info.value.code == 2
