"""
Tests for the command-line entry point.
"""

import io

from main import main, parse_args, read_matches


HEADER = "Team                           | MP |  W |  D |  L |  P"


class TestParseArgs:
    """Tests for argument parsing."""

    def test_defaults(self):
        """Reads stdin as utf-8 by default."""
        args = parse_args([])
        assert args.file == '-'
        assert args.encoding == 'utf-8'

    def test_file_argument(self):
        """Positional argument is the input file."""
        args = parse_args(['results.txt'])
        assert args.file == 'results.txt'


class TestMain:
    """Tests for main()."""

    def test_tally_from_file(self, tmp_path, capsys):
        """Prints the table for a results file."""
        results = tmp_path / "results.txt"
        results.write_text("Alpha;Beta;win\n", encoding="utf-8")

        assert main([str(results)]) == 0

        out = capsys.readouterr().out
        assert out.splitlines()[0] == HEADER
        assert out.splitlines()[1].startswith("Alpha ")

    def test_tally_from_stdin(self, monkeypatch, capsys):
        """Reads from stdin when no file is given."""
        monkeypatch.setattr('sys.stdin', io.StringIO("Alpha;Beta;draw"))

        assert main([]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3

    def test_read_matches_stdin(self, monkeypatch):
        """'-' means stdin."""
        monkeypatch.setattr('sys.stdin', io.StringIO("A;B;win"))
        assert read_matches('-') == "A;B;win"

    def test_empty_input(self, monkeypatch, capsys):
        """Empty input prints the header only."""
        monkeypatch.setattr('sys.stdin', io.StringIO(""))

        assert main([]) == 0
        assert capsys.readouterr().out == HEADER + "\n"

    def test_malformed_input(self, tmp_path, capsys):
        """Malformed input prints an error and exits non-zero."""
        results = tmp_path / "results.txt"
        results.write_text("Alpha;Beta;tie", encoding="utf-8")

        assert main([str(results)]) == 1
        assert capsys.readouterr().out.startswith("Error: Line 1")

    def test_missing_file(self, tmp_path, capsys):
        """Missing file prints an error and exits non-zero."""
        assert main([str(tmp_path / "missing.txt")]) == 1
        assert capsys.readouterr().out.startswith("Error:")

    def test_crlf_file(self, tmp_path, capsys):
        """Files with Windows line endings tally like plain ones."""
        results = tmp_path / "results.txt"
        results.write_bytes(b"Alpha;Beta;win\r\nBeta;Gamma;draw\r\n")

        assert main([str(results)]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 4

    def test_blank_line_in_file(self, tmp_path, capsys):
        """An empty line between records is reported as malformed."""
        results = tmp_path / "results.txt"
        results.write_text("Alpha;Beta;win\n\nBeta;Gamma;draw\n", encoding="utf-8")

        assert main([str(results)]) == 1
        assert capsys.readouterr().out.startswith("Error: Line 2")


class TestServe:
    """Tests for serving the web API."""

    def test_serve_defaults(self):
        """Serving binds to localhost:8000 without reload by default."""
        args = parse_args(['--serve'])
        assert args.serve
        assert (args.host, args.port, args.reload) == ('127.0.0.1', 8000, False)

    def test_serve_runs_tally_app(self, monkeypatch, capsys):
        """--serve hands the tally app to uvicorn with the given options."""
        calls = []
        monkeypatch.setattr('main.uvicorn.run', lambda app, **kwargs: calls.append((app, kwargs)))

        assert main(['--serve', '--host', '0.0.0.0', '--port', '3000', '--reload']) == 0

        assert calls == [("src.web.app:app", {'host': '0.0.0.0', 'port': 3000, 'reload': True})]
        out = capsys.readouterr().out
        assert "http://0.0.0.0:3000" in out
        assert "/api/tally" in out

    def test_serve_skips_input(self, monkeypatch):
        """Serving does not read match results from stdin."""
        monkeypatch.setattr('main.uvicorn.run', lambda app, **kwargs: None)
        monkeypatch.setattr('sys.stdin', io.StringIO("not;a;match;line"))

        assert main(['--serve']) == 0

    def test_app_import_path_resolves(self):
        """The app path given to uvicorn points at the FastAPI app."""
        from src.web.app import app
        from fastapi import FastAPI
        assert isinstance(app, FastAPI)
