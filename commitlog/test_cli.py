import logging

import pytest

from commitlog import __version__
from commitlog.cli import main
from commitlog.tasks.check import (
    InputNotAFile,
    InputNotFound,
    UsageError,
    check_main,
    resolve_log_file,
)


LOG = """commit 0123456789abcdef
Author: Foo Bar <foo.bar@wizz.bzh>
Date:   Thu Aug 8 13:37:42 2012 +0000

    chore: #0 - did things

    Signed-off-by: Foo Bar <foo.bar@wizz.bzh>

commit fedcba9876543210
Date:   Fri Aug 9 09:00:00 2012 +0000

    fix: #1 - fixed things

    Signed-off-by:
"""


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "git.log"
    path.write_text(LOG, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def no_debug_env(monkeypatch):
    monkeypatch.delenv("COMMITLOG_DEBUG", raising=False)


def test_reports_findings(log_file, capsys):
    assert main([str(log_file)]) == 0
    out, err = capsys.readouterr()
    lines = out.splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("Undefined signed-off value for commit 'fedcba9876543210'")
    assert lines[1].endswith("Missing author field for commit 'fedcba9876543210'")
    assert err == ""


def test_clean_log_prints_nothing(tmp_path, capsys):
    path = tmp_path / "clean.log"
    path.write_text("commit abc\nAuthor: Foo\n\n    Signed-off-by: Foo\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == ""


def test_empty_file(tmp_path, capsys):
    path = tmp_path / "empty.log"
    path.write_text("", encoding="utf-8")
    assert main([str(path)]) == 0
    out, err = capsys.readouterr()
    assert out == ""
    assert err == ""


def test_trailing_whitespace_sign_off(tmp_path, capsys):
    path = tmp_path / "git.log"
    path.write_text("commit abc\nAuthor: Foo\n\n    Signed-off-by:    \n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Undefined signed-off value for commit 'abc'" in out
    assert "Missing" not in out


def test_crlf_log(tmp_path, capsys):
    path = tmp_path / "git.log"
    path.write_bytes(b"commit abc\r\nAuthor: Foo\r\n\r\n    Signed-off-by: \r\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 1
    assert out[0].endswith("Undefined signed-off value for commit 'abc'")


def test_missing_file(tmp_path, capsys):
    missing = tmp_path / "nope.log"
    assert main([str(missing)]) == InputNotFound.exit_code
    out, err = capsys.readouterr()
    assert out == ""
    assert f"The file to use '{missing}' does not exist" in err


def test_directory(tmp_path, capsys):
    assert main([str(tmp_path)]) == InputNotAFile.exit_code
    out, err = capsys.readouterr()
    assert out == ""
    assert f"The object at '{tmp_path}' is not a file" in err


def test_empty_path(capsys):
    assert main([""]) == UsageError.exit_code
    out, err = capsys.readouterr()
    assert out == ""
    assert "The file to use '' is not defined" in err


@pytest.mark.parametrize("argv", [[], ["a.log", "b.log"]])
def test_wrong_argument_count(argv, capsys):
    assert main(argv) == UsageError.exit_code
    out, err = capsys.readouterr()
    assert "ERROR: Expected only 1 argument" in err
    assert "usage:" in out


def test_exit_codes_are_distinct():
    codes = {UsageError.exit_code, InputNotFound.exit_code, InputNotAFile.exit_code}
    assert len(codes) == 3
    assert 0 not in codes


def test_version(capsys):
    with pytest.raises(SystemExit) as e:
        main(["--version"])
    assert e.value.code == 0
    assert capsys.readouterr().out.strip() == f"VERSION: {__version__}"


def test_help(capsys):
    with pytest.raises(SystemExit) as e:
        main(["--help"])
    assert e.value.code == 0
    out = capsys.readouterr().out
    assert "usage:" in out
    assert "LOG_FILE" in out


def test_debug_flag(log_file, caplog):
    caplog.set_level(logging.DEBUG)
    assert main(["--debug", str(log_file)]) == 0
    assert f"Will process commits in log file '{log_file}' with delimiter 'commit'" in caplog.text
    assert "Checked 2 commit(s), found 2 issue(s)" in caplog.text


def test_debug_env(log_file, caplog, monkeypatch):
    monkeypatch.setenv("COMMITLOG_DEBUG", "1")
    caplog.set_level(logging.DEBUG)
    assert main([str(log_file)]) == 0
    assert "Checking commit #1 'fedcba9876543210'" in caplog.text


def test_resolve_log_file(log_file, tmp_path):
    assert resolve_log_file(str(log_file)) == log_file
    with pytest.raises(InputNotFound):
        resolve_log_file(str(tmp_path / "missing"))
    with pytest.raises(InputNotAFile):
        resolve_log_file(str(tmp_path))
    with pytest.raises(UsageError):
        resolve_log_file("")


def test_check_main_returns_issues(log_file, capsys):
    issues = check_main(str(log_file))
    assert [i.commit for i in issues] == ["fedcba9876543210", "fedcba9876543210"]
    assert len(capsys.readouterr().out.splitlines()) == 2


def test_report_prints_one_marked_line_per_issue(monkeypatch, capsys):
    from commitlog.checks.fields import E_MISSING_FIELD, E_UNDEFINED_FIELD
    from commitlog.tasks.check import report

    monkeypatch.setenv("NO_COLOR", "1")
    report([
        E_UNDEFINED_FIELD.make(field="signed-off").at("a"),
        E_MISSING_FIELD.make(field="author").at("a"),
    ])
    assert capsys.readouterr().out.splitlines() == [
        "[✗] Undefined signed-off value for commit 'a'",
        "[✗] Missing author field for commit 'a'",
    ]


def test_log_is_segmented_once(log_file, monkeypatch, capsys):
    import commitlog.analyzer

    calls = []
    original = commitlog.analyzer.iter_records

    def counting_iter_records(raw_text, delimiter):
        calls.append(delimiter)
        return original(raw_text, delimiter)

    monkeypatch.setattr(commitlog.analyzer, "iter_records", counting_iter_records)
    assert main([str(log_file)]) == 0
    assert calls == ["commit"]


def test_log_file_starting_with_dash(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "-x.log").write_text("commit abc\nAuthor: Foo\n", encoding="utf-8")
    assert main(["-x.log"]) == 0
    assert main(["--", "-x.log"]) == 0
    out, err = capsys.readouterr()
    assert out.splitlines()[0].endswith("Missing signed-off field for commit 'abc'")
    assert len(out.splitlines()) == 2
    assert err == ""


def test_unknown_option_is_taken_as_path(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["--bogus"]) == InputNotFound.exit_code
    assert "The file to use '--bogus' does not exist" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [["--debug"], ["a.log", "-b.log"], ["--deb", "a.log"]])
def test_options_are_not_mistaken_for_paths(argv, capsys):
    assert main(argv) == UsageError.exit_code
    assert "ERROR: Expected only 1 argument" in capsys.readouterr().err


def test_help_with_extra_argument_still_prints_help(capsys):
    with pytest.raises(SystemExit) as e:
        main(["--help", "a.log"])
    assert e.value.code == 0
    assert "usage:" in capsys.readouterr().out
