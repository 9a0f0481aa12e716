from fmsound.errors import AlutError, AlutErrorCode, error_string


def test_no_error_message():
    assert error_string(AlutErrorCode.NO_ERROR) == "No ALUT error found"


def test_io_error_message():
    assert error_string(AlutErrorCode.IO_ERROR) == "I/O error"


def test_unknown_code_message():
    assert error_string(12345) == "An impossible ALUT error condition was reported?!?"


def test_every_code_has_distinct_message():
    messages = [error_string(code) for code in AlutErrorCode]
    assert len(set(messages)) == len(messages)
    assert "An impossible ALUT error condition was reported?!?" not in messages


def test_exception_carries_code_and_message():
    err = AlutError(AlutErrorCode.CORRUPT_OR_TRUNCATED_DATA)
    assert err.code is AlutErrorCode.CORRUPT_OR_TRUNCATED_DATA
    assert str(err) == "The sound data was corrupt or truncated"


def test_debug_variable_reports_to_stderr(monkeypatch, capsys):
    monkeypatch.setenv("ALUT_DEBUG", "1")
    AlutError(AlutErrorCode.IO_ERROR)
    assert capsys.readouterr().err == "ALUT error: I/O error\n"


def test_no_report_without_debug_variable(monkeypatch, capsys):
    monkeypatch.delenv("ALUT_DEBUG", raising=False)
    AlutError(AlutErrorCode.IO_ERROR)
    assert capsys.readouterr().err == ""