from sui_dev_tools.infrastructure.adapters.diagnostic_parsing.text_sanitizer import sanitize, strip_ansi


def test_strips_sgr_colour_codes():
    raw = "\x1b[1m\x1b[38;5;11mwarning[W09002]\x1b[0m\x1b[1m: unused variable\x1b[0m"
    assert strip_ansi(raw) == "warning[W09002]: unused variable"


def test_strips_cursor_and_osc_sequences():
    raw = "\x1b[2K\x1b[1Gdone\x1b]0;title\x07 \x1b]8;;http://x\x1b\\link\x1b]8;;\x1b\\"
    assert strip_ansi(raw) == "done link"


def test_clean_text_is_unchanged():
    text = "error[E01]: bad\n   ┌─ sources/a.move:1:2\n\n"
    assert sanitize(text) == text
    assert sanitize(sanitize(text)) == text


def test_bytes_are_decoded_with_replacement():
    raw = b"\x1b[31merror\x1b[0m \xff\xfe ok \xe2\x94\x8c\xe2\x94\x80"
    assert sanitize(raw) == "error �� ok ┌─"


def test_none_and_empty_input():
    assert sanitize(None) == ""
    assert sanitize(b"") == ""


def test_strips_charset_designation():
    # `tput sgr0` emits ESC ( B before the SGR reset
    raw = b"\x1b(B\x1b[mwarning[W01]: x\n"
    assert sanitize(raw) == "warning[W01]: x\n"


def test_strips_sequences_truncated_at_end_of_capture():
    assert sanitize(b"  \xe2\x94\x8c\xe2\x94\x80 a.move:1:2\x1b[") == "  ┌─ a.move:1:2"
    assert sanitize("done\x1b[38;5") == "done"
    assert sanitize("done\x1b]0;tit") == "done"
    assert sanitize("done\x1b") == "done"
