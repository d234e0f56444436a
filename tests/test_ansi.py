from winix.ansi import AnsiEvent, AnsiEventKind, demo_lines, parse_ansi


def test_color_output_parses_color_events():
    events = parse_ansi("\x1b[31mHello\x1b[0m".encode())
    assert any(e.kind is AnsiEventKind.SET_COLOR for e in events)


def test_full_event_sequence():
    events = parse_ansi(b"\x1b[31mHello\x1b[0m")
    assert events == [
        AnsiEvent(AnsiEventKind.SET_COLOR, "Red"),
        AnsiEvent(AnsiEventKind.PRINT_TEXT, "Hello"),
        AnsiEvent(AnsiEventKind.RESET_COLOR),
    ]


def test_green_and_clear_line():
    events = parse_ansi(b"a\x1b[32mb\x1b[Kc")
    assert events == [
        AnsiEvent(AnsiEventKind.PRINT_TEXT, "a"),
        AnsiEvent(AnsiEventKind.SET_COLOR, "Green"),
        AnsiEvent(AnsiEventKind.PRINT_TEXT, "b"),
        AnsiEvent(AnsiEventKind.CLEAR_LINE),
        AnsiEvent(AnsiEventKind.PRINT_TEXT, "c"),
    ]


def test_unknown_sequences_are_dropped():
    events = parse_ansi(b"\x1b[33;44mYellow\x1b[1m")
    assert events == [AnsiEvent(AnsiEventKind.PRINT_TEXT, "Yellow")]


def test_invalid_utf8_gives_no_events():
    assert parse_ansi(b"\xff\xfe\x1b[31m") == []


def test_plain_text():
    assert parse_ansi("plain") == [AnsiEvent(AnsiEventKind.PRINT_TEXT, "plain")]


def test_empty_input():
    assert parse_ansi(b"") == []


def test_demo_lines_parse():
    lines = demo_lines()
    assert len(lines) == 5
    assert parse_ansi(lines[0]) == [
        AnsiEvent(AnsiEventKind.SET_COLOR, "Red"),
        AnsiEvent(AnsiEventKind.PRINT_TEXT, "Red Text"),
        AnsiEvent(AnsiEventKind.RESET_COLOR),
        AnsiEvent(AnsiEventKind.PRINT_TEXT, " Normal"),
    ]
    assert parse_ansi(lines[2]) == [
        AnsiEvent(AnsiEventKind.PRINT_TEXT, "Bold Text"),
        AnsiEvent(AnsiEventKind.RESET_COLOR),
    ]