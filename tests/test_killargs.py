import pytest

from winix.killargs import (
    KillError,
    KillMethod,
    KillOptions,
    is_valid_signal_name,
    parse_arguments,
    signal_to_method,
    validate_options,
)


def parse_and_validate(args):
    options = parse_arguments(args)
    validate_options(options)
    return options


def test_plain_pid_is_target():
    options = parse_and_validate(["1234"])
    assert options.targets == ["1234"]
    assert options.signal is None
    assert options.signal_explicit is None


def test_no_arguments_fails_validation():
    with pytest.raises(KillError, match="No process ID or name specified"):
        parse_and_validate([])


def test_name_target_is_accepted_by_parser():
    options = parse_and_validate(["not_a_number"])
    assert options.targets == ["not_a_number"]


def test_negative_pid_treated_as_signal_and_fails():
    options = parse_arguments(["-123"])
    assert options.signal == "123"
    assert options.targets == []
    with pytest.raises(KillError):
        validate_options(options)


def test_numeric_signal_parsed():
    options = parse_and_validate(["-9", "1234"])
    assert options.signal == "9"
    assert options.targets == ["1234"]


@pytest.mark.parametrize(
    "signal, method",
    [
        ("-2", KillMethod.GRACEFUL_CTRL_C),
        ("-3", KillMethod.GRACEFUL_CTRL_BREAK),
        ("-9", KillMethod.FORCE_TERMINATE),
        ("-15", KillMethod.GRACEFUL_CTRL_C),
        ("-INT", KillMethod.GRACEFUL_CTRL_C),
        ("-QUIT", KillMethod.GRACEFUL_CTRL_BREAK),
        ("-KILL", KillMethod.FORCE_TERMINATE),
        ("-TERM", KillMethod.GRACEFUL_CTRL_C),
    ],
)
def test_valid_signals(signal, method):
    options = parse_and_validate([signal, "4242"])
    assert options.signal == signal[1:]
    assert signal_to_method(options.signal) is method


@pytest.mark.parametrize("signal", ["-HUP", "-USR1", "-PIPE", "-999", "-INVALID"])
def test_invalid_signals(signal):
    with pytest.raises(KillError):
        parse_and_validate([signal, "4242"])


def test_invalid_signal_message():
    with pytest.raises(KillError, match=r"Invalid signal: -HUP"):
        parse_arguments(["-HUP", "1"])


@pytest.mark.parametrize("signal", ["-term", "-TERM", "-Term", "-kill", "-KILL", "-Kill"])
def test_case_insensitive_signals(signal):
    options = parse_and_validate([signal, "4242"])
    assert options.signal == signal[1:]


@pytest.mark.parametrize(
    "args, expected",
    [
        (["-s", "TERM", "4242"], "TERM"),
        (["-s", "9", "4242"], "9"),
        (["-s", "KILL", "4242"], "KILL"),
    ],
)
def test_explicit_signal_flag(args, expected):
    options = parse_and_validate(args)
    assert options.signal_explicit == expected
    assert options.signal is None
    assert options.targets == ["4242"]


def test_conflicting_signal_options():
    with pytest.raises(KillError, match="both -signal and -s"):
        parse_and_validate(["-9", "-s", "TERM", "4242"])


def test_queue_value_option():
    options = parse_and_validate(["-q", "42", "-TERM", "4242"])
    assert options.queue_value == 42
    assert options.signal == "TERM"


def test_combined_flags():
    options = parse_and_validate(["-q", "42", "-s", "TERM", "4242"])
    assert options.queue_value == 42
    assert options.signal_explicit == "TERM"
    assert options.targets == ["4242"]


def test_invalid_queue_value():
    with pytest.raises(KillError, match="Invalid queue value: invalid"):
        parse_and_validate(["-q", "invalid", "4242"])


def test_missing_signal_argument():
    with pytest.raises(KillError, match="-s requires a signal"):
        parse_and_validate(["-s"])


def test_missing_queue_argument():
    with pytest.raises(KillError, match="-q requires a value"):
        parse_and_validate(["-q"])


def test_end_of_options_marker():
    options = parse_and_validate(["--", "4242"])
    assert options.end_of_options is True
    assert options.targets == ["4242"]


def test_after_end_of_options_dashes_are_targets():
    options = parse_arguments(["--", "-9", "-p"])
    assert options.targets == ["-9", "-p"]
    assert options.signal is None
    assert options.print_only is False


def test_multiple_targets():
    options = parse_and_validate(["-9", "11", "22", "33"])
    assert options.targets == ["11", "22", "33"]


def test_timeout_option():
    options = parse_and_validate(["--timeout", "1000", "KILL", "4242"])
    assert options.timeout_ms == 1000
    assert options.timeout_signal == "KILL"
    assert options.targets == ["4242"]


def test_timeout_without_signal_fails():
    with pytest.raises(KillError):
        parse_and_validate(["--timeout", "1000", "4242"])


def test_timeout_equals_form_requires_signal():
    options = parse_arguments(["--timeout=5000", "4242"])
    assert options.timeout_ms == 5000
    assert options.timeout_signal is None
    with pytest.raises(KillError, match="--timeout option requires a signal"):
        validate_options(options)


def test_timeout_invalid_value():
    with pytest.raises(KillError, match="Invalid timeout value: abc"):
        parse_arguments(["--timeout", "abc", "KILL", "1"])


def test_timeout_missing_milliseconds():
    with pytest.raises(KillError, match="requires milliseconds"):
        parse_arguments(["--timeout"])


def test_timeout_missing_signal():
    with pytest.raises(KillError, match="requires a signal argument"):
        parse_arguments(["--timeout", "100"])


def test_a_flag_with_numeric_pid_fails():
    with pytest.raises(KillError, match="Cannot use -a flag with numeric PIDs"):
        parse_and_validate(["-a", "1234"])


def test_a_flag_with_name():
    options = parse_and_validate(["-a", "powershell"])
    assert options.all_processes is True
    assert options.targets == ["powershell"]


def test_print_only_without_targets_is_allowed():
    options = parse_and_validate(["-p"])
    assert options.print_only is True
    assert options.targets == []


def test_lone_dash_is_target():
    options = parse_arguments(["-"])
    assert options.targets == ["-"]


def test_default_options():
    options = KillOptions()
    assert options.targets == []
    assert options.print_only is False
    assert options.timeout_ms is None


@pytest.mark.parametrize("name", ["TERM", "kill", "Int", "quit", "2", "3", "9", "15"])
def test_is_valid_signal_name_true(name):
    assert is_valid_signal_name(name) is True


@pytest.mark.parametrize("name", ["HUP", "USR1", "1", "999", ""])
def test_is_valid_signal_name_false(name):
    assert is_valid_signal_name(name) is False


def test_signal_to_method_unsupported_message():
    with pytest.raises(KillError, match="Signal 'HUP' is not supported"):
        signal_to_method("HUP")