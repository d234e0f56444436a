from types import SimpleNamespace
from unittest import mock

from winix.df import format_memory
from winix.free import execute, memory_report


def _patched(total=8192, available=2048, swap_total=4096, swap_used=1024):
    return (
        mock.patch("psutil.virtual_memory",
                   return_value=SimpleNamespace(total=total, available=available)),
        mock.patch("psutil.swap_memory",
                   return_value=SimpleNamespace(total=swap_total, used=swap_used)),
    )


def test_memory_report_labels_in_order():
    vm, sw = _patched()
    with vm, sw:
        report = memory_report()
    assert [label for label, _ in report] == [
        "Used memory", "Total memory", "Total swap", "Used swap"
    ]


def test_memory_report_values():
    vm, sw = _patched(total=8192, available=2048, swap_total=4096, swap_used=1024)
    with vm, sw:
        values = dict(memory_report())
    assert values["Total memory"] == 8192
    assert values["Used memory"] + 2048 == values["Total memory"]
    assert values["Total swap"] == 4096
    assert values["Used swap"] == 1024


def test_memory_report_live_invariants():
    values = dict(memory_report())
    assert 0 <= values["Used memory"] <= values["Total memory"]
    assert values["Used swap"] <= values["Total swap"] or values["Total swap"] == 0


def test_execute_prints_aligned_lines(capsys):
    vm, sw = _patched(total=1024 ** 3, available=1024 ** 2, swap_total=0, swap_used=0)
    with vm, sw:
        execute()
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(":")[0] for line in lines] == [
        "Used memory ", "Total memory", "Total swap  ", "Used swap   "
    ]
    assert lines[1] == f"Total memory: {format_memory(1024 ** 3)}"
    assert lines[2] == "Total swap  : 0 bytes"