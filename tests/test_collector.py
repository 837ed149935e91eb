import io
import pytest

from reversi_tree.collector import Counter, Gatherer, Printer


def test_printer() -> None:
    output = io.StringIO()
    printer = Printer(output)

    printer.collect("D3C3")
    printer.collect("C4E3")
    printer.finish()

    assert output.getvalue() == "D3C3\nC4E3\n"


def test_printer_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    Printer().collect("F5")
    assert capsys.readouterr().out == "F5\n"


def test_counter_reports() -> None:
    output = io.StringIO()
    counter = Counter(2, output)

    for transcript in ["a", "b", "c", "d", "e"]:
        counter.collect(transcript)

    assert counter.count == 5

    lines = output.getvalue().splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("2 games in ")
    assert lines[1] == " => b"
    assert lines[2].startswith("4 games in ")
    assert lines[3] == " => d"

    counter.finish()
    lines = output.getvalue().splitlines()
    assert len(lines) == 5
    assert lines[4].startswith("5 games in ")


def test_counter_formats_thousands() -> None:
    output = io.StringIO()
    counter = Counter(1000, output)

    for _ in range(1000):
        counter.collect("x")

    assert output.getvalue().startswith("1,000 games in ")


def test_counter_empty() -> None:
    output = io.StringIO()
    Counter(10, output).finish()
    assert output.getvalue().startswith("0 games in ")


def test_counter_error() -> None:
    with pytest.raises(ValueError):
        Counter(0)


def test_gatherer() -> None:
    gatherer = Gatherer()
    gatherer.collect("a")
    gatherer.collect("b")
    gatherer.finish()
    assert gatherer.transcripts == ["a", "b"]
