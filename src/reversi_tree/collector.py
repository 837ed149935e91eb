from __future__ import annotations

import time
from typing import Optional, TextIO


class Collector:
    """
    Receives finished transcripts one at a time, in the order they arrive.
    """

    def collect(self, transcript: str) -> None:
        raise NotImplementedError

    def finish(self) -> None:
        pass


class Printer(Collector):
    def __init__(self, output: Optional[TextIO] = None) -> None:
        self.output = output

    def collect(self, transcript: str) -> None:
        print(transcript, file=self.output)


class Counter(Collector):
    def __init__(self, report_interval: int, output: Optional[TextIO] = None) -> None:
        if report_interval < 1:
            raise ValueError(f"Report interval must be positive, got {report_interval}")

        self.report_interval = report_interval
        self.output = output
        self.count = 0
        self.started = time.perf_counter()

    def collect(self, transcript: str) -> None:
        self.count += 1

        if self.count % self.report_interval == 0:
            self.report(transcript)

    def report(self, sample: Optional[str] = None) -> None:
        elapsed = time.perf_counter() - self.started

        if self.count == 0 or elapsed <= 0:
            per_game = 0.0
            per_second = 0
        else:
            per_game = elapsed / self.count
            per_second = int(self.count / elapsed)

        print(
            f"{self.count:,} games in {elapsed:.3f}s "
            f"({per_game * 1_000_000:.1f}µs per game, {per_second:,} per second)",
            file=self.output,
        )

        if sample is not None:
            print(f" => {sample}", file=self.output)

    def finish(self) -> None:
        self.report()


class Gatherer(Collector):
    def __init__(self) -> None:
        self.transcripts: list[str] = []

    def collect(self, transcript: str) -> None:
        self.transcripts.append(transcript)
