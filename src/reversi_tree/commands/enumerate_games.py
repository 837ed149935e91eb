from __future__ import annotations

import typer
from typing import Optional

from reversi_tree.collector import Collector, Counter, Printer
from reversi_tree.config import (
    get_channel_size,
    get_random_seed,
    get_report_interval,
    get_seed_depth,
    get_verbose,
    get_worker_count,
)
from reversi_tree.dispatcher import Dispatcher
from reversi_tree.solvers.ordering import Seed, get_ordering
from reversi_tree.solvers.partition import seed_games


class EnumerateGames:
    def __init__(
        self,
        workers: Optional[int],
        depth: Optional[int],
        order: str,
        count: bool,
    ) -> None:
        self.workers = workers or get_worker_count()
        self.depth = depth or get_seed_depth()
        self.ordering = get_ordering(order, Seed(get_random_seed()))
        self.count = count
        self.verbose = get_verbose()

    def get_collector(self) -> Collector:
        if self.count:
            return Counter(get_report_interval())
        return Printer()

    def __call__(self) -> None:
        seeds = seed_games(self.depth)

        if self.verbose:
            print(f"Partitioned search into {len(seeds)} seeds of depth {self.depth}")

        dispatcher = Dispatcher(
            seeds,
            self.get_collector(),
            worker_count=self.workers,
            channel_size=get_channel_size(),
            ordering=self.ordering,
            verbose=self.verbose,
        )
        dispatcher.run()


app = typer.Typer(pretty_exceptions_enable=False)


@app.command()
def enumerate_games(
    workers: Optional[int] = typer.Option(None, "--workers", "-w"),
    depth: Optional[int] = typer.Option(None, "--depth", "-d"),
    order: str = typer.Option("forward", "--order", "-o"),
    count: bool = typer.Option(False, "--count", "-c"),
) -> None:
    EnumerateGames(workers, depth, order, count)()


if __name__ == "__main__":
    app()
