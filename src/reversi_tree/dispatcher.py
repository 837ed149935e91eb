from __future__ import annotations

import multiprocessing
import queue
from multiprocessing import Queue
from typing import Optional

from reversi_tree.collector import Collector
from reversi_tree.othello.game import Game
from reversi_tree.othello.transcript import to_text
from reversi_tree.solvers.depth_first import Enumerator
from reversi_tree.solvers.ordering import ForwardOrder, MoveOrdering
from reversi_tree.solvers.symmetry import symmetrical

# Seconds the consumer waits for a result before checking on the workers.
POLL_INTERVAL = 0.5

# Seconds a worker waits on a full result queue before checking on the consumer.
SEND_TIMEOUT = 0.5

# Finished games between consumer checks, for result queues that never fill up.
LIVENESS_INTERVAL = 10_000


class ChannelClosed(Exception):
    pass


class WorkerFailed(Exception):
    pass


def consumer_alive() -> bool:
    parent = multiprocessing.parent_process()
    return parent is None or parent.is_alive()


def send(channel: Queue[Optional[str]], message: Optional[str]) -> None:
    while True:
        try:
            channel.put(message, timeout=SEND_TIMEOUT)
            return
        except ValueError as e:
            raise ChannelClosed("Result channel closed before worker was done") from e
        except queue.Full:
            if not consumer_alive():
                raise ChannelClosed("Consumer exited before worker was done")


def run_worker(
    work_queue: Queue[Optional[str]],
    result_queue: Queue[Optional[str]],
    ordering: MoveOrdering,
    symmetric: bool,
) -> None:
    try:
        _produce_results(work_queue, result_queue, ordering, symmetric)
    except ChannelClosed:
        # Buffered results can never be delivered, don't wait on them at exit.
        result_queue.cancel_join_thread()
        raise

    send(result_queue, None)


def _produce_results(
    work_queue: Queue[Optional[str]],
    result_queue: Queue[Optional[str]],
    ordering: MoveOrdering,
    symmetric: bool,
) -> None:
    finished = 0

    # Seeds arrive as transcripts, None means no work is left.
    while True:
        seed = work_queue.get()

        if seed is None:
            return

        for game in Enumerator(Game.from_text(seed), ordering.derive(seed)):
            if symmetric:
                transcripts = symmetrical(game.transcript)
            else:
                transcripts = [game.transcript]

            for transcript in transcripts:
                send(result_queue, to_text(transcript))

            finished += 1
            if finished % LIVENESS_INTERVAL == 0 and not consumer_alive():
                raise ChannelClosed("Consumer exited before worker was done")


class Dispatcher:
    """
    Searches every seed game to exhaustion using a pool of worker processes.
    Workers pull seeds from a shared work queue and send finished
    transcripts to a single result queue, which is drained into `collector`
    by the calling process.

    With `symmetric` set, every finished game is also sent as its rotated and
    mirrored equivalents.
    """

    def __init__(
        self,
        seeds: list[Game],
        collector: Collector,
        *,
        worker_count: int,
        channel_size: int = 0,
        ordering: Optional[MoveOrdering] = None,
        symmetric: bool = True,
        verbose: bool = False,
    ) -> None:
        if worker_count < 1:
            raise ValueError(f"Need at least one worker, got {worker_count}")

        if channel_size < 0:
            raise ValueError(f"Channel size must not be negative, got {channel_size}")

        self.seeds = seeds
        self.collector = collector
        self.worker_count = min(worker_count, len(seeds))
        self.channel_size = channel_size
        self.ordering = ordering or ForwardOrder()
        self.symmetric = symmetric
        self.verbose = verbose

    def run(self) -> None:
        if not self.seeds:
            self.collector.finish()
            return

        work_queue: Queue[Optional[str]] = Queue()
        result_queue: Queue[Optional[str]] = Queue(self.channel_size)

        for seed in self.seeds:
            work_queue.put(seed.to_text())

        for _ in range(self.worker_count):
            work_queue.put(None)

        workers = [
            multiprocessing.Process(
                target=run_worker,
                args=(work_queue, result_queue, self.ordering, self.symmetric),
                daemon=True,
            )
            for _ in range(self.worker_count)
        ]

        for worker in workers:
            worker.start()

        if self.verbose:
            print(f"Started {len(workers)} workers for {len(self.seeds)} seeds")

        try:
            self.__consume(result_queue, workers)
        except BaseException:
            # Unsent seeds would block interpreter exit on the feeder thread.
            work_queue.cancel_join_thread()
            result_queue.cancel_join_thread()

            for worker in workers:
                worker.terminate()

            for worker in workers:
                worker.join()
            raise

        for worker in workers:
            worker.join()

        self.collector.finish()

    def __consume(
        self,
        result_queue: Queue[Optional[str]],
        workers: list[multiprocessing.Process],
    ) -> None:
        done = 0

        while done < len(workers):
            try:
                message = result_queue.get(timeout=POLL_INTERVAL)
            except queue.Empty:
                self.__check_workers(workers)
                continue

            if message is None:
                done += 1
                if self.verbose:
                    print(f"Worker done ({done}/{len(workers)})")
                continue

            self.collector.collect(message)

    def __check_workers(self, workers: list[multiprocessing.Process]) -> None:
        for worker in workers:
            if worker.exitcode not in [None, 0]:
                raise WorkerFailed(
                    f"Worker {worker.pid} exited with code {worker.exitcode}"
                )
