"""Thread drills: waiting for workers, sharing a counter, and passing messages."""

import queue as _queue
import threading
import time
from dataclasses import dataclass


def run_threads(count=10, delay=0.25):
    """Start ``count`` threads that each sleep ``delay`` seconds, then wait for them all.

    Returns the number of threads that finished.
    """

    def work(index):
        time.sleep(delay)
        print(f"thread {index} is complete")

    threads = [threading.Thread(target=work, args=(i,)) for i in range(count)]
    for thread in threads:
        thread.start()

    completed = 0
    for thread in threads:
        thread.join()
        completed += 1

    if completed != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    return completed


def count_jobs(count=10, delay=0.25):
    """Have ``count`` threads each add one to a shared, locked counter.

    Prints the counter after each join and returns its final value.
    """
    lock = threading.Lock()
    status = {"jobs_completed": 0}

    def work():
        time.sleep(delay)
        with lock:
            status["jobs_completed"] += 1

    threads = [threading.Thread(target=work) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
        with lock:
            print(f"jobs completed {status['jobs_completed']}")

    with lock:
        return status["jobs_completed"]


@dataclass(frozen=True)
class Queue:
    length: int = 10
    first_half: tuple[int, ...] = (1, 2, 3, 4, 5)
    second_half: tuple[int, ...] = (6, 7, 8, 9, 10)


def send_tx(queue, channel, delay=1.0):
    """Send both halves of ``queue`` into ``channel`` from two threads.

    Returns the started sender threads.
    """

    def send(values):
        for value in values:
            print(f"sending {value}")
            channel.put(value)
            time.sleep(delay)

    threads = [
        threading.Thread(target=send, args=(queue.first_half,)),
        threading.Thread(target=send, args=(queue.second_half,)),
    ]
    for thread in threads:
        thread.start()
    return threads


def receive_all(queue, delay=1.0):
    """Receive every value sent from ``queue`` until the senders are finished.

    Raises RuntimeError if the number received differs from ``queue.length``.
    """
    channel = _queue.Queue()
    senders = send_tx(queue, channel, delay)
    received = []
    while True:
        try:
            value = channel.get(timeout=0.05)
        except _queue.Empty:
            # Check liveness before emptiness so a last value is never lost.
            if not any(thread.is_alive() for thread in senders) and channel.empty():
                break
            continue
        print(f"Got: {value}")
        received.append(value)

    for thread in senders:
        thread.join()
    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(
            f"received {len(received)} numbers, expected {queue.length}"
        )
    return received