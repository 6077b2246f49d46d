import logging
import time
from collections.abc import Callable

from queues.linked_queue import DeleteStatus, create_queue

logger = logging.getLogger(__name__)


def push_pop_workload(n: int) -> int:
    """Push ids 0..n-1, pop them all back and return the sum of popped ids."""
    queue = create_queue()
    for i in range(n):
        queue.push(i)

    total = 0
    node = queue.pop()
    while node is not None:
        total += node.id
        node = queue.pop()
    queue.clear()
    return total


def delete_workload(n: int) -> int:
    """Fill the queue with n ids and delete from the middle until it is empty."""
    queue = create_queue()
    for i in range(n):
        queue.push(i)

    deleted = 0
    while len(queue):
        if queue.delete_node(len(queue) // 2) is DeleteStatus.SUCCESS:
            deleted += 1
    queue.clear()
    return deleted


def time_workload(workload: Callable[[int], int], n: int) -> float:
    start_time = time.perf_counter()
    workload(n)
    return time.perf_counter() - start_time


def main(n: int = 100_000, n_delete: int = 2_000):
    """Timing of the queue workloads."""
    import cProfile
    import pstats

    logging.basicConfig(level=logging.INFO)
    logger.info("running queue workloads")

    profiler = cProfile.Profile()
    profiler.enable()
    push_pop_time = time_workload(push_pop_workload, n)
    profiler.disable()
    print(f"push/pop of {n} ids: {push_pop_time:.3f} seconds")

    # delete_workload walks to the middle every time, keep n_delete small
    delete_time = time_workload(delete_workload, n_delete)
    print(f"middle delete of {n_delete} ids: {delete_time:.3f} seconds")
    pstats.Stats(profiler).sort_stats("cumulative").print_stats(10)


if __name__ == "__main__":
    main()
