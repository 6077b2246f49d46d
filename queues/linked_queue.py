from enum import IntEnum
from typing import TextIO


class QueueClearedError(RuntimeError):
    """Raised when a queue is used after it has been cleared."""


class DeleteStatus(IntEnum):
    """Result codes of `delete_node`, numbered like the C return codes."""

    SUCCESS = 0
    NOT_FOUND = 1


def _check_int(value, what: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{what} must be int, got {type(value).__name__}")


class Node:
    """Node of a singly linked queue carrying one integer id."""

    __slots__ = ("id", "next")

    def __init__(self, id: int):
        _check_int(id, "queue ids")
        self.id = id
        self.next: Node | None = None

    def __repr__(self):
        return f"Node({self.id})"


class LinkedQueue:
    """
    Singly linked FIFO queue of integer ids.

    Nodes are owned by the queue until they are popped (ownership goes to the
    caller) or deleted / cleared (the queue drops them). Positions passed to
    `delete_node` are zero-based, counted from `start`.
    """

    def __init__(self):
        self.start: Node | None = None
        self.end: Node | None = None
        self.size = 0
        self._cleared = False

    def __repr__(self):
        if self._cleared:
            return "LinkedQueue(<cleared>)"
        return f"LinkedQueue({self.to_list()})"

    def __len__(self):
        self._check_alive()
        return self.size

    def __iter__(self):
        self._check_alive()
        current = self.start
        while current:
            yield current.id
            current = current.next

    @property
    def cleared(self) -> bool:
        return self._cleared

    def _check_alive(self) -> None:
        if self._cleared:
            raise QueueClearedError("queue has been cleared and must not be used again")

    def is_empty(self) -> bool:
        self._check_alive()
        return self.start is None

    def push(self, id: int) -> None:
        """Append a new node carrying `id` to the tail."""
        self._check_alive()
        new_node = Node(id)
        if self.start is None:
            self.start = self.end = new_node
        else:
            self.end.next = new_node
            self.end = new_node
        self.size += 1

    def pop(self) -> Node | None:
        """
        Detach and return the node at the head, or None if the queue is empty.

        The returned node no longer belongs to the queue: its `next` is reset
        so nothing in the queue is reachable through it.
        """
        self._check_alive()
        node = self.start
        if node is None:
            return None

        self.start = node.next
        if self.start is None:
            self.end = None
        node.next = None
        self.size -= 1
        return node

    def delete_node(self, position: int) -> DeleteStatus:
        """
        Remove and release the node at zero-based `position`.

        Returns DeleteStatus.NOT_FOUND and leaves the queue untouched when the
        position is out of range.
        """
        self._check_alive()
        _check_int(position, "positions")
        if position < 0 or position >= self.size:
            return DeleteStatus.NOT_FOUND

        prev = None
        node = self.start
        for _ in range(position):
            prev = node
            node = node.next

        if prev is None:
            self.start = node.next
        else:
            prev.next = node.next

        if node is self.end:
            self.end = prev

        node.next = None
        self.size -= 1
        return DeleteStatus.SUCCESS

    def clear(self) -> None:
        """Release every node, then retire the queue."""
        self._check_alive()
        current = self.start
        while current:
            following = current.next
            current.next = None
            current = following
        self.start = self.end = None
        self.size = 0
        self._cleared = True

    def to_list(self) -> list[int]:
        """Convert the queue to a list of ids, front to back."""
        return list(self)

    def print_queue(self, file: TextIO | None = None) -> None:
        """Write the ids from start to end on one line of the diagnostic stream."""
        self._check_alive()
        print(" ".join(str(node_id) for node_id in self), file=file)


def create_queue() -> LinkedQueue:
    return LinkedQueue()


def create_node(id: int) -> Node:
    return Node(id)


def push(queue: LinkedQueue, id: int) -> None:
    queue.push(id)


def pop(queue: LinkedQueue) -> Node | None:
    return queue.pop()


def delete_node(queue: LinkedQueue, position: int) -> DeleteStatus:
    return queue.delete_node(position)


def clear_queue(queue: LinkedQueue) -> None:
    queue.clear()


def print_queue(queue: LinkedQueue, file: TextIO | None = None) -> None:
    queue.print_queue(file)
