from __future__ import annotations
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, v: T):
        self.value: T = v
        self.next: Optional["Node[T]"] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class LinkedList(Generic[T]):
    """Singly-linked list with O(1) access to both ends.

    Out-of-range reads and removals return None instead of raising;
    insert_at reports a rejected index by returning False.
    """

    def __init__(self):
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._size: int = 0

    # ---- basics ----
    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def head(self) -> Optional[Node[T]]:
        return self._head

    def tail(self) -> Optional[Node[T]]:
        return self._tail

    # ---- append/prepend/pop ----
    def append(self, value: T) -> None:
        n = Node(value)
        if self._tail is None:
            self._head = self._tail = n
        else:
            self._tail.next = n
            self._tail = n
        self._size += 1

    def prepend(self, value: T) -> None:
        n = Node(value)
        n.next = self._head
        self._head = n
        if self._tail is None:
            self._tail = n
        self._size += 1

    def pop(self) -> Optional[T]:
        """Remove the tail and return its value, or None if the list is empty.

        A stored None is returned as None too; size() tells the two apart.
        """
        if self._tail is None:
            return None
        victim = self._tail
        if self._head is victim:
            self._head = self._tail = None
        else:
            # no back links: walk to the node before the tail
            prev = self._walk(self._size - 2)
            prev.next = None
            self._tail = prev
        self._size -= 1
        return victim.value

    def _pop_front(self) -> T:
        n = self._head
        assert n is not None
        self._head = n.next
        n.next = None
        if self._head is None:
            self._tail = None
        self._size -= 1
        return n.value

    # ---- access ----
    def at(self, index: int) -> Optional[Node[T]]:
        if index < 0 or index >= self._size:
            return None
        return self._walk(index)

    # ---- search ----
    def contains(self, value: T) -> bool:
        return self.find(value) is not None

    def find(self, value: T) -> Optional[int]:
        n = self._head
        i = 0
        while n is not None:
            if n.value == value:
                return i
            n = n.next
            i += 1
        return None

    # ---- indexed ops ----
    def insert_at(self, value: T, index: int) -> bool:
        if index < 0 or index > self._size:
            return False
        if index == 0:
            self.prepend(value)
            return True
        if index == self._size:
            self.append(value)
            return True
        prev = self._walk(index - 1)
        n = Node(value)
        n.next = prev.next
        prev.next = n
        self._size += 1
        return True

    def remove_at(self, index: int) -> Optional[T]:
        """Remove the node at `index` and return its value.

        None for an index outside [0, size()); as with pop(), a stored None
        is only distinguishable by the change in size().
        """
        if index < 0 or index >= self._size:
            return None
        if index == 0:
            return self._pop_front()
        prev = self._walk(index - 1)
        victim = prev.next
        assert victim is not None
        prev.next = victim.next
        victim.next = None
        if victim is self._tail:
            self._tail = prev
        self._size -= 1
        return victim.value

    # ---- utils ----
    def to_string(self) -> str:
        parts: List[str] = []
        n = self._head
        while n is not None:
            parts.append(f"({n.value}) -> ")
            n = n.next
        parts.append("null")
        return "".join(parts)

    def to_list(self) -> List[T]:
        out: List[T] = []
        n = self._head
        while n is not None:
            out.append(n.value)
            n = n.next
        return out

    def _walk(self, index: int) -> Node[T]:
        n = self._head
        for _ in range(index):
            assert n is not None
            n = n.next
        assert n is not None
        return n

    # ---- protocol hooks ----
    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"LinkedList({self.to_list()!r})"
