#  ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~
#  MIT License
#
#  Copyright (c) 2025 Nathan Juraj Michlo
#
#  Permission is hereby granted, free of charge, to any person obtaining a copy
#  of this software and associated documentation files (the "Software"), to deal
#  in the Software without restriction, including without limitation the rights
#  to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
#  copies of the Software, and to permit persons to whom the Software is
#  furnished to do so, subject to the following conditions:
#
#  The above copyright notice and this permission notice shall be included in
#  all copies or substantial portions of the Software.
#
#  THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
#  IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
#  FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
#  AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
#  LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
#  OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
#  SOFTWARE.
#  ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~

__all__ = [
    "CircularDeque",
    "DequeEmptyError",
]

import logging
from typing import Generic, List, Optional, TypeVar


logger = logging.getLogger(__name__)


T = TypeVar("T")


# ========================================================================= #
# Errors                                                                    #
# ========================================================================= #


class DequeEmptyError(IndexError):
    """
    Raised when reading or removing from an empty deque.
    """


# ========================================================================= #
# Circular Deque                                                            #
# ========================================================================= #


_MIN_CAPACITY = 2


class CircularDeque(Generic[T]):
    """
    Double ended queue over a circular buffer that doubles when full.

    Queue ends:  `enqueue` adds at the back, `dequeue` / `element` act on the front.
    Stack ends:  `push` adds at the front, `remove` / `peek` act on the back.

    Logical position `i` (0 is the front) lives in the physical slot
    `(head + i) % capacity`. Slots outside the logical window are always
    `None`, which is why `None` cannot be stored.
    """

    def __init__(self):
        self._buffer: List[Optional[T]] = [None] * _MIN_CAPACITY
        self._head = 0
        self._count = 0

    # ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~ #
    # internals                                                             #
    # ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~ #

    def _ensure_capacity(self, n: int):
        capacity = len(self._buffer)
        if n <= capacity:
            return
        new_capacity = capacity * 2
        while new_capacity < n:
            new_capacity *= 2
        # unroll the window so the front lands at index 0
        buffer = [None] * new_capacity
        buffer[: capacity - self._head] = self._buffer[self._head :]
        buffer[capacity - self._head : capacity] = self._buffer[: self._head]
        self._buffer = buffer
        self._head = 0
        logger.debug(f"grew deque buffer: {capacity} -> {new_capacity}")

    def _resolve(self, offset: int) -> int:
        # python's modulo is already non-negative for a positive divisor
        return (self._head + offset) % len(self._buffer)

    def _check_element(self, element, op: str):
        if element is None:
            raise ValueError(f"{op}: element must not be None")

    def _check_not_empty(self, op: str):
        if self._count == 0:
            raise DequeEmptyError(f"{op} from empty deque")

    # ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~ #
    # stack end                                                             #
    # ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~ #

    def push(self, element: T):
        """
        Insert the element before the current front.
        """
        self._check_element(element, "push")
        self._ensure_capacity(self._count + 1)
        cur = self._resolve(-1)
        self._buffer[cur] = element
        self._head = cur
        self._count += 1

    def peek(self) -> T:
        """
        Return the back element without removing it.
        """
        self._check_not_empty("peek")
        return self._buffer[self._resolve(self._count - 1)]

    def remove(self) -> T:
        """
        Remove and return the back element.
        """
        self._check_not_empty("remove")
        cur = self._resolve(self._count - 1)
        result = self._buffer[cur]
        self._buffer[cur] = None
        self._count -= 1
        return result

    # ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~ #
    # search                                                                #
    # ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~ #

    def index_of(self, element: T) -> int:
        """
        Logical index of the first element equal to `element`, or -1.
        """
        self._check_element(element, "index_of")
        for i in range(self._count):
            if self._buffer[self._resolve(i)] == element:
                return i
        return -1

    def last_index_of(self, element: T) -> int:
        """
        Logical index of the last element equal to `element`, or -1.
        """
        self._check_element(element, "last_index_of")
        for i in range(self._count - 1, -1, -1):
            if self._buffer[self._resolve(i)] == element:
                return i
        return -1

    # ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~ #
    # queue end                                                             #
    # ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~ #

    def enqueue(self, element: T):
        """
        Insert the element after the current back.
        """
        self._check_element(element, "enqueue")
        self._ensure_capacity(self._count + 1)
        self._buffer[self._resolve(self._count)] = element
        self._count += 1

    def element(self) -> T:
        """
        Return the front element without removing it.
        """
        self._check_not_empty("element")
        return self._buffer[self._head]

    def dequeue(self) -> T:
        """
        Remove and return the front element.
        """
        self._check_not_empty("dequeue")
        result = self._buffer[self._head]
        self._buffer[self._head] = None
        self._head = self._resolve(1)
        self._count -= 1
        return result

    # ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~ #
    # size                                                                  #
    # ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~ #

    def size(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def clear(self):
        self._buffer = [None] * _MIN_CAPACITY
        self._head = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def __len__(self):
        return self._count

    def __bool__(self):
        return self._count > 0

    def __repr__(self):
        items = [self._buffer[self._resolve(i)] for i in range(self._count)]
        return f"{type(self).__name__}({items!r})"


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
