import operator
from typing import Iterable, Optional


class IntervalSumTree:
    def __init__(self, values: Iterable[int]):
        self._values = [self._check_value(v) for v in values]
        self.size = len(self._values)
        # root is at 1, so 4 * size covers every split shape
        self._tree = [0 for _ in range(4 * self.size)]

        if self.size > 0:
            self._build_helper(1, 0, self.size)

    @staticmethod
    def _as_int(x: int, name: str) -> int:
        try:
            return operator.index(x)
        except TypeError:
            raise TypeError("{} must be an integer, got {!r}".format(name, x)) from None

    def _check_value(self, value: int) -> int:
        return self._as_int(value, "value")

    def _check_index(self, idx: int) -> int:
        idx = self._as_int(idx, "index")
        if not 0 <= idx < self.size:
            raise IndexError("index {} out of range [0, {})".format(idx, self.size))
        return idx

    def _build_helper(self, node: int, left: int, right: int):
        if left + 1 == right:
            self._tree[node] = self._values[left]
            return

        mid = (left + right) // 2
        self._build_helper(2 * node, left, mid)
        self._build_helper(2 * node + 1, mid, right)

        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def _update_helper(self, idx: int, val: int, delta: int, node: int, left: int, right: int):
        self._tree[node] += delta

        if left + 1 == right:
            self._values[idx] = val
            self._tree[node] = val
            return

        mid = (left + right) // 2
        if idx < mid:
            self._update_helper(idx, val, delta, 2 * node, left, mid)
        else:
            self._update_helper(idx, val, delta, 2 * node + 1, mid, right)

    def _sum_helper(self, start: int, end: int, node: int, node_start: int, node_end: int) -> int:
        # [start, end) is the query, [node_start, node_end) is what node covers
        if start >= node_end or end <= node_start:
            return 0

        if start <= node_start and end >= node_end:
            return self._tree[node]

        mid = (node_start + node_end) // 2
        return self._sum_helper(start, end, 2 * node, node_start, mid) + self._sum_helper(
            start, end, 2 * node + 1, mid, node_end
        )

    def update(self, idx: int, val: int):
        """Sets arr[idx] = val."""
        idx = self._check_index(idx)
        val = self._check_value(val)

        # delta must be taken before the leaf overwrites values[idx]
        delta = val - self._values[idx]
        self._update_helper(idx, val, delta, 1, 0, self.size)

    def sum(self, start: int = 0, end: Optional[int] = None) -> int:
        """Returns arr[start] + ... + arr[end - 1], or 0 if the interval is empty."""
        if end is None:
            end = self.size
        start = self._as_int(start, "start")
        end = self._as_int(end, "end")
        if self.size == 0:
            return 0

        return self._sum_helper(start, end, 1, 0, self.size)

    def __setitem__(self, idx: int, val: int):
        self.update(idx, val)

    def __getitem__(self, idx: int) -> int:
        return self._values[self._check_index(idx)]

    def __len__(self) -> int:
        return self.size
