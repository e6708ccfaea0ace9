class InvalidArgumentError(ValueError):
    pass


class OutOfRangeError(IndexError):
    pass


class DisjointSet:
    '''
    Union-find over the elements 0..n-1, with path compression and union by rank.
    '''
    def __init__(self, n: int) -> None:
        if n < 0:
            raise InvalidArgumentError(f'number of elements must be non-negative, got {n}')

        self.parent = [i for i in range(n)]
        self.rank = [0] * n
        self.count = n

    def __len__(self) -> int:
        return len(self.parent)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.parent):
            raise OutOfRangeError(f'element {index} out of range [0, {len(self.parent)})')

    def find(self, index: int) -> int:
        self._check(index)

        root = index
        while self.parent[root] != root:
            root = self.parent[root]

        # second pass: point everything on the path straight at the root
        while self.parent[index] != root:
            self.parent[index], index = root, self.parent[index]

        return root

    def union(self, i: int, j: int) -> bool:
        i = self.find(i)
        j = self.find(j)
        if i == j:
            return False

        if self.rank[i] < self.rank[j]:
            self.parent[i] = j
        elif self.rank[i] > self.rank[j]:
            self.parent[j] = i
        else:
            self.parent[j] = i
            self.rank[i] += 1

        self.count -= 1
        return True

    def connected(self, i: int, j: int) -> bool:
        return self.find(i) == self.find(j)

    def groups(self) -> dict[int, list[int]]:
        out = {}
        for x in range(len(self.parent)):
            out.setdefault(self.find(x), []).append(x)
        return out
