class IntSet:
    """以二叉搜索树实现的不可变整数集合

    集合要么是空集 Empty，要么是 NonEmpty(elem, left, right)，
    左子树的元素都小于 elem，右子树的元素都大于 elem。
    incl 和 union 都返回新集合，原集合保持不变。
    """
    __slots__ = ()

    def incl(self, x: int) -> "IntSet":
        raise NotImplementedError

    def contains(self, x: int) -> bool:
        raise NotImplementedError

    def union(self, other: "IntSet") -> "IntSet":
        raise NotImplementedError

    def size(self) -> int:
        raise NotImplementedError

    def __contains__(self, x: int) -> bool:
        return self.contains(x)

    def __len__(self) -> int:
        return self.size()


class _Empty(IntSet):
    __slots__ = ()

    def incl(self, x: int) -> IntSet:
        return NonEmpty(x, Empty, Empty)

    def contains(self, x: int) -> bool:
        return False

    def union(self, other: IntSet) -> IntSet:
        return other

    def size(self) -> int:
        return 0

    def __str__(self):
        return "."


Empty = _Empty()


class NonEmpty(IntSet):
    __slots__ = ("elem", "left", "right")

    def __init__(self, elem: int, left: IntSet, right: IntSet):
        self.elem = elem
        self.left = left
        self.right = right

    def incl(self, x: int) -> IntSet:
        if x < self.elem:
            return NonEmpty(self.elem, self.left.incl(x), self.right)
        if x > self.elem:
            return NonEmpty(self.elem, self.left, self.right.incl(x))
        return self

    def contains(self, x: int) -> bool:
        node = self
        while isinstance(node, NonEmpty):
            if x == node.elem:
                return True
            node = node.left if x < node.elem else node.right
        return False

    def union(self, other: IntSet) -> IntSet:
        # ((left ∪ right) ∪ other) 再加入 elem
        return self.left.union(self.right).union(other).incl(self.elem)

    def size(self) -> int:
        return self.left.size() + self.right.size() + 1

    def __str__(self):
        return "{" + str(self.left) + str(self.elem) + str(self.right) + "}"


def from_ints(*xs: int) -> IntSet:
    s = Empty
    for x in xs:
        s = s.incl(x)
    return s
