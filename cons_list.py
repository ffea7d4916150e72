from typing import Any, Callable, Iterable, Iterator


class ConsList:
    """不可变的单链表（cons list）

    一个列表要么是空表 Nil，要么是 Cons(head, tail)：一个元素加上剩余的列表。
    所有操作都返回新列表，旧列表永远不会被修改，因此不同的递归分支可以放心地共享同一个尾部。
    """
    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} 是不可变的")

    @property
    def is_empty(self) -> bool:
        raise NotImplementedError

    @property
    def head(self) -> Any:
        raise NotImplementedError

    @property
    def tail(self) -> "ConsList":
        raise NotImplementedError

    def prepend(self, elem: Any) -> "ConsList":
        """在表头加入一个元素，返回新列表"""
        return Cons(elem, self)

    def append(self, other: "ConsList") -> "ConsList":
        """把 other 接在本列表之后；other 原样作为新列表的尾部被共享"""
        if not isinstance(other, ConsList):
            raise TypeError(f"只能连接 ConsList，而不是 {type(other).__name__}")
        result = other
        for x in self.reverse():
            result = result.prepend(x)
        return result

    def contains(self, elem: Any) -> bool:
        return any(x == elem for x in self)

    def __contains__(self, elem: Any) -> bool:
        return self.contains(elem)

    def map(self, f: Callable[[Any], Any]) -> "ConsList":
        return ConsList.from_iterable(f(x) for x in self)

    def reverse(self) -> "ConsList":
        result = Nil
        for x in self:
            result = result.prepend(x)
        return result

    def __iter__(self) -> Iterator[Any]:
        node = self
        while not node.is_empty:
            yield node.head
            node = node.tail

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __eq__(self, other):
        if not isinstance(other, ConsList):
            return NotImplemented
        a, b = self, other
        while not a.is_empty and not b.is_empty:
            if a.head != b.head:
                return False
            a, b = a.tail, b.tail
        return a.is_empty and b.is_empty

    def __hash__(self):
        return hash(tuple(self))

    def __repr__(self):
        return "List(" + ", ".join(repr(x) for x in self) + ")"

    @staticmethod
    def of(*items: Any) -> "ConsList":
        """ConsList.of(1, 2, 3) 相当于 List(1, 2, 3)"""
        return ConsList.from_iterable(items)

    @staticmethod
    def from_iterable(items: Iterable[Any]) -> "ConsList":
        result = Nil
        for x in reversed(list(items)):
            result = result.prepend(x)
        return result


class Cons(ConsList):
    __slots__ = ("_head", "_tail")

    def __init__(self, head: Any, tail: ConsList):
        if not isinstance(tail, ConsList):
            raise TypeError(f"tail 必须是 ConsList，而不是 {type(tail).__name__}")
        object.__setattr__(self, "_head", head)
        object.__setattr__(self, "_tail", tail)

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def head(self) -> Any:
        return self._head

    @property
    def tail(self) -> ConsList:
        return self._tail


class _Nil(ConsList):
    __slots__ = ()

    @property
    def is_empty(self) -> bool:
        return True

    @property
    def head(self):
        raise IndexError("Nil.head")

    @property
    def tail(self):
        raise IndexError("Nil.tail")


# 空表只有一个实例
Nil = _Nil()


def singleton(elem: Any) -> ConsList:
    return Cons(elem, Nil)


def select(n: int, lst: ConsList) -> Any:
    """返回列表中第 n 个元素（从 0 开始）"""
    if n < 0 or n >= len(lst):
        raise IndexError("invalid index")
    while n > 0:
        lst = lst.tail
        n -= 1
    return lst.head


def scale_list(xs: ConsList, factor: float) -> ConsList:
    return xs.map(lambda x: x * factor)
