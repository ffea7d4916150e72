from typing import Any, Callable


class ChurchBoolean:
    """丘奇编码的布尔值

    布尔值不是原始数据，而是“在两个备选之间做选择”的行为。
    if_then_else 是唯一的基本操作，其余运算都由它推导出来。
    参数用无参函数（thunk）传入，只有被选中的那一个才会被求值。
    """
    __slots__ = ()

    def if_then_else(self, t: Callable[[], Any], e: Callable[[], Any]) -> Any:
        raise NotImplementedError

    def and_(self, x: Callable[[], "ChurchBoolean"]) -> "ChurchBoolean":
        # true && x = x, false && x = false
        return self.if_then_else(x, lambda: FALSE)

    def or_(self, x: Callable[[], "ChurchBoolean"]) -> "ChurchBoolean":
        # true || x = true, false || x = x
        return self.if_then_else(lambda: TRUE, x)

    def not_(self) -> "ChurchBoolean":
        return self.if_then_else(lambda: FALSE, lambda: TRUE)

    def eq(self, x: "ChurchBoolean") -> "ChurchBoolean":
        return self.if_then_else(lambda: x, lambda: x.not_())

    def ne(self, x: "ChurchBoolean") -> "ChurchBoolean":
        return self.if_then_else(lambda: x.not_(), lambda: x)

    def lt(self, x: "ChurchBoolean") -> "ChurchBoolean":
        """false < true，其余情况都为 false"""
        return self.if_then_else(lambda: FALSE, lambda: x)

    def __and__(self, x: "ChurchBoolean") -> "ChurchBoolean":
        return self.and_(lambda: x)

    def __or__(self, x: "ChurchBoolean") -> "ChurchBoolean":
        return self.or_(lambda: x)

    def __invert__(self) -> "ChurchBoolean":
        return self.not_()

    def to_bool(self) -> bool:
        return self.if_then_else(lambda: True, lambda: False)

    def __repr__(self):
        return self.if_then_else(lambda: "TRUE", lambda: "FALSE")


class _True(ChurchBoolean):
    __slots__ = ()

    def if_then_else(self, t, e):
        return t()


class _False(ChurchBoolean):
    __slots__ = ()

    def if_then_else(self, t, e):
        return e()


TRUE = _True()
FALSE = _False()


def from_bool(b: bool) -> ChurchBoolean:
    return TRUE if b else FALSE


def church_min(a: ChurchBoolean, b: ChurchBoolean) -> ChurchBoolean:
    return a.lt(b).if_then_else(lambda: a, lambda: b)


def church_max(a: ChurchBoolean, b: ChurchBoolean) -> ChurchBoolean:
    return a.lt(b).if_then_else(lambda: b, lambda: a)
