class Nat:
    """皮亚诺自然数

    每个自然数要么是 Zero，要么是 Succ(n)，即另一个自然数 n 的后继。
    所有运算都只用 Zero 和后继递归地定义。
    """
    __slots__ = ()

    @property
    def is_zero(self) -> bool:
        raise NotImplementedError

    @property
    def predecessor(self) -> "Nat":
        raise NotImplementedError

    @property
    def successor(self) -> "Nat":
        return Succ(self)

    def __add__(self, that: "Nat") -> "Nat":
        raise NotImplementedError

    def __sub__(self, that: "Nat") -> "Nat":
        raise NotImplementedError

    def __eq__(self, other):
        if not isinstance(other, Nat):
            return NotImplemented
        a, b = self, other
        while not a.is_zero and not b.is_zero:
            a, b = a.predecessor, b.predecessor
        return a.is_zero and b.is_zero

    def __hash__(self):
        return hash(to_int(self))

    def __repr__(self):
        return nat_to_string(self)


class _Zero(Nat):
    __slots__ = ()

    @property
    def is_zero(self) -> bool:
        return True

    @property
    def predecessor(self) -> Nat:
        raise ArithmeticError("0.predecessor")

    def __add__(self, that: Nat) -> Nat:
        return that

    def __sub__(self, that: Nat) -> Nat:
        if that.is_zero:
            return self
        raise ArithmeticError("negative number")


Zero = _Zero()


class Succ(Nat):
    __slots__ = ("_n",)

    def __init__(self, n: Nat):
        self._n = n

    @property
    def is_zero(self) -> bool:
        return False

    @property
    def predecessor(self) -> Nat:
        return self._n

    def __add__(self, that: Nat) -> Nat:
        # (n + 1) + m = (n + m) + 1
        return Succ(self._n + that)

    def __sub__(self, that: Nat) -> Nat:
        if that.is_zero:
            return self
        return self._n - that.predecessor


def to_int(nat: Nat) -> int:
    count = 0
    while not nat.is_zero:
        nat = nat.predecessor
        count += 1
    return count


def from_int(n: int) -> Nat:
    """把整数转换为皮亚诺数，即对 Zero 连续取 n 次后继"""
    if n < 0:
        raise ValueError("Negative numbers not supported")
    nat = Zero
    for _ in range(n):
        nat = nat.successor
    return nat


def nat_to_string(nat: Nat) -> str:
    """显示构造过程，例如 2 显示为 Zero.successor.successor"""
    return "Zero" + ".successor" * to_int(nat)
