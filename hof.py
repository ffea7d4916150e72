from typing import Callable

IntFunction = Callable[[int], int]


def gcd(a: int, b: int) -> int:
    """欧几里得算法，gcd(a, b) = gcd(b, a % b)"""
    while b != 0:
        a, b = b, a % b
    return a


def factorial(n: int) -> int:
    """尾递归形式的阶乘，用累加器 acc 改写成循环"""
    if n < 0:
        raise ValueError(f"factorial 的参数不能为负数: {n}")
    acc = 1
    while n != 0:
        n, acc = n - 1, n * acc
    return acc


def square(x: int) -> int:
    return x * x


def cube(x: int) -> int:
    return x * x * x


def identity(x: int) -> int:
    return x


def sum_ints(a: int, b: int) -> int:
    return 0 if a > b else a + sum_ints(a + 1, b)


def sum_squares(a: int, b: int) -> int:
    return 0 if a > b else square(a) + sum_squares(a + 1, b)


def sum_cubes(a: int, b: int) -> int:
    return 0 if a > b else cube(a) + sum_cubes(a + 1, b)


def sum_factorials(a: int, b: int) -> int:
    return 0 if a > b else factorial(a) + sum_factorials(a + 1, b)


def sum_f(f: IntFunction, a: int, b: int) -> int:
    """高阶求和：f(a) + f(a+1) + ... + f(b)，上面几个 sum_* 都是它的特例"""
    if a > b:
        return 0
    return f(a) + sum_f(f, a + 1, b)


def sum_tail_rec(f: IntFunction, a: int, b: int) -> int:
    """与 sum_f 结果相同，但把递归改写为带累加器的循环"""
    acc = 0
    while a <= b:
        a, acc = a + 1, f(a) + acc
    return acc


def curry_sum(f: IntFunction) -> Callable[[int, int], int]:
    """柯里化：先给出 f，返回一个只接收区间 (a, b) 的求和函数"""
    def sum_of_f(a: int, b: int) -> int:
        if a > b:
            return 0
        return f(a) + sum_of_f(a + 1, b)
    return sum_of_f
