from collections import Counter


def is_anagram(s: str, t: str) -> bool:
    """判断两个字符串是否互为变位词（字母相同、顺序不同）

    先统计 s 中每个字符出现的次数，再用 t 逐个抵消；
    一旦某个字符的计数变为负数，说明 t 中该字符多于 s，立即返回 False。
    """
    if len(s) != len(t):
        return False
    freq = Counter(s)
    for c in t:
        freq[c] -= 1
        if freq[c] < 0:
            return False
    return True
