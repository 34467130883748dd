"""
Integer Math — GCD / LCM

Алгоритм Евклида:
    gcd(a, b) = gcd(b, a mod b)
    gcd(a, 0) = |a|

LCM:
    lcm(a, b) = |a * b| / gcd(a, b)

Итеративная реализация: O(log(min(a, b))) шагов, без рекурсии.
"""

from src.core.math.numerical_safeguards import check_int_range


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Args:
        a: Первое целое (любого знака)
        b: Второе целое (любого знака)

    Returns:
        gcd(|a|, |b|) >= 0; gcd(0, 0) == 0

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(-4, 6)
        2
        >>> gcd(0, 7)
        7
        >>> gcd(5, 0)
        5
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное с проверкой диапазона.

    lcm(a, 0) == 0 по соглашению.

    Raises:
        ArithmeticOverflow: Если результат вне [INT_MIN, INT_MAX]

    Examples:
        >>> lcm(4, 6)
        12
        >>> lcm(2, 3)
        6
    """
    if a == 0 or b == 0:
        return 0
    # Делим до умножения: |a| / gcd * |b| не создаёт лишнего промежуточного
    return check_int_range(abs(a) // gcd(a, b) * abs(b), "lcm")
