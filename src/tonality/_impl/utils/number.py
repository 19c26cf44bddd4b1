from numbers import Real, Integral

__all__ = ["resolveInt", "isInt", "smod"]


def resolveInt(arg: Real) -> Real:
    """
    Turns a numeric value into an `int` if it has an integral value, otherwise returns it
    as is.
    """
    if isinstance(arg, Integral) or arg.is_integer():
        return int(arg)
    return arg


def isInt(arg: object) -> bool:
    """
    Whether `arg` is a real number with an integral value. `bool` values are not considered
    numbers here.
    """
    if isinstance(arg, bool) or not isinstance(arg, Real):
        return False
    if isinstance(arg, Integral):
        return True
    return arg.is_integer()


def smod(n: float, k: float, disp: float, includeRight: bool = True) -> float:
    result = n % k
    if result > disp or (not includeRight and result == disp):
        result -= k
    return result
