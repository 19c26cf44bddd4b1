from __future__ import annotations

from collections.abc import Sequence
import typing as t

if t.TYPE_CHECKING:
    from typing import overload, Protocol
    from _typeshed import SupportsAdd, SupportsMul

    class SupportsAddAndMul(SupportsAdd, SupportsMul, Protocol): ...

    @overload
    def cycGet[T](seq: Sequence[T], idx: int) -> T: ...

    @overload
    def cycGet[T: SupportsAddAndMul](seq: Sequence[T], idx: int, increment: T) -> T: ...


__all__ = ["cycGet", "cycRoll"]


def cycGet(seq, idx, increment=None):
    """
    Cyclic indexing. With `increment` given, each full cycle past the end of `seq` adds
    `increment` to the item, and each full cycle before the start subtracts it.
    """
    q, r = divmod(idx, len(seq))
    res = seq[r]
    if increment is not None:
        res += increment * q
    return res


def cycRoll[T](seq: Sequence[T], shift: int, increment: T) -> list[T]:
    """
    Rotates `seq` left by `shift` positions. Items wrapped around from the front are raised
    by `increment` per cycle, and items wrapped around from the back are lowered by it.
    """
    return [cycGet(seq, i + shift, increment) for i in range(len(seq))]
