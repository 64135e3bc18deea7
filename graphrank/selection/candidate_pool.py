from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")


def topk_by_score(items: Sequence[T], k: int, key: Callable[[T], float]) -> List[T]:
    # sorted() is stable: ties keep their incoming order
    return sorted(items, key=key, reverse=True)[:k]


def restore_order(items: Sequence[T], key: Callable[[T], int]) -> List[T]:
    return sorted(items, key=key)
