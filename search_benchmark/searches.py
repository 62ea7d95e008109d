from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, NamedTuple, Protocol, TypeVar

# --- Search Results ---

NOT_FOUND = -1


class SearchResult(NamedTuple):
    """Outcome of a single search: the index of the match (or NOT_FOUND) and the iterations spent."""
    item_index: int
    required_iterations: int

    @property
    def found(self) -> bool:
        return self.item_index != NOT_FOUND


class Comparable(Protocol):
    """Elements must support equality and a total order via ``<``."""

    def __eq__(self, other: Any) -> bool: ...

    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=Comparable)


# --- Search Algorithms ---

class Searcher(ABC):
    """
    Abstract base class for a search strategy.
    Implementations must be pure: they never mutate ``items`` and always return
    the same result for the same inputs.
    """

    @abstractmethod
    def find(self, items: Sequence[T], target: T) -> SearchResult:
        """Attempt to find ``target`` in ``items``, returning its index or NOT_FOUND."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Return the name of this searcher."""
        pass

    @property
    def name(self) -> str:
        return self.get_name()

    def __repr__(self):
        return f"{type(self).__name__}()"


class LinearSearch(Searcher):
    """
    Scans the collection front to back.
    The iteration count of a match is its 1-based position; a miss costs len(items).
    """

    def find(self, items: Sequence[T], target: T) -> SearchResult:
        if len(items) == 0:
            return SearchResult(NOT_FOUND, 0)

        for i, item in enumerate(items):
            if item == target:
                # It takes at least one iteration to find an item
                return SearchResult(i, i + 1)
        return SearchResult(NOT_FOUND, len(items))

    def get_name(self) -> str:
        return "LinearSearch"


class BinarySearch(Searcher):
    """
    Binary search over the closed interval [low, high].

    ``items`` must be sorted ascending by ``<``; on unsorted input the result is
    undefined (it may report NOT_FOUND for a present element), but never an
    out-of-range index.
    The count starts at one and grows by one for every pass that does not hit,
    so an empty collection costs one iteration.
    """

    def find(self, items: Sequence[T], target: T) -> SearchResult:
        low, high = 0, len(items) - 1
        iterations = 1
        while low <= high:
            mid = low + (high - low) // 2
            item = items[mid]
            if target < item:
                high = mid - 1
            elif item < target:
                low = mid + 1
            else:
                return SearchResult(mid, iterations)
            iterations += 1
        return SearchResult(NOT_FOUND, iterations)

    def get_name(self) -> str:
        return "BinarySearch"


SEARCHERS: dict[str, type[Searcher]] = {
    "linear": LinearSearch,
    "binary": BinarySearch,
}


def create_searcher(key: str) -> Searcher:
    """Instantiate a searcher by its registry key ("linear" or "binary")."""
    try:
        return SEARCHERS[key]()
    except KeyError:
        raise ValueError(f"Unknown searcher {key!r}, expected one of {sorted(SEARCHERS)}") from None
