from dataclasses import dataclass
from typing import Generic, Iterator, Optional, Self, Sequence, TypeVar, overload

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result = Ok[T] | Err[E]


class Cursor(Generic[T], Iterator[T]):
    """Single-owner read position over a sequence.

    The position only moves forward, one item at a time, and never passes
    one beyond the last item.
    """

    def __init__(self, items: Sequence[T]):
        self._items = items
        self.position = 0

    def __iter__(self) -> Self:
        return self

    def __bool__(self) -> bool:
        return self.position < len(self._items)

    @overload
    def peek(self) -> Optional[T]:
        ...

    @overload
    def peek(self, default: U) -> T | U:
        ...

    def peek(self, default: Optional[U] = None) -> Optional[T | U]:
        if not self:
            return default
        return self._items[self.position]

    def advance(self) -> None:
        assert self, "cannot advance past the end of input"
        self.position += 1

    def __next__(self) -> T:
        if not self:
            raise StopIteration
        item = self._items[self.position]
        self.position += 1
        return item


# Below the lowest value sys.set_int_max_str_digits accepts, so each chunk
# converts whatever limit the interpreter runs with.
CHUNK_DIGITS = 600
CHUNK = 10**CHUNK_DIGITS


def format_int(value: int) -> str:
    """Decimal text of ``value``, without the interpreter's digit limit."""
    if -CHUNK < value < CHUNK:
        return str(value)
    sign = "-" if value < 0 else ""
    value = abs(value)
    chunks = []
    while value:
        value, chunk = divmod(value, CHUNK)
        chunks.append(str(chunk).zfill(CHUNK_DIGITS))
    return sign + "".join(reversed(chunks)).lstrip("0")
