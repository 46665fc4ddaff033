"""Phone-book hash tables using chaining or linear probing to resolve collisions."""

from __future__ import annotations

DEFAULT_SIZE = 10


class TableFullError(Exception):
    """Raised when an open-addressing table has no free slot left."""


def hash_key(key: str, size: int) -> int:
    """Return the bucket for ``key``: the sum of its code points modulo ``size``."""
    return sum(map(ord, key)) % size


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError(f"table size must be positive, got {size}")


class ChainingHashTable:
    """Hash table whose buckets are lists of ``(name, phone)`` pairs."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        _check_size(size)
        self.size = size
        self._buckets: list[list[tuple[str, str]]] = [[] for _ in range(size)]

    def insert(self, name: str, phone: str) -> None:
        """Append an entry to the bucket that ``name`` hashes to."""
        self._buckets[hash_key(name, self.size)].append((name, phone))

    def search(self, name: str) -> tuple[str | None, int]:
        """Return ``(phone, comparisons)``; phone is None when ``name`` is absent."""
        comparisons = 0
        for comparisons, (entry_name, phone) in enumerate(
            self._buckets[hash_key(name, self.size)], start=1
        ):
            if entry_name == name:
                return phone, comparisons
        return None, comparisons


class LinearProbingHashTable:
    """Open-addressing hash table that probes successive slots on collision."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        _check_size(size)
        self.size = size
        self._slots: list[tuple[str, str] | None] = [None] * size

    def _probe(self, name: str):
        start = hash_key(name, self.size)
        for step in range(self.size):
            yield (start + step) % self.size

    def insert(self, name: str, phone: str) -> None:
        """Store ``phone`` under ``name``, replacing an existing entry of that name."""
        for index in self._probe(name):
            slot = self._slots[index]
            if slot is None or slot[0] == name:
                self._slots[index] = (name, phone)
                return
        raise TableFullError("Hash table is full!")

    def search(self, name: str) -> tuple[str | None, int]:
        """Return ``(phone, comparisons)``; phone is None when ``name`` is absent."""
        comparisons = 0
        for index in self._probe(name):
            comparisons += 1
            slot = self._slots[index]
            if slot is None:
                return None, comparisons
            if slot[0] == name:
                return slot[1], comparisons
        return None, comparisons


def _ask_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt).strip())
        except ValueError:
            print("Please enter a number.")


def _session() -> None:
    while True:
        print("Choose collision resolution method: ")
        print("1. Chaining")
        print("2. Linear Probing")
        print("3. Exit")
        choice = _ask_int("Enter your choice: ")

        if choice == 1:
            table: ChainingHashTable | LinearProbingHashTable = ChainingHashTable()
        elif choice == 2:
            table = LinearProbingHashTable()
        elif choice == 3:
            print("\nExiting...")
            return
        else:
            print("Invalid choice! Please try again.")
            continue

        while True:
            name = input("Enter client name: ")
            phone = input(f"Enter phone number for {name}: ")
            try:
                table.insert(name, phone)
            except TableFullError as exc:
                print(exc)
            more = _ask_int("Do you want to add another client? (1 for Yes, 0 for No): ")
            if more == 0:
                break

        search_name = input("Enter the name of the client you want to search: ")
        result, comparisons = table.search(search_name)
        if result is not None:
            print(f"Phone number for {search_name}: {result}")
        else:
            print(f"{search_name} not found!")
        print(f"Number of comparisons: {comparisons}")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive phone-book session."""
    try:
        _session()
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())