"""Hospital triage queue ordering patients by severity."""

from __future__ import annotations

import bisect
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum


class Severity(IntEnum):
    """Patient severity; a lower value is treated first."""

    SERIOUS = 1
    MEDIUM = 2
    NORMAL = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Patient:
    """A waiting patient and their priority."""

    priority: int
    name: str


class TriageQueue:
    """Priority queue where patients of equal priority keep arrival order."""

    def __init__(self) -> None:
        self._patients: list[Patient] = []

    def push(self, priority: int, name: str) -> Patient:
        """Queue a patient behind everyone of the same or higher urgency."""
        patient = Patient(int(priority), name)
        index = bisect.bisect_right(
            [queued.priority for queued in self._patients], patient.priority
        )
        self._patients.insert(index, patient)
        return patient

    def pop(self) -> Patient:
        """Remove and return the most urgent patient."""
        if not self._patients:
            raise IndexError("queue is empty")
        return self._patients.pop(0)

    def __iter__(self) -> Iterator[Patient]:
        return iter(list(self._patients))

    def __len__(self) -> int:
        return len(self._patients)

    def format_table(self) -> str:
        """Render the queue; patients with an unknown priority are not listed."""
        lines = ["Priority \t Name \t\t Patient Name"]
        for patient in self._patients:
            try:
                label = Severity(patient.priority).label
            except ValueError:
                continue
            lines.append(f"{patient.priority}\t\t {label} \t\t{patient.name}")
        return "\n".join(lines) + "\n"


class _TokenReader:
    def __init__(self) -> None:
        self._pending: deque[str] = deque()

    def next_token(self, prompt: str) -> str:
        while not self._pending:
            self._pending.extend(input(prompt).split())
        return self._pending.popleft()

    def next_int(self, prompt: str) -> int:
        while True:
            token = self.next_token(prompt)
            try:
                return int(token)
            except ValueError:
                print(f"Not a number: {token}")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive hospital queue menu."""
    reader = _TokenReader()
    queue = TriageQueue()
    try:
        while True:
            print("\nHospital History")
            print("1. Enter the record you want")
            print("2. Display")
            print("3. Delete")
            choice = reader.next_int("Enter your choice: ")
            if choice == 1:
                print("\n1. Serious\n2. Medium\n3. Normal")
                for _ in range(reader.next_int("Enter number of patients: ")):
                    priority = reader.next_int("\nEnter severity: ")
                    queue.push(priority, reader.next_token("\nEnter patient name: "))
            elif choice == 2:
                print(queue.format_table(), end="")
            elif choice == 3:
                try:
                    patient = queue.pop()
                except IndexError:
                    print("\nNo patients waiting.")
                else:
                    print(f"\n{patient.name} patient checked successfully\n")
                    print(queue.format_table(), end="")
            else:
                print("\nWrong choice!")
            if reader.next_int("\nDo you want to continue? (1 for Yes, 0 for No): ") != 1:
                break
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())