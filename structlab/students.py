"""Student records kept in a fixed-size binary file with tombstone deletion."""

from __future__ import annotations

import os
import struct
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PATH = "stud.dat"
DELETED_ROLL = -1

_NAME_SIZE = 10
_ADDRESS_SIZE = 50
_RECORD = struct.Struct(f"<i{_NAME_SIZE}sc{_ADDRESS_SIZE}s3x")


def _encode_text(value: str, size: int, field: str) -> bytes:
    data = value.encode()
    if len(data) >= size:
        raise ValueError(f"{field} must be shorter than {size} bytes: {value!r}")
    return data


def _decode_text(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode(errors="replace")


@dataclass(frozen=True)
class StudentRecord:
    """One student: roll number, name, division letter and address."""

    roll: int
    name: str
    division: str
    address: str

    def pack(self) -> bytes:
        division = self.division.encode()
        if len(division) != 1:
            raise ValueError(f"division must be one character: {self.division!r}")
        return _RECORD.pack(
            self.roll,
            _encode_text(self.name, _NAME_SIZE, "name"),
            division,
            _encode_text(self.address, _ADDRESS_SIZE, "address"),
        )

    @classmethod
    def unpack(cls, data: bytes) -> StudentRecord:
        roll, name, division, address = _RECORD.unpack(data)
        return cls(roll, _decode_text(name), _decode_text(division), _decode_text(address))


_TOMBSTONE = StudentRecord(DELETED_ROLL, "NULL", "N", "NULL")


class StudentFile:
    """A file of fixed-size student records."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def create(self, records: Iterable[StudentRecord]) -> None:
        """Replace the file's contents with ``records``."""
        payload = b"".join(record.pack() for record in records)
        with self.path.open("wb") as handle:
            handle.write(payload)

    def _all(self) -> Iterator[StudentRecord]:
        with self.path.open("rb") as handle:
            while len(chunk := handle.read(_RECORD.size)) == _RECORD.size:
                yield StudentRecord.unpack(chunk)

    def records(self) -> list[StudentRecord]:
        """Return every record that has not been deleted, in file order."""
        return [record for record in self._all() if record.roll != DELETED_ROLL]

    def find(self, roll: int) -> StudentRecord | None:
        """Return the record with ``roll``, or None when there is none."""
        if roll == DELETED_ROLL:
            return None
        return next((record for record in self._all() if record.roll == roll), None)

    def delete(self, roll: int) -> StudentRecord:
        """Overwrite the record with ``roll`` by a tombstone and return it."""
        if roll != DELETED_ROLL:
            for position, record in enumerate(self._all()):
                if record.roll == roll:
                    with self.path.open("r+b") as handle:
                        handle.seek(position * _RECORD.size)
                        handle.write(_TOMBSTONE.pack())
                    return record
        raise KeyError(roll)


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
                print(f"\tNot a number: {token}")


def _yes(answer: str) -> bool:
    return answer[:1] in ("y", "Y")


def _row(record: StudentRecord) -> str:
    return f"\t{record.roll}\t{record.name}\t{record.division}\t{record.address}"


def _read_records(reader: _TokenReader) -> Iterator[StudentRecord]:
    while True:
        roll = reader.next_int("\n\tEnter Roll No of Student: ")
        name = reader.next_token("\n\tEnter a Name of Student: ")
        division = reader.next_token("\n\tEnter a Division of Student: ")[0]
        address = reader.next_token("\n\tEnter an Address of Student: ")
        yield StudentRecord(roll, name, division, address)
        if not _yes(reader.next_token("\n\tDo You Want to Add More Records (Y/N): ")):
            return


def main(argv: list[str] | None = None) -> int:
    """Run the interactive student records menu."""
    store = StudentFile(argv[0] if argv else DEFAULT_PATH)
    reader = _TokenReader()
    header = "\n\tRoll\tName\tDiv\tAddress"
    try:
        while True:
            print("\n\t***** Student Information *****")
            print("\t1. Create\n\t2. Display\n\t3. Delete\n\t4. Search\n\t5. Exit")
            choice = reader.next_int("\t..... Enter Your Choice: ")
            try:
                if choice == 1:
                    store.create(list(_read_records(reader)))
                elif choice == 2:
                    print("\n\tThe Content of File are:")
                    print(header)
                    for record in store.records():
                        print(_row(record))
                elif choice == 3:
                    roll = reader.next_int("\n\tEnter a Roll No: ")
                    try:
                        store.delete(roll)
                    except KeyError:
                        print("\n\tRecord Not Found")
                    else:
                        print("\n\tRecord Deleted")
                elif choice == 4:
                    record = store.find(reader.next_int("\n\tEnter a Roll No: "))
                    if record is None:
                        print("\n\tRecord Not Found...")
                    else:
                        print("\n\tRecord Found...")
                        print(header)
                        print(_row(record))
            except (OSError, ValueError) as exc:
                print(f"\n\tError: {exc}")
            answer = reader.next_token(
                "\n\t..... Do You Want to Continue in Main Menu? (Y/N): "
            )
            if not _yes(answer):
                break
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())