"""Fixed-size binary student records kept in a flat file."""

from __future__ import annotations

import argparse
import os
import struct
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

_FIELD = 40
_LAYOUT = struct.Struct(f"=i{_FIELD}s{_FIELD}sf")
RECORD_SIZE = _LAYOUT.size
STREAMS = (
    "Computer",
    "Instrumentation",
    "Mechanical",
    "Electrical",
    "ENTC",
    "Production",
    "Metallurgy",
)
_STREAM_LABELS = {"ENTC": "Electronics"}
DEFAULT_PATH = "Student_Record.dat"


def _single(value: float) -> float:
    return struct.unpack("=f", struct.pack("=f", value))[0]


def _encode(text: str, label: str) -> bytes:
    data = text.encode("utf-8")
    if len(data) >= _FIELD or b"\0" in data:
        raise ValueError(f"{label} must be under {_FIELD} bytes with no NUL")
    return data


def _decode(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


@dataclass(frozen=True)
class Student:
    """One student record."""

    mis: int
    name: str
    stream: str
    cgpa: float

    def pack(self) -> bytes:
        """Encode the record in its fixed binary layout."""
        return _LAYOUT.pack(
            self.mis,
            _encode(self.name, "name"),
            _encode(self.stream, "stream"),
            self.cgpa,
        )

    @classmethod
    def unpack(cls, data: bytes) -> Student:
        """Decode one record from its binary layout."""
        if len(data) != RECORD_SIZE:
            raise ValueError(f"a record is {RECORD_SIZE} bytes, got {len(data)}")
        mis, name, stream, cgpa = _LAYOUT.unpack(data)
        return cls(mis, _decode(name), _decode(stream), cgpa)


class StudentFile:
    """A file of back-to-back student records."""

    def __init__(self, path: Union[str, Path] = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def add(self, student: Student) -> None:
        """Append a record to the file."""
        data = student.pack()
        with self.path.open("ab") as handle:
            handle.write(data)

    def __iter__(self) -> Iterator[Student]:
        """Yield every complete record; a missing file holds none."""
        try:
            handle = self.path.open("rb")
        except FileNotFoundError:
            return
        with handle:
            while len(chunk := handle.read(RECORD_SIZE)) == RECORD_SIZE:
                yield Student.unpack(chunk)

    def find_by_mis(self, mis: int) -> list[Student]:
        """Records with the MIS number."""
        return [student for student in self if student.mis == mis]

    def find_by_name(self, name: str) -> list[Student]:
        """Records with exactly this name."""
        return [student for student in self if student.name == name]

    def find_by_stream(self, stream: str) -> list[Student]:
        """Records of exactly this stream."""
        return [student for student in self if student.stream == stream]

    def find_by_cgpa(self, cgpa: float) -> list[Student]:
        """Records whose stored CGPA equals ``cgpa`` at single precision."""
        target = _single(cgpa)
        return [student for student in self if student.cgpa == target]

    def delete(self, mis: int) -> int:
        """Remove every record with the MIS number and return how many went.

        Raises KeyError, leaving the file alone, when there is none.
        """
        kept = []
        removed = 0
        with self.path.open("rb") as handle:
            while len(chunk := handle.read(RECORD_SIZE)) == RECORD_SIZE:
                if Student.unpack(chunk).mis == mis:
                    removed += 1
                else:
                    kept.append(chunk)
        if not removed:
            raise KeyError(mis)
        fd, temp = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as out:
                out.write(b"".join(kept))
            os.replace(temp, self.path)
        except BaseException:
            Path(temp).unlink(missing_ok=True)
            raise
        return removed

    def count_by_stream(self) -> dict[str, int]:
        """Number of students in each known stream, in the fixed stream order."""
        counts = dict.fromkeys(STREAMS, 0)
        for student in self:
            if student.stream in counts:
                counts[student.stream] += 1
        return counts


_MENU = """1. Insert Record
2. Search the record by MIS
3. Search the record by Name
4. Search the record by Stream
5. Search the record by CGPA
6. Delete Record
7. Display all record
8. Display count of student from each stream
9. Exit
"""


def _first_word(prompt: str) -> str:
    words = input(prompt).split()
    return words[0] if words else ""


def _show_found(students: list[Student]) -> None:
    if not students:
        print("No such record")
    for student in students:
        print("Found")
        print(f"MIS No: {student.mis}")
        print(f"Name: {student.name}")
        print(f"Stream: {student.stream}")
        print(f"CGPA: {student.cgpa:f}")


def _run_choice(records: StudentFile, choice: int) -> bool:
    if choice == 1:
        mis = int(input("MIS No:"))
        name = _first_word("Name:")
        stream = _first_word("Stream:")
        cgpa = float(input("CGPA:"))
        records.add(Student(mis, name, stream, cgpa))
        print("Record has been added successfully")
    elif choice == 2:
        _show_found(records.find_by_mis(int(input("Enter the MIS No:"))))
    elif choice == 3:
        _show_found(records.find_by_name(_first_word("Enter the name:")))
    elif choice == 4:
        _show_found(records.find_by_stream(_first_word("Enter the stream:")))
    elif choice == 5:
        _show_found(records.find_by_cgpa(float(input("Enter the CGPA:"))))
    elif choice == 6:
        try:
            records.delete(int(input("Enter the MIS No:")))
            print("Record deleted successfully")
        except KeyError:
            print("No such record exist")
        except FileNotFoundError:
            print("Unable to open student record file")
    elif choice == 7:
        for student in records:
            print(
                f"MIS = {student.mis}\nName = {student.name}\n"
                f"Stream = {student.stream}\nCGPA = {student.cgpa:f}\n"
            )
    elif choice == 8:
        for stream, count in records.count_by_stream().items():
            print(f"Students of {_STREAM_LABELS.get(stream, stream)}:{count}")
    elif choice == 9:
        return False
    else:
        print("Wrong choice")
    print()
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive student record menu."""
    parser = argparse.ArgumentParser(
        prog="structkit-records", description="Manage a file of student records."
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH, help="record file")
    args = parser.parse_args(argv)
    records = StudentFile(args.path)
    running = True
    try:
        while running:
            print(_MENU)
            try:
                running = _run_choice(records, int(input("Enter your choice : ")))
            except ValueError as exc:
                print(f"Wrong input: {exc}")
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())