import io

import pytest

from structkit.records import RECORD_SIZE, STREAMS, Student, StudentFile, main


@pytest.fixture
def records(tmp_path):
    store = StudentFile(tmp_path / "students.dat")
    store.add(Student(1, "Asha", "Computer", 8.5))
    store.add(Student(2, "Ravi", "Mechanical", 7.25))
    store.add(Student(3, "Meera", "Computer", 9.0))
    return store


def test_record_size_matches_layout():
    assert RECORD_SIZE == 88
    assert len(Student(1, "a", "b", 1.0).pack()) == RECORD_SIZE


def test_pack_unpack_round_trip():
    student = Student(42, "Kiran", "ENTC", 6.5)
    assert Student.unpack(student.pack()) == student


def test_pack_rejects_long_name():
    with pytest.raises(ValueError):
        Student(1, "x" * 40, "Computer", 1.0).pack()


def test_unpack_rejects_wrong_length():
    with pytest.raises(ValueError):
        Student.unpack(b"\0" * (RECORD_SIZE - 1))


def test_iteration_returns_added_records(records):
    assert [student.mis for student in records] == [1, 2, 3]
    assert list(records)[1] == Student(2, "Ravi", "Mechanical", 7.25)


def test_missing_file_is_empty(tmp_path):
    assert list(StudentFile(tmp_path / "absent.dat")) == []


def test_file_size_is_whole_records(records):
    assert records.path.stat().st_size == 3 * RECORD_SIZE


def test_find_by_fields(records):
    assert [s.name for s in records.find_by_mis(2)] == ["Ravi"]
    assert [s.mis for s in records.find_by_name("Meera")] == [3]
    assert [s.mis for s in records.find_by_stream("Computer")] == [1, 3]
    assert records.find_by_mis(99) == []


def test_find_by_cgpa_single_precision(tmp_path):
    store = StudentFile(tmp_path / "s.dat")
    store.add(Student(5, "Tara", "Production", 7.3))
    assert [s.mis for s in store.find_by_cgpa(7.3)] == [5]
    assert store.find_by_cgpa(7.4) == []


def test_delete_removes_record(records):
    assert records.delete(2) == 1
    assert [s.mis for s in records] == [1, 3]
    assert records.path.stat().st_size == 2 * RECORD_SIZE


def test_delete_missing_raises_and_keeps_file(records):
    before = records.path.read_bytes()
    with pytest.raises(KeyError):
        records.delete(99)
    assert records.path.read_bytes() == before


def test_count_by_stream(records):
    counts = records.count_by_stream()
    assert list(counts) == list(STREAMS)
    assert counts["Computer"] == 2
    assert counts["Mechanical"] == 1
    assert sum(counts.values()) == 3


def test_main_insert_and_count(tmp_path, monkeypatch, capsys):
    path = tmp_path / "r.dat"
    script = "1\n7\nNeha\nENTC\n8.0\n8\n9\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Students of Electronics:1" in out
    assert [s.mis for s in StudentFile(path)] == [7]