"""Tests for the in-memory student store and the service in front of it."""

import threading
from dataclasses import FrozenInstanceError, replace

import pytest

from app.core.exceptions import StudentNotFoundError
from app.models.student import Student
from app.services.student.store import StudentStore


def make_student(name="Ana", age=20, email="a@x.com", course="CS"):
    return Student(name=name, age=age, email=email, course=course)


# --- id assignment ---

def test_ids_start_at_one_and_follow_creation_order(store):
    ids = [store.save(make_student(name=f"s{i}")).id for i in range(5)]
    assert ids == [1, 2, 3, 4, 5]


def test_ids_are_never_reused_after_removal(store):
    first = store.save(make_student())
    second = store.save(make_student(name="Bia"))
    assert store.remove(second.id)
    assert store.remove(first.id)

    third = store.save(make_student(name="Caio"))
    assert third.id == 3


def test_clear_does_not_reset_counter(store):
    store.save(make_student())
    store.clear()
    assert len(store) == 0
    assert store.save(make_student()).id == 2


def test_save_does_not_mutate_the_input(store):
    transient = make_student()
    saved = store.save(transient)
    assert transient.id == 0
    assert saved.id == 1
    assert saved.name == transient.name


def test_concurrent_saves_get_distinct_ids(store):
    workers = 16
    per_worker = 50
    barrier = threading.Barrier(workers)

    def create_many():
        barrier.wait()
        for _ in range(per_worker):
            store.save(make_student())

    threads = [threading.Thread(target=create_many) for _ in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = sorted(s.id for s in store.list())
    assert ids == list(range(1, workers * per_worker + 1))


# --- list / get ---

def test_list_returns_insertion_order(store):
    for name in ("Ana", "Bia", "Caio"):
        store.save(make_student(name=name))
    assert [s.name for s in store.list()] == ["Ana", "Bia", "Caio"]


def test_list_is_a_snapshot(store):
    saved = store.save(make_student())
    snapshot = store.list()
    snapshot.clear()
    snapshot.append(make_student(name="Intruso"))

    assert store.list() == [saved]
    assert store.get_by_id(saved.id) == saved


def test_records_cannot_be_mutated_through_a_snapshot(store):
    saved = store.save(make_student())
    with pytest.raises(FrozenInstanceError):
        store.list()[0].name = "Outro"
    assert store.get_by_id(saved.id).name == "Ana"


def test_get_by_id_missing_returns_none(store):
    assert store.get_by_id(999) is None


# --- update policy ---

def test_update_replaces_in_place(store):
    store.save(make_student(name="Ana"))
    bia = store.save(make_student(name="Bia"))
    store.save(make_student(name="Caio"))

    updated = store.save(replace(bia, course="Math"))

    assert updated.id == bia.id
    assert [s.name for s in store.list()] == ["Ana", "Bia", "Caio"]
    assert store.get_by_id(bia.id).course == "Math"


def test_update_of_unknown_id_is_rejected(store):
    store.save(make_student())
    with pytest.raises(StudentNotFoundError):
        store.save(replace(make_student(), id=42))
    assert [s.id for s in store.list()] == [1]
    # the counter was not touched by the failed update
    assert store.save(make_student()).id == 2


# --- remove ---

def test_remove_is_final(store):
    saved = store.save(make_student())
    assert store.remove(saved.id) is True
    assert store.get_by_id(saved.id) is None
    assert saved not in store.list()
    assert store.remove(saved.id) is False


def test_remove_unknown_id(store):
    assert store.remove(7) is False


# --- service ---

def test_service_delegates_to_store(service, store):
    saved = service.save_student(make_student())
    assert store.get_by_id(saved.id) == saved
    assert service.get_student(saved.id) == saved
    assert service.list_students() == [saved]
    assert service.remove_student(saved.id) is True
    assert len(store) == 0


def test_service_builds_its_own_store_by_default():
    from app.services.student.student import StudentService

    service = StudentService()
    assert isinstance(service.store, StudentStore)
    assert service.list_students() == []


def test_student_console_format():
    student = replace(make_student(), id=3)
    assert str(student) == "ID: 3 | Nome: Ana | Idade: 20 | Email: a@x.com | Curso: CS"
