from dataclasses import dataclass

UNASSIGNED_ID = 0


@dataclass(frozen=True)
class Student:
    """
    A student record. id == 0 means the record has not been saved yet;
    the store hands back a new instance carrying the assigned id.
    """
    name: str
    age: int
    email: str
    course: str
    id: int = UNASSIGNED_ID

    @property
    def is_new(self) -> bool:
        return self.id == UNASSIGNED_ID

    def __str__(self) -> str:
        return (
            f"ID: {self.id} | Nome: {self.name} | Idade: {self.age} "
            f"| Email: {self.email} | Curso: {self.course}"
        )
