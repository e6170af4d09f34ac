from pydantic import BaseModel, ConfigDict, field_validator


class StudentBase(BaseModel):
    name: str
    age: int
    email: str
    course: str

    @field_validator("age", mode="before")
    @classmethod
    def reject_bool_age(cls, v):
        """Numbers and numeric strings ("20") pass; true/false do not."""
        if isinstance(v, bool):
            raise ValueError("age must be an integer, not a boolean")
        return v


class StudentCreate(StudentBase):
    pass


class Student(BaseModel):
    # Field order is the wire order: id first
    id: int
    name: str
    age: int
    email: str
    course: str

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
