"""Exercise catalog and program schemas."""

from pydantic import BaseModel

from ironlog.schemas.session import ExerciseLog


class ExerciseDef(BaseModel):
    id: str
    name: str
    muscle_group: str


class ProgramExercise(BaseModel):
    name: str
    weight: float
    muscle_group: str | None = None


class ProgramDay(BaseModel):
    id: str
    label: str
    rest: bool = False
    exercises: list[ProgramExercise] = []


class Program(BaseModel):
    id: str
    name: str
    days: list[ProgramDay]


class SessionDraft(BaseModel):
    """Prefilled exercises for a new session; the client saves it once sets are done."""

    program_id: str
    day_id: str
    name: str
    exercises: list[ExerciseLog]
