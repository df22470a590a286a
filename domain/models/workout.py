"""
Workout, exercise library and template models.
"""

from sqlalchemy import (
    Column,
    Text,
    TIMESTAMP,
    ForeignKey,
    Uuid,
    Integer,
    Float,
    Date,
    Boolean,
    JSON,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class Workout(Base):
    """A training session on one day"""

    __tablename__ = "workout"

    workout_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        nullable=False,
    )
    workout_date = Column(Date, nullable=False)
    category = Column(Text, nullable=False)
    muscle_groups = Column(JSON, nullable=False, default=list)
    note = Column(Text, nullable=False, default="")
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    user = relationship("AppUser", back_populates="workouts")
    exercises = relationship(
        "ExerciseEntry",
        back_populates="workout",
        cascade="all, delete-orphan",
        order_by="ExerciseEntry.position",
    )


class ExerciseEntry(Base):
    """One set of an exercise inside a workout"""

    __tablename__ = "exercise_entry"

    entry_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    workout_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("workout.workout_id", ondelete="CASCADE"),
        nullable=False,
    )
    position = Column(Integer, nullable=False, default=0)
    name = Column(Text, nullable=False)
    reps = Column(Integer)
    weight = Column(Float)  # kg
    duration = Column(Float)  # minutes
    distance = Column(Float)  # km
    is_cardio = Column(Boolean, nullable=False, default=False)
    note = Column(Text, nullable=False, default="")

    workout = relationship("Workout", back_populates="exercises")


class ExerciseDefinition(Base):
    """Exercise library entry"""

    __tablename__ = "exercise_definition"

    definition_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(Text, nullable=False)
    muscle_groups = Column(JSON, nullable=False, default=list)
    is_cardio = Column(Boolean, nullable=False, default=False)

    user = relationship("AppUser", back_populates="exercise_definitions")

    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_exercise_definition_user_name"),
    )


class WorkoutTemplate(Base):
    """Reusable workout layout"""

    __tablename__ = "workout_template"

    template_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    muscle_groups = Column(JSON, nullable=False, default=list)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    user = relationship("AppUser", back_populates="workout_templates")
    exercises = relationship(
        "TemplateExerciseEntry",
        back_populates="template",
        cascade="all, delete-orphan",
        order_by="TemplateExerciseEntry.position",
    )


class TemplateExerciseEntry(Base):
    __tablename__ = "template_exercise_entry"

    entry_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    template_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("workout_template.template_id", ondelete="CASCADE"),
        nullable=False,
    )
    position = Column(Integer, nullable=False, default=0)
    name = Column(Text, nullable=False)
    reps = Column(Integer)
    weight = Column(Float)
    duration = Column(Float)
    distance = Column(Float)
    is_cardio = Column(Boolean, nullable=False, default=False)
    note = Column(Text, nullable=False, default="")

    template = relationship("WorkoutTemplate", back_populates="exercises")
