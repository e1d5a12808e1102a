from __future__ import annotations

from datetime import datetime, timezone
import logging

from sqlalchemy import func, inspect, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

import classbook.models  # noqa: F401
from classbook.db.base import Base
from classbook.models.room import Room
from classbook.models.study_material import StudyMaterial
from classbook.models.subject import Subject
from classbook.models.teacher import Teacher

logger = logging.getLogger(__name__)

SAMPLE_TEACHERS = [
    ("Dr. Sarah Johnson", "sarah.johnson@nexathon.edu", "Computer Science", ["CS101", "CS201", "CS301"]),
    ("Prof. Michael Chen", "michael.chen@nexathon.edu", "Mathematics", ["MATH101", "MATH201", "STAT301"]),
    ("Dr. Emily Davis", "emily.davis@nexathon.edu", "Database Systems", ["DB101", "DB201", "DB301"]),
    ("Prof. Alex Rodriguez", "alex.rodriguez@nexathon.edu", "Artificial Intelligence", ["AI101", "ML201", "AI301"]),
    ("Dr. Lisa Wang", "lisa.wang@nexathon.edu", "Web Development", ["WEB101", "WEB201", "WEB301"]),
    ("Prof. David Thompson", "david.thompson@nexathon.edu", "Software Engineering", ["SE101", "SE201", "SE301"]),
    ("Dr. Maria Garcia", "maria.garcia@nexathon.edu", "Data Science", ["DS101", "DS201", "DS301"]),
    ("Prof. James Wilson", "james.wilson@nexathon.edu", "Cybersecurity", ["CSEC101", "CSEC201", "CSEC301"]),
]

SAMPLE_SUBJECTS = [
    ("Introduction to Computer Science", "CS101", "Computer Science", 3),
    ("Data Structures and Algorithms", "CS201", "Computer Science", 4),
    ("Database Management Systems", "DB101", "Database Systems", 3),
    ("Machine Learning Fundamentals", "ML201", "Artificial Intelligence", 4),
    ("Web Development", "WEB101", "Web Development", 3),
    ("Software Engineering", "SE101", "Software Engineering", 4),
    ("Data Science and Analytics", "DS101", "Data Science", 4),
    ("Cybersecurity Fundamentals", "CSEC101", "Cybersecurity", 3),
    ("Calculus I", "MATH101", "Mathematics", 4),
    ("Statistics and Probability", "STAT301", "Mathematics", 3),
]

SAMPLE_ROOMS = [
    ("Computer Lab 1", "101", "1", 30, "lab"),
    ("Computer Lab 2", "102", "1", 30, "lab"),
    ("Mathematics Lab", "103", "1", 25, "lab"),
    ("Lecture Hall A", "201", "2", 100, "classroom"),
    ("Lecture Hall B", "202", "2", 80, "classroom"),
    ("Seminar Room 1", "301", "3", 20, "classroom"),
    ("Seminar Room 2", "302", "3", 20, "classroom"),
    ("Conference Room", "401", "4", 15, "office"),
    ("Research Lab", "501", "5", 25, "lab"),
]

SAMPLE_MATERIALS = [
    ("Introduction to React", "Complete guide to React fundamentals and hooks", "react-intro.pdf", 2048576,
     "Dr. Sarah Johnson", "Computer Science"),
    ("Database Design Principles", "Fundamentals of database design and normalization", "database-design.pdf",
     3072000, "Dr. Emily Davis", "Database Systems"),
    ("Machine Learning Basics", "Introduction to ML algorithms and applications", "ml-basics.pdf", 4096000,
     "Prof. Alex Rodriguez", "Artificial Intelligence"),
]


def ensure_schema(engine: Engine) -> None:
    existing = set(inspect(engine).get_table_names())
    Base.metadata.create_all(bind=engine)
    created = sorted(set(Base.metadata.tables) - existing)
    if created:
        logger.info("Created tables: %s", ", ".join(created))


def _is_empty(db: Session, model) -> bool:
    return db.execute(select(func.count()).select_from(model)).scalar_one() == 0


def seed_sample_data(db: Session) -> None:
    seeded: list[str] = []
    if _is_empty(db, Teacher):
        db.add_all(
            Teacher(name=name, email=email, department=department, subjects=subjects)
            for name, email, department, subjects in SAMPLE_TEACHERS
        )
        seeded.append("teachers")
    if _is_empty(db, Subject):
        db.add_all(
            Subject(name=name, code=code, department=department, credits=credits)
            for name, code, department, credits in SAMPLE_SUBJECTS
        )
        seeded.append("subjects")
    if _is_empty(db, Room):
        db.add_all(
            Room(name=name, number=number, floor=floor, capacity=capacity, type=room_type)
            for name, number, floor, capacity, room_type in SAMPLE_ROOMS
        )
        seeded.append("rooms")
    if _is_empty(db, StudyMaterial):
        db.add_all(
            StudyMaterial(
                title=title,
                description=description,
                file_url=f"materials/{file_name}",
                file_name=file_name,
                file_size=file_size,
                uploaded_by=uploaded_by,
                subject=subject,
                batch="2024",
                uploaded_at=datetime.now(timezone.utc),
            )
            for title, description, file_name, file_size, uploaded_by, subject in SAMPLE_MATERIALS
        )
        seeded.append("study materials")
    if seeded:
        db.commit()
        logger.info("Seeded sample %s", ", ".join(seeded))
