from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Session

from classbook.core.exceptions import NotFoundError, ValidationError
from classbook.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


def require_id(entity_id: str | None, label: str) -> str:
    if not entity_id or not entity_id.strip():
        raise ValidationError(f"{label} ID is required")
    return entity_id.strip()


def get_or_404(db: Session, model: type[ModelT], entity_id: str, label: str) -> ModelT:
    instance = db.get(model, entity_id)
    if instance is None:
        raise NotFoundError(label, entity_id)
    return instance


def create_entity(db: Session, model: type[ModelT], payload: BaseModel) -> ModelT:
    instance = model(**payload.model_dump())
    db.add(instance)
    db.commit()
    db.refresh(instance)
    return instance


def update_entity(db: Session, instance: ModelT, payload: BaseModel) -> ModelT:
    for key, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(instance, key, value)
    db.commit()
    db.refresh(instance)
    return instance


def delete_entity(db: Session, instance: Base) -> None:
    db.delete(instance)
    db.commit()
