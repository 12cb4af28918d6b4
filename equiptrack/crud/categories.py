"""CRUD helpers for equipment categories."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models.category import Category
from .common import commit_or_raise


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def list_categories(db: Session) -> list[Category]:
    return db.execute(select(Category).order_by(Category.id)).scalars().all()


def get_category(db: Session, category_id: int) -> Category | None:
    return db.get(Category, category_id)


def create_category(db: Session, payload: dict) -> Category:
    name = _clean(payload.get("name"))
    if not name:
        raise ValueError("name is required")
    category = Category(name=name, description=_clean(payload.get("description")))
    db.add(category)
    commit_or_raise(db, "category")
    db.refresh(category)
    return category


def update_category(db: Session, category: Category, payload: dict) -> Category:
    if "name" in payload:
        name = _clean(payload.get("name"))
        if not name:
            raise ValueError("name is required")
        category.name = name
    if "description" in payload:
        category.description = _clean(payload.get("description"))
    commit_or_raise(db, "category")
    db.refresh(category)
    return category


def delete_category(db: Session, category: Category) -> None:
    db.delete(category)
    commit_or_raise(db, "category")
