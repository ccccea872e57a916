from __future__ import annotations

from typing import Generic, TypeVar, Type
from sqlalchemy.orm import Session
from sqlalchemy import Select

T = TypeVar("T")


class BaseRepository(Generic[T]):
    def __init__(self, session: Session, model: Type[T]) -> None:
        self.session = session
        self.model = model

    def create(self, obj: T, *, commit: bool = True) -> T:
        self.session.add(obj)
        if commit:
            self.session.commit()
            self.session.refresh(obj)
        return obj

    def _all(self, stmt: Select) -> list[T]:
        return list(self.session.execute(stmt).scalars().all())
