"""
Persistence context: one unit of work over a SQLAlchemy session.

Services never hold a raw Session. They get an AppDbContext, address the
four entity sets on it and call save_changes() once per operation.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Generator, Generic, Iterable, Iterator, List, Optional, Sequence, Type, TypeVar

from fastapi import Depends
from sqlalchemy import func, select
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from core.database import get_db
from core.exceptions import StorageError
from core.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class EntitySet(Generic[T]):
    """Query/mutation surface for one mapped class.

    `include` names relationship attributes to load eagerly with the result.
    """

    def __init__(self, session: Session, model: Type[T]):
        self._session = session
        self.model = model

    def _select(self, criteria: Sequence[Any], include: Iterable[str]):
        stmt = select(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        if include:
            stmt = stmt.options(*(selectinload(getattr(self.model, name)) for name in include))
        return stmt.order_by(*self.model.__mapper__.primary_key)

    def _expire_included(self, include: Sequence[str]) -> None:
        # selectinload only fills unloaded collections, so stale ones on
        # instances already held by the session are expired first. Only the
        # named relationships are touched and never while they carry unsaved changes.
        for obj in list(self._session.identity_map.values()):
            if not isinstance(obj, self.model):
                continue
            state = sa_inspect(obj)
            names = [
                name for name in include
                if name not in state.unloaded and not state.attrs[name].history.has_changes()
            ]
            if names:
                self._session.expire(obj, names)

    def _scalars(self, criteria: Sequence[Any], include: Iterable[str]):
        include = tuple(include)
        # pending edits stay pending: reads neither flush nor overwrite loaded columns
        with self._session.no_autoflush:
            if include:
                self._expire_included(include)
            return self._session.scalars(self._select(criteria, include)).all()

    def all(self, include: Iterable[str] = ()) -> List[T]:
        return list(self._scalars((), include))

    def filter(self, *criteria: Any, include: Iterable[str] = ()) -> List[T]:
        return list(self._scalars(criteria, include))

    def first(self, *criteria: Any, include: Iterable[str] = ()) -> Optional[T]:
        rows = self._scalars(criteria, include)
        return rows[0] if rows else None

    def find(self, key: Any) -> Optional[T]:
        return self._session.get(self.model, key)

    def count(self, *criteria: Any) -> int:
        stmt = select(func.count()).select_from(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        return self._session.scalar(stmt) or 0

    def add(self, entity: T) -> None:
        self._session.add(entity)

    def remove(self, entity: T) -> None:
        self._session.delete(entity)


@dataclass
class ChangeSet:
    added: List[Any] = field(default_factory=list)
    modified: List[Any] = field(default_factory=list)
    removed: List[Any] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.added or self.modified or self.removed)


class AppDbContext:
    def __init__(self, session: Session):
        # model imports are deferred so core does not depend on the domain packages at import time
        from assignment.models import ProjectEmployee
        from employee.models import Employee
        from project.models import Project
        from task.models import Task

        self.session = session
        self.employees: EntitySet[Employee] = EntitySet(session, Employee)
        self.projects: EntitySet[Project] = EntitySet(session, Project)
        self.tasks: EntitySet[Task] = EntitySet(session, Task)
        self.assignments: EntitySet[ProjectEmployee] = EntitySet(session, ProjectEmployee)
        self.failed_changes: Optional[ChangeSet] = None

    @property
    def pending_changes(self) -> ChangeSet:
        return ChangeSet(
            added=list(self.session.new),
            modified=list(self.session.dirty),
            removed=list(self.session.deleted),
        )

    def save_changes(self) -> None:
        """Flush and commit everything pending in one transaction.

        A failure propagates untouched and nothing is rolled back here. The
        change set that was being written is kept on `failed_changes` so the
        caller can inspect it, then rollback() and retry.
        """
        changes = self.pending_changes
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.failed_changes = changes
            raise
        self.failed_changes = None

    def refresh(self, entity: Any) -> None:
        self.session.refresh(entity)

    def rollback(self) -> None:
        self.session.rollback()


@contextmanager
def storage_errors(message: str) -> Iterator[None]:
    """Re-raise any SQLAlchemy failure inside the block as StorageError."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error(f"{message}: {exc}")
        raise StorageError(message, cause=exc) from exc


def get_context(db: Session = Depends(get_db)) -> Generator[AppDbContext, None, None]:
    yield AppDbContext(db)
