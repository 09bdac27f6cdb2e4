"""Base repository pattern implementation.

This module provides a generic repository pattern that can be used
as a base for domain-specific repositories.
"""

from typing import Any, Generic, TypeVar, cast
from uuid import UUID

from sqlalchemy.orm import Session

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """Generic repository with common lookup operations.

    Example:
        ```python
        class StudentRepository(BaseRepository[Student]):
            def __init__(self, db: Session):
                super().__init__(db, Student)

            def find_by_code(self, code: str) -> Student | None:
                return self.find_one_by(code=code)
        ```
    """

    def __init__(self, db: Session, model: type[ModelType]):
        """Initialize repository with database session and model class.

        Args:
            db: SQLAlchemy session.
            model: The model class this repository operates on.
        """
        self.db = db
        self.model = model

    def get_many_by_ids(self, entity_ids: list[UUID]) -> dict[UUID, ModelType]:
        """Load several entities at once, keyed by ID.

        Args:
            entity_ids: UUIDs to load. Unknown IDs are simply absent from the result.

        Returns:
            Mapping of ID to entity.
        """
        if not entity_ids:
            return {}
        rows = self.db.query(self.model).filter(self.model.id.in_(entity_ids)).all()  # type: ignore[attr-defined]
        return {row.id: row for row in rows}

    def find_one_by(self, **filters: Any) -> ModelType | None:
        """Get the first entity matching all equality filters.

        Args:
            **filters: Column name to value pairs.

        Returns:
            The entity if found, None otherwise.
        """
        result = self.db.query(self.model).filter_by(**filters).first()
        return cast(ModelType | None, result)
