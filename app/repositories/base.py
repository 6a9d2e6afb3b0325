from datetime import datetime, timezone
from typing import Any, Generic, List, Optional, Type, TypeVar
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import Base
from app.exceptions import EntityNotFoundError

ModelT = TypeVar("ModelT", bound=Base)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SQLAlchemyRepository(Generic[ModelT]):
    """
    Persistence gateway for a single model.

    Subclasses set `model`. All operations run against the session handed
    in at construction; write failures roll the session back and propagate
    unchanged to the caller.
    """

    model: Type[ModelT]

    # Columns the gateway owns; callers never overwrite them on update
    IMMUTABLE_COLUMNS = ("id", "created_at")

    # Customers carry updated_at from the moment they are created
    stamp_updated_on_create = False

    def __init__(self, db: Session, logger: logging.Logger = None):
        self.db = db
        self.logger = logger or logging.getLogger(self.__class__.__module__)

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    @property
    def mutable_columns(self) -> List[str]:
        return [
            column.key
            for column in self.model.__table__.columns
            if column.key not in self.IMMUTABLE_COLUMNS
        ]

    def get_by_id(self, entity_id: Any) -> Optional[ModelT]:
        """Return the entity or None; a missing row is not an error."""
        entity = self.db.get(self.model, entity_id)
        if entity is None:
            self.logger.info(f"{self.entity_name} with ID {entity_id} not found")
        return entity

    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[ModelT]:
        """
        Get every row, oldest first.

        Args:
            skip: Number of rows to skip
            limit: Maximum number of rows, None for the whole table

        Returns:
            List of entities
        """
        query = (
            select(self.model)
            .order_by(self.model.created_at, self.model.id)
            .offset(skip)
        )
        if limit is not None:
            query = query.limit(limit)

        entities = list(self.db.scalars(query).all())
        self.logger.debug(f"Retrieved {len(entities)} {self.model.__tablename__}")
        return entities

    def create(self, entity: ModelT) -> ModelT:
        """
        Stamp creation time, persist and return the stored entity.

        Args:
            entity: New entity instance (not yet added to the session)

        Returns:
            Stored entity including database-assigned fields
        """
        now = utcnow()
        entity.created_at = now
        if self.stamp_updated_on_create:
            entity.updated_at = now

        self.db.add(entity)
        self._commit(f"creating {self.entity_name}")
        self.db.refresh(entity)

        self.logger.info(f"Created {self.entity_name} with ID {entity.id}")
        return entity

    def update(self, entity: ModelT) -> ModelT:
        """
        Replace every mutable column of an existing row.

        Loads the current row by `entity.id`, overwrites all mutable columns
        with the values on `entity`, refreshes `updated_at` and writes back.

        Raises:
            EntityNotFoundError: If no row has that ID
        """
        existing = self.db.get(self.model, entity.id)
        if existing is None:
            self.logger.warning(f"{self.entity_name} with ID {entity.id} not found for update")
            raise EntityNotFoundError(self.entity_name, entity.id)

        if existing is not entity:
            for column in self.mutable_columns:
                setattr(existing, column, getattr(entity, column))

        existing.updated_at = utcnow()
        self._commit(f"updating {self.entity_name} {entity.id}")
        self.db.refresh(existing)

        self.logger.info(f"Updated {self.entity_name} with ID {existing.id}")
        return existing

    def delete(self, entity_id: Any) -> bool:
        """
        Delete a row.

        Returns:
            True if deleted, False if not found
        """
        entity = self.db.get(self.model, entity_id)
        if entity is None:
            self.logger.info(f"{self.entity_name} with ID {entity_id} not found for deletion")
            return False

        self.db.delete(entity)
        self._commit(f"deleting {self.entity_name} {entity_id}")

        self.logger.info(f"Deleted {self.entity_name} with ID {entity_id}")
        return True

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            self.logger.error(f"Error {action}: {e}")
            raise
