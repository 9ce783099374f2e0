"""
Base CRUD operations for SQLAlchemy models.

Provides generic create and read operations that can be inherited and
extended by model-specific CRUD classes.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from stats_service.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Provides standard database operations that work with any SQLAlchemy model
    with a single-column primary key. Subclasses specify the model class and
    add model-specific queries.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    @property
    def primary_key(self):
        """Primary key column of the target model."""
        return inspect(self.model).primary_key[0]

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Create a new record in the database.

        The row is flushed, not committed; the caller owns the transaction.

        Args:
            session: Async database session
            **kwargs: Model field values

        Returns:
            Created model instance
        """
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        return instance

    async def get_by_id(self, session: AsyncSession, id: Any) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            session: Async database session
            id: Primary key value

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self.primary_key == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()
