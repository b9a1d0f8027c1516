# consistent_seeding/factory.py

import logging
from typing import Any, List, Mapping, Optional, Type, TypeVar

from faker import Faker
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .context import SeedingContext
from .exceptions import RecordNotFoundError
from .generator import get_generator

logger = logging.getLogger(__name__)

M = TypeVar("M")
F = TypeVar("F", bound="SeedingFactory")


class SeedingFactory:
    """
    Finds or builds ORM records for seeders.

    Subclass it to add ``create_*`` helpers that fill model fields from
    ``self.faker``. Records are looked up with one equality filter per column.
    """

    def __init__(
        self,
        session: AsyncSession,
        faker: Optional[Faker] = None,
        context: Optional[SeedingContext] = None,
    ) -> None:
        self.session = session
        self.faker = faker if faker is not None else get_generator()
        self.context = context

    @classmethod
    def get(
        cls: Type[F], session: AsyncSession, faker: Optional[Faker] = None
    ) -> F:
        return cls(session, faker)

    @classmethod
    def from_context(cls: Type[F], context: SeedingContext) -> F:
        return cls(context.session, context.faker, context=context)

    @staticmethod
    def get_generator() -> Faker:
        """Return the shared Faker instance (see ``generator.get_generator``)."""
        return get_generator()

    @staticmethod
    def equality_filters(
        model_type: Type[M], key_value_pairs: Optional[Mapping[str, Any]] = None
    ) -> List[Any]:
        # Unknown columns raise AttributeError from the model class unchanged.
        return [
            getattr(model_type, key) == value
            for key, value in (key_value_pairs or {}).items()
        ]

    async def find_by_columns(
        self, model_type: Type[M], key_value_pairs: Optional[Mapping[str, Any]] = None
    ) -> Optional[M]:
        """Return the first record matching every column value, or ``None``."""
        query = (
            select(model_type)
            .where(*self.equality_filters(model_type, key_value_pairs))
            .limit(1)
        )
        result = await self.session.execute(query)
        return result.scalars().first()

    async def find_by_columns_or_fail(
        self, model_type: Type[M], key_value_pairs: Optional[Mapping[str, Any]] = None
    ) -> M:
        record = await self.find_by_columns(model_type, key_value_pairs)
        if record is None:
            raise RecordNotFoundError(model_type, key_value_pairs)
        return record

    async def find_or_create_by_columns(
        self, model_type: Type[M], key_value_pairs: Optional[Mapping[str, Any]] = None
    ) -> M:
        """
        Return the matching record, or a new unsaved instance with the given
        columns set.

        The new instance is not added to the session; call ``save`` to persist it.
        """
        record = await self.find_by_columns(model_type, key_value_pairs)
        if record is not None:
            return record

        model = model_type()
        for key, value in (key_value_pairs or {}).items():
            setattr(model, key, value)
        logger.debug(
            f"No {model_type.__name__} matched {dict(key_value_pairs or {})}; "
            "built new instance"
        )
        return model

    async def save(self, model: M) -> M:
        """Add ``model`` to the session and flush so generated keys are populated."""
        is_new = model not in self.session
        self.session.add(model)
        await self.session.flush()
        if is_new and self.context is not None:
            self.context.record_created(
                getattr(model, "__tablename__", type(model).__name__)
            )
        return model
