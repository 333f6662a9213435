"""HoldingRepository - SQLAlchemy implementation of HoldingRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Holding entities and database HoldingModel.

Concurrency:
    ``save`` compares the entity's version with the stored row before
    writing, and the mapper's ``version_id_col`` guards the UPDATE itself.
    Either check failing raises ConcurrentModificationError. The write runs
    in a SAVEPOINT so a lost check leaves the session usable for the next
    holding in the same request.
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from mintlite.domain.entities.holding import Holding
from mintlite.domain.enums.asset_class import AssetClass
from mintlite.domain.errors import ConcurrentModificationError
from mintlite.infrastructure.persistence.models.holding import Holding as HoldingModel


class HoldingRepository:
    """SQLAlchemy implementation of HoldingRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = HoldingRepository(session)
        ...     holdings = await repo.find_by_user(user_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def find_by_user(self, user_id: UUID) -> list[Holding]:
        """List all holdings owned by a user, newest first.

        Args:
            user_id: Owner identifier.

        Returns:
            List of holdings (empty if none).
        """
        stmt = (
            select(HoldingModel)
            .where(HoldingModel.user_id == user_id)
            .order_by(HoldingModel.created_at.desc(), HoldingModel.id.desc())
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_domain(model) for model in models]

    async def find_by_id_and_user(
        self, holding_id: UUID, user_id: UUID
    ) -> Holding | None:
        """Find a holding by ID, scoped to its owner.

        Args:
            holding_id: Holding identifier.
            user_id: Owner identifier.

        Returns:
            Holding entity if found and owned by the user, None otherwise.
        """
        stmt = select(HoldingModel).where(
            HoldingModel.id == holding_id,
            HoldingModel.user_id == user_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def save(self, holding: Holding) -> Holding:
        """Save a holding (create or update).

        Args:
            holding: Holding entity to save. ``holding.version`` must match
                the stored version for an update.

        Returns:
            The persisted holding with its new version.

        Raises:
            ConcurrentModificationError: If the stored version differs or the
                guarded UPDATE matched no row.
        """
        stmt = (
            select(HoldingModel)
            .where(HoldingModel.id == holding.id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is not None and existing.version != holding.version:
            raise ConcurrentModificationError(
                holding.id,
                expected_version=holding.version,
                actual_version=existing.version,
            )

        try:
            async with self._session.begin_nested():
                if existing is None:
                    model = self._to_model(holding)
                    self._session.add(model)
                else:
                    model = existing
                    self._update_model(model, holding)
                await self._session.flush()
        except StaleDataError:
            raise ConcurrentModificationError(
                holding.id, expected_version=holding.version
            ) from None

        return self._to_domain(model)

    async def delete(self, holding_id: UUID) -> None:
        """Delete a holding.

        Args:
            holding_id: Holding ID to delete.
        """
        stmt = delete(HoldingModel).where(HoldingModel.id == holding_id)
        await self._session.execute(stmt)
        await self._session.flush()

    # =========================================================================
    # Entity <-> Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: HoldingModel) -> Holding:
        """Convert database model to domain entity.

        Derived figures are recomputed by the entity rather than read back.

        Args:
            model: SQLAlchemy HoldingModel instance.

        Returns:
            Domain Holding entity.
        """
        return Holding(
            id=model.id,
            user_id=model.user_id,
            account_id=model.account_id,
            symbol=model.symbol,
            name=model.name,
            asset_class=AssetClass(model.asset_class),
            quantity=model.quantity,
            cost_basis=model.cost_basis,
            current_price=model.current_price,
            currency=model.currency,
            metadata=model.holding_metadata,
            last_price_update_at=model.last_price_update_at,
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Holding) -> HoldingModel:
        """Convert domain entity to database model.

        ``version`` is left unset; the mapper assigns the first version.

        Args:
            entity: Domain Holding entity.

        Returns:
            SQLAlchemy HoldingModel instance.
        """
        return HoldingModel(
            id=entity.id,
            user_id=entity.user_id,
            account_id=entity.account_id,
            symbol=entity.symbol,
            name=entity.name,
            asset_class=entity.asset_class.value,
            quantity=entity.quantity,
            cost_basis=entity.cost_basis,
            current_price=entity.current_price,
            currency=entity.currency,
            market_value=entity.market_value,
            unrealized_gain=entity.unrealized_gain,
            return_percentage=entity.return_percentage,
            last_price_update_at=entity.last_price_update_at,
            holding_metadata=entity.metadata,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def _update_model(self, model: HoldingModel, entity: Holding) -> None:
        """Update existing model from entity.

        Does not update id, user_id or created_at (immutable).

        Args:
            model: Existing SQLAlchemy model to update.
            entity: Domain entity with new values.
        """
        model.account_id = entity.account_id
        model.name = entity.name
        model.asset_class = entity.asset_class.value
        model.quantity = entity.quantity
        model.cost_basis = entity.cost_basis
        model.current_price = entity.current_price
        model.currency = entity.currency
        model.market_value = entity.market_value
        model.unrealized_gain = entity.unrealized_gain
        model.return_percentage = entity.return_percentage
        model.last_price_update_at = entity.last_price_update_at
        model.holding_metadata = entity.metadata
        model.updated_at = entity.updated_at
