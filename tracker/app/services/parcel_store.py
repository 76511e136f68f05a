"""
Parcel storage access layer.

Every method runs a single statement and commits it. Storage errors are
passed to the caller unchanged; the only translated condition is a missing
parcel on `get`. A failed statement is rolled back before the error is
re-raised, so the session stays usable for other stores sharing it.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete
from sqlalchemy.engine import CursorResult, Result
from sqlalchemy.exc import NoResultFound, SQLAlchemyError

from tracker.app.core.exceptions import ParcelNotFoundError
from tracker.app.models.parcel import Parcel
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import ParcelCreate, ParcelRead


class ParcelStore:
    """Gateway to persisted parcel rows, bound to one database session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _read(self, stmt) -> Result:
        try:
            return await self.db.execute(stmt.execution_options(populate_existing=True))
        except SQLAlchemyError:
            await self.db.rollback()
            raise

    async def _write(self, stmt) -> CursorResult:
        try:
            result = await self.db.execute(stmt.execution_options(synchronize_session=False))
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        return result

    async def add(self, parcel: ParcelCreate) -> int:
        """
        Insert a parcel and return the number assigned by the database.

        Args:
            parcel: Parcel fields; any number the caller holds is ignored

        Returns:
            The new parcel number
        """
        row = Parcel(
            client=parcel.client,
            status=parcel.status,
            address=parcel.address,
            created_at=parcel.created_at,
        )
        try:
            self.db.add(row)
            await self.db.flush()
            number = row.number
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        return number

    async def get(self, number: int) -> ParcelRead:
        """
        Fetch a parcel by number.

        Raises:
            ParcelNotFoundError: If no parcel has this number
        """
        result = await self._read(select(Parcel).where(Parcel.number == number))
        try:
            row = result.scalar_one()
        except NoResultFound as exc:
            raise ParcelNotFoundError(number) from exc
        return ParcelRead.model_validate(row)

    async def delete(self, number: int) -> None:
        """Remove a parcel permanently. Unknown numbers are ignored."""
        await self._write(delete(Parcel).where(Parcel.number == number))

    async def set_address(self, number: int, address: str) -> bool:
        """
        Change the delivery address of a parcel that is still registered.

        The status check is part of the UPDATE itself, so a parcel that was
        sent in the meantime keeps its address.

        Returns:
            True if a row was updated, False otherwise
        """
        result = await self._write(
            update(Parcel)
            .where(Parcel.number == number, Parcel.status == ParcelStatus.REGISTERED)
            .values(address=address)
        )
        return result.rowcount > 0

    async def set_status(self, number: int, status: ParcelStatus) -> bool:
        """
        Overwrite the status of a parcel. No transition rules are applied.

        Returns:
            True if a row was updated, False otherwise
        """
        result = await self._write(
            update(Parcel)
            .where(Parcel.number == number)
            .values(status=status)
        )
        return result.rowcount > 0

    async def get_by_client(self, client: int) -> List[ParcelRead]:
        """Return every parcel of a client ordered by number; empty if none."""
        result = await self._read(
            select(Parcel)
            .where(Parcel.client == client)
            .order_by(Parcel.number)
        )
        return [ParcelRead.model_validate(row) for row in result.scalars().all()]
