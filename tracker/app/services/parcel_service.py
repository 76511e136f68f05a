"""
Parcel workflow service.

Registers parcels, moves them through their delivery stages and reports on
a client's parcels. All persistence goes through ParcelStore.
"""

import logging
from typing import List

from tracker.app.core.observability import timed_operation
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import ParcelCreate, ParcelRead, utc_timestamp
from tracker.app.services.parcel_store import ParcelStore

logger = logging.getLogger("tracker.service")


class ParcelService:
    """
    Delivery workflow over a ParcelStore.

    Each step is logged with its duration; store errors reach the caller unchanged.
    """

    def __init__(self, store: ParcelStore):
        self.store = store

    async def register(self, client: int, address: str) -> ParcelRead:
        """
        Register a new parcel for a client.

        Args:
            client: Owning client identifier
            address: Delivery address

        Returns:
            The stored parcel, including its assigned number
        """
        async with timed_operation("register", log=logger, client=client) as log_data:
            parcel = ParcelCreate(
                client=client,
                status=ParcelStatus.REGISTERED,
                address=address,
                created_at=utc_timestamp(),
            )
            number = await self.store.add(parcel)
            log_data["number"] = number
        return ParcelRead(number=number, **parcel.model_dump())

    async def describe_client_parcels(self, client: int) -> List[str]:
        parcels = await self.store.get_by_client(client)
        lines = [
            f"Parcel #{p.number} to {p.address} since {p.created_at}, status {p.status.value}"
            for p in parcels
        ]
        logger.info("Parcels of client %s: %d", client, len(lines))
        for line in lines:
            logger.info(line)
        return lines

    async def next_status(self, number: int) -> ParcelStatus:
        """
        Advance a parcel to its next delivery stage.

        A delivered parcel is left untouched and its status is returned as is.

        Raises:
            ParcelNotFoundError: If the parcel does not exist
        """
        async with timed_operation("next_status", log=logger, number=number) as log_data:
            parcel = await self.store.get(number)
            new_status = parcel.status.next()
            if new_status is None:
                log_data["status"] = parcel.status.value
                log_data["changed"] = False
                return parcel.status

            await self.store.set_status(number, new_status)
            log_data["status"] = new_status.value
            log_data["changed"] = True
        return new_status

    async def change_address(self, number: int, address: str) -> bool:
        async with timed_operation("change_address", log=logger, number=number) as log_data:
            changed = await self.store.set_address(number, address)
            log_data["changed"] = changed
        if not changed:
            logger.warning(
                "Address not changed: parcel %s is missing or no longer registered", number
            )
        return changed

    async def delete(self, number: int) -> None:
        async with timed_operation("delete", log=logger, number=number):
            await self.store.delete(number)
