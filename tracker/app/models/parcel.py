"""
Parcel database model.

One row per tracked parcel; the number is assigned by the database.
"""

from sqlalchemy import Column, Integer, String, Enum
from tracker.app.db.session import Base
from tracker.app.models.parcel_enums import ParcelStatus


class Parcel(Base):
    """
    Parcel model for the delivery tracker.
    
    Address may only change while the parcel is still registered;
    client and created_at never change after insert.
    """
    __tablename__ = "parcel"
    # Numbers of deleted parcels are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    number = Column(Integer, primary_key=True, autoincrement=True)
    
    # Ownership
    client = Column(Integer, nullable=False, index=True)
    
    # Status, stored by value ("registered", "sent", "delivered")
    status = Column(
        Enum(
            ParcelStatus,
            name="parcel_status",
            native_enum=False,
            length=16,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        default=ParcelStatus.REGISTERED,
        nullable=False,
    )
    
    # Delivery information
    address = Column(String(500), nullable=False)
    
    # RFC3339 timestamp text, kept verbatim as supplied on insert
    created_at = Column(String(40), nullable=False)
    
    def __repr__(self):
        return f"<Parcel(number={self.number}, client={self.client}, status='{self.status.value}')>"
