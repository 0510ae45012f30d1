from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from wedding_rsvp.config.table_names import TableNames
from wedding_rsvp.models.base import Base, CreatedAt


class RSVP(Base, CreatedAt):
    __tablename__ = TableNames.RSVPS.value
    # ids are never reused, even after the highest row is gone
    __table_args__ = {"sqlite_autoincrement": True}

    code: Mapped[str | None] = mapped_column(Text, nullable=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    attending: Mapped[str | None] = mapped_column(Text, nullable=True)
    dietary: Mapped[str | None] = mapped_column(Text, nullable=True)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<RSVP {self.id} {self.name} - {self.attending}>"
