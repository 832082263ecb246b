"""Modèle Pays / Country model."""

from sqlalchemy import BigInteger, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from worlder.database import Base


class Country(Base):
    __tablename__ = "countries"
    # SQLite : ids jamais reutilises apres suppression / SQLite: ids never reused after delete
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    iso_code: Mapped[str] = mapped_column(String(3), unique=True, nullable=False)  # ISO 3166
    capital: Mapped[str | None] = mapped_column(String(255))
    continent: Mapped[str | None] = mapped_column(String(100))
    population: Mapped[int | None] = mapped_column(BigInteger)
    area: Mapped[float | None] = mapped_column(Float)
    currency: Mapped[str | None] = mapped_column(String(100))
    official_language: Mapped[str | None] = mapped_column(String(100))

    def __repr__(self) -> str:
        return f"<Country {self.iso_code} - {self.name}>"
