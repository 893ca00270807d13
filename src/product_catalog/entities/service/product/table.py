"""Product database table model."""

from sqlalchemy import BigInteger, Column, Integer
from sqlmodel import Field, SQLModel

# Identifiers are stored as signed 64-bit integers
MIN_PRODUCT_ID = -(2**63)
MAX_PRODUCT_ID = 2**63 - 1


class ProductTable(SQLModel, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    It's separate from the domain entity so the row never leaves the
    repository.
    """

    __tablename__ = "product"
    # Identifiers of deleted products are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(
        default=None,
        sa_column=Column(
            "product_id",
            # SQLite only autoincrements an INTEGER primary key
            BigInteger().with_variant(Integer, "sqlite"),
            primary_key=True,
            autoincrement=True,
        ),
    )
    category: str | None = Field(default=None, max_length=255, index=True)
    name: str | None = Field(default=None, max_length=255)
