from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, Integer, ForeignKey, DateTime, Text, Table, Column
from sqlalchemy.sql import func
from datetime import datetime
from papaya.core.db import Base

SEX_MALE = "male"
SEX_FEMALE = "female"
SEX_UNISEX = "unisex"
SEXES = (SEX_MALE, SEX_FEMALE, SEX_UNISEX)

look_items = Table(
    "look_items",
    Base.metadata,
    Column("look_id", Integer, ForeignKey("looks.id", ondelete="CASCADE"), primary_key=True),
    Column("wardrobe_item_id", Integer, ForeignKey("wardrobe_items.id", ondelete="CASCADE"), primary_key=True),
)

look_categories = Table(
    "look_categories",
    Base.metadata,
    Column("look_id", Integer, ForeignKey("looks.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", Integer, ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
)

users_wardrobe = Table(
    "users_wardrobe",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("wardrobe_item_id", Integer, ForeignKey("wardrobe_items.id", ondelete="CASCADE"), primary_key=True),
)

saved_looks = Table(
    "saved_looks",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("look_id", Integer, ForeignKey("looks.id", ondelete="CASCADE"), primary_key=True),
)

liked_looks = Table(
    "liked_looks",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("look_id", Integer, ForeignKey("looks.id", ondelete="CASCADE"), primary_key=True),
)

disliked_looks = Table(
    "disliked_looks",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("look_id", Integer, ForeignKey("looks.id", ondelete="CASCADE"), primary_key=True),
)


class WardrobeCategory(Base):
    __tablename__ = "wardrobe_categories"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    slug: Mapped[str] = mapped_column(String(200), unique=True)
    parent_category: Mapped[str | None] = mapped_column(String(200), nullable=True)


class WardrobeItem(Base):
    __tablename__ = "wardrobe_items"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    slug: Mapped[str] = mapped_column(String(200))
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    sex: Mapped[str] = mapped_column(String(16))
    category_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("wardrobe_categories.id", ondelete="SET NULL"), nullable=True)


class Look(Base):
    __tablename__ = "looks"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    slug: Mapped[str] = mapped_column(String(200), unique=True)
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    desc: Mapped[str | None] = mapped_column(Text, nullable=True)
    sex: Mapped[str] = mapped_column(String(16), index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    items: Mapped[list["WardrobeItem"]] = relationship("WardrobeItem", secondary=look_items, lazy="selectin")

    # presentation only, never persisted
    is_from_wardrobe = False


class Category(Base):
    __tablename__ = "categories"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    slug: Mapped[str] = mapped_column(String(200), unique=True)


class User(Base):
    __tablename__ = "users"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email: Mapped[str | None] = mapped_column(Text, unique=True, nullable=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    sex: Mapped[str | None] = mapped_column(String(16), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
