"""Restoration proposal ORM model."""

from sqlalchemy import BigInteger, Boolean, Integer, LargeBinary, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from heritage_registry.models.base import Base


class ProposalRecord(Base):
    """Persisted proposal row; the unique hash column doubles as the hash index."""

    __tablename__ = "heritage_proposals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    title: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str] = mapped_column(String(100), nullable=False)
    heritage_type: Mapped[str] = mapped_column(String(50), nullable=False)
    initial_hash: Mapped[bytes] = mapped_column(LargeBinary(32), unique=True, index=True, nullable=False)
    submitter: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    status: Mapped[str] = mapped_column(String(32), default="pending", nullable=False)
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    updated_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    verified_at: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    task_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    nft_minted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
