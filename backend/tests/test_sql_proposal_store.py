"""Tests for the SQLAlchemy-backed proposal store."""

from __future__ import annotations

import unittest

from sqlalchemy import create_engine, delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from heritage_registry.models.base import Base
from heritage_registry.models.proposal import ProposalRecord
from heritage_registry.registry import CallContext, Proposal, ProposalRegistry, RegistryError, SqlProposalStore


def _hash(fill: int) -> bytes:
    return bytes([fill]) * 32


class SqlProposalStoreTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.engine = create_engine(
            "sqlite+pysqlite:///:memory:",
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        cls.SessionLocal = sessionmaker(bind=cls.engine, autoflush=False, autocommit=False, future=True)
        Base.metadata.create_all(cls.engine)

    @classmethod
    def tearDownClass(cls) -> None:
        Base.metadata.drop_all(cls.engine)
        cls.engine.dispose()

    def setUp(self) -> None:
        with self.SessionLocal() as db:
            db.execute(delete(ProposalRecord))
            db.commit()
        self.store = SqlProposalStore(self.SessionLocal)
        self.registry = ProposalRegistry(self.store)

    def _submit(self, fill: int, height: int = 100, caller: str = "ST1SUBMITTER"):
        return self.registry.submit_proposal(
            CallContext(caller=caller, block_height=height),
            title="Chapel roof",
            description="Replace the lead covering",
            location="Durham",
            heritage_type="ecclesiastical",
            initial_hash=_hash(fill),
        )

    def test_empty_store_counter_starts_at_zero(self) -> None:
        self.assertEqual(self.store.next_id(), 0)
        self.assertIsNone(self.store.get(0))
        self.assertIsNone(self.store.id_for_hash(_hash(1)))

    def test_submission_persists_row_and_hash_index(self) -> None:
        self.assertEqual(self._submit(1).value, 0)
        self.assertEqual(self._submit(2).value, 1)

        self.assertEqual(self.store.next_id(), 2)
        self.assertEqual(self.store.id_for_hash(_hash(2)), 1)
        with self.SessionLocal() as db:
            rows = list(db.scalars(select(ProposalRecord).order_by(ProposalRecord.id)).all())
        self.assertEqual([row.id for row in rows], [0, 1])
        self.assertEqual(rows[0].initial_hash, _hash(1))
        self.assertEqual(rows[0].status, "pending")

    def test_duplicate_hash_rejected_before_insert(self) -> None:
        self._submit(3)
        result = self._submit(3, height=101)

        self.assertEqual(result.error, RegistryError.PROPOSAL_EXISTS)
        self.assertEqual(self.store.next_id(), 1)

    def test_unique_hash_constraint_guards_direct_inserts(self) -> None:
        self._submit(4)
        clash = Proposal(
            id=1,
            title="t",
            description="d",
            location="l",
            heritage_type="h",
            initial_hash=_hash(4),
            submitter="ST1SUBMITTER",
            status="pending",
            created_at=1,
            updated_at=1,
        )
        with self.assertRaises(IntegrityError):
            self.store.insert(clash)
        self.assertEqual(self.store.next_id(), 1)

    def test_lifecycle_state_survives_new_registry(self) -> None:
        self._submit(5)
        ctx = CallContext(caller="ST1SUBMITTER", block_height=110)
        self.registry.update_proposal_status(ctx, 0, "approved")
        self.registry.update_proposal_status(ctx, 0, "in-progress")
        self.registry.increment_task_count(ctx, 0)
        done = CallContext(caller="ST1SUBMITTER", block_height=120)
        self.registry.update_proposal_status(done, 0, "completed")
        self.registry.mark_nft_minted(done, 0)

        reopened = ProposalRegistry(SqlProposalStore(self.SessionLocal))
        proposal = reopened.get_proposal(0)
        assert proposal is not None
        self.assertEqual(proposal.status, "completed")
        self.assertEqual(proposal.task_count, 1)
        self.assertTrue(proposal.nft_minted)
        self.assertEqual(proposal.verified_at, 120)
        self.assertEqual(proposal.created_at, 100)
        self.assertEqual(reopened.get_next_proposal_id().value, 1)
        self.assertEqual(reopened.mark_nft_minted(done, 0).error, RegistryError.UNAUTHORIZED)

    def test_save_unknown_proposal_raises(self) -> None:
        ghost = Proposal(
            id=9,
            title="t",
            description="d",
            location="l",
            heritage_type="h",
            initial_hash=_hash(9),
            submitter="ST1SUBMITTER",
            status="pending",
            created_at=1,
            updated_at=1,
        )
        with self.assertRaises(KeyError):
            self.store.save(ghost)


if __name__ == "__main__":
    unittest.main()
