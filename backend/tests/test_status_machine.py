"""Unit tests for the proposal status transition graph."""

from __future__ import annotations

import unittest

from heritage_registry.registry.errors import RegistryError
from heritage_registry.registry.status import (
    PROPOSAL_STATUS_VALUES,
    TERMINAL_STATUSES,
    can_transition,
    check_transition,
    next_statuses,
)


class StatusMachineTests(unittest.TestCase):
    def test_forward_edges_are_legal(self) -> None:
        self.assertTrue(can_transition("pending", "approved"))
        self.assertTrue(can_transition("pending", "rejected"))
        self.assertTrue(can_transition("approved", "in-progress"))
        self.assertTrue(can_transition("in-progress", "completed"))

    def test_only_listed_edges_are_legal(self) -> None:
        legal = {
            ("pending", "approved"),
            ("pending", "rejected"),
            ("approved", "in-progress"),
            ("in-progress", "completed"),
        }
        for current in PROPOSAL_STATUS_VALUES:
            for target in PROPOSAL_STATUS_VALUES:
                with self.subTest(current=current, target=target):
                    self.assertEqual(can_transition(current, target), (current, target) in legal)

    def test_terminal_statuses(self) -> None:
        self.assertEqual(TERMINAL_STATUSES, frozenset({"rejected", "completed"}))
        self.assertEqual(next_statuses("rejected"), frozenset())

    def test_check_transition_error_precedence(self) -> None:
        self.assertIsNone(check_transition("pending", "approved"))
        self.assertEqual(check_transition("pending", "in-progress"), RegistryError.INVALID_STATUS_TRANSITION)
        self.assertEqual(check_transition("pending", "archived"), RegistryError.INVALID_STATUS_TRANSITION)
        self.assertEqual(check_transition("completed", "approved"), RegistryError.PROPOSAL_CLOSED)
        self.assertEqual(check_transition("completed", "archived"), RegistryError.INVALID_STATUS_TRANSITION)
        self.assertEqual(check_transition("rejected", "approved"), RegistryError.INVALID_STATUS_TRANSITION)


if __name__ == "__main__":
    unittest.main()
