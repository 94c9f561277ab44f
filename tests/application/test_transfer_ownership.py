"""Integration tests for the TransferOwnership use case."""

import pytest

from storefront.domain.exceptions import InvalidOwnerError, UnauthorizedError
from storefront.domain.model.events import OwnershipTransferred


class TestTransferOwnership:

    def test_transfer_moves_the_gate(self, harness):
        harness.service.transfer_ownership("owner", "alice")

        assert harness.service.get_owner() == "alice"
        assert harness.publisher.events == [
            OwnershipTransferred(previous_owner="owner", new_owner="alice")
        ]

        harness.service.add_product("alice", "Widget", 1)
        with pytest.raises(UnauthorizedError):
            harness.service.add_product("owner", "Gadget", 1)

    def test_non_owner_rejected(self, harness):
        with pytest.raises(UnauthorizedError) as exc_info:
            harness.service.transfer_ownership("mallory", "mallory")
        assert exc_info.value.caller == "mallory"
        assert harness.service.get_owner() == "owner"

    def test_empty_new_owner_rejected(self, harness):
        with pytest.raises(InvalidOwnerError):
            harness.service.transfer_ownership("owner", "")
        assert harness.service.get_owner() == "owner"
