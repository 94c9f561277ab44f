"""Integration tests for the refund policy use cases."""

import pytest

from storefront.domain.exceptions import InvalidRefundWindowError, UnauthorizedError
from storefront.domain.model.events import RefundPolicyChanged


class TestSetRefundPolicy:

    def test_default_window(self, harness):
        assert harness.service.get_refund_policy_number() == 100

    def test_owner_sets_new_window(self, harness):
        harness.service.set_refund_policy_number("owner", 0)

        assert harness.service.get_refund_policy_number() == 0
        assert harness.publisher.events == [RefundPolicyChanged(window_ticks=0)]

    def test_non_owner_rejected(self, harness):
        harness.service.add_product("owner", "Product A", 10)
        harness.service.buy_product("client1", 0)

        with pytest.raises(UnauthorizedError) as exc_info:
            harness.service.set_refund_policy_number("client1", 0)

        assert exc_info.value.caller == "client1"
        assert harness.service.get_refund_policy_number() == 100

    def test_negative_window_rejected(self, harness):
        with pytest.raises(InvalidRefundWindowError):
            harness.service.set_refund_policy_number("owner", -1)
        assert harness.service.get_refund_policy_number() == 100
