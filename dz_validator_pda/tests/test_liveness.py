"""Unit tests for the gossip liveness gate."""

import logging

from solders.pubkey import Pubkey

from dz_validator_pda.errors import ClientError
from dz_validator_pda.liveness import LivenessGate, cancel_reason, decide
from dz_validator_pda.types import FundingDecision, LivenessResult, LivenessStatus


class TestDecide:
    """Test mapping of liveness results to funding decisions."""

    def test_present_proceeds(self):
        result = LivenessResult(LivenessStatus.PRESENT, Pubkey.new_unique())
        assert decide(result) is FundingDecision.PROCEED

    def test_absent_cancels(self):
        result = LivenessResult(LivenessStatus.ABSENT, Pubkey.new_unique())
        assert decide(result) is FundingDecision.CANCEL

    def test_unknown_cancels_on_error(self):
        result = LivenessResult(LivenessStatus.UNKNOWN, Pubkey.new_unique(), error="timeout")
        assert decide(result) is FundingDecision.CANCEL_ON_ERROR

    def test_only_proceed_is_not_cancel(self):
        assert FundingDecision.PROCEED.is_cancel is False
        assert FundingDecision.CANCEL.is_cancel is True
        assert FundingDecision.CANCEL_ON_ERROR.is_cancel is True


class TestLivenessGate:
    """Test gossip membership checks."""

    def test_present(self, make_client, validator_id):
        client = make_client(node_ids=[str(Pubkey.new_unique()), str(validator_id)])

        result = LivenessGate(client).check(validator_id)

        assert result.status is LivenessStatus.PRESENT
        assert result.identity == validator_id
        assert result.error is None

    def test_absent(self, make_client, validator_id):
        client = make_client(node_ids=[str(Pubkey.new_unique())])

        result = LivenessGate(client).check(validator_id)

        assert result.status is LivenessStatus.ABSENT

    def test_empty_gossip(self, make_client, validator_id):
        result = LivenessGate(make_client()).check(validator_id)

        assert result.status is LivenessStatus.ABSENT

    def test_client_error_is_unknown(self, make_client, validator_id):
        client = make_client(gossip_error=ClientError("Failed to get cluster nodes: 503"))

        result = LivenessGate(client).check(validator_id)

        assert result.status is LivenessStatus.UNKNOWN
        assert "503" in result.error

    def test_unexpected_error_is_unknown(self, make_client, validator_id):
        """Any lookup failure fails closed."""
        client = make_client(gossip_error=RuntimeError("connection reset"))

        decision, result = LivenessGate(client).evaluate(validator_id)

        assert result.status is LivenessStatus.UNKNOWN
        assert decision is FundingDecision.CANCEL_ON_ERROR

    def test_error_and_absent_both_cancel(self, make_client, validator_id):
        absent, _ = LivenessGate(make_client()).evaluate(validator_id)
        failed, _ = LivenessGate(make_client(gossip_error=ClientError("boom"))).evaluate(validator_id)

        assert absent.is_cancel and failed.is_cancel

    def test_match_is_exact(self, make_client, validator_id):
        client = make_client(node_ids=[str(validator_id).lower(), str(validator_id)[:-1]])

        result = LivenessGate(client).check(validator_id)

        assert result.status is LivenessStatus.ABSENT

    def test_logs_lookup_result(self, make_client, validator_id, caplog):
        with caplog.at_level(logging.INFO, logger="dz_validator_pda.liveness"):
            LivenessGate(make_client()).check(validator_id)

        assert f"Validator {validator_id} not found in gossip network" in caplog.text
        assert "Funding cancelled" not in caplog.text

    def test_logs_lookup_failure(self, make_client, validator_id, caplog):
        with caplog.at_level(logging.WARNING, logger="dz_validator_pda.liveness"):
            LivenessGate(make_client(gossip_error=ClientError("503"))).check(validator_id)

        assert "Gossip lookup for validator" in caplog.text
        assert "Funding cancelled" not in caplog.text


class TestCancelReason:
    def test_absent_reason(self, validator_id):
        reason = cancel_reason(LivenessResult(LivenessStatus.ABSENT, validator_id))

        assert "not found in gossip network" in reason
        assert str(validator_id) in reason

    def test_unknown_reason_includes_error(self, validator_id):
        reason = cancel_reason(LivenessResult(LivenessStatus.UNKNOWN, validator_id, error="timed out"))

        assert "unable to verify" in reason
        assert "timed out" in reason
