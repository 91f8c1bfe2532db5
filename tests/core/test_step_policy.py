"""Tests for the per-step failure policy table."""

import logging

import pytest

from source_service.core.processing.step_policy import (
    STEP_POLICIES,
    FailurePolicy,
    PipelineStep,
    run_step,
)


def _raise(exc):
    raise exc


class TestPolicyTable:
    def test_every_step_has_a_policy(self) -> None:
        assert set(STEP_POLICIES) == set(PipelineStep)

    @pytest.mark.parametrize(
        "step,policy",
        [
            (PipelineStep.EXTRACT, FailurePolicy.FATAL),
            (PipelineStep.IMAGE_BACKFILL, FailurePolicy.IGNORABLE),
            (PipelineStep.TITLE_BACKFILL, FailurePolicy.IGNORABLE),
            (PipelineStep.CHUNK, FailurePolicy.FATAL),
            (PipelineStep.EMBED_CHUNK, FailurePolicy.DEGRADED),
            (PipelineStep.UPSERT, FailurePolicy.FATAL),
            (PipelineStep.MARK_STATUS, FailurePolicy.FATAL),
        ],
    )
    def test_declared_policies(self, step, policy) -> None:
        assert STEP_POLICIES[step] is policy


class TestRunStep:
    def test_returns_result_on_success(self) -> None:
        assert run_step(PipelineStep.CHUNK, lambda a, b=0: a + b, 1, b=2) == 3

    def test_fatal_step_reraises(self) -> None:
        """Should propagate the original exception for FATAL steps."""
        with pytest.raises(ValueError, match="bad"):
            run_step(PipelineStep.EXTRACT, _raise, ValueError("bad"))

    def test_degraded_step_returns_fallback(self, caplog) -> None:
        """Should log and return the fallback for DEGRADED steps."""
        with caplog.at_level(logging.ERROR):
            result = run_step(
                PipelineStep.EMBED_CHUNK,
                _raise,
                RuntimeError("quota"),
                fallback="skipped",
                context={"chunk_index": 4},
            )

        assert result == "skipped"
        assert "embed_chunk failed" in caplog.text

    def test_ignorable_step_defaults_to_none(self) -> None:
        assert run_step(PipelineStep.IMAGE_BACKFILL, _raise, OSError("x")) is None
