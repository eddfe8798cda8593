from __future__ import annotations

from collections.abc import Iterator

import pytest

from cqrs_ddd_pipeline.correlation import set_context_vars


@pytest.fixture(autouse=True)
def _reset_correlation_context() -> Iterator[None]:
    set_context_vars(correlation_id=None, causation_id=None)
    yield
    set_context_vars(correlation_id=None, causation_id=None)
