import math

import pytest
from hypothesis import given, settings, strategies as st

from beatseed.seed.loader import BatchLoader, plan_batches
from tests.fakes import FakeCollection, TemplateGenerator


positive = st.integers(min_value=1, max_value=10_000)


@given(positive, positive)
def test_plan_batch_count_and_sum(total, batch_size):
    """
    Property: there are ceil(N / B) batches and their sizes sum to N.
    """
    sizes = plan_batches(total, batch_size)
    assert len(sizes) == math.ceil(total / batch_size)
    assert sum(sizes) == total


@given(positive, positive)
def test_plan_final_batch_size(total, batch_size):
    """
    Property: the last batch holds N - B * (batches - 1) records, within (0, B].
    All earlier batches are full.
    """
    sizes = plan_batches(total, batch_size)
    assert sizes[-1] == total - batch_size * (len(sizes) - 1)
    assert 0 < sizes[-1] <= batch_size
    assert all(size == batch_size for size in sizes[:-1])


def test_plan_thousand_by_hundred():
    assert plan_batches(1000, 100) == [100] * 10


def test_plan_with_remainder():
    assert plan_batches(250, 100) == [100, 100, 50]


def test_plan_batch_larger_than_total():
    assert plan_batches(5, 100) == [5]


@pytest.mark.parametrize("total,batch_size", [(0, 10), (10, 0), (-1, 10), (10, -5), (2.5, 1), (True, 1)])
def test_plan_rejects_invalid(total, batch_size):
    with pytest.raises(ValueError):
        plan_batches(total, batch_size)


@settings(max_examples=25, deadline=None)
@given(st.integers(min_value=1, max_value=60), st.integers(min_value=1, max_value=25))
def test_seed_inserts_exactly_total(total, batch_size):
    """
    Property: absent constraint violations the collection ends with N
    documents, inserted in ceil(N / B) unordered calls.
    """
    collection = FakeCollection()
    report = BatchLoader(collection, TemplateGenerator()).seed(total, batch_size)  # type: ignore[arg-type]

    assert collection.count_documents({}) == total
    assert report.total_inserted == total
    assert [call["count"] for call in collection.insert_calls] == plan_batches(total, batch_size)
    assert all(call["ordered"] is False for call in collection.insert_calls)
