import threading
import time
from enum import Enum

import pytest

from runtime_version.core import comparer as comparer_module
from runtime_version.core.comparer import VersionComparator, compare_tokens
from runtime_version.core.models import Operation


class Spec(Enum):
    MINOR = "3.2"


@pytest.fixture
def call_counter(monkeypatch):
    calls: list[tuple] = []
    original = comparer_module.compare_tokens

    def counting(current, other):
        calls.append((tuple(current), tuple(other)))
        return original(current, other)

    monkeypatch.setattr(comparer_module, "compare_tokens", counting)
    return calls


def test_compare_tokens_ignores_positions_past_current():
    assert compare_tokens([2, 1], [2, 1, 5, 9]) == 0


def test_compare_tokens_treats_missing_positions_as_zero():
    assert compare_tokens([3, 2, 1], [3, 2]) == 1
    assert compare_tokens([3, 2, 0], [3, 2]) == 0
    assert compare_tokens([3, 2, 1], [4, 0]) == -1


def test_compare_tokens_coerces_elements():
    assert compare_tokens([3, 2, 1], ["3", "2", "1"]) == 0


def test_documented_examples():
    comparator = VersionComparator("3.2.1")
    assert comparator.eq("3.2.1") is True
    assert comparator.eq("3.2") is False
    assert comparator.gt("3.2") is True
    assert comparator.lt("4.0") is True
    assert comparator.gte("3.2.1.0.0") is True
    assert comparator.compare("3.2.0") == 1


def test_boolean_operations_agree_with_compare():
    comparator = VersionComparator("3.2.1")
    for spec in ["3", "3.2", "3.2.1", "3.2.2", "3.10", "2.99.99", "garbage", [3, 2, 1], (4,)]:
        result = comparator.compare(spec)
        assert comparator.gte(spec) == (result in (0, 1))
        assert comparator.lte(spec) == (result in (-1, 0))
        assert comparator.lt(spec) == (result == -1)
        assert comparator.gt(spec) == (result == 1)
        assert comparator.eq(spec) == (result == 0)


def test_tokens_are_frozen():
    comparator = VersionComparator("3.11.4")
    assert comparator.version == "3.11.4"
    assert comparator.tokens == (3, 11, 4)


def test_repeated_calls_are_served_from_cache(call_counter):
    comparator = VersionComparator("3.2.1")
    assert comparator.gte("3.2") is True
    assert comparator.gte("3.2") is True
    assert comparator.gte(" 3.2 ") is True
    assert comparator.gte(Spec.MINOR) is True
    assert len(call_counter) == 1


def test_cache_is_isolated_per_operation(call_counter):
    comparator = VersionComparator("3.2.1")
    comparator.gte("3.2")
    assert comparator.lte("3.2") is False
    assert len(call_counter) == 2


def test_sequence_operands_use_their_own_keys(call_counter):
    comparator = VersionComparator("3.2.1")
    comparator.eq("3.2.1")
    comparator.eq([3, 2, 1])
    comparator.eq((3, 2, 1))
    assert len(call_counter) == 2


def test_unhashable_sequences_are_compared_without_caching(call_counter):
    comparator = VersionComparator("3.2.1")
    assert comparator.gte([[3], 2]) is True
    assert comparator.gte([[3], 2]) is True
    assert len(call_counter) == 2


def test_concurrent_first_calls_compute_once(monkeypatch):
    comparator = VersionComparator("3.2.1")
    calls = []
    original = comparer_module.compare_tokens

    def slow(current, other):
        calls.append(1)
        time.sleep(0.01)
        return original(current, other)

    monkeypatch.setattr(comparer_module, "compare_tokens", slow)
    barrier = threading.Barrier(8)
    results = []

    def worker():
        barrier.wait()
        results.append(comparator.lt("4.0"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results == [True] * 8
    assert len(calls) == 1


def test_rich_comparisons_delegate_to_operations():
    comparator = VersionComparator("3.2.1")
    assert comparator >= "3.0"
    assert comparator <= "3.2.1"
    assert comparator > [3, 1]
    assert comparator < "3.3"
    assert comparator == "3.2.1"
    assert comparator != "3.2"
    assert "4.0" > comparator
    assert (comparator == 3) is False


def test_evaluate_accepts_names_and_symbols():
    comparator = VersionComparator("3.2.1")
    assert comparator.evaluate(">=", "3.2") is True
    assert comparator.evaluate("gt", "3.2.1") is False
    assert comparator.evaluate("<=>", "4") == -1
    assert comparator.evaluate(Operation.EQ, "3.2.1") is True


def test_evaluate_rejects_unknown_operation():
    comparator = VersionComparator("3.2.1")
    with pytest.raises(ValueError):
        comparator.evaluate("between", "3.0")


def test_malformed_operands_do_not_raise():
    comparator = VersionComparator("3.2.1")
    assert comparator.compare("not.a.version") == 1
    assert comparator.compare(None) == 1
    assert comparator.compare("") == 1


def test_long_digit_runs_compare_without_raising():
    comparator = VersionComparator("3.2.1")
    assert comparator.compare("3." + "9" * 5000) == -1
    assert comparator.gt("3." + "9" * 5000) is False
    assert VersionComparator("1" * 5000 + ".0").compare("2") == 1


def test_operand_callbacks_may_reenter_comparator():
    comparator = VersionComparator("3.2.1")

    class Component:
        def __str__(self):
            comparator.gte("1")
            return "3"

    results = []
    thread = threading.Thread(target=lambda: results.append(comparator.gte([Component()])))
    thread.start()
    thread.join(timeout=5)

    assert not thread.is_alive()
    assert results == [True]
    assert comparator.gte("1") is True
