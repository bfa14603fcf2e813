"""
Unit Tests for ItemsServiceWithFallback.

Test Aspects Covered:
    ✅ Business Logic: Primary short-circuit, fallback forwarding
    ✅ Edge Cases: Both fail, nested fallbacks
    ✅ State: Fallback only starts after primary completed
"""

from __future__ import annotations

from account_dashboard.adapters.null_service import NullItemsService
from account_dashboard.domain.errors import FetchError, ServiceDisabledError
from account_dashboard.domain.result import LoadResult
from account_dashboard.interfaces.items_service import ItemsService
from account_dashboard.resilience.fallback import ItemsServiceWithFallback, with_fallback
from tests.fixtures.doubles import (
    CompletionRecorder,
    DeferredItemsService,
    ItemsServiceSpy,
    a_failure,
    an_item,
)


class TestFallbackOnPrimarySuccess:
    """Primary succeeds: its items are delivered, fallback never runs."""

    def test_delivers_primary_items(self) -> None:
        """
        SCENARIO: Primary succeeds with items X
        EXPECTED: Result is success with X
        """
        # Arrange
        items = [an_item("a"), an_item("b")]
        primary = ItemsServiceSpy([LoadResult.success(items)])
        fallback = ItemsServiceSpy([LoadResult.success([an_item("cached")])])
        recorder = CompletionRecorder()

        # Act
        ItemsServiceWithFallback(primary, fallback).load_items(recorder)

        # Assert
        assert recorder.single.value == items

    def test_fallback_is_never_invoked(self) -> None:
        """
        SCENARIO: Primary succeeds
        EXPECTED: Fallback invocation counter stays at zero
        """
        # Arrange
        primary = ItemsServiceSpy([LoadResult.success([an_item("a")])])
        fallback = ItemsServiceSpy([LoadResult.success([])])

        # Act
        ItemsServiceWithFallback(primary, fallback).load_items(CompletionRecorder())

        # Assert
        assert primary.call_count == 1
        assert fallback.call_count == 0

    def test_empty_success_does_not_trigger_fallback(self) -> None:
        """
        SCENARIO: Primary succeeds with no items
        EXPECTED: Empty success delivered, fallback not invoked
        """
        primary = ItemsServiceSpy([LoadResult.success([])])
        fallback = ItemsServiceSpy([LoadResult.success([an_item("cached")])])
        recorder = CompletionRecorder()

        ItemsServiceWithFallback(primary, fallback).load_items(recorder)

        assert recorder.single.value == []
        assert fallback.call_count == 0


class TestFallbackOnPrimaryFailure:
    """Primary fails: the fallback's own result is delivered verbatim."""

    def test_delivers_fallback_success(self) -> None:
        """
        SCENARIO: Primary fails, fallback succeeds
        EXPECTED: Fallback's items delivered, each service invoked once
        """
        # Arrange
        cached = [an_item("cached")]
        primary = ItemsServiceSpy([a_failure("primary error")])
        fallback = ItemsServiceSpy([LoadResult.success(cached)])
        recorder = CompletionRecorder()

        # Act
        ItemsServiceWithFallback(primary, fallback).load_items(recorder)

        # Assert
        assert recorder.single.value == cached
        assert primary.call_count == 1
        assert fallback.call_count == 1

    def test_delivers_fallback_failure(self) -> None:
        """
        SCENARIO: Both services fail
        EXPECTED: Fallback's error delivered, primary's error swallowed
        """
        # Arrange
        primary = ItemsServiceSpy([a_failure("primary error")])
        fallback = ItemsServiceSpy([a_failure("fallback error")])
        recorder = CompletionRecorder()

        # Act
        ItemsServiceWithFallback(primary, fallback).load_items(recorder)

        # Assert
        assert recorder.single.error == FetchError("fallback error")

    def test_result_equals_fallback_result(self) -> None:
        """
        SCENARIO: Primary fails
        EXPECTED: Delivered result is the very object the fallback produced
        """
        fallback_result = a_failure("fallback error")
        primary = ItemsServiceSpy([a_failure("primary error")])
        fallback = ItemsServiceSpy([fallback_result])
        recorder = CompletionRecorder()

        ItemsServiceWithFallback(primary, fallback).load_items(recorder)

        assert recorder.single is fallback_result

    def test_null_fallback_surfaces_disabled_error(self) -> None:
        """
        SCENARIO: Primary fails, fallback is a NullItemsService
        EXPECTED: ServiceDisabledError delivered
        """
        primary = ItemsServiceSpy([a_failure("primary error")])
        recorder = CompletionRecorder()

        with_fallback(primary, NullItemsService("cache disabled")).load_items(recorder)

        assert isinstance(recorder.single.error, ServiceDisabledError)
        assert str(recorder.single.error) == "cache disabled"


class TestFallbackOrdering:
    """Fallback is strictly sequential."""

    def test_fallback_starts_only_after_primary_completes(self) -> None:
        """
        SCENARIO: Primary completes later (asynchronously)
        EXPECTED: Fallback not invoked until primary's completion fires
        """
        # Arrange
        primary = DeferredItemsService()
        fallback = ItemsServiceSpy([LoadResult.success([an_item("cached")])])
        recorder = CompletionRecorder()
        service = ItemsServiceWithFallback(primary, fallback)

        # Act
        service.load_items(recorder)

        # Assert
        assert primary.call_count == 1
        assert fallback.call_count == 0
        assert recorder.results == []

        primary.complete(a_failure())

        assert fallback.call_count == 1
        assert recorder.single.is_success

    def test_nested_fallbacks_evaluate_left_to_right(self) -> None:
        """
        SCENARIO: Fallback(Fallback(A, B), C) with A and B failing
        EXPECTED: A, B, C each invoked once, C's result delivered
        """
        a = ItemsServiceSpy([a_failure("a")])
        b = ItemsServiceSpy([a_failure("b")])
        c = ItemsServiceSpy([LoadResult.success([an_item("c")])])
        recorder = CompletionRecorder()

        with_fallback(with_fallback(a, b), c).load_items(recorder)

        assert (a.call_count, b.call_count, c.call_count) == (1, 1, 1)
        assert [item.title for item in recorder.single.value] == ["c"]

    def test_grouping_does_not_change_outcome(self) -> None:
        """
        SCENARIO: (A then B) then C versus A then (B then C)
        EXPECTED: Same delivered result when A and B fail
        """
        left_recorder = CompletionRecorder()
        right_recorder = CompletionRecorder()
        results = [a_failure("a"), a_failure("b"), a_failure("c")]

        with_fallback(
            with_fallback(ItemsServiceSpy([results[0]]), ItemsServiceSpy([results[1]])),
            ItemsServiceSpy([results[2]]),
        ).load_items(left_recorder)
        with_fallback(
            ItemsServiceSpy([results[0]]),
            with_fallback(ItemsServiceSpy([results[1]]), ItemsServiceSpy([results[2]])),
        ).load_items(right_recorder)

        assert left_recorder.single == right_recorder.single

    def test_composed_service_is_an_items_service(self) -> None:
        """Composition preserves the capability interface."""
        service = with_fallback(ItemsServiceSpy([a_failure()]), NullItemsService())

        assert isinstance(service, ItemsService)
