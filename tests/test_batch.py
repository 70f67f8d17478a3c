"""Tests for the batch orchestrator."""

import threading

import pytest

from photostag.batch import BatchProcessor, process_batch
from photostag.exceptions import InvalidParameterError
from photostag.results import BatchResult, ProcessingResult

SEPIA = {"operation": "filter", "filter": "sepia"}


class TestBatchResults:
    """Ordering, isolation and counts."""

    def test_all_succeed(self, red_png_base64, red_png_data_url):
        batch = process_batch([red_png_base64, red_png_data_url, red_png_base64], SEPIA)
        assert (batch.processed, batch.successful, batch.failed) == (3, 3, 0)
        assert all(r.success for r in batch.results)
        assert batch.total_time_ms >= 0
        assert batch.failure_summary() is None

    def test_failure_is_isolated(self, red_png_base64):
        inputs = [red_png_base64, "not an image", red_png_base64]
        batch = process_batch(inputs, SEPIA, max_workers=2)
        assert (batch.processed, batch.successful, batch.failed) == (3, 2, 1)
        assert [r.success for r in batch.results] == [True, False, True]
        assert batch.results[1].error_type == "decode_error"
        assert batch.results[0].encoded_bytes == batch.results[2].encoded_bytes

    def test_order_follows_inputs(self, red_png_base64, square_png_data_url):
        inputs = [square_png_data_url, red_png_base64] * 3
        batch = process_batch(inputs, {"operation": "adjust"}, max_workers=4)
        widths = [r.metadata.width for r in batch.results]
        assert widths == [200, 10] * 3

    def test_failure_summary(self, red_png_base64):
        batch = process_batch([red_png_base64, "", "???"], SEPIA)
        assert batch.has_failures
        assert batch.failure_summary() == "Batch processing failed for 2 out of 3 images"

    def test_empty_batch(self):
        batch = process_batch([], SEPIA)
        assert (batch.processed, batch.successful, batch.failed) == (0, 0, 0)
        assert batch.results == []

    def test_engine_errors_are_per_item(self, red_png_base64):
        batch = process_batch([red_png_base64], {"operation": "filter", "filter": "nonexistent"})
        assert batch.failed == 1
        assert batch.results[0].error_type == "unknown_filter"


class TestBatchRejection:
    """Malformed batches are rejected before any item runs."""

    def test_mixed_representations(self, red_png, red_png_base64):
        with pytest.raises(InvalidParameterError, match="item 1"):
            process_batch([red_png_base64, red_png], SEPIA)

    def test_not_a_list(self, red_png_base64):
        with pytest.raises(InvalidParameterError):
            process_batch(red_png_base64, SEPIA)

    def test_bad_descriptor(self, red_png_base64):
        with pytest.raises(InvalidParameterError):
            process_batch([red_png_base64], {"operation": "filter", "filter": "sepia", "extra": 1})

    def test_bad_worker_count(self):
        with pytest.raises(InvalidParameterError):
            BatchProcessor(SEPIA, max_workers=-2)


class TestCancellation:
    """Items not started when cancelled are recorded as failed."""

    def test_cancel_before_run(self, red_png_base64):
        processor = BatchProcessor(SEPIA, max_workers=1)
        processor.cancel()
        assert processor.cancelled
        batch = processor.run([red_png_base64] * 3)
        assert batch.processed == 3
        assert batch.failed == 3
        assert all(r.error_type == "cancelled" for r in batch.results)

    def test_shared_cancel_event(self, red_png_base64):
        event = threading.Event()
        event.set()
        batch = process_batch([red_png_base64], SEPIA, cancel_event=event)
        assert batch.results[0].error_type == "cancelled"

    def test_cancel_during_run(self, red_png_base64, monkeypatch):
        processor = BatchProcessor(SEPIA, max_workers=1)
        calls = []

        def fake_process(source, descriptor):
            calls.append(source)
            processor.cancel()
            return ProcessingResult.failure("stopped")

        monkeypatch.setattr("photostag.batch.process", fake_process)
        batch = processor.run([red_png_base64] * 4)
        assert len(calls) == 1
        assert [r.error_type for r in batch.results] == ["processing_error"] + ["cancelled"] * 3


class TestBatchResultModel:
    """Counts are derived from the slots."""

    def test_from_results(self):
        results = [ProcessingResult.failure("x"), ProcessingResult(success=True)]
        batch = BatchResult.from_results(results, 1.5)
        assert (batch.processed, batch.successful, batch.failed) == (2, 1, 1)
        assert batch.total_time_ms == 1.5


class TestUnexpectedItemErrors:
    """An unexpected exception in one item leaves the others intact."""

    def test_raising_item_is_isolated(self, red_png_base64, monkeypatch):
        from photostag import batch as batch_module

        real_process = batch_module.process

        def flaky_process(source, descriptor):
            if source == "boom":
                raise OverflowError("signed integer is greater than maximum")
            return real_process(source, descriptor)

        monkeypatch.setattr("photostag.batch.process", flaky_process)
        batch = process_batch([red_png_base64, "boom", red_png_base64], SEPIA, max_workers=2)
        assert (batch.processed, batch.successful, batch.failed) == (3, 2, 1)
        assert batch.results[1].error_type == "internal_error"
        assert batch.results[0].success and batch.results[2].success

    def test_oversized_resize_in_batch(self, red_png_base64):
        request = {
            "operation": "transform",
            "resize": {"width": 2 ** 31, "height": 1, "keep_aspect_ratio": False},
        }
        batch = process_batch([red_png_base64, red_png_base64], request)
        assert batch.failed == 2
        assert all(r.error_type == "invalid_region" for r in batch.results)
