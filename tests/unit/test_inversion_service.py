"""
Tests for Inversion Service и Pydantic моделей границы

Покрывает:
- InversionRequest / InversionReport: создание, валидация, immutability
- InversionService.process: INVALID / SINGULAR / INVERTIBLE
- process_payload / invert_payload: оба JSON контракта
- parse_matrix, random_integer_matrix
"""

import logging
import math
import random

import pytest
from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from src.core.domain import InversionReport, InversionRequest, InversionStatus
from src.core.math.rational import DisplayFormat
from src.inversion import (
    InversionService,
    compute_inverse,
    invert_payload,
    parse_matrix,
    random_integer_matrix,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def service():
    """Сервис с конфигурацией по умолчанию."""
    return InversionService()


# =============================================================================
# PYDANTIC MODELS
# =============================================================================


class TestInversionRequestModel:
    """Тесты InversionRequest."""

    def test_defaults_to_decimal(self):
        request = InversionRequest(matrix=[[1, 2], [3, 4]])
        assert request.display_format == DisplayFormat.DECIMAL
        assert request.matrix == [[1.0, 2.0], [3.0, 4.0]]

    def test_fraction_from_string(self):
        request = InversionRequest(matrix=[[1.0]], display_format="fraction")
        assert request.display_format == DisplayFormat.FRACTION

    def test_unknown_format_rejected(self):
        with pytest.raises(ValidationError):
            InversionRequest(matrix=[[1.0]], display_format="hex")

    def test_frozen(self):
        request = InversionRequest(matrix=[[1.0]])
        with pytest.raises(ValidationError):
            request.display_format = DisplayFormat.FRACTION

    def test_nan_passes_model(self):
        """NaN отсекается validate(), а не моделью."""
        request = InversionRequest(matrix=[[math.nan]])
        assert math.isnan(request.matrix[0][0])


class TestInversionReportModel:
    """Тесты InversionReport."""

    def test_invertible_requires_payload(self):
        with pytest.raises(ValidationError, match="requires inverse and rendered"):
            InversionReport(
                status=InversionStatus.INVERTIBLE,
                size=1,
                display_format=DisplayFormat.DECIMAL,
            )

    def test_payload_rows_match_size(self):
        with pytest.raises(ValidationError, match="size"):
            InversionReport(
                status=InversionStatus.INVERTIBLE,
                size=2,
                display_format=DisplayFormat.DECIMAL,
                inverse=[[1.0]],
                rendered=[["1"]],
            )

    def test_singular_requires_reason(self):
        with pytest.raises(ValidationError, match="requires reason"):
            InversionReport(
                status=InversionStatus.SINGULAR,
                size=2,
                display_format=DisplayFormat.DECIMAL,
            )

    def test_singular_must_not_carry_inverse(self):
        with pytest.raises(ValidationError, match="must not carry inverse"):
            InversionReport(
                status=InversionStatus.SINGULAR,
                size=1,
                display_format=DisplayFormat.DECIMAL,
                reason="SINGULAR",
                inverse=[[1.0]],
                rendered=[["1"]],
            )

    def test_empty_reason_rejected(self):
        with pytest.raises(ValidationError):
            InversionReport(
                status=InversionStatus.INVALID,
                size=0,
                display_format=DisplayFormat.DECIMAL,
                reason="",
            )


# =============================================================================
# SERVICE
# =============================================================================


class TestInversionServiceProcess:
    """Тесты InversionService.process."""

    def test_invertible_decimal(self, service):
        report = service.process(InversionRequest(matrix=[[4, 7], [2, 6]]))
        assert report.status == InversionStatus.INVERTIBLE
        assert report.rank == 2
        assert report.rendered == [["0.6", "-0.7"], ["-0.2", "0.4"]]

    def test_invertible_fraction(self, service):
        report = service.process(
            InversionRequest(matrix=[[2, 0], [0, 2]], display_format="fraction")
        )
        assert report.rendered == [["1/2", "0"], ["0", "1/2"]]
        assert report.inverse == [[0.5, 0.0], [0.0, 0.5]]

    def test_display_format_does_not_change_values(self, service):
        matrix = [[4, 7], [2, 6]]
        decimal = service.process(InversionRequest(matrix=matrix, display_format="decimal"))
        fraction = service.process(InversionRequest(matrix=matrix, display_format="fraction"))
        assert decimal.inverse == fraction.inverse
        assert decimal.rendered != fraction.rendered

    def test_singular(self, service):
        report = service.process(InversionRequest(matrix=[[1, 2], [2, 4]]))
        assert report.status == InversionStatus.SINGULAR
        assert report.reason == "SINGULAR"
        assert report.inverse is None
        assert report.rank == 1

    @pytest.mark.parametrize(
        "matrix, reason",
        [
            ([[1, 2, 3], [4, 5, 6]], "NON_SQUARE"),
            ([[0, 0, 0], [0, 0, 0], [0, 0, 0]], "ALL_ZERO"),
            ([[math.nan, 1], [1, 1]], "CONTAINS_NAN"),
            ([[math.inf, 1], [1, 1]], "CONTAINS_INFINITE"),
        ],
    )
    def test_invalid(self, service, matrix, reason):
        report = service.process(InversionRequest(matrix=matrix))
        assert report.status == InversionStatus.INVALID
        assert report.reason == reason

    def test_outcome_logged(self, service, caplog):
        with caplog.at_level(logging.INFO, logger="src.inversion.service"):
            service.process(InversionRequest(matrix=[[1, 2], [2, 4]]))
        assert any("singular" in record.getMessage() for record in caplog.records)


class TestInvertPayload:
    """Тесты JSON границы."""

    def test_round_trip_payload(self):
        payload = invert_payload({"matrix": [[4, 7], [2, 6]], "display_format": "fraction"})
        assert payload["status"] == "INVERTIBLE"
        assert payload["display_format"] == "fraction"
        assert payload["rendered"] == [["3/5", "-7/10"], ["-1/5", "2/5"]]

    def test_invalid_payload_report(self):
        payload = invert_payload({"matrix": [[0, 0], [0, 0]]})
        assert payload["status"] == "INVALID"
        assert payload["reason"] == "ALL_ZERO"
        assert payload["inverse"] is None

    def test_malformed_payload_raises(self):
        with pytest.raises(SchemaValidationError):
            invert_payload({"matrix": "not a matrix"})


# =============================================================================
# INPUT HELPERS
# =============================================================================


class TestParseMatrix:
    """Тесты parse_matrix."""

    def test_blank_cells_are_zero(self):
        assert parse_matrix([["1", ""], ["  ", "2.5"]]) == [[1.0, 0.0], [0.0, 2.5]]

    def test_negative_and_exponent(self):
        assert parse_matrix([["-3", "1e2"]]) == [[-3.0, 100.0]]

    def test_garbage_raises(self):
        with pytest.raises(ValueError, match=r"Cell \[0\]\[1\]"):
            parse_matrix([["1", "abc"]])


class TestRandomIntegerMatrix:
    """Тесты random_integer_matrix."""

    def test_shape_and_range(self):
        m = random_integer_matrix(4, rng=random.Random(0))
        assert len(m) == 4
        assert all(len(row) == 4 for row in m)
        assert all(-10 <= v <= 10 and v == int(v) for row in m for v in row)

    def test_deterministic_with_seed(self):
        assert random_integer_matrix(3, rng=random.Random(5)) == random_integer_matrix(
            3, rng=random.Random(5)
        )

    def test_invertible_examples_invert(self):
        rng = random.Random(11)
        for _ in range(10):
            m = random_integer_matrix(3, rng=rng)
            outcome = compute_inverse(m)
            if outcome.invertible:
                assert outcome.rank == 3

    @pytest.mark.parametrize("n, low, high", [(0, -10, 10), (2, 5, 1)])
    def test_invalid_arguments(self, n, low, high):
        with pytest.raises(ValueError):
            random_integer_matrix(n, low, high)
