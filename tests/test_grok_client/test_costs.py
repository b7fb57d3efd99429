"""Tests for cost estimation."""
from __future__ import annotations

import pytest

from grok_client.costs import estimate_cost
from grok_client.errors import InvalidModelError


class TestTokenPriced:
    def test_input_and_output(self) -> None:
        expected = round(12000 / 1e6 * 3.0 + 2000 / 1e6 * 15.0, 6)
        assert estimate_cost("grok-4", 12000, 2000) == expected
        assert expected == pytest.approx(0.066)

    def test_mini(self) -> None:
        assert estimate_cost("grok-3-mini", 1_000_000, 1_000_000) == pytest.approx(0.8)

    def test_input_only(self) -> None:
        assert estimate_cost("grok-3", input_tokens=500_000) == pytest.approx(1.5)

    def test_output_only(self) -> None:
        assert estimate_cost("grok-3", output_tokens=100_000) == pytest.approx(1.5)

    def test_nothing(self) -> None:
        assert estimate_cost("grok-4") == 0.0

    def test_zero_counts(self) -> None:
        assert estimate_cost("grok-4", 0, 0, 0) == 0.0

    def test_images_ignored_for_token_priced(self) -> None:
        assert estimate_cost("grok-4", 0, 0, 5) == 0.0

    def test_rounded_to_six_places(self) -> None:
        assert estimate_cost("grok-3-mini", 1, 1) == round(0.3e-6 + 0.5e-6, 6)
        assert estimate_cost("grok-3-mini", 1, 0) == 0.0


class TestUnitPriced:
    def test_three_images(self) -> None:
        assert estimate_cost("grok-2-image", image_count=3) == pytest.approx(3 * 0.07)

    def test_images_replace_output_tokens(self) -> None:
        assert estimate_cost("grok-2-image", output_tokens=1_000_000, image_count=1) == pytest.approx(0.07)

    def test_no_images(self) -> None:
        assert estimate_cost("grok-2-image") == 0.0


class TestInvalid:
    def test_unknown_model(self) -> None:
        with pytest.raises(InvalidModelError):
            estimate_cost("nonexistent-model", 10, 10)

    @pytest.mark.parametrize(
        "kwargs",
        [{"input_tokens": -1}, {"output_tokens": -5}, {"image_count": -2}],
    )
    def test_negative_counts(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            estimate_cost("grok-4", **kwargs)

    def test_unknown_model_reported_before_negative_count(self) -> None:
        with pytest.raises(InvalidModelError):
            estimate_cost("nonexistent-model", input_tokens=-1)
