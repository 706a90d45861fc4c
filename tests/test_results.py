import pytest

from zerogravity.models import MedalTier
from zerogravity.results import medal_for


@pytest.mark.parametrize(
    ("score", "tier", "image"),
    [
        (3, MedalTier.EXPERT, "gold.png"),
        (2, MedalTier.SILVER, "silver.png"),
        (1, MedalTier.BRONZE, "bronze.png"),
        (0, MedalTier.NONE, "fail.png"),
    ],
)
def test_three_question_tiers(score, tier, image) -> None:
    medal = medal_for(score, 3)
    assert medal.tier == tier
    assert medal.image == image
    assert f"{score}/3" in medal.message


def test_larger_bank_uses_ratio() -> None:
    assert medal_for(7, 10).tier == MedalTier.SILVER
    assert medal_for(6, 10).tier == MedalTier.BRONZE
    assert medal_for(10, 10).tier == MedalTier.EXPERT


def test_score_is_clamped() -> None:
    assert medal_for(5, 3).tier == MedalTier.EXPERT
    assert medal_for(-1, 3).tier == MedalTier.NONE


def test_empty_bank_has_no_medal() -> None:
    medal = medal_for(0, 0)
    assert medal.tier == MedalTier.NONE
    assert "0/0" in medal.message
