from .models import Medal, MedalTier

# Fraction of correct answers needed for silver (2 of 3 on the default bank)
SILVER_THRESHOLD = 2 / 3


def medal_for(score: int, total: int) -> Medal:
    """Pick the medal, message and image for a final quiz score."""
    total = max(0, total)
    score = max(0, min(score, total))

    if total > 0 and score == total:
        return Medal(
            MedalTier.EXPERT,
            f"You scored {score}/{total}!\nExcellent!\nYou earned the Zero-G Expert badge! 🚀",
            "gold.png",
        )
    if score == 0:
        return Medal(
            MedalTier.NONE,
            f"You scored 0/{total}.\nTry again to earn a medal!",
            "fail.png",
        )
    if score / total >= SILVER_THRESHOLD:
        return Medal(
            MedalTier.SILVER,
            f"You scored {score}/{total}.\nGreat job!\nYou earned the Silver Medal!",
            "silver.png",
        )
    return Medal(
        MedalTier.BRONZE,
        f"You scored {score}/{total}.\nGood try!\nYou earned the Bronze Medal!",
        "bronze.png",
    )
