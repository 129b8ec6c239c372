from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .store.base import AppRecord


@dataclass(frozen=True)
class PromotionInsights:
    total_download_potential: int = 0
    average_rating: float = 0.0
    top_performing_app: Optional[AppRecord] = None
    category_breakdown: Dict[str, int] = field(default_factory=dict)
    recommended_promotion_order: List[int] = field(default_factory=list)


def promotion_score(app: AppRecord) -> float:
    return app.display_rating * app.display_rating_count


def compute_insights(apps: Sequence[AppRecord]) -> PromotionInsights:
    """Summarise a set of apps for deciding what to promote first.

    The recommended order ranks by rating times review count; apps with the
    same score keep their input order.
    """
    if not apps:
        return PromotionInsights()

    total = sum(a.display_rating_count for a in apps)
    average = sum(a.display_rating for a in apps) / len(apps)
    top = max(apps, key=lambda a: a.display_rating)

    categories: Dict[str, int] = {}
    for a in apps:
        categories[a.display_genre] = categories.get(a.display_genre, 0) + 1

    ordered = sorted(apps, key=promotion_score, reverse=True)

    return PromotionInsights(
        total_download_potential=total,
        average_rating=average,
        top_performing_app=top,
        category_breakdown=categories,
        recommended_promotion_order=[a.track_id for a in ordered],
    )
