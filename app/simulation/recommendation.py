from typing import List, Sequence

from app.schemas.simulation import CareerPath, RecommendedPath

FALLBACK_REASONING = "Best overall balance of your success criteria among the simulated paths."


def select_best_path(paths: Sequence[CareerPath]) -> CareerPath:
    """Highest success score; on a tie the earlier path is kept."""
    if not paths:
        raise ValueError("Cannot recommend a path from an empty path list")

    best = paths[0]
    for path in paths[1:]:
        if path.success_score > best.success_score:
            best = path
    return best


def generate_recommendation_reasoning(recommended: CareerPath, all_paths: Sequence[CareerPath]) -> str:
    reasons: List[str] = []

    if recommended.success_score >= 80:
        reasons.append(f"This path scores highest ({recommended.success_score}/100) on your success criteria")

    top_earnings = max(p.expected_lifetime_earnings for p in all_paths)
    if recommended.expected_lifetime_earnings == top_earnings:
        reasons.append(
            f"Offers the highest expected lifetime earnings (${recommended.expected_lifetime_earnings / 1_000_000:.2f}M)"
        )

    if recommended.risk_score < 50:
        reasons.append("Provides good stability with lower risk")

    if recommended.path_characteristics.growth_potential > 70:
        reasons.append("Strong growth potential for career advancement")

    if not reasons:
        return FALLBACK_REASONING
    return ". ".join(reasons) + "."


def calculate_confidence(path: CareerPath) -> float:
    characteristics = path.path_characteristics

    confidence = 0.5
    confidence += characteristics.stability_score / 100 * 0.2
    confidence += (100 - path.risk_score) / 100 * 0.2
    confidence += characteristics.market_demand / 100 * 0.1

    return min(1.0, confidence)


def recommend_path(paths: Sequence[CareerPath]) -> RecommendedPath:
    best = select_best_path(paths)
    return RecommendedPath(
        path_id=best.path_id,
        reasoning=generate_recommendation_reasoning(best, paths),
        confidence=calculate_confidence(best)
    )
