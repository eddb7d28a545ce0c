"""
Cost Service
API spend rolled up by model, prompt and category
"""

from collections import defaultdict
from typing import Dict, Sequence

from geo_visibility.schemas import AuditResult, CostBreakdown


def _rounded(costs: Dict[str, float]) -> Dict[str, float]:
    return {key: round(value, 6) for key, value in costs.items()}


def build_cost_breakdown(results: Sequence[AuditResult]) -> CostBreakdown:
    """
    Total API cost of the given audit results.

    Per-model figures come from the model results; per-prompt and
    per-category figures use each audit's summary total.
    """
    by_model: Dict[str, float] = defaultdict(float)
    by_prompt: Dict[str, float] = defaultdict(float)
    by_category: Dict[str, float] = defaultdict(float)

    for audit in results:
        for mr in audit.model_results:
            by_model[mr.model] += mr.api_cost
        by_prompt[audit.prompt_id or audit.prompt_text] += audit.summary.total_cost
        by_category[audit.prompt_category.value] += audit.summary.total_cost

    return CostBreakdown(
        total=round(sum(a.summary.total_cost for a in results), 6),
        by_model=_rounded(by_model),
        by_prompt=_rounded(by_prompt),
        by_category=_rounded(by_category),
    )
