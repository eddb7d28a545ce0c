"""
Analysis Tasks
Score fetched model responses and roll up stored audit results
"""

from typing import Dict

from celery.utils.log import get_task_logger

from geo_visibility.models import PromptCategory
from geo_visibility.schemas import (
    AIModel,
    AuditFilter,
    AuditResult,
    BrandIdentity,
    CompetitorIdentity,
    RawModelResponse,
)
from geo_visibility.services import AuditService, DashboardService
from geo_visibility.workers.celery_app import celery_app

logger = get_task_logger(__name__)


def _competitor(value) -> CompetitorIdentity:
    if isinstance(value, str):
        return CompetitorIdentity(name=value)
    return CompetitorIdentity.model_validate(value)


@celery_app.task(
    bind=True,
    name="geo_visibility.workers.tasks.analysis_tasks.analyze_prompt_run",
)
def analyze_prompt_run(self, payload: Dict) -> Dict:
    """
    Score every model response of one prompt run.

    Args:
        payload: Dict with prompt_text, brand, competitors, responses and
            optional prompt_id, prompt_category, client_id, audit_id,
            created_at and models

    Returns:
        Dict with the serialized AuditResult
    """
    try:
        brand = BrandIdentity.model_validate(payload["brand"])
        competitors = [_competitor(c) for c in payload.get("competitors", [])]
        responses = [RawModelResponse.model_validate(r) for r in payload.get("responses", [])]

        models = None
        if payload.get("models"):
            models = {}
            for m in payload["models"]:
                model = AIModel.model_validate(m)
                models[model.id] = model

        result = AuditService().run(
            payload["prompt_text"],
            brand,
            competitors,
            responses,
            models=models,
            prompt_id=payload.get("prompt_id"),
            prompt_category=PromptCategory(payload.get("prompt_category", PromptCategory.CUSTOM.value)),
            client_id=payload.get("client_id"),
            audit_id=payload.get("audit_id"),
            created_at=payload.get("created_at"),
        )

        logger.info(
            f"Analyzed prompt run {result.prompt_id or result.prompt_text!r}: "
            f"sov={result.summary.share_of_voice} models={result.summary.total_models_checked}"
        )

        return {
            "success": True,
            "audit_result": result.model_dump(mode="json"),
        }

    except Exception as e:
        logger.exception(f"Analysis error for prompt run: {e}")
        return {"success": False, "error": str(e)}


@celery_app.task(
    bind=True,
    name="geo_visibility.workers.tasks.analysis_tasks.build_dashboard_summary",
)
def build_dashboard_summary(self, payload: Dict) -> Dict:
    """
    Roll serialized audit results into a dashboard summary.

    Args:
        payload: Dict with audit_results and an optional filter

    Returns:
        Dict with the serialized DashboardSummary
    """
    try:
        results = [AuditResult.model_validate(r) for r in payload.get("audit_results", [])]
        audit_filter = None
        if payload.get("filter"):
            audit_filter = AuditFilter.model_validate(payload["filter"])

        summary = DashboardService().build_summary(results, audit_filter)

        logger.info(f"Dashboard summary built from {summary.total_prompts} prompt runs")

        return {
            "success": True,
            "summary": summary.model_dump(mode="json"),
        }

    except Exception as e:
        logger.exception(f"Dashboard summary error: {e}")
        return {"success": False, "error": str(e)}
