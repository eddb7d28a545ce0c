"""
Model & Industry Registry
Lookups over the static tables in config
"""

from typing import Dict, List, Optional

from geo_visibility.config import AI_MODELS, INDUSTRY_PRESETS
from geo_visibility.models import PromptCategory
from geo_visibility.schemas import AIModel, CompetitorIdentity


def available_models() -> List[AIModel]:
    """All AI engines known to the engine"""
    return [AIModel(**m) for m in AI_MODELS]


def get_model(model_id: str, models: Optional[Dict[str, AIModel]] = None) -> AIModel:
    """
    Look up model metadata.

    Args:
        model_id: Engine identifier, e.g. "chatgpt"
        models: Caller-supplied metadata overriding the default registry

    Returns:
        The model's metadata, or a zero-cost, weight 1.0 placeholder for
        unknown ids
    """
    if models and model_id in models:
        return models[model_id]
    for m in AI_MODELS:
        if m["id"] == model_id:
            return AIModel(**m)
    return AIModel(id=model_id, name=model_id)


def competitors_for_industry(industry: str) -> List[CompetitorIdentity]:
    """Default competitor list for an industry preset"""
    preset = INDUSTRY_PRESETS.get(industry) or INDUSTRY_PRESETS["Custom"]
    return [CompetitorIdentity(name=name) for name in preset["competitors"]]


def render_prompt_template(
    template: str,
    brand: str = "",
    region: str = "",
    competitor: str = "",
) -> str:
    """Fill {brand}, {region} and {competitor} placeholders"""
    return (
        template
        .replace("{brand}", brand)
        .replace("{region}", region)
        .replace("{competitor}", competitor)
    ).strip()


def prompts_for_industry(
    industry: str,
    brand: str,
    region: str,
    category: Optional[PromptCategory] = None,
) -> List[Dict[str, str]]:
    """
    Render the preset prompts for an industry.

    "{competitor}" templates are filled with the first preset competitor.
    """
    preset = INDUSTRY_PRESETS.get(industry) or INDUSTRY_PRESETS["Custom"]
    competitor = preset["competitors"][0] if preset["competitors"] else ""

    prompts = []
    for template in preset["prompts"]:
        if category and template["category"] != category.value:
            continue
        prompts.append({
            "text": render_prompt_template(template["text"], brand, region, competitor),
            "category": template["category"],
        })
    return prompts
