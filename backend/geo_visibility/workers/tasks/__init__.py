"""
Celery Tasks
"""

from .analysis_tasks import analyze_prompt_run, build_dashboard_summary

__all__ = [
    "analyze_prompt_run",
    "build_dashboard_summary",
]
