"""Application layer for lustre-dev - Contains use cases and application services."""

from lustre_dev.application.pipeline import Pipeline, PipelineResult, keep
from lustre_dev.application.preview_service import PreviewService

__all__ = [
    "Pipeline",
    "PipelineResult",
    "PreviewService",
    "keep",
]
