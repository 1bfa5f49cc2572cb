"""Pipeline orchestration for content analysis.

Provides the single entry point of the scoring engine:
- FactCheckPipeline: injectable stages, ``analyze(content, source_url)``
- analyze: module-level convenience using a settings-configured pipeline
"""

from factcheck_system.pipeline.fact_check_pipeline import (
    FactCheckPipeline,
    analyze,
    get_pipeline,
)

__all__ = ["FactCheckPipeline", "analyze", "get_pipeline"]
