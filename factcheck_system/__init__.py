"""Heuristic credibility scoring for submitted text and source URLs.

Usage:
    from factcheck_system import analyze

    result = analyze("According to research published in Nature ...",
                     "https://www.nature.com/articles/...")
    print(result.classification.value, result.confidence_score)
"""

from factcheck_system.pipeline import FactCheckPipeline, analyze

__version__ = "0.1.0"

__all__ = ["FactCheckPipeline", "analyze", "__version__"]
