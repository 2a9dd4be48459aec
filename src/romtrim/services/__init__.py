"""
Services module for RomTrim
Candidate collection and batch processing around the trim engine
"""

from .batch_service import BatchResult, BatchTrimService, collect_candidates

__all__ = ["BatchResult", "BatchTrimService", "collect_candidates"]
