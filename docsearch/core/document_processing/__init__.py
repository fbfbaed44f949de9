"""
Document processing pipeline.

Coordinates text extraction, chunking, embedding and chunk persistence.

Exports: DocumentPipeline, DocumentIndexResult, BatchIndexResult, IndexStatus
"""

from .entrypoint import DocumentPipeline
from .models import BatchIndexResult, DocumentIndexResult, IndexStatus

__all__ = [
    "DocumentPipeline",
    "DocumentIndexResult",
    "BatchIndexResult",
    "IndexStatus",
]
