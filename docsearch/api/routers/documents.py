"""
Document indexing API endpoint.

Routes: POST /index-docs

Dependencies: docsearch.application.services
System role: Ingestion HTTP API
"""

from fastapi import APIRouter, Depends

from docsearch.api.deps import get_ingestion_service
from docsearch.api.error_handling import handle_api_errors
from docsearch.application.services import IngestionService
from docsearch.models.ingestion import IndexDocsResponse

router = APIRouter(tags=["documents"])


@router.post("/index-docs", response_model=IndexDocsResponse)
@handle_api_errors("Failed to index local docs", expose_detail=True)
async def index_docs(
    service: IngestionService = Depends(get_ingestion_service),
):
    """
    Index every eligible document in the configured documents folder.

    Returns per-document outcomes; a document that fails is reported with
    status "failed" unless fail-fast ingestion is enabled.
    """
    batch = await service.index_local_documents()
    return IndexDocsResponse.from_batch(batch)
