"""
Question answering API endpoint.

Routes: POST /query

Dependencies: docsearch.application.services
System role: Query HTTP API
"""

from fastapi import APIRouter, Depends

from docsearch.api.deps import get_query_service
from docsearch.api.error_handling import handle_api_errors
from docsearch.application.services import QueryService
from docsearch.models.query import QueryRequest, QueryResponse

router = APIRouter(tags=["query"])


@router.post("/query", response_model=QueryResponse)
@handle_api_errors("Internal Server Error")
async def query_documents(
    request: QueryRequest | None = None,
    service: QueryService = Depends(get_query_service),
):
    """Answer a question from the indexed documents. No body is a missing query."""
    answer = await service.answer(request.query if request is not None else None)
    return QueryResponse(answer=answer)
