# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Updated: 2026-01-28
# Description: query router
# -----------------------------------------------------------------------------
from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_query_service
from api.schemas.query import QueryRequest, QueryResponse, QuerySource
from errors.RAGErrors import InvalidInputError, RAGError
from services.RAGQueryService import RAGQueryService
from utility.logging_utils import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/query", tags=["query"])


@router.post("", response_model=QueryResponse)
def post_query(
    req: QueryRequest,
    svc: RAGQueryService = Depends(get_query_service),
) -> QueryResponse:
    logger.info("POST /query (start) question_len=%d", len(req.question or ""))

    try:
        result = svc.query(req.question)
    except InvalidInputError as e:
        logger.warning("POST /query -> 400 (%s)", e)
        raise HTTPException(status_code=400, detail=str(e))
    except RAGError as e:
        logger.error("POST /query -> 500 kind=%s: %s", e.kind, e)
        raise HTTPException(status_code=500, detail="Failed to process query")
    except Exception as e:
        logger.exception("POST /query -> 500 (unexpected): %s", e)
        raise HTTPException(status_code=500, detail="Failed to process query")

    sources = [
        QuerySource(content=s.content, metadata=s.metadata, similarity=s.similarity)
        for s in result.sources
    ]
    logger.info(
        "POST /query (done) stage=%s answer_len=%d sources=%d",
        result.stage.value,
        len(result.answer),
        len(sources),
    )
    return QueryResponse(answer=result.answer, sources=sources)
