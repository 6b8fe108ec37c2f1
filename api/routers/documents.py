# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-23
# Updated: 2026-01-28
# Description: documents.py
# -----------------------------------------------------------------------------
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_document_service
from api.schemas.documents import AddDocumentRequest, AddDocumentResponse, DocumentInfo
from errors.RAGErrors import InvalidInputError, RAGError
from services.RAGDocumentService import RAGDocumentService
from utility.logging_utils import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("", response_model=AddDocumentResponse)
def post_document(
        req: AddDocumentRequest,
        svc: RAGDocumentService = Depends(get_document_service),
) -> AddDocumentResponse:
    logger.info("POST /documents (start) content_len=%d", len(req.content or ""))

    try:
        doc_id = svc.add_document(content=req.content, metadata=req.metadata)
    except InvalidInputError as e:
        logger.warning("POST /documents -> 400 (%s)", e)
        raise HTTPException(status_code=400, detail=str(e))
    except RAGError as e:
        logger.error("POST /documents -> 500 kind=%s: %s", e.kind, e)
        raise HTTPException(status_code=500, detail="Failed to add document")
    except Exception as e:
        logger.exception("POST /documents -> 500 (unexpected): %s", e)
        raise HTTPException(status_code=500, detail="Failed to add document")

    logger.info("POST /documents (done) id=%d", doc_id)
    return AddDocumentResponse(id=doc_id, message="Document added successfully")


@router.get("", response_model=List[DocumentInfo])
def get_documents(
        svc: RAGDocumentService = Depends(get_document_service),
) -> List[DocumentInfo]:
    logger.info("GET /documents (start)")
    try:
        docs = svc.list_documents()
    except RAGError as e:
        logger.error("GET /documents -> 500 kind=%s: %s", e.kind, e)
        raise HTTPException(status_code=500, detail="Failed to fetch documents")
    except Exception as e:
        logger.exception("GET /documents -> 500 (unexpected): %s", e)
        raise HTTPException(status_code=500, detail="Failed to fetch documents")

    resp = [
        DocumentInfo(id=d.id, content=d.content, metadata=d.metadata, created_at=d.created_at)
        for d in docs
    ]
    logger.info("GET /documents (done) count=%d", len(resp))
    return resp
