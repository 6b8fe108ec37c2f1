# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Updated: 2026-01-29
# Description: dependencies.py
# -----------------------------------------------------------------------------
from api.AppContainer import get_app_container
from services.RAGDocumentService import RAGDocumentService
from services.RAGHealthService import RAGHealthService
from services.RAGQueryService import RAGQueryService


def get_health_service() -> RAGHealthService:
    # use the singleton service from the container
    return get_app_container().health_service

def get_document_service() -> RAGDocumentService:
    # use the singleton service from the container
    return get_app_container().document_service

def get_query_service() -> RAGQueryService:
    # use the singleton service from the container
    return get_app_container().query_service
