"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from fd_gateway.domain.recommendations import RecommendationService
from fd_gateway.infrastructure.clients.textgen import TextGenerationClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_textgen_client() -> TextGenerationClient:
    """Provide text generation client instance"""
    return TextGenerationClient()


def get_recommendation_service() -> RecommendationService:
    """Provide recommendation service backed by the text generation client"""
    return RecommendationService(get_textgen_client())
