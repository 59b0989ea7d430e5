"""Mapping of domain validation results to HTTP errors"""

from fastapi import HTTPException

from fd_gateway.api.v1.schemas import ValidationErrorDetail, ViolationSchema
from fd_gateway.domain.models import ValidationError


def validation_http_exception(error: ValidationError) -> HTTPException:
    """422 carrying the joined message plus one entry per failed field"""
    detail = ValidationErrorDetail(
        message=error.message,
        violations=[ViolationSchema(field=v.field, message=v.message) for v in error.violations],
    )
    return HTTPException(status_code=422, detail=detail.model_dump())
