import logging
from typing import List, Optional, Tuple

from fastapi import Query as QueryParam
from pydantic import BaseModel
from sqlalchemy.orm import Query

from wellness.core.config import settings
from wellness.helpers.exception_handler import CustomException, BadRequestException
from wellness.helpers.validation import clamp_pagination, check_strict_pagination

logger = logging.getLogger(__name__)


class PaginationParams(BaseModel):
    limit: int = settings.DEFAULT_PAGE_SIZE
    offset: int = 0


def pagination_params(
    limit: Optional[int] = QueryParam(None, description="Page size, clamped to [1, 100]"),
    offset: Optional[int] = QueryParam(None, description="Rows to skip, negative values become 0"),
) -> PaginationParams:
    limit, offset = clamp_pagination(limit, offset, settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)
    return PaginationParams(limit=limit, offset=offset)


def feed_pagination_params(
    limit: Optional[int] = QueryParam(None, description="Page size, at most 50"),
    offset: Optional[int] = QueryParam(None, description="Rows to skip"),
) -> PaginationParams:
    limit, offset, error_code = check_strict_pagination(
        limit, offset, settings.DEFAULT_PAGE_SIZE, settings.FEED_MAX_PAGE_SIZE
    )
    if error_code == 'LIMIT_EXCEEDED':
        raise BadRequestException(f'Limit cannot exceed {settings.FEED_MAX_PAGE_SIZE}', error_code)
    if error_code == 'INVALID_LIMIT':
        raise BadRequestException('Invalid limit parameter. Must be a positive integer.', error_code)
    if error_code == 'INVALID_OFFSET':
        raise BadRequestException('Invalid offset parameter. Must be a non-negative integer.', error_code)
    return PaginationParams(limit=limit, offset=offset)


def paginate(query: Query, params: PaginationParams, *order_by) -> List:
    if order_by:
        query = query.order_by(*order_by)
    return query.limit(params.limit).offset(params.offset).all()


def paginate_with_total(query: Query, params: PaginationParams, *order_by) -> Tuple[List, int]:
    try:
        total = query.order_by(None).count()
        data = paginate(query, params, *order_by)
    except Exception as e:
        logger.error(f"Pagination query failed: {e}", exc_info=True)
        raise CustomException(http_code=500, code='INTERNAL_ERROR', message=f'Internal server error: {e}')
    return data, total
