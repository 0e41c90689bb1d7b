import logging
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class InsufficientStock(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Not enough stock.'
    default_code = 'insufficient_stock'


class ProductNotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Product not found.'
    default_code = 'product_not_found'


class UnknownProductCode(APIException):
    """A sale referenced a product code the company does not stock."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Product not found.'
    default_code = 'unknown_product_code'


class LedgerEntryMissing(APIException):
    """Raised when a loan has no matching client transaction."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Related transaction not found.'
    default_code = 'ledger_entry_missing'


class DuplicateProductCode(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'A product with this code already exists.'
    default_code = 'duplicate_product_code'


class TenantMissing(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'Your user is not linked to a company.'
    default_code = 'tenant_missing'


def tradeflow_exception_handler(exc, context):
    response = exception_handler(exc, context)
    view = context.get('view')
    view_name = view.__class__.__name__ if view else 'unknown'

    if response is None:
        logger.exception("Unhandled error in %s", view_name)
        return None

    if response.status_code >= 500:
        logger.error("Server error in %s: %s", view_name, exc)
    elif isinstance(exc, APIException) and not isinstance(response.data, dict):
        response.data = {'detail': response.data}

    if isinstance(response.data, dict) and 'detail' in response.data:
        response.data.setdefault('error', str(response.data['detail']))
    return response
