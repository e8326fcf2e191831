"""Domain-level exceptions.

Business rule violations are expressed as subclasses of ``ProductError``
so the API layer can map them onto HTTP status codes uniformly.  The
message of each exception is safe to show to clients.
"""


class ProductError(Exception):
    """Base class for all product errors."""

    status_code = 500


class InvalidProductError(ProductError):
    """Required product data is missing or unusable."""

    status_code = 400


class DuplicateProductError(ProductError):
    """A product with the same name already exists."""

    status_code = 400


class ProductOutOfStockError(ProductError):
    """The product has no stock left and cannot be removed."""

    status_code = 400


class ProductNotFoundError(ProductError):
    """No product has the requested id."""

    status_code = 404


class EmptyInventoryError(ProductError):
    """There are no products to report on."""

    status_code = 404


class StoreAnomalyError(ProductError):
    """The store did not apply a write it should have applied."""

    status_code = 500


class SeedDataError(Exception):
    """The bundled seed file is missing or malformed."""
