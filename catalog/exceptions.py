class CatalogError(Exception):
    """Base class for catalog errors; ``code`` is a stable machine-readable id."""

    code = 'catalog_error'


class ProductNotFound(CatalogError):
    code = 'product_not_found'

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product with key '{product_id}' was not found")


class ProductValidationError(CatalogError):
    code = 'validation_failed'

    def __init__(self, errors):
        self.errors = list(errors)
        details = ', '.join(f"{field}: {message}" for field, message in self.errors)
        super().__init__(f"Product validation failed ({details})")


class SyncCancelled(CatalogError):
    code = 'sync_cancelled'
