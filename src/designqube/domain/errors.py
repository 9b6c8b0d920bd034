class AppError(Exception):
    """Base app error."""


class ValidationError(AppError):
    pass


class InvalidSale(AppError):
    """A sale was rejected; ledger state is unchanged."""


class UnknownSerialError(InvalidSale):
    pass


class InvalidQuantityError(InvalidSale):
    pass


class InsufficientStockError(InvalidSale):
    pass


class PersistenceError(AppError):
    pass
