"""Business rule violations raised by the service layer.

Every error carries the HTTP status the routes answer with and a short
machine-readable code used for metrics labels.
"""


class ServiceError(Exception):
    status = 400
    code = "invalid_request"
    default_message = "Invalid request"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class NotFound(ServiceError):
    status = 404
    code = "not_found"
    default_message = "Not found"


class ItemNotFound(NotFound):
    code = "item_not_found"
    default_message = "Item not found"


class UserNotFound(NotFound):
    code = "user_not_found"
    default_message = "User not found"


class NotInCart(NotFound):
    code = "not_in_cart"
    default_message = "Item not in cart"


class InvalidQuantity(ServiceError):
    code = "invalid_quantity"
    default_message = "Please provide a valid quantity above Zero"


class InvalidDecrease(InvalidQuantity):
    code = "invalid_decrease"

    def __init__(self, held):
        super().__init__(
            f"Wrong amount: only {held} available in cart and must have a default value of 1 in cart"
        )


class InsufficientStock(ServiceError):
    code = "insufficient_stock"
    default_message = "Insufficient quantity"


class DuplicateLine(ServiceError):
    code = "duplicate_line"
    default_message = "Item already in cart"


class EmptyCart(ServiceError):
    code = "empty_cart"
    default_message = "Cart is empty"


class DuplicateEmail(ServiceError):
    code = "duplicate_email"

    def __init__(self, email):
        super().__init__(f"{email}: email already exist")


class InvalidCredentials(ServiceError):
    code = "invalid_credentials"
    default_message = "Wrong email or password"


class Forbidden(ServiceError):
    status = 403
    code = "forbidden"
    default_message = "Forbidden"


class ReservedEmail(ServiceError):
    code = "reserved_email"

    def __init__(self, email):
        super().__init__(f"{email}: email is reserved")
