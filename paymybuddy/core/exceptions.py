# paymybuddy/core/exceptions.py
from fastapi import status


class PayMyBuddyError(Exception):
    """Base class for failures the caller is expected to present to the user"""
    status_code = status.HTTP_400_BAD_REQUEST
    code = "PAYMYBUDDY_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidEmailFormatError(PayMyBuddyError, ValueError):
    code = "INVALID_EMAIL_FORMAT"

    def __init__(self, email: str):
        super().__init__(f"Invalid email address: {email}")
        self.email = email


class InvalidAmountError(PayMyBuddyError, ValueError):
    code = "INVALID_AMOUNT"

    def __init__(self, amount: str):
        super().__init__(f"Invalid amount: {amount}")
        self.amount = amount


class EmailAlreadyUsedError(PayMyBuddyError):
    status_code = status.HTTP_409_CONFLICT
    code = "EMAIL_ALREADY_USED"

    def __init__(self, email: str):
        super().__init__(f"Email {email} is already used by another account")
        self.email = email


class BuddyNotFoundError(PayMyBuddyError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "BUDDY_NOT_FOUND"

    def __init__(self, email: str):
        super().__init__(f"No user found with email {email}")
        self.email = email


class BuddyAlreadyAddedError(PayMyBuddyError):
    status_code = status.HTTP_409_CONFLICT
    code = "BUDDY_ALREADY_ADDED"

    def __init__(self, email: str):
        super().__init__(f"{email} is already in your buddies")
        self.email = email


class InvalidBuddyError(PayMyBuddyError, ValueError):
    code = "INVALID_BUDDY"
