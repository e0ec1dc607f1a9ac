import asyncio
from decimal import Decimal

import pytest

from conftest import FakeUserRepository
from paymybuddy.core.exceptions import (
    BuddyNotFoundError,
    EmailAlreadyUsedError,
    InvalidAmountError,
    InvalidEmailFormatError,
)
from paymybuddy.services.user_service import UserService


def _service(password_hasher, users=None):
    repository = FakeUserRepository(users)
    return UserService(repository, password_hasher), repository


def test_create_user_with_valid_email_saves_once(password_hasher) -> None:
    service, repository = _service(password_hasher)

    user = asyncio.run(service.create_user("username@domain.com", "ABCDEF123"))

    assert len(repository.saved) == 1
    assert user is repository.saved[0]
    assert user.email == "username@domain.com"
    assert user.balance == Decimal("0.00")
    assert user.hashed_password == "hashed::ABCDEF123"
    assert password_hasher.encoded == ["ABCDEF123"]


def test_create_user_keeps_names(password_hasher) -> None:
    service, _ = _service(password_hasher)

    user = asyncio.run(service.create_user("Monica@Friends.com", "pw", "Monica", "Geller"))

    assert user.email == "monica@friends.com"
    assert (user.first_name, user.last_name) == ("Monica", "Geller")


def test_create_user_with_invalid_email_raises(password_hasher) -> None:
    service, repository = _service(password_hasher)

    with pytest.raises(InvalidEmailFormatError):
        asyncio.run(service.create_user("username@domain", "123"))

    assert repository.saved == []


def test_invalid_email_is_a_value_error(password_hasher) -> None:
    service, _ = _service(password_hasher)

    with pytest.raises(ValueError):
        asyncio.run(service.create_user("username@domain", "123"))


def test_create_user_with_used_email_raises(password_hasher, test_user) -> None:
    test_user.email = "username@domain.com"
    service, repository = _service(password_hasher, [test_user])

    with pytest.raises(EmailAlreadyUsedError):
        asyncio.run(service.create_user("username@domain.com", "ABCDEF123"))

    assert repository.saved == []
    assert password_hasher.encoded == []


def test_create_user_email_lookup_ignores_case(password_hasher, test_user) -> None:
    service, _ = _service(password_hasher, [test_user])

    with pytest.raises(EmailAlreadyUsedError):
        asyncio.run(service.create_user("BingChandler@Friends.com", "pw"))


def test_update_user_with_valid_email_saves_user(password_hasher, test_user) -> None:
    test_user.email = "username@domain.com"
    test_user.balance = Decimal("3000.00")
    service, repository = _service(password_hasher, [test_user])

    updated = asyncio.run(service.update_user(test_user))

    assert repository.saved == [test_user]
    assert updated.balance == Decimal("3000.00")
    assert updated.email.lower() == "username@domain.com"
    # the stored credential is not re-hashed on update
    assert password_hasher.encoded == []
    assert updated.hashed_password == "CouldIBeAnyMoreBored"


def test_update_user_with_invalid_email_raises(password_hasher, test_user) -> None:
    service, _ = _service(password_hasher, [test_user])
    test_user.email = "username@domain"

    with pytest.raises(InvalidEmailFormatError):
        asyncio.run(service.update_user(test_user))


def test_update_unknown_user_raises_buddy_not_found(password_hasher, test_user) -> None:
    service, repository = _service(password_hasher)

    with pytest.raises(BuddyNotFoundError):
        asyncio.run(service.update_user(test_user))

    assert repository.saved == []


def test_update_user_last_name(password_hasher, test_user) -> None:
    service, _ = _service(password_hasher, [test_user])
    test_user.last_name = "Bing-Geller"

    updated = asyncio.run(service.update_user(test_user))

    assert updated.last_name.lower() == "bing-geller"


def test_change_password_hashes_and_saves(password_hasher, test_user) -> None:
    service, repository = _service(password_hasher, [test_user])

    asyncio.run(service.change_password(test_user, "WeWereOnABreak"))

    assert test_user.hashed_password == "hashed::WeWereOnABreak"
    assert repository.saved == [test_user]


@pytest.mark.parametrize("amount", ["490.44", "-490.44"])
def test_deposit_adds_magnitude(password_hasher, test_user, amount) -> None:
    service, repository = _service(password_hasher, [test_user])

    service.deposit(test_user, amount)

    assert test_user.balance == Decimal("3000.00")
    assert repository.saved == []


@pytest.mark.parametrize("amount", ["509.56", "-509.56"])
def test_withdraw_subtracts_magnitude(password_hasher, test_user, amount) -> None:
    service, _ = _service(password_hasher, [test_user])

    service.withdraw(test_user, amount)

    assert test_user.balance == Decimal("2000.00")


def test_withdraw_can_go_below_zero(password_hasher, other_user) -> None:
    service, _ = _service(password_hasher)
    other_user.balance = Decimal("10.00")

    service.withdraw(other_user, "25")

    assert other_user.balance == Decimal("-15.00")


def test_deposit_on_empty_balance_starts_from_zero(password_hasher, other_user) -> None:
    service, _ = _service(password_hasher)

    service.deposit(other_user, "12.5")

    assert other_user.balance == Decimal("12.50")


def test_deposit_rejects_garbage(password_hasher, test_user) -> None:
    service, _ = _service(password_hasher)

    with pytest.raises(InvalidAmountError):
        service.deposit(test_user, "a lot")

    assert test_user.balance == Decimal("2509.56")


def test_get_users_maps_in_repository_order(password_hasher, test_user, other_user) -> None:
    service, _ = _service(password_hasher, [test_user, other_user])

    result = asyncio.run(service.get_users())

    assert [view.email for view in result] == [test_user.email, other_user.email]
    assert result[0].first_name == "Chandler"
    assert result[0].last_name == "Bing"
    assert result[0].balance == Decimal("2509.56")
    assert result[1].first_name == "Joey"
    assert result[1].last_name == "Tribbiani"
    assert result[1].balance is None
