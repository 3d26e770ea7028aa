"""User registration service."""

import logging

from django.contrib.auth import get_user_model
from django.db import transaction, IntegrityError

from apps.core.exceptions import DuplicationError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    display_name: str = ""
) -> User:
    """
    Register a new user.

    Args:
        email: User's email address (login name)
        password: User's password (will be hashed)
        display_name: Optional display name

    Returns:
        Created User instance

    Raises:
        DuplicationError: If the email address is already registered
    """
    if User.objects.filter(email__iexact=email).exists():
        raise DuplicationError("A user with this email already exists.")

    try:
        with transaction.atomic():
            user = User.objects.create_user(
                email=email,
                password=password,
                display_name=display_name
            )
    except IntegrityError as e:
        raise DuplicationError("A user with this email already exists.") from e

    logger.info("Registered user with ID '%s'", user.id)
    return user
