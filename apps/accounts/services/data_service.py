"""ORM-backed user store."""

from apps.accounts.domain import User
from apps.accounts.models import User as UserModel
from apps.core.data import ModelDataService


def to_user(instance: UserModel) -> User:
    return User(
        id=instance.id,
        email=instance.email,
        display_name=instance.display_name,
        created_at=instance.created_at,
        updated_at=instance.updated_at,
    )


class UserDataService(ModelDataService[User]):
    """Looks up and stores users. Passwords are managed by `register_user`."""

    model = UserModel
    entity_name = 'User'

    def to_domain(self, instance):
        return to_user(instance)

    def to_fields(self, entity):
        return {
            'email': UserModel.objects.normalize_email(entity.email),
            'display_name': entity.display_name,
        }
