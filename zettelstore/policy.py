"""Authorization policies for zettel access."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .meta import (
    KEY_ID,
    KEY_IDENT,
    KEY_ROLE,
    KEY_USER_ROLE,
    VALUE_ROLE_USER,
    Meta,
)
from .metaconfig import UserRole, Visibility, get_user_role, get_visibility
from .zettel import INVALID_ZETTEL_ID, ZettelID

_NO_CHANGE_USER = (KEY_ID, KEY_IDENT, KEY_ROLE, KEY_USER_ROLE)


class Policy(ABC):
    """Decides whether a user may perform an operation."""

    @abstractmethod
    def can_reload(self, user: Optional[Meta]) -> bool:
        """User may reload a store."""

    @abstractmethod
    def can_create(self, user: Optional[Meta], new_meta: Optional[Meta]) -> bool:
        """User may create a new zettel."""

    @abstractmethod
    def can_read(self, user: Optional[Meta], meta: Optional[Meta]) -> bool:
        """User may read a zettel."""

    @abstractmethod
    def can_write(
        self, user: Optional[Meta], old_meta: Optional[Meta], new_meta: Optional[Meta]
    ) -> bool:
        """User may write a zettel."""

    @abstractmethod
    def can_rename(self, user: Optional[Meta], meta: Optional[Meta]) -> bool:
        """User may rename a zettel."""

    @abstractmethod
    def can_delete(self, user: Optional[Meta], meta: Optional[Meta]) -> bool:
        """User may delete a zettel."""


class AllPolicy(Policy):
    """Allows everything."""

    def can_reload(self, user):
        return True

    def can_create(self, user, new_meta):
        return True

    def can_read(self, user, meta):
        return True

    def can_write(self, user, old_meta, new_meta):
        return True

    def can_rename(self, user, meta):
        return True

    def can_delete(self, user, meta):
        return True


class DefaultPolicy(Policy):
    """Policy for ordinary users based on visibility and user roles."""

    def can_reload(self, user):
        return False

    def can_create(self, user, new_meta):
        if user is None or get_user_role(user) == UserRole.READER:
            return False
        return new_meta.get(KEY_ROLE) != VALUE_ROLE_USER

    def can_read(self, user, meta):
        visibility = get_visibility(meta)
        if visibility == Visibility.OWNER:
            return False
        if visibility == Visibility.PUBLIC:
            return True
        if user is None:
            return False
        role = meta.get(KEY_ROLE)
        if role is None:
            return False
        if role == VALUE_ROLE_USER:
            # Only the user may read its own zettel.
            return user.zid == meta.zid
        return True

    def can_write(self, user, old_meta, new_meta):
        if not self.can_read(user, old_meta) or user is None:
            return False
        if old_meta.get(KEY_ROLE) == VALUE_ROLE_USER:
            if user.zid != new_meta.zid:
                return False
            return all(
                old_meta.get_default(key, "") == new_meta.get_default(key, "")
                for key in _NO_CHANGE_USER
            )
        if get_user_role(user) == UserRole.READER:
            return False
        return self.can_create(user, new_meta)

    def can_rename(self, user, meta):
        return False

    def can_delete(self, user, meta):
        return False


@dataclass
class OwnerPolicy(Policy):
    """Grants the owner everything, otherwise delegates to a base policy."""

    base: Policy
    owner: ZettelID = INVALID_ZETTEL_ID
    readonly: bool = False

    def _is_owner(self, user: Optional[Meta]) -> bool:
        if ZettelID(self.owner).is_valid():
            return user is not None and user.zid == self.owner
        return True

    def can_reload(self, user):
        return self._is_owner(user) or self.base.can_reload(user)

    def can_create(self, user, new_meta):
        if self.readonly or new_meta is None:
            return False
        return self._is_owner(user) or self.base.can_create(user, new_meta)

    def can_read(self, user, meta):
        if meta is None:
            return False
        return self._is_owner(user) or self.base.can_read(user, meta)

    def can_write(self, user, old_meta, new_meta):
        if (
            self.readonly
            or old_meta is None
            or new_meta is None
            or old_meta.zid != new_meta.zid
        ):
            return False
        return self._is_owner(user) or self.base.can_write(user, old_meta, new_meta)

    def can_rename(self, user, meta):
        if self.readonly or meta is None:
            return False
        return self._is_owner(user) or self.base.can_rename(user, meta)

    def can_delete(self, user, meta):
        if self.readonly or meta is None:
            return False
        return self._is_owner(user) or self.base.can_delete(user, meta)


def new_policy(name: str, owner: ZettelID, readonly: bool) -> Policy:
    """Create the policy with the given name; anything but 'all' is the default."""
    if name == "all":
        return AllPolicy()
    return OwnerPolicy(base=DefaultPolicy(), owner=owner, readonly=readonly)