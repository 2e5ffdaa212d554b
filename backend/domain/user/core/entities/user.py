"""User entity - aggregate root."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """User aggregate root.

    Represents a person who can be credited with a word of the day.
    The identifier is assigned by the repository when the user is created,
    so freshly built users carry ``user_id=None``.

    Stored users load as they are, so the constructor accepts any name;
    only the ``create`` factory rejects a blank one for new users.

    Invariants:
    - at most one user is active at a time (enforced by the repository,
      not by the entity)

    Examples:
        >>> user = User.create("Ada", "@ada")
        >>> user.user_id is None
        True
        >>> user.active
        False

        >>> user.activate()
        >>> user.active
        True

        >>> user.update_public_key("ssh-ed25519 AAAA")
        >>> user.public_key
        'ssh-ed25519 AAAA'
    """

    name: str
    twitter_handle: str
    public_key: str = ""
    active: bool = False
    user_id: Optional[str] = None

    @staticmethod
    def create(name: str, twitter_handle: str, public_key: str = "") -> "User":
        """Factory method to create a new, inactive, not yet persisted user.

        Args:
            name: Display name
            twitter_handle: Twitter handle (may be empty)
            public_key: Public key (may be empty)

        Returns:
            New User instance without identifier

        Raises:
            ValueError: If name is blank
        """
        if not name or not name.strip():
            raise ValueError("User name cannot be empty")

        return User(
            name=name.strip(),
            twitter_handle=twitter_handle.strip(),
            public_key=public_key,
        )

    @property
    def is_persisted(self) -> bool:
        """True once the repository assigned an identifier."""
        return bool(self.user_id)

    def activate(self) -> None:
        """Mark user as the active one."""
        self.active = True

    def deactivate(self) -> None:
        """Clear the active flag."""
        self.active = False

    def update_public_key(self, public_key: str) -> None:
        """Replace the public key.

        Args:
            public_key: New public key value
        """
        self.public_key = public_key

    def __eq__(self, other: object) -> bool:
        """Equality based on user_id once persisted, field values otherwise."""
        if not isinstance(other, User):
            return False
        if self.user_id or other.user_id:
            return self.user_id == other.user_id
        return (
            self.name == other.name
            and self.twitter_handle == other.twitter_handle
            and self.public_key == other.public_key
            and self.active == other.active
        )

    def __hash__(self) -> int:
        """Hash based on user_id (aggregate identity)."""
        return hash(self.user_id)
