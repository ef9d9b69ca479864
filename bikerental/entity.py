"""Domain objects of the rental system: users, bikes, their registries and the session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

_ADMIN_ID = "admin"


@dataclass(eq=False)
class User:
    """A registered account identified by its id."""

    user_id: str
    password: str

    def is_admin(self) -> bool:
        """Return whether this user has administrator rights."""
        return False


@dataclass(eq=False)
class Admin(User):
    """The administrator account."""

    def is_admin(self) -> bool:
        return True


@dataclass(eq=False)
class Member(User):
    """An ordinary member who can rent bikes."""

    phone: str = ""
    rental_bikes: list[Bike] = field(default_factory=list, repr=False)

    def add_rental_bike(self, bike: Bike | None) -> None:
        """Record a rented bike; ``None`` is ignored."""
        if bike is not None:
            self.rental_bikes.append(bike)


@dataclass(eq=False)
class Bike:
    """A bike that can be rented by a member."""

    bike_id: str
    bike_name: str
    rent_member: Member | None = field(default=None, repr=False)


class UserCollection:
    """All registered users, keyed by user id."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._users

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users.values())

    def find_user(self, user_id: str, password: str) -> User | None:
        """Return the user whose id and password both match, else ``None``."""
        user = self._users.get(user_id)
        if user is not None and user.password == password:
            return user
        return None

    def add_user(self, user: User | None) -> bool:
        """Register a user; return False if absent or the id is already taken."""
        if user is None or user.user_id in self._users:
            return False
        self._users[user.user_id] = user
        return True

    def initialize(self) -> None:
        """Add the default administrator account unless it already exists."""
        if _ADMIN_ID not in self._users:
            self._users[_ADMIN_ID] = Admin(_ADMIN_ID, _ADMIN_ID)


class BikeCollection:
    """All registered bikes, keyed by bike id."""

    def __init__(self) -> None:
        self._bikes: dict[str, Bike] = {}

    def __contains__(self, bike_id: object) -> bool:
        return bike_id in self._bikes

    def __len__(self) -> int:
        return len(self._bikes)

    def __iter__(self) -> Iterator[Bike]:
        return iter(self._bikes.values())

    def add_bike(self, bike: Bike | None) -> bool:
        """Register a bike; return False if absent or the id is already taken."""
        if bike is None or bike.bike_id in self._bikes:
            return False
        self._bikes[bike.bike_id] = bike
        return True

    def get_bike(self, bike_id: str) -> Bike | None:
        """Return the bike with this id, or ``None``."""
        return self._bikes.get(bike_id)


class Session:
    """Tracks the currently logged-in user."""

    def __init__(self, users: UserCollection) -> None:
        self.users = users
        self.current_user: User | None = None

    def login(self, user_id: str, password: str) -> bool:
        """Log in with the given credentials; a failed attempt clears the session."""
        self.current_user = self.users.find_user(user_id, password)
        return self.current_user is not None

    def logout(self) -> None:
        """Clear the current user."""
        self.current_user = None

    def is_admin(self) -> bool:
        """Return whether an administrator is logged in."""
        return self.current_user is not None and self.current_user.is_admin()


@dataclass
class RentalSystem:
    """The shared state: user registry, bike registry and session."""

    users: UserCollection = field(default_factory=UserCollection)
    bikes: BikeCollection = field(default_factory=BikeCollection)
    session: Session | None = None

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = Session(self.users)