"""Use-case controllers that connect the text front ends to the shared state."""

from __future__ import annotations

from typing import Iterator, TextIO

from .boundary import AddBikeUI, AddMemberUI, LoginUI, LogoutUI, RentBikeListUI, RentBikeUI
from .entity import Bike, Member, RentalSystem, Session


class _Control:
    """Base for controllers working on one rental system."""

    def __init__(self, system: RentalSystem) -> None:
        self.system = system

    @property
    def session(self) -> Session:
        assert self.system.session is not None
        return self.system.session


class Login(_Control):
    """Logs a user in."""

    def __init__(self, system: RentalSystem) -> None:
        super().__init__(system)
        self.ui = LoginUI()

    def start(self, tokens: Iterator[str], out: TextIO) -> None:
        """Read credentials and report the result."""
        self.ui.input_data(tokens, out, self)
        self.ui.display_login_result(out)

    def login_user(self, user_id: str, password: str) -> bool:
        """Try to log in; return whether it succeeded."""
        return self.session.login(user_id, password)


class Logout(_Control):
    """Logs the current user out."""

    def __init__(self, system: RentalSystem) -> None:
        super().__init__(system)
        self.ui = LogoutUI()

    def start(self, tokens: Iterator[str], out: TextIO) -> None:
        """Log out and report the id of the user who left."""
        self.ui.display_logout_result(out, self.logout_user())

    def logout_user(self) -> str:
        """Log out and return the former user's id, or an empty string."""
        user = self.session.current_user
        user_id = user.user_id if user is not None else ""
        self.session.logout()
        return user_id


class AddMember(_Control):
    """Registers new members."""

    def __init__(self, system: RentalSystem) -> None:
        super().__init__(system)
        self.ui = AddMemberUI()

    def start(self, tokens: Iterator[str], out: TextIO) -> None:
        """Read sign-up data and report the result."""
        self.ui.input_data(tokens, out, self)
        self.ui.display_signup_result(out)

    def add_new_member(self, user_id: str, password: str, phone: str) -> bool:
        """Register a member; return False when the id is taken."""
        return self.system.users.add_user(Member(user_id, password, phone))


class AddBike(_Control):
    """Registers new bikes; only administrators may do so."""

    def __init__(self, system: RentalSystem) -> None:
        super().__init__(system)
        self.ui = AddBikeUI()

    def start(self, tokens: Iterator[str], out: TextIO) -> None:
        """Read bike data and report the result."""
        self.ui.input_data(tokens, out, self)
        self.ui.display_add_bike_result(out)

    def add_new_bike(self, bike_id: str, bike_name: str) -> bool:
        """Register a bike; return False unless an admin is logged in and the id is new."""
        if not self.session.is_admin():
            return False
        return self.system.bikes.add_bike(Bike(bike_id, bike_name))


class RentBike(_Control):
    """Rents a bike to the logged-in member."""

    def __init__(self, system: RentalSystem) -> None:
        super().__init__(system)
        self.ui = RentBikeUI()

    def start(self, tokens: Iterator[str], out: TextIO) -> None:
        """Read the bike id and report the result."""
        self.ui.input_data(tokens, out, self)
        self.ui.display_rent_bike_result(out)

    def rental_bike(self, bike_id: str) -> str:
        """Rent the bike to the current member; return its name, or '' on failure."""
        bike = self.system.bikes.get_bike(bike_id)
        member = self.session.current_user
        if bike is None or not isinstance(member, Member):
            return ""
        bike.rent_member = member
        member.add_rental_bike(bike)
        return bike.bike_name


class RentBikeList(_Control):
    """Lists the bikes rented by the logged-in member."""

    def __init__(self, system: RentalSystem) -> None:
        super().__init__(system)
        self.ui = RentBikeListUI()

    def start(self, tokens: Iterator[str], out: TextIO) -> None:
        """Report the rented bikes."""
        self.ui.display_rent_bike_list(out, self)

    def list_rent_bike(self) -> list[Bike]:
        """Return the current member's bikes sorted by id; empty for non-members."""
        member = self.session.current_user
        if not isinstance(member, Member):
            return []
        return sorted(member.rental_bikes, key=lambda bike: bike.bike_id)