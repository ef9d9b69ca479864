"""Text front ends for each use case: read request tokens and write the report."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, TextIO

if TYPE_CHECKING:
    from .control import AddBike, AddMember, Login, RentBike, RentBikeList


def _read(tokens: Iterator[str]) -> str:
    """Return the next whitespace-separated token, or an empty string when exhausted."""
    return next(tokens, "")


class AddMemberUI:
    """Reads sign-up data and reports the outcome."""

    def __init__(self) -> None:
        self.user_id = ""
        self.password = ""
        self.phone = ""
        self.success = False

    def input_data(self, tokens: Iterator[str], out: TextIO, control: AddMember) -> None:
        """Read id, password and phone, then ask the control to register the member."""
        print("1.1. 회원가입", file=out)
        self.user_id = _read(tokens)
        self.password = _read(tokens)
        self.phone = _read(tokens)
        self.success = control.add_new_member(self.user_id, self.password, self.phone)

    def display_signup_result(self, out: TextIO) -> None:
        """Write the sign-up result."""
        if self.success:
            print(f"> {self.user_id} {self.password} {self.phone}", file=out)
        else:
            print("> 회원가입 실패: 이미 존재하는 아이디입니다.", file=out)
        print(file=out)


class LoginUI:
    """Reads credentials and reports the login outcome."""

    def __init__(self) -> None:
        self.user_id = ""
        self.password = ""
        self.success = False

    def input_data(self, tokens: Iterator[str], out: TextIO, control: Login) -> None:
        """Read id and password, then ask the control to log in."""
        print("2.1. 로그인", file=out)
        self.user_id = _read(tokens)
        self.password = _read(tokens)
        self.success = control.login_user(self.user_id, self.password)

    def display_login_result(self, out: TextIO) -> None:
        """Write the login result."""
        if self.success:
            print(f"> {self.user_id} {self.password}", file=out)
        else:
            print("> 로그인 실패: 아이디 또는 비밀번호가 일치하지 않습니다.", file=out)
        print(file=out)


class LogoutUI:
    """Reports a logout."""

    def display_logout_result(self, out: TextIO, user_id: str) -> None:
        """Write the id of the user who logged out."""
        print("2.2. 로그아웃", file=out)
        print(f"> {user_id}", file=out)
        print(file=out)


class AddBikeUI:
    """Reads bike data and reports the registration outcome."""

    def __init__(self) -> None:
        self.bike_id = ""
        self.bike_name = ""
        self.success = False

    def input_data(self, tokens: Iterator[str], out: TextIO, control: AddBike) -> None:
        """Read bike id and name, then ask the control to register the bike."""
        print("3.1. 자전거 등록", file=out)
        self.bike_id = _read(tokens)
        self.bike_name = _read(tokens)
        self.success = control.add_new_bike(self.bike_id, self.bike_name)

    def display_add_bike_result(self, out: TextIO) -> None:
        """Write the bike registration result."""
        if self.success:
            print(f"> {self.bike_id} {self.bike_name}", file=out)
        else:
            print("> 자전거 등록에 실패했습니다.", file=out)
        print(file=out)


class RentBikeUI:
    """Reads the bike to rent and reports the outcome."""

    def __init__(self) -> None:
        self.bike_id = ""
        self.bike_name = ""
        self.success = False

    def input_data(self, tokens: Iterator[str], out: TextIO, control: RentBike) -> None:
        """Read a bike id and ask the control to rent it."""
        print("4.1. 자전거 대여", file=out)
        self.bike_id = _read(tokens)
        self.bike_name = control.rental_bike(self.bike_id)
        self.success = bool(self.bike_name)

    def display_rent_bike_result(self, out: TextIO) -> None:
        """Write the rental result."""
        if self.success:
            print(f"> {self.bike_id} {self.bike_name}", file=out)
        else:
            print("> 자전거 대여에 실패했습니다.", file=out)
        print(file=out)


class RentBikeListUI:
    """Reports the bikes rented by the current member."""

    def display_rent_bike_list(self, out: TextIO, control: RentBikeList) -> None:
        """Write every rented bike, or a notice when there are none."""
        print("5.1. 자전거 대여 리스트", file=out)
        bikes = control.list_rent_bike()
        if not bikes:
            print("> 대여한 자전거가 없습니다.", file=out)
            print(file=out)
            return
        for bike in bikes:
            print(f"> {bike.bike_id} {bike.bike_name}", file=out)
        print(file=out)