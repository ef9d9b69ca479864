import io

import pytest

from bikerental.app import do_task, main, run
from bikerental.entity import Admin, Member


def test_signup_and_duplicate_signup():
    report = run("1 1 user1 password phone1\n1 1 user1 password phone2\n6 1\n")
    assert report == (
        "1.1. 회원가입\n"
        "> user1 password phone1\n"
        "\n"
        "1.1. 회원가입\n"
        "> 회원가입 실패: 이미 존재하는 아이디입니다.\n"
        "\n"
        "6.1. 종료\n"
    )


def test_admin_registers_bikes_and_member_rents_them():
    script = """
        1 1 user1 password phone1
        2 1 admin admin
        3 1 B2 city
        3 1 B1 road
        2 2
        2 1 user1 password
        4 1 B2
        4 1 B1
        5 1
        6 1
    """
    lines = run(script).splitlines()
    assert "> B2 city" in lines
    listing = lines.index("5.1. 자전거 대여 리스트")
    assert lines[listing + 1 : listing + 3] == ["> B1 road", "> B2 city"]
    assert lines[-1] == "6.1. 종료"


def test_logout_reports_user_id():
    report = run("2 1 admin admin 2 2 6 1")
    assert "2.2. 로그아웃\n> admin\n\n" in report


def test_member_cannot_register_bike():
    report = run("1 1 user1 password phone1 2 1 user1 password 3 1 B1 road 6 1")
    assert "3.1. 자전거 등록\n> 자전거 등록에 실패했습니다.\n\n" in report


def test_rent_without_login_fails():
    report = run("4 1 B1 6 1")
    assert report.startswith("4.1. 자전거 대여\n> 자전거 대여에 실패했습니다.\n\n")


def test_empty_rental_list():
    report = run("1 1 user1 password phone1 2 1 user1 password 5 1 6 1")
    assert "5.1. 자전거 대여 리스트\n> 대여한 자전거가 없습니다.\n\n" in report


def test_wrong_password_fails_login():
    report = run("2 1 admin wrong 6 1")
    assert "> 로그인 실패: 아이디 또는 비밀번호가 일치하지 않습니다." in report


def test_commands_after_exit_are_ignored():
    report = run("6 1 1 1 user1 password phone1")
    assert report == "6.1. 종료\n"


def test_end_of_input_stops_without_exit_line():
    report = run("1 1 user1 password phone1")
    assert "종료" not in report
    assert report.startswith("1.1. 회원가입\n")


def test_unknown_menu_is_ignored():
    assert run("7 3 6 1") == "6.1. 종료\n"


def test_invalid_menu_raises():
    with pytest.raises(ValueError):
        run("x 1")


def test_do_task_returns_state_with_admin_and_member():
    out = io.StringIO()
    system = do_task("1 1 user1 password phone1 6 1".split(), out)
    assert isinstance(system.users.find_user("admin", "admin"), Admin)
    member = system.users.find_user("user1", "password")
    assert isinstance(member, Member)
    assert member.phone == "phone1"


def test_rent_records_member_on_bike():
    system = do_task(
        "2 1 admin admin 3 1 B1 road 2 2 1 1 user1 password phone1 "
        "2 1 user1 password 4 1 B1 6 1".split(),
        io.StringIO(),
    )
    bike = system.bikes.get_bike("B1")
    assert bike.rent_member is system.users.find_user("user1", "password")


def test_main_reads_and_writes_files(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("2 1 admin admin\n6 1\n", encoding="utf-8")
    assert main([str(source), str(target)]) == 0
    assert target.read_text(encoding="utf-8") == (
        "2.1. 로그인\n> admin admin\n\n6.1. 종료\n"
    )


def test_main_missing_input_returns_error(tmp_path):
    assert main([str(tmp_path / "missing.txt"), str(tmp_path / "out.txt")]) == 1
    assert not (tmp_path / "out.txt").exists()