# bikerental

A small bike rental system driven by a command script. It keeps a set of
users (one built-in administrator plus registered members), a set of bikes,
and a login session. Each command in the script is carried out in turn and its
result is written to a report file.

## Installing

```
pip install .
```

## Running

Put a file named `input.txt` in the current directory and run:

```
bikerental
```

The report is written to `output.txt` in the same directory. Other file names
can be given as positional arguments:

```
bikerental commands.txt report.txt
```

If the command file cannot be read, a message is printed to standard error
and the exit status is 1.

## The command script

The script is a sequence of whitespace-separated tokens. Each command starts
with two menu numbers, followed by its arguments:

| Menu  | Command              | Arguments                  |
|-------|----------------------|----------------------------|
| `1 1` | sign up as a member  | id, password, phone        |
| `2 1` | log in               | id, password               |
| `2 2` | log out              | none                       |
| `3 1` | register a bike      | bike id, bike name (admin) |
| `4 1` | rent a bike          | bike id (member)           |
| `5 1` | list rented bikes    | none (member)              |
| `6 1` | quit                 | none                       |

Processing stops at `6 1` or at the end of the script. Menu pairs not in the
table are skipped; a menu token that is not a whole number raises
`ValueError`.

An administrator account with id `admin` and password `admin` exists from the
start. Only the administrator can register bikes, and bike ids must be unique.
Member ids must be unique too. A failed login leaves nobody logged in. Only a
logged-in member can rent bikes and list them; the rental list is sorted by
bike id.

Example `input.txt`:

```
2 1 admin admin
3 1 B2 road
3 1 B1 city
2 2
1 1 alice password none
2 1 alice password
4 1 B2
4 1 B1
5 1
2 2
6 1
```

The matching `output.txt`:

```
2.1. 로그인
> admin admin

3.1. 자전거 등록
> B2 road

3.1. 자전거 등록
> B1 city

2.2. 로그아웃
> admin

1.1. 회원가입
> alice password none

2.1. 로그인
> alice password

4.1. 자전거 대여
> B2 road

4.1. 자전거 대여
> B1 city

5.1. 자전거 대여 리스트
> B1 city
> B2 road

2.2. 로그아웃
> alice

6.1. 종료
```

## Using it from Python

`bikerental.app.run` takes the script as a string and returns the report text:

```python
from bikerental.app import run

print(run("2 1 admin admin\n3 1 B1 city\n6 1\n"))
```

`bikerental.app.do_task(tokens, out)` runs an iterable of tokens, writes the
report to a text stream and returns the `RentalSystem` it acted on, so the
resulting users, bikes and session can be inspected.

The building blocks live in `bikerental.entity` (`User`, `Admin`, `Member`,
`Bike`, `UserCollection`, `BikeCollection`, `Session`, `RentalSystem`),
`bikerental.control` (`Login`, `Logout`, `AddMember`, `AddBike`, `RentBike`,
`RentBikeList`, each built on a `RentalSystem`) and `bikerental.boundary`,
which reads each command's arguments and formats its result.

## What it does not do

- Nothing is stored between runs: every run starts with only the
  administrator account and no bikes.
- Bikes cannot be returned, and renting does not check whether a bike is
  already rented; the bike simply records its latest renter.
- Passwords are kept and compared as plain text.

## Tests

```
pip install .[test]
pytest
```