#!/usr/bin/env python3
"""
Print the ADMIN_PASSWORD_HASH value for a new admin password.

    python -m scripts.hash_password
"""
from getpass import getpass

from core.credentials import hash_password


def main() -> None:
    pw1 = getpass("Password: ")
    pw2 = getpass("Repeat password: ")
    if not pw1:
        raise SystemExit("Password must not be empty")
    if pw1 != pw2:
        raise SystemExit("Passwords do not match")
    print(f"ADMIN_PASSWORD_HASH={hash_password(pw1)}")


if __name__ == "__main__":
    main()
