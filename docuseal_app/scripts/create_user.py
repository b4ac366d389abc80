#!/usr/bin/env python
"""
CLI script to create users for the DocuSeal App.

Usage:
    docuseal-create-user --email user@example.com
    docuseal-create-user --email user@example.com --password mypassword --name "Jane Doe"

If no password is provided, a random secure password will be generated.
"""
import argparse
import asyncio
import secrets
import string
import sys
from typing import Optional

from docuseal_app.auth.utils import hash_password
from docuseal_app.services.firestore import FirestoreService


def generate_password(length: int = 16) -> str:
    """Generate a random secure password."""
    alphabet = string.ascii_letters + string.digits + "!@#$%^&*"
    password = ''.join(secrets.choice(alphabet) for _ in range(length))
    return password


def is_valid_email(email: str) -> bool:
    """Basic email sanity check."""
    local, _, domain = email.partition("@")
    return bool(local) and "." in domain


async def create_user(email: str, password: str, name: Optional[str] = None) -> None:
    """Create a user in Firestore."""
    firestore = FirestoreService()

    # Check if user already exists
    existing_user = await firestore.get_user_by_email(email)
    if existing_user:
        print(f"Error: User with email '{email}' already exists.")
        sys.exit(1)

    # Hash password and create user
    password_hash = hash_password(password)
    user = await firestore.create_user(
        email=email,
        password_hash=password_hash,
        name=name,
        created_by="cli_script"
    )

    print(f"\n{'='*50}")
    print("User created successfully!")
    print(f"{'='*50}")
    print(f"Email:    {email}")
    print(f"Password: {password}")
    print(f"User ID:  {user.id}")
    print(f"{'='*50}")
    print("\nPlease save the password securely and send it to the user.")
    print("The password cannot be retrieved later - only reset.\n")


def main(argv: Optional[list] = None):
    parser = argparse.ArgumentParser(
        description="Create a user for the DocuSeal App"
    )
    parser.add_argument(
        "--email",
        required=True,
        help="User's email address"
    )
    parser.add_argument(
        "--password",
        required=False,
        help="User's password (optional - will generate if not provided)"
    )
    parser.add_argument(
        "--name",
        required=False,
        help="User's display name"
    )

    args = parser.parse_args(argv)

    # Validate email format (basic check)
    if not is_valid_email(args.email):
        print(f"Error: Invalid email format: {args.email}")
        sys.exit(1)

    # Generate password if not provided
    password = args.password
    if not password:
        password = generate_password()
        print(f"Generated password: {password}")

    # Create user
    asyncio.run(create_user(args.email, password, args.name))


if __name__ == "__main__":
    main()
