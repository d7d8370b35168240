"""
User accounts.

Registration, credential checks and lookups, all backed by the
`users` collection of the document store.
"""

from __future__ import annotations

import logging

from blogapi.core.security import hash_password, verify_password
from blogapi.core.models import AuthorSummary, User
from blogapi.errors import ValidationError
from blogapi.services.base import store_faults
from blogapi.storage import Collections, StorageProvider

logger = logging.getLogger(__name__)


class UserService:
    """Stores and looks up users."""

    def __init__(self, storage: StorageProvider):
        self.storage = storage

    async def register(self, username: str, email: str, password: str) -> User:
        """
        Create a new user.

        Raises:
            ValidationError: the email is already registered
        """
        email = email.lower()
        with store_faults("Register user"):
            if await self.get_by_email(email):
                raise ValidationError("Email already registered")

            user = User(
                username=username,
                email=email,
                password_hash=hash_password(password),
            )
            await self.storage.metadata.save(
                Collections.USERS, user.id, user.model_dump(mode="json")
            )

        logger.info(f"Registered user {user.id}")
        return user

    async def get(self, user_id: str) -> User | None:
        """Get user by ID."""
        doc = await self.storage.metadata.get(Collections.USERS, user_id)
        return User.model_validate(doc) if doc else None

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email."""
        docs = await self.storage.metadata.query(
            Collections.USERS, {"email": email.lower()}, limit=1
        )
        return User.model_validate(docs[0]) if docs else None

    async def authenticate(self, email: str, password: str) -> User | None:
        """Return the user if the email and password match, else None."""
        with store_faults("Authenticate user"):
            user = await self.get_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            return None
        return user

    async def authors(self, user_ids: set[str]) -> dict[str, AuthorSummary]:
        """Author summaries keyed by user id. Unknown ids are left out."""
        authors = {}
        for user_id in user_ids:
            user = await self.get(user_id)
            if user:
                authors[user_id] = AuthorSummary(
                    id=user.id, username=user.username, email=user.email
                )
        return authors
