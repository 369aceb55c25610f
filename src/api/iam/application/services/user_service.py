"""User application service for IAM bounded context.

Handles account registration, credential checks and profile edits.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
    DefaultUserServiceProbe,
    UserServiceProbe,
)
from iam.domain.aggregates import (
    User,
    validate_login,
    validate_profile_update,
    validate_registration,
)
from iam.domain.value_objects import UserId
from iam.ports.credentials import ICredentialVerifier
from iam.ports.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from iam.ports.repositories import IUserRepository
from shared_kernel.exceptions import DomainError


class UserService:
    """Application service for user management.

    Every use case runs in its own transaction. The raw credential is handed
    to the injected verifier and never stored or logged.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        credential_verifier: ICredentialVerifier,
        session: AsyncSession,
        probe: UserServiceProbe | None = None,
        authentication_probe: AuthenticationProbe | None = None,
    ):
        """Initialize UserService with dependencies.

        Args:
            user_repository: Repository for user persistence
            credential_verifier: Hashes and checks credentials
            session: Database session for transaction management
            probe: Optional domain probe for observability
            authentication_probe: Optional probe for sign-in events
        """
        self._user_repository = user_repository
        self._credential_verifier = credential_verifier
        self._session = session
        self._probe = probe or DefaultUserServiceProbe()
        self._auth_probe = authentication_probe or DefaultAuthenticationProbe()

    async def register(
        self, username: str, raw_credential: str, email: str
    ) -> User:
        """Create a new user account.

        Args:
            username: Requested sign-in handle, must be unused
            raw_credential: Plaintext password
            email: Contact address, must contain "@"

        Returns:
            The newly created User aggregate

        Raises:
            ValidationError: If a field is blank or the email is malformed
            DuplicateUsernameError: If the username is already taken
        """
        try:
            validate_registration(username, raw_credential, email)

            async with self._session.begin():
                existing = await self._user_repository.get_by_username(
                    username.strip()
                )
                if existing is not None:
                    raise DuplicateUsernameError(
                        f"Username '{username.strip()}' is already taken"
                    )

                user = User.register(
                    username=username,
                    credential_hash=self._credential_verifier.hash(raw_credential),
                    email=email,
                )
                # Flushes; a concurrent insert of the same username surfaces here
                await self._user_repository.save(user)

            self._probe.user_registered(user_id=user.id.value, username=user.username)
            return user

        except DomainError as e:
            self._probe.registration_rejected(username=username, reason=str(e))
            raise
        except Exception as e:
            self._probe.registration_failed(username=username, error=str(e))
            raise

    async def authenticate(self, username: str, raw_credential: str) -> User:
        """Check a username and credential pair.

        Args:
            username: Sign-in handle
            raw_credential: Plaintext password

        Returns:
            The matching User aggregate

        Raises:
            ValidationError: If either field is blank
            InvalidCredentialsError: If the user is unknown or the credential
                does not match (same message in both cases)
        """
        validate_login(username, raw_credential)

        async with self._session.begin():
            user = await self._user_repository.get_by_username(username.strip())

        if user is None:
            # Pay the same hashing cost as a real mismatch
            self._credential_verifier.verify(
                raw_credential, self._credential_verifier.placeholder_hash()
            )
            self._auth_probe.authentication_failed(reason="unknown_username")
            raise InvalidCredentialsError()

        if not self._credential_verifier.verify(raw_credential, user.credential_hash):
            self._auth_probe.authentication_failed(reason="credential_mismatch")
            raise InvalidCredentialsError()

        self._auth_probe.user_authenticated(
            user_id=user.id.value, username=user.username
        )
        return user

    async def update_profile(
        self, user_id: UserId, new_credential: str, new_email: str
    ) -> User:
        """Replace a user's credential and email. The username never changes.

        Args:
            user_id: The user being edited (always the caller)
            new_credential: New plaintext password, at least 4 characters
            new_email: New contact address, must contain "@"

        Returns:
            The updated User aggregate

        Raises:
            ValidationError: If the new values are invalid
            UserNotFoundError: If the user no longer exists
        """
        try:
            validate_profile_update(new_credential, new_email)

            async with self._session.begin():
                user = await self._user_repository.get_by_id(user_id)
                if user is None:
                    raise UserNotFoundError(f"User {user_id} not found")

                user.change_profile(
                    credential_hash=self._credential_verifier.hash(new_credential),
                    email=new_email,
                )
                await self._user_repository.save(user)

            self._probe.profile_updated(user_id=user_id.value)
            return user

        except Exception as e:
            self._probe.profile_update_failed(user_id=user_id.value, error=str(e))
            raise

    async def get_user(self, user_id: UserId) -> User:
        """Load a user's profile.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        async with self._session.begin():
            user = await self._user_repository.get_by_id(user_id)

        if user is None:
            raise UserNotFoundError(f"User {user_id} not found")
        return user
