"""Application-layer value objects for IAM bounded context.

These are value objects specific to the application layer, representing
cross-cutting concerns like the authentication context of a request.
"""

from __future__ import annotations

from dataclasses import dataclass

from iam.domain.value_objects import UserId


@dataclass(frozen=True)
class SessionIdentity:
    """The authenticated caller bound to a client session.

    Created only by the authorization gate after a successful register or
    sign-in. The username is captured at sign-in time; since usernames are
    immutable it never goes stale.

    This is an application-layer concept (not domain) because it represents
    the authentication context of the request, not a core business entity.
    """

    user_id: UserId
    username: str
