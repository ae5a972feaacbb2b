"""Account status and account type of a user."""

from enum import StrEnum


class UserStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    LOCKED = "locked"


class UserType(StrEnum):
    """How the account came to exist.

    Direct users sign up on their own and may own a team. Invited users join
    an existing team and must always stay attached to one.
    """

    DIRECT = "direct"
    INVITED = "invited"
