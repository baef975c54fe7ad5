"""The acting user of a request, as attested by a verified access token."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Actor:
    id: int
    email: str

    @property
    def is_pm(self) -> bool:
        return False


@dataclass(frozen=True)
class Member(Actor):
    pass


@dataclass(frozen=True)
class ProjectManager(Actor):
    """Holds the global PM flag. It grants nothing on its own; every elevated
    right is additionally conditioned on membership of the target board."""

    @property
    def is_pm(self) -> bool:
        return True


def actor_from_claims(user_id: int, email: str, is_pm: bool) -> Actor:
    if is_pm:
        return ProjectManager(id=user_id, email=email)
    return Member(id=user_id, email=email)
