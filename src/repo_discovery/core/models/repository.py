"""Repository identifier models."""

from pydantic import BaseModel, ConfigDict


class RepositoryOverride(BaseModel):
    """An operator-supplied repository entry carrying extra configuration.

    Only ``repository`` is interpreted; every other field is kept verbatim
    and handed to downstream consumers untouched.
    """

    model_config = ConfigDict(extra="allow")

    repository: str

    @property
    def settings(self) -> dict:
        """Configuration fields other than the repository name."""
        return dict(self.model_extra or {})


# Plain name as reported by the platform, or an override record.
RepositoryIdentifier = str | RepositoryOverride


def full_name(identifier: RepositoryIdentifier) -> str:
    """Return the repository name of an identifier, casing preserved."""
    if isinstance(identifier, RepositoryOverride):
        return identifier.repository
    return str(identifier)


def repo_name(identifier: RepositoryIdentifier) -> str:
    """Return the normalized (lower-cased) name of a repository identifier."""
    return full_name(identifier).lower()


def same_repository(left: RepositoryIdentifier, right: RepositoryIdentifier) -> bool:
    """Check whether two identifiers refer to the same repository."""
    return repo_name(left) == repo_name(right)
