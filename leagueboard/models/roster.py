from enum import auto
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from leagueboard.utils.id_types import TeamId
from leagueboard.utils.types import EnumAutoStr


class RosterTeam(BaseModel):
    """
    A team as it appears in a roster that is being edited.

    Teams that exist remotely carry their persisted ``id``. Teams that were added during the
    edit session only carry a ``placeholder_id``, which is never sent to the API.
    """

    model_config = ConfigDict(frozen=True)

    id: TeamId | None = None
    placeholder_id: str | None = None
    name: str = ""

    @model_validator(mode="after")
    def has_identity(self) -> "RosterTeam":
        if self.id is None and self.placeholder_id is None:
            raise ValueError("A roster team needs either an id or a placeholder id")
        return self

    @property
    def key(self) -> str:
        return str(self.id) if self.id is not None else f"placeholder:{self.placeholder_id}"


class TeamRename(BaseModel):
    model_config = ConfigDict(frozen=True)

    team_id: TeamId
    old_name: str
    new_name: str


class TeamAddition(BaseModel):
    model_config = ConfigDict(frozen=True)

    placeholder_id: str
    name: str


class TeamDeletion(BaseModel):
    model_config = ConfigDict(frozen=True)

    team_id: TeamId


class LeagueRename(BaseModel):
    model_config = ConfigDict(frozen=True)

    old_name: str
    new_name: str


class RosterChangeSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    league_rename: LeagueRename | None = None
    renamed: tuple[TeamRename, ...] = ()
    added: tuple[TeamAddition, ...] = ()
    deleted: tuple[TeamDeletion, ...] = ()

    @property
    def is_empty(self) -> bool:
        return (
            self.league_rename is None
            and len(self.renamed) == 0
            and len(self.added) == 0
            and len(self.deleted) == 0
        )


class OperationVerb(EnumAutoStr):
    CREATE = auto()
    UPDATE = auto()
    DELETE = auto()


class OperationDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    verb: OperationVerb
    path: str
    payload: dict[str, Any] | None = None

    # Local bookkeeping only, never part of the request
    placeholder_id: str | None = Field(default=None, exclude=True)


class OperationOutcome(BaseModel):
    descriptor: OperationDescriptor
    success: bool
    data: dict[str, Any] | None = None


class BatchOutcome(BaseModel):
    outcomes: list[OperationOutcome] = Field(default_factory=list)

    @property
    def all_succeeded(self) -> bool:
        return all(outcome.success for outcome in self.outcomes)

    @property
    def failed(self) -> list[OperationOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.success]


class SessionState(EnumAutoStr):
    EDITING = auto()
    CONFIRM_PENDING = auto()
    SAVING = auto()
    COMMITTED = auto()
    STALE = auto()


class NotificationKind(EnumAutoStr):
    SUCCESS = auto()
    ERROR = auto()


class Notification(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: NotificationKind
    message: str
