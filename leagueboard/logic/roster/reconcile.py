import itertools
from collections.abc import Awaitable, Callable
from typing import Protocol

from leagueboard.logic.roster.batch import Sender, execute_batch
from leagueboard.logic.roster.diff import diff_rosters, roster_is_savable
from leagueboard.logic.roster.planning import plan_operations
from leagueboard.models.db.league import LeagueWithTeams
from leagueboard.models.roster import (
    BatchOutcome,
    Notification,
    NotificationKind,
    OperationVerb,
    RosterChangeSet,
    RosterTeam,
    SessionState,
)
from leagueboard.utils.id_types import LeagueId, TeamId
from leagueboard.utils.logging import logger

SUCCESS_MESSAGE = "All changes succeeded"
RELOAD_MESSAGE = "Please reload page"

LeagueLoader = Callable[[LeagueId], Awaitable[LeagueWithTeams]]


class Notifier(Protocol):
    def __call__(self, kind: NotificationKind, message: str) -> None: ...


class RosterSessionStateError(Exception):
    def __init__(self, action: str, state: SessionState) -> None:
        super().__init__(f"Cannot {action} while the session is {state.value}")
        self.action = action
        self.state = state


def roster_from_league(league: LeagueWithTeams) -> tuple[RosterTeam, ...]:
    return tuple(RosterTeam(id=team.id, name=team.name) for team in league.teams)


class RosterEditSession:
    """
    Edit session for a single league's name and team roster.

    Edits are applied to a detached copy of the roster. Saving computes the changes against
    the canonical copy, sends them as one batch of independent requests and only replaces
    the canonical copy when every request succeeded. When any request fails the canonical
    copy is left untouched and the session becomes stale: some of the requests may have been
    applied remotely, so the league has to be reloaded.
    """

    def __init__(self, league: LeagueWithTeams, send: Sender, notify: Notifier) -> None:
        self._send = send
        self._notify = notify
        self._placeholder_counter = itertools.count()
        self.league_id = league.id
        self.notification: Notification | None = None
        self.pending_change_set: RosterChangeSet | None = None
        self.last_batch: BatchOutcome | None = None
        self.requires_reload = False
        self._reset(league)

    @classmethod
    async def load(
        cls, league_id: LeagueId, loader: LeagueLoader, send: Sender, notify: Notifier
    ) -> "RosterEditSession":
        return cls(await loader(league_id), send, notify)

    def _reset(self, league: LeagueWithTeams) -> None:
        self.original_name = league.name
        self.original_teams = roster_from_league(league)
        self.league_name = league.name
        self.teams = self.original_teams
        self.pending_change_set = None
        self.requires_reload = False
        self.state = SessionState.EDITING

    @property
    def change_set(self) -> RosterChangeSet:
        return diff_rosters(
            self.original_teams,
            self.teams,
            original_name=self.original_name,
            edited_name=self.league_name,
        )

    @property
    def can_save(self) -> bool:
        if self.state is not SessionState.EDITING or self.requires_reload:
            return False
        if not roster_is_savable(self.teams, self.league_name):
            return False
        return not self.change_set.is_empty

    def _start_edit(self, action: str) -> None:
        # The detached copy stays editable while a batch is in flight
        if self.requires_reload or self.state in (
            SessionState.CONFIRM_PENDING,
            SessionState.STALE,
        ):
            raise RosterSessionStateError(action, self.state)
        if self.state is SessionState.COMMITTED:
            self.state = SessionState.EDITING

    def rename_team(self, index: int, name: str) -> None:
        self._start_edit("rename a team")
        teams = list(self.teams)
        teams[index] = teams[index].model_copy(update={"name": name})
        self.teams = tuple(teams)

    def delete_team(self, index: int) -> None:
        self._start_edit("delete a team")
        teams = list(self.teams)
        del teams[index]
        self.teams = tuple(teams)

    def add_placeholder_team(self, name: str = "") -> RosterTeam:
        self._start_edit("add a team")
        team = RosterTeam(placeholder_id=f"t{next(self._placeholder_counter)}", name=name)
        self.teams = (*self.teams, team)
        return team

    def rename_league(self, name: str) -> None:
        self._start_edit("rename the league")
        self.league_name = name

    def request_save(self) -> RosterChangeSet:
        if not self.can_save:
            raise RosterSessionStateError("save", self.state)

        self.pending_change_set = self.change_set
        self.state = SessionState.CONFIRM_PENDING
        return self.pending_change_set

    def cancel_confirmation(self) -> None:
        if self.state is not SessionState.CONFIRM_PENDING:
            raise RosterSessionStateError("cancel the confirmation", self.state)

        self.pending_change_set = None
        self.state = SessionState.EDITING

    async def confirm_save(self) -> BatchOutcome:
        if self.state is not SessionState.CONFIRM_PENDING:
            raise RosterSessionStateError("confirm saving", self.state)

        self.state = SessionState.SAVING
        try:
            # Recompute rather than trusting what was displayed
            change_set = self.change_set
            edited_name = self.league_name
            edited_teams = self.teams

            operations = plan_operations(self.league_id, change_set)
            batch = await execute_batch(operations, self._send)
            self.last_batch = batch
            if batch.all_succeeded:
                self._commit(edited_name, edited_teams, batch)
        except BaseException as exc:
            # An interrupted save may have been partially applied remotely
            logger.warning(f"Saving roster of league {self.league_id} was interrupted: {exc!r}")
            self.pending_change_set = None
            self.state = SessionState.STALE
            self._emit(NotificationKind.ERROR, RELOAD_MESSAGE)
            raise

        self.pending_change_set = None
        if batch.all_succeeded:
            # Edits made while the batch was in flight are still unsaved
            self.state = (
                SessionState.COMMITTED if self.change_set.is_empty else SessionState.EDITING
            )
            self._emit(NotificationKind.SUCCESS, SUCCESS_MESSAGE)
        else:
            self.state = SessionState.STALE
            self._emit(NotificationKind.ERROR, RELOAD_MESSAGE)

        return batch

    def _commit(
        self, edited_name: str, edited_teams: tuple[RosterTeam, ...], batch: BatchOutcome
    ) -> None:
        created_ids: dict[str, TeamId] = {}
        for outcome in batch.outcomes:
            descriptor = outcome.descriptor
            if descriptor.verb is not OperationVerb.CREATE or descriptor.placeholder_id is None:
                continue

            created_id = (outcome.data or {}).get("id")
            try:
                created_ids[descriptor.placeholder_id] = TeamId(int(created_id))
            except (TypeError, ValueError):
                logger.warning(
                    f"No usable id returned for created team {descriptor.payload}: {created_id!r}"
                )
                self.requires_reload = True

        def with_created_ids(teams: tuple[RosterTeam, ...]) -> tuple[RosterTeam, ...]:
            return tuple(
                RosterTeam(id=created_ids[team.placeholder_id], name=team.name)
                if team.id is None and team.placeholder_id in created_ids
                else team
                for team in teams
            )

        self.original_name = edited_name
        self.original_teams = with_created_ids(edited_teams)
        # Keeps edits made while the batch was in flight
        self.teams = with_created_ids(self.teams)

    def _emit(self, kind: NotificationKind, message: str) -> None:
        self.notification = Notification(kind=kind, message=message)
        self._notify(kind, message)

    async def reload(self, loader: LeagueLoader) -> None:
        if self.state is SessionState.SAVING:
            raise RosterSessionStateError("reload", self.state)

        self._reset(await loader(self.league_id))
        self.notification = None
