class LeagueError(Exception):
    pass


class CompetitionNotFound(LeagueError):
    pass


class TeamNotFound(LeagueError):
    pass


class MatchNotFound(LeagueError):
    pass


class MergeError(LeagueError):
    """Raised when a player merge would fold a registered player away."""


class ConcurrentUpdateError(LeagueError):
    """The competition was written by someone else since it was read."""
