"""Failures reported back to the player who issued a command.

Every error here is recovered at the command dispatcher and shown to the
invoking player as a short red announcement. None of them stop the process.
"""


class RoomCommandError(Exception):
    """Base class for command failures with a user-facing message."""

    default_message = "❌ Command failed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class PermissionDenied(RoomCommandError):
    default_message = "❌ You don't have permission to use this command!"


class NotCaptain(PermissionDenied):
    default_message = "❌ Only club captains can do that!"


class NotFound(RoomCommandError):
    default_message = "❌ Not found!"


class PlayerNotFound(NotFound):
    default_message = "❌ Player not found!"


class ClubNotFound(NotFound):
    default_message = "❌ Club not found!"


class NotInClub(NotFound):
    default_message = "❌ Player is not in your club!"


class AlreadyExists(RoomCommandError):
    default_message = "❌ Already exists!"


class ClubAlreadyExists(AlreadyExists):
    default_message = "❌ Club already exists!"


class AlreadyMember(AlreadyExists):
    default_message = "❌ Player is already in this club!"


class PlayerAlreadyInClub(AlreadyExists):
    default_message = "❌ Player is already in a club!"


class InvalidArguments(RoomCommandError):
    default_message = "❌ Invalid arguments!"


class InvariantViolationAttempt(RoomCommandError):
    default_message = "❌ That action is not allowed!"


class CannotRemoveCaptain(InvariantViolationAttempt):
    default_message = "❌ Cannot remove the club captain!"


class UnknownCommand(RoomCommandError):
    default_message = "❌ Unknown command."


class HandlerFault(RoomCommandError):
    """An unexpected exception raised inside a command handler."""

    default_message = "❌ Error executing command. Please try again."

    def __init__(self, command: str, cause: BaseException):
        super().__init__()
        self.command = command
        self.cause = cause
