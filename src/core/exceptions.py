"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the domain layer."""

    # Not found errors
    ACTOR_NOT_FOUND = "ACTOR_NOT_FOUND"
    GROUP_NOT_FOUND = "GROUP_NOT_FOUND"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NESTED_GROUP = "NESTED_GROUP"
    ACTOR_NOT_IN_WORLD = "ACTOR_NOT_IN_WORLD"
    INVALID_MEMBER_ARGUMENT = "INVALID_MEMBER_ARGUMENT"
    NOT_A_GROUP_MEMBER = "NOT_A_GROUP_MEMBER"
    INVALID_PRIMARY_PARTY = "INVALID_PRIMARY_PARTY"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.details = details
        super().__init__(self.message)


class ActorNotFoundError(AppException):
    """Actor not found."""

    def __init__(self, actor_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.ACTOR_NOT_FOUND,
            message=f"Actor not found: {actor_id}",
            details={"actor_id": actor_id},
        )


class GroupNotFoundError(AppException):
    """Group not found."""

    def __init__(self, group_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.GROUP_NOT_FOUND,
            message=f"Group not found: {group_id}",
            details={"group_id": group_id},
        )


class GroupValidationError(AppException):
    """Caller input rejected before any change was persisted."""


class InvalidGroupDataError(GroupValidationError):
    """Group data failed schema validation."""

    def __init__(self, group_id: str, errors: list[dict[str, Any]]) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=f"Invalid data for group: {group_id}",
            details={"group_id": group_id, "errors": errors},
        )


class NestedGroupError(GroupValidationError):
    """A group cannot be a member of another group."""

    def __init__(self, actor_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.NESTED_GROUP,
            message="You may not add a group within a group",
            details={"actor_id": actor_id},
        )


class ActorNotInWorldError(GroupValidationError):
    """Only actors that exist within the world can join a group."""

    def __init__(self, actor_id: str, pack: str) -> None:
        super().__init__(
            error_code=ErrorCode.ACTOR_NOT_IN_WORLD,
            message="You may only add actors to the group which exist within the world",
            details={"actor_id": actor_id, "pack": pack},
        )


class InvalidMemberArgumentError(GroupValidationError):
    """Member removal needs an actor or an actor id."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_MEMBER_ARGUMENT,
            message="You must provide an actor or an actor id to remove a group member",
            details={"type": type(value).__name__},
        )


class NotAGroupMemberError(GroupValidationError):
    """Actor is not a member of the group."""

    def __init__(self, actor_id: str, group_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.NOT_A_GROUP_MEMBER,
            message=f'Actor id "{actor_id}" is not a group member',
            details={"actor_id": actor_id, "group_id": group_id},
        )


class InvalidPrimaryPartyError(GroupValidationError):
    """Only a group of the party type can be the primary party."""

    def __init__(self, group_id: str, group_type: str) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_PRIMARY_PARTY,
            message=f"Group {group_id} of type '{group_type}' cannot be the primary party",
            details={"group_id": group_id, "type": group_type},
        )
