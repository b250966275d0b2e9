"""Lock-in rule: an activity is accepted once half the participants, rounded up, vote for it."""

import math

from planit.errors import ErrorCode, ValidationError
from planit.models import Activity, ActivityStatus, VoteSummary


def votes_required(participant_count: int) -> int:
    if participant_count < 1:
        raise ValidationError(
            f"participant_count must be at least 1, got {participant_count}",
            code=ErrorCode.INVALID_PARTICIPANT_COUNT,
        )
    return math.ceil(participant_count / 2)


def is_locked_in(activity: Activity, participant_count: int) -> bool:
    return activity.vote_count >= votes_required(participant_count)


def activity_status(activity: Activity, participant_count: int) -> ActivityStatus:
    if is_locked_in(activity, participant_count):
        return ActivityStatus.LOCKED_IN
    return ActivityStatus.PROPOSED


def vote_summary(activity: Activity, participant_count: int, user_id: str | None = None) -> VoteSummary:
    return VoteSummary(
        activity_id=activity.id,
        vote_count=activity.vote_count,
        votes_required=votes_required(participant_count),
        status=activity_status(activity, participant_count),
        has_voted=bool(user_id) and activity.has_vote_from(user_id),
    )
