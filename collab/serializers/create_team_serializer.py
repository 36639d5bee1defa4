from rest_framework import serializers

from collab.constants.messages import ValidationErrors


class CreateTeamSerializer(serializers.Serializer):
    """
    Presence of ``teamName`` is checked by the store so that every caller gets
    the same error. This serializer only normalises types.
    """

    teamName = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default=None,
        trim_whitespace=False,
        help_text="Name of the team",
    )
    memberCount = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default=None,
        help_text="Number of team members (defaults to 0)",
    )
    eventName = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default=None,
        trim_whitespace=False,
        help_text="Event the team is registered for (defaults to General)",
    )

    def validate_memberCount(self, value):
        # HTML forms submit numbers as text, so "4" and 4 are both accepted
        if value in (None, ""):
            return None
        try:
            member_count = int(value)
        except (TypeError, ValueError):
            raise serializers.ValidationError(ValidationErrors.INVALID_MEMBER_COUNT)
        if member_count < 0:
            raise serializers.ValidationError(ValidationErrors.INVALID_MEMBER_COUNT)
        return member_count
