from rest_framework import serializers


class CreateUpdateSerializer(serializers.Serializer):
    teamName = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default=None,
        trim_whitespace=False,
        help_text="Team posting the update",
    )
    updateText = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default=None,
        trim_whitespace=False,
        help_text="Body of the update",
    )
    updateType = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default=None,
        trim_whitespace=False,
        help_text="Progress, Achievement, Blocker or General (defaults to General)",
    )
