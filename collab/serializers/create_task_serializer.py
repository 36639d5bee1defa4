from rest_framework import serializers


class CreateTaskSerializer(serializers.Serializer):
    teamName = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default=None,
        trim_whitespace=False,
        help_text="Team the task belongs to",
    )
    taskTitle = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default=None,
        trim_whitespace=False,
        help_text="Title of the task",
    )
    assignedTo = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default=None,
        trim_whitespace=False,
        help_text="Assignee (defaults to Unassigned)",
    )
    priority = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default=None,
        trim_whitespace=False,
        help_text="Priority of the task (High, Medium, Low; defaults to Medium)",
    )
    deadline = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default=None,
        trim_whitespace=False,
        help_text="Optional deadline",
    )
