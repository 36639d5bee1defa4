from rest_framework import serializers


class UpdateTaskStatusSerializer(serializers.Serializer):
    # Any string is accepted; see CollaborationStore.update_task_status
    status = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default="",
        trim_whitespace=False,
        help_text="New status (conventionally To Do, In Progress or Completed)",
    )

    def validate_status(self, value):
        return value if value is not None else ""
