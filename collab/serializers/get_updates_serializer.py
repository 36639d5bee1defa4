from rest_framework import serializers


class GetUpdateQueryParamsSerializer(serializers.Serializer):
    """
    ``limit`` is kept as raw text: the store coerces it and falls back to the
    default for anything non-numeric instead of rejecting the request.
    """

    teamName = serializers.CharField(
        required=False, allow_blank=True, default=None, allow_null=True, trim_whitespace=False
    )
    limit = serializers.CharField(required=False, allow_blank=True, default=None, allow_null=True)
