from rest_framework import serializers


class GetTaskQueryParamsSerializer(serializers.Serializer):
    teamName = serializers.CharField(
        required=False, allow_blank=True, default=None, allow_null=True, trim_whitespace=False
    )
    status = serializers.CharField(
        required=False, allow_blank=True, default=None, allow_null=True, trim_whitespace=False
    )
