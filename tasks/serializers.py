from rest_framework import serializers
from .models import Task


class TaskSerializer(serializers.ModelSerializer):
    class Meta:
        model = Task
        fields = ['id', 'title', 'description', 'completed_at', 'created_at', 'updated_at']
        read_only_fields = fields


class TaskInputSerializer(serializers.Serializer):
    """
    Validates the body of create and update requests.

    Both fields are optional and kept exactly as sent: no trimming, and empty
    strings and nulls are allowed.
    """
    title = serializers.CharField(required=False, allow_null=True, allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True, trim_whitespace=False)


class TaskSearchSerializer(serializers.Serializer):
    title = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
