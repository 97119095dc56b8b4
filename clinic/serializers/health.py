from rest_framework import serializers


class ComponentHealthSerializer(serializers.Serializer):
    status = serializers.CharField(source='status.value')
    details = serializers.CharField()


class HealthReportSerializer(serializers.Serializer):
    status = serializers.CharField(source='status.value')
    timestamp = serializers.DateTimeField()
    components = serializers.DictField(child=ComponentHealthSerializer())
