from rest_framework import serializers


class SpecialtySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField(allow_null=True)


class VetSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    firstName = serializers.CharField(source='first_name')
    lastName = serializers.CharField(source='last_name')
    specialties = SpecialtySerializer(source='sorted_specialties', many=True)
