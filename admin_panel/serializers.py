from rest_framework import serializers

from registrations.models import Influencer


class InfluencerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Influencer
        fields = ['name', 'email', 'phone']


class InfluencerStatsSerializer(serializers.Serializer):
    ref_code = serializers.CharField(max_length=32)
