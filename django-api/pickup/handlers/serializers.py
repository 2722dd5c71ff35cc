"""Serializers for request input and for transforming domain models to API responses."""

from rest_framework import serializers


class SportInputSerializer(serializers.Serializer):
    """Raw sport fields; the service decides what is valid."""

    name = serializers.CharField(allow_blank=True, trim_whitespace=False)


class SessionInputSerializer(serializers.Serializer):
    """Raw session fields; the service parses ids and dates."""

    sport_id = serializers.CharField()
    date = serializers.CharField()
    venue = serializers.CharField(allow_blank=True)


class SportSerializer(serializers.Serializer):
    """Serializer for Sport domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    created_at = serializers.DateTimeField()


class SessionSerializer(serializers.Serializer):
    """Serializer for Session domain model."""

    id = serializers.IntegerField(source="id.value")
    sport_id = serializers.IntegerField(source="sport_id.value")
    creator_id = serializers.IntegerField(source="creator_id.value")
    date = serializers.DateField()
    venue = serializers.CharField()
    created_at = serializers.DateTimeField()


class SessionViewSerializer(serializers.Serializer):
    """Serializer for SessionView, flattening the wrapped Session."""

    id = serializers.IntegerField(source="session.id.value")
    sport_id = serializers.IntegerField(source="session.sport_id.value")
    sport_name = serializers.CharField()
    creator_id = serializers.IntegerField(source="session.creator_id.value")
    creator_name = serializers.CharField()
    date = serializers.DateField(source="session.date")
    venue = serializers.CharField(source="session.venue")


class PlayerDashboardSerializer(serializers.Serializer):
    available = SessionViewSerializer(many=True)
    joined = SessionViewSerializer(many=True)


class SportPopularitySerializer(serializers.Serializer):
    sport_name = serializers.CharField()
    session_count = serializers.IntegerField()


class SessionReportSerializer(serializers.Serializer):
    sessions = SessionViewSerializer(many=True)
    popularity = SportPopularitySerializer(many=True)
