"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.conf import settings
from django.db import models


class Sport(models.Model):
    """Persistence model for sport categories."""

    name = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name", "id"]

    def __str__(self) -> str:
        return self.name


class Session(models.Model):
    """Persistence model for scheduled sessions."""

    # PROTECT keeps sport deletion from orphaning sessions.
    sport = models.ForeignKey(Sport, on_delete=models.PROTECT, related_name="sessions")
    creator = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="created_sessions",
    )
    date = models.DateField()
    venue = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["date", "id"]
        indexes = [
            models.Index(fields=["date"], name="pickup_session_date_idx"),
            models.Index(
                fields=["creator", "date"], name="pickup_sess_creator_date_idx"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.sport.name} - {self.date} @ {self.venue}"


class Membership(models.Model):
    """Persistence model for a player's enrollment in a session."""

    session = models.ForeignKey(
        Session, on_delete=models.CASCADE, related_name="memberships"
    )
    player = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="memberships",
    )
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["session", "player"], name="unique_session_player"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.player_id} in {self.session_id}"
