from django.contrib import admin

from pickup.models import Membership, Session, Sport


class MembershipInline(admin.TabularInline):
    model = Membership
    extra = 0


@admin.register(Sport)
class SportAdmin(admin.ModelAdmin):
    list_display = ["name", "created_at"]
    search_fields = ["name"]


@admin.register(Session)
class SessionAdmin(admin.ModelAdmin):
    list_display = ["sport", "date", "venue", "creator"]
    list_filter = ["sport", "date"]
    inlines = [MembershipInline]


@admin.register(Membership)
class MembershipAdmin(admin.ModelAdmin):
    list_display = ["session", "player", "joined_at"]
    list_filter = ["session__sport"]
